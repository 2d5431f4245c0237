from fastapi import APIRouter

from . import activity, announcements, rsvp

router = APIRouter()
router.include_router(rsvp.router, tags=["rsvp"])
router.include_router(activity.router, tags=["activity"])
router.include_router(announcements.router, tags=["announcements"])
