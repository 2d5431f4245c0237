from fastapi import APIRouter

from . import activities, announcements, auth, rsvps, settings

router = APIRouter()
router.include_router(auth.router, tags=["admin-auth"])
router.include_router(rsvps.router, prefix="/rsvps", tags=["admin"])
router.include_router(activities.router, prefix="/activities", tags=["admin"])
router.include_router(announcements.router, prefix="/announcements", tags=["admin"])
router.include_router(settings.router, prefix="/settings", tags=["admin"])
