from fastapi import APIRouter

from app.presentation.api import admin, public, system

api_router = APIRouter()
api_router.include_router(public.router)
api_router.include_router(admin.router, prefix="/admin")
api_router.include_router(system.router, prefix="/system")
