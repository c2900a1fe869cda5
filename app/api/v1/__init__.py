"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, component_photos, health, photos, storage, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/user", tags=["user"])
router.include_router(photos.router, prefix="/photos", tags=["photos"])
router.include_router(
    component_photos.router, prefix="/component-photos", tags=["component-photos"]
)
router.include_router(
    component_photos.components_router, prefix="/components", tags=["component-photos"]
)
router.include_router(storage.router, prefix="/storage", tags=["storage"])
