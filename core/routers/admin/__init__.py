"""
Admin API Router

Admin-only endpoints, mounted under /api/admin.
"""
from fastapi import APIRouter

from .analytics import router as analytics_router
from .users import router as users_router

# Create main router
router = APIRouter(prefix="/admin", tags=["admin"])

# Include all sub-routers
router.include_router(analytics_router)
router.include_router(users_router)

__all__ = ["router"]
