"""
FastAPI Routers Package

All routers are included in api/index.py under the /api prefix.
"""

from core.routers.admin import router as admin_router
from core.routers.auth import router as auth_router
from core.routers.contact import router as contact_router
from core.routers.orders import router as orders_router
from core.routers.products import router as products_router
from core.routers.profile import router as profile_router

__all__ = [
    "admin_router",
    "auth_router",
    "contact_router",
    "orders_router",
    "products_router",
    "profile_router",
]
