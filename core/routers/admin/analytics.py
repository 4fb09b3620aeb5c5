"""
Admin Analytics Router

Dashboard summary for the admin panel.
"""
from fastapi import APIRouter, Depends

from core.auth.dependencies import verify_admin
from core.services.database import get_database
from core.services.domains.dashboard import DashboardService

router = APIRouter(tags=["admin-analytics"])


@router.get("/dashboard")
async def admin_get_dashboard(admin=Depends(verify_admin)):
    """Totals, new users, recent orders, best sellers and revenue breakdowns."""
    return await DashboardService(get_database()).build()
