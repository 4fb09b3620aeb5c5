"""
Admin Users Router

User listing for the admin panel.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from core.auth.dependencies import verify_admin
from core.services.database import get_database

router = APIRouter(tags=["admin-users"])

USER_ROLES = ("admin", "customer")


@router.get("/users")
async def admin_get_users(role: Optional[str] = None, admin=Depends(verify_admin)):
    """Get all users, newest first, optionally filtered by role"""
    if role is not None and role not in USER_ROLES:
        raise HTTPException(status_code=400, detail="Invalid role")

    db = get_database()
    users = await db.list_users(role)
    return {"users": [u.public() for u in users]}
