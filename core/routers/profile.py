"""
Profile Router

The signed-in user's own account.
"""
from fastapi import APIRouter, Depends, HTTPException

from core.auth import hash_password, verify_password
from core.auth.dependencies import get_current_user
from core.errors import ERROR_EMAIL_TAKEN, ERROR_USER_NOT_FOUND, ERROR_WRONG_PASSWORD
from core.services.database import get_database
from core.services.models import User

from .models import ChangePasswordRequest, UpdateProfileRequest

router = APIRouter(tags=["profile"])


@router.get("/user/profile")
async def get_profile(user: User = Depends(get_current_user)):
    return {"user": user.public()}


@router.put("/user/profile")
async def update_profile(request: UpdateProfileRequest, user: User = Depends(get_current_user)):
    """Update email and display name (only the fields sent)."""
    db = get_database()
    fields = request.model_dump(exclude_unset=True)

    new_email = fields.get("email")
    if new_email and new_email != user.email:
        owner = await db.get_user_by_email(new_email)
        if owner and owner.id != user.id:
            raise HTTPException(status_code=400, detail=ERROR_EMAIL_TAKEN)

    updated = await db.update_user(user.id, fields) if fields else user
    if not updated:
        raise HTTPException(status_code=404, detail=ERROR_USER_NOT_FOUND)

    return {"message": "Profile updated successfully", "user": updated.public()}


@router.put("/user/password")
async def change_password(request: ChangePasswordRequest, user: User = Depends(get_current_user)):
    if not verify_password(request.current_password, user.password_hash):
        raise HTTPException(status_code=400, detail=ERROR_WRONG_PASSWORD)

    db = get_database()
    await db.update_user(user.id, {"password_hash": hash_password(request.new_password)})
    return {"message": "Password updated successfully"}
