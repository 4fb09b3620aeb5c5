"""
Auth Router

Username/password accounts with opaque Bearer session tokens.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from core.auth import create_web_session, hash_password, needs_rehash, revoke_web_session, verify_password
from core.auth.dependencies import extract_bearer_token, get_current_user
from core.errors import ERROR_EMAIL_TAKEN, ERROR_INVALID_CREDENTIALS, ERROR_USERNAME_TAKEN
from core.logging import get_logger, sanitize_id_for_logging
from core.services.database import get_database
from core.services.models import User

from .models import LoginRequest, RegisterRequest

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


def _session_response(message: str, user: User) -> dict:
    token = create_web_session(user.id, user.username, user.is_admin)
    return {"message": message, "token": token, "user": user.public()}


@router.post("/auth/register", status_code=201)
async def register(request: RegisterRequest):
    """Create a customer account and sign it in."""
    db = get_database()

    if await db.get_user_by_username(request.username):
        raise HTTPException(status_code=400, detail=ERROR_USERNAME_TAKEN)
    if await db.get_user_by_email(request.email):
        raise HTTPException(status_code=400, detail=ERROR_EMAIL_TAKEN)

    user = await db.create_user(
        request.username,
        request.email,
        hash_password(request.password),
        first_name=request.first_name,
        last_name=request.last_name,
    )
    logger.info("Registered user %s", sanitize_id_for_logging(user.id))
    return _session_response("Registration successful", user)


@router.post("/auth/login")
async def login(request: LoginRequest):
    """Exchange username and password for a session token."""
    db = get_database()
    user = await db.get_user_by_username(request.username)

    if not user or not verify_password(request.password, user.password_hash):
        raise HTTPException(status_code=401, detail=ERROR_INVALID_CREDENTIALS)

    if needs_rehash(user.password_hash):
        user = await db.update_user(user.id, {"password_hash": hash_password(request.password)}) or user

    return _session_response("Login successful", user)


@router.post("/auth/logout")
async def logout(authorization: Optional[str] = Header(None, alias="Authorization")):
    """Revoke the presented session token (no-op without one)."""
    token = extract_bearer_token(authorization)
    if token:
        revoke_web_session(token)
    return {"message": "Logged out successfully"}


@router.get("/auth/me")
async def me(user: User = Depends(get_current_user)):
    return {"user": user.public()}
