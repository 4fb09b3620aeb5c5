"""User Repository - User CRUD operations.

All methods use async/await with supabase-py v2.
"""

from datetime import UTC, datetime

from core.logging import get_logger
from core.services.models import User

from .base import BaseRepository

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """User database operations."""

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self.client.table("users").select("*").eq("id", user_id).execute()
        return User(**result.data[0]) if result.data else None

    async def get_by_username(self, username: str) -> User | None:
        result = await self.client.table("users").select("*").eq("username", username).execute()
        return User(**result.data[0]) if result.data else None

    async def get_by_email(self, email: str) -> User | None:
        result = await self.client.table("users").select("*").eq("email", email).execute()
        return User(**result.data[0]) if result.data else None

    async def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        first_name: str | None = None,
        last_name: str | None = None,
        role: str = "customer",
    ) -> User:
        data = {
            "username": username,
            "email": email,
            "password_hash": password_hash,
            "first_name": first_name,
            "last_name": last_name,
            "role": role,
            "created_at": datetime.now(UTC).isoformat(),
        }
        result = await self.client.table("users").insert(data).execute()
        return User(**result.data[0])

    async def update(self, user_id: int, fields: dict) -> User | None:
        """Update the given columns; returns None if the user does not exist."""
        if not fields:
            return await self.get_by_id(user_id)
        result = await self.client.table("users").update(fields).eq("id", user_id).execute()
        return User(**result.data[0]) if result.data else None

    async def get_all(self, role: str | None = None) -> list[User]:
        query = self.client.table("users").select("*").order("created_at", desc=True)
        if role:
            query = query.eq("role", role)
        result = await query.execute()
        return [User(**u) for u in result.data]
