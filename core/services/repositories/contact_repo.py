"""Contact Repository - contact form submissions."""
from core.services.models import Contact

from .base import BaseRepository


class ContactRepository(BaseRepository):
    """Contact database operations."""

    async def create(self, name: str, email: str, message: str) -> Contact:
        data = {"name": name, "email": email, "message": message}
        result = await self.client.table("contacts").insert(data).execute()
        return Contact(**result.data[0])
