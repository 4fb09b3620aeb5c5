"""Product Repository - Product catalog operations."""
from datetime import UTC, datetime
from typing import List, Optional

from core.services.models import Product
from core.services.money import to_float

from .base import BaseRepository


class ProductRepository(BaseRepository):
    """Product database operations."""

    @staticmethod
    def _row(data: dict) -> dict:
        if data.get("price") is not None:
            return {**data, "price": to_float(data["price"])}
        return dict(data)

    async def get_all(self) -> List[Product]:
        result = await self.client.table("products").select("*").order("id").execute()
        return [Product(**p) for p in result.data]

    async def get_by_id(self, product_id: int) -> Optional[Product]:
        result = await self.client.table("products").select("*").eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def create(self, data: dict) -> Product:
        result = await self.client.table("products").insert(self._row(data)).execute()
        return Product(**result.data[0])

    async def update(self, product_id: int, data: dict) -> Optional[Product]:
        data = {**self._row(data), "updated_at": datetime.now(UTC).isoformat()}
        result = await self.client.table("products").update(data).eq("id", product_id).execute()
        return Product(**result.data[0]) if result.data else None

    async def delete(self, product_id: int) -> bool:
        result = await self.client.table("products").delete().eq("id", product_id).execute()
        return bool(result.data)
