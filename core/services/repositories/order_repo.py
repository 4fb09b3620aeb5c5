"""Order Repository - Order and order item operations."""
from datetime import UTC, datetime
from typing import List, Optional, Tuple

from core.services.models import Order, OrderItem
from core.services.money import to_float

from .base import BaseRepository


class OrderRepository(BaseRepository):
    """Order database operations."""

    async def create(
        self,
        user_id: int,
        total_amount,
        items: List[dict],
        idempotency_key: Optional[str] = None,
        status: str = "pending",
    ) -> Tuple[Order, List[OrderItem]]:
        """Create an order and its items.

        Args:
            items: dicts with product_id, quantity and price
        """
        data = {
            "user_id": user_id,
            "total_amount": to_float(total_amount),
            "status": status,
        }
        if idempotency_key:
            data["idempotency_key"] = idempotency_key

        result = await self.client.table("orders").insert(data).execute()
        order = Order(**result.data[0])

        order_items: List[OrderItem] = []
        if items:
            rows = [
                {
                    "order_id": order.id,
                    "product_id": item["product_id"],
                    "quantity": item["quantity"],
                    "price": to_float(item["price"]),
                }
                for item in items
            ]
            items_result = await self.client.table("order_items").insert(rows).execute()
            order_items = [OrderItem(**row) for row in items_result.data]

        return order, order_items

    async def get_by_id(self, order_id: int) -> Optional[Order]:
        result = await self.client.table("orders").select("*").eq("id", order_id).execute()
        return Order(**result.data[0]) if result.data else None

    async def get_by_idempotency_key(self, user_id: int, key: str) -> Optional[Order]:
        result = (
            await self.client.table("orders")
            .select("*")
            .eq("user_id", user_id)
            .eq("idempotency_key", key)
            .execute()
        )
        return Order(**result.data[0]) if result.data else None

    async def get_all(self) -> List[Order]:
        result = await self.client.table("orders").select("*").order("created_at", desc=True).execute()
        return [Order(**o) for o in result.data]

    async def get_by_user(self, user_id: int) -> List[Order]:
        result = (
            await self.client.table("orders")
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [Order(**o) for o in result.data]

    async def update_status(self, order_id: int, status: str) -> Optional[Order]:
        data = {"status": status, "updated_at": datetime.now(UTC).isoformat()}
        result = await self.client.table("orders").update(data).eq("id", order_id).execute()
        return Order(**result.data[0]) if result.data else None

    async def get_items(self, order_id: int) -> List[OrderItem]:
        result = await self.client.table("order_items").select("*").eq("order_id", order_id).execute()
        return [OrderItem(**i) for i in result.data]

    async def get_all_items(self) -> List[OrderItem]:
        result = await self.client.table("order_items").select("*").execute()
        return [OrderItem(**i) for i in result.data]
