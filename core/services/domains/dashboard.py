"""
Admin dashboard aggregation.

Everything is computed from the flat database API, so it works the same
for Supabase and the in-memory backend.
"""
import asyncio
from collections import defaultdict
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, List, Optional

from core.orders.serializer import build_order_payload
from core.services.models import Order, OrderItem, Product, utcnow
from core.services.money import round_money, to_float

NEW_USER_WINDOW_DAYS = 30
RECENT_ORDERS_LIMIT = 5
TOP_PRODUCTS_LIMIT = 5
REVENUE_MONTHS = 6

# Cancelled orders never count towards revenue or sales
REVENUE_EXCLUDED_STATUSES = ("cancelled",)


def _month_starts(now: datetime, count: int) -> List[datetime]:
    """First day of each of the last `count` months, oldest first."""
    year, month = now.year, now.month
    starts = []
    for _ in range(count):
        starts.append(now.replace(year=year, month=month, day=1, hour=0, minute=0, second=0, microsecond=0))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(starts))


class DashboardService:
    """Builds the admin dashboard summary."""

    def __init__(self, db) -> None:
        self.db = db

    async def build(self, now: Optional[datetime] = None) -> dict:
        now = now or utcnow()
        users, orders, products, items = await asyncio.gather(
            self.db.list_users(),
            self.db.get_orders(),
            self.db.get_products(),
            self.db.get_all_order_items(),
        )

        counted_orders = [o for o in orders if o.status not in REVENUE_EXCLUDED_STATUSES]
        counted_ids = {o.id for o in counted_orders}
        counted_items = [i for i in items if i.order_id in counted_ids]

        total_revenue = round_money(sum((o.total_amount for o in counted_orders), Decimal("0")))
        new_user_cutoff = now - timedelta(days=NEW_USER_WINDOW_DAYS)
        recent = sorted(orders, key=lambda o: o.created_at, reverse=True)[:RECENT_ORDERS_LIMIT]

        return {
            "total_users": len(users),
            "total_orders": len(orders),
            "total_products": len(products),
            "total_revenue": to_float(total_revenue),
            "average_order_value": to_float(total_revenue / len(counted_orders)) if counted_orders else 0.0,
            "new_users": sum(1 for u in users if u.created_at >= new_user_cutoff),
            "recent_orders": [build_order_payload(o) for o in recent],
            "top_selling_products": self._top_selling(counted_items, products),
            "sales_by_category": self._sales_by_category(counted_items, products),
            "revenue_by_month": self._revenue_by_month(counted_orders, now),
        }

    @staticmethod
    def _top_selling(items: List[OrderItem], products: List[Product]) -> List[dict]:
        names = {p.id: p.name for p in products}
        units: Dict[int, int] = defaultdict(int)
        revenue: Dict[int, Decimal] = defaultdict(Decimal)
        for item in items:
            units[item.product_id] += item.quantity
            revenue[item.product_id] += item.price * item.quantity

        ranked = sorted(units, key=lambda pid: (-units[pid], pid))[:TOP_PRODUCTS_LIMIT]
        return [
            {
                "id": pid,
                "name": names.get(pid, f"Product #{pid}"),
                "sales": units[pid],
                "revenue": to_float(revenue[pid]),
            }
            for pid in ranked
        ]

    @staticmethod
    def _sales_by_category(items: List[OrderItem], products: List[Product]) -> List[dict]:
        """Share of line revenue per product category, in percent."""
        categories = {p.id: p.category for p in products}
        revenue: Dict[str, Decimal] = defaultdict(Decimal)
        for item in items:
            revenue[categories.get(item.product_id, "Uncategorized")] += item.price * item.quantity

        total = sum(revenue.values(), Decimal("0"))
        if not total:
            return []
        return [
            {"name": name, "value": to_float(amount * 100 / total)}
            for name, amount in sorted(revenue.items(), key=lambda kv: -kv[1])
        ]

    @staticmethod
    def _revenue_by_month(orders: List[Order], now: datetime) -> List[dict]:
        starts = _month_starts(now, REVENUE_MONTHS)
        buckets = {(s.year, s.month): Decimal("0") for s in starts}
        for order in orders:
            key = (order.created_at.year, order.created_at.month)
            if key in buckets:
                buckets[key] += order.total_amount
        return [
            {"name": s.strftime("%b %Y"), "revenue": to_float(buckets[(s.year, s.month)])}
            for s in starts
        ]
