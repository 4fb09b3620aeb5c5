"""
Database Service

Two interchangeable backends with the same flat async API:
- Database: Supabase (PostgreSQL) via the repository classes
- MemoryDatabase: in-process dicts, used for development and tests

Usage:
    from core.services.database import get_database

    # At FastAPI startup (lifespan):
    await init_database()

    db = get_database()
    product = await db.get_product(1)
"""

from itertools import count
from typing import Dict, List, Optional, Tuple

from core.auth.passwords import hash_password
from core.config import get_admin_seed
from core.db import get_supabase, supabase_configured
from core.logging import get_logger
from core.services.models import Contact, Order, OrderItem, Product, User, utcnow
from core.services.repositories import (
    ContactRepository,
    OrderRepository,
    ProductRepository,
    UserRepository,
)

logger = get_logger(__name__)


class Database:
    """
    Supabase-backed database.

    Must be created via the async factory `create()` or `init_database()`.
    """

    def __init__(self, client):
        self.client = client
        self._users_repo = UserRepository(client)
        self._products_repo = ProductRepository(client)
        self._orders_repo = OrderRepository(client)
        self._contacts_repo = ContactRepository(client)

    @classmethod
    async def create(cls) -> "Database":
        return cls(await get_supabase())

    # ==================== USER OPERATIONS ====================

    async def get_user(self, user_id: int) -> Optional[User]:
        return await self._users_repo.get_by_id(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self._users_repo.get_by_username(username)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return await self._users_repo.get_by_email(email)

    async def create_user(self, username: str, email: str, password_hash: str, **fields) -> User:
        return await self._users_repo.create(username, email, password_hash, **fields)

    async def update_user(self, user_id: int, fields: dict) -> Optional[User]:
        return await self._users_repo.update(user_id, fields)

    async def list_users(self, role: Optional[str] = None) -> List[User]:
        return await self._users_repo.get_all(role)

    # ==================== PRODUCT OPERATIONS ====================

    async def get_products(self) -> List[Product]:
        return await self._products_repo.get_all()

    async def get_product(self, product_id: int) -> Optional[Product]:
        return await self._products_repo.get_by_id(product_id)

    async def create_product(self, data: dict) -> Product:
        return await self._products_repo.create(data)

    async def update_product(self, product_id: int, data: dict) -> Optional[Product]:
        return await self._products_repo.update(product_id, data)

    async def delete_product(self, product_id: int) -> bool:
        return await self._products_repo.delete(product_id)

    # ==================== ORDER OPERATIONS ====================

    async def create_order(
        self, user_id: int, total_amount, items: List[dict], idempotency_key: Optional[str] = None
    ) -> Tuple[Order, List[OrderItem]]:
        return await self._orders_repo.create(user_id, total_amount, items, idempotency_key)

    async def get_order(self, order_id: int) -> Optional[Order]:
        return await self._orders_repo.get_by_id(order_id)

    async def get_order_by_idempotency_key(self, user_id: int, key: str) -> Optional[Order]:
        return await self._orders_repo.get_by_idempotency_key(user_id, key)

    async def get_orders(self) -> List[Order]:
        return await self._orders_repo.get_all()

    async def get_user_orders(self, user_id: int) -> List[Order]:
        return await self._orders_repo.get_by_user(user_id)

    async def update_order_status(self, order_id: int, status: str) -> Optional[Order]:
        return await self._orders_repo.update_status(order_id, status)

    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        return await self._orders_repo.get_items(order_id)

    async def get_all_order_items(self) -> List[OrderItem]:
        return await self._orders_repo.get_all_items()

    # ==================== CONTACT OPERATIONS ====================

    async def create_contact(self, name: str, email: str, message: str) -> Contact:
        return await self._contacts_repo.create(name, email, message)


class MemoryDatabase:
    """In-memory database for development; seeded with an admin account."""

    def __init__(self, seed_admin: bool = True):
        self.users: Dict[int, User] = {}
        self.products: Dict[int, Product] = {}
        self.orders: Dict[int, Order] = {}
        self.order_items: Dict[int, OrderItem] = {}
        self.contacts: Dict[int, Contact] = {}
        self._ids = {name: count(1) for name in ("users", "products", "orders", "order_items", "contacts")}

        if seed_admin:
            admin = get_admin_seed()
            self._insert_user(
                username=admin["username"],
                email=admin["email"],
                password_hash=hash_password(admin["password"]),
                first_name="Admin",
                last_name="User",
                role="admin",
            )

    def _next_id(self, table: str) -> int:
        return next(self._ids[table])

    def _insert_user(self, **data) -> User:
        user = User(id=self._next_id("users"), **data)
        self.users[user.id] = user
        return user

    # ==================== USER OPERATIONS ====================

    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def create_user(self, username: str, email: str, password_hash: str, **fields) -> User:
        return self._insert_user(username=username, email=email, password_hash=password_hash, **fields)

    async def update_user(self, user_id: int, fields: dict) -> Optional[User]:
        user = self.users.get(user_id)
        if not user:
            return None
        updated = user.model_copy(update=fields)
        self.users[user_id] = updated
        return updated

    async def list_users(self, role: Optional[str] = None) -> List[User]:
        users = sorted(self.users.values(), key=lambda u: u.created_at, reverse=True)
        return [u for u in users if not role or u.role == role]

    # ==================== PRODUCT OPERATIONS ====================

    async def get_products(self) -> List[Product]:
        return list(self.products.values())

    async def get_product(self, product_id: int) -> Optional[Product]:
        return self.products.get(product_id)

    async def create_product(self, data: dict) -> Product:
        product = Product(id=self._next_id("products"), **data)
        self.products[product.id] = product
        return product

    async def update_product(self, product_id: int, data: dict) -> Optional[Product]:
        product = self.products.get(product_id)
        if not product:
            return None
        updated = Product(**{**product.model_dump(), **data, "updated_at": utcnow()})
        self.products[product_id] = updated
        return updated

    async def delete_product(self, product_id: int) -> bool:
        return self.products.pop(product_id, None) is not None

    # ==================== ORDER OPERATIONS ====================

    async def create_order(
        self, user_id: int, total_amount, items: List[dict], idempotency_key: Optional[str] = None
    ) -> Tuple[Order, List[OrderItem]]:
        order = Order(
            id=self._next_id("orders"),
            user_id=user_id,
            total_amount=total_amount,
            idempotency_key=idempotency_key,
        )
        self.orders[order.id] = order

        created_items = []
        for item in items:
            order_item = OrderItem(
                id=self._next_id("order_items"),
                order_id=order.id,
                product_id=item["product_id"],
                quantity=item["quantity"],
                price=item["price"],
            )
            self.order_items[order_item.id] = order_item
            created_items.append(order_item)
        return order, created_items

    async def get_order(self, order_id: int) -> Optional[Order]:
        return self.orders.get(order_id)

    async def get_order_by_idempotency_key(self, user_id: int, key: str) -> Optional[Order]:
        return next(
            (o for o in self.orders.values() if o.user_id == user_id and o.idempotency_key == key),
            None,
        )

    async def get_orders(self) -> List[Order]:
        return sorted(self.orders.values(), key=lambda o: o.created_at, reverse=True)

    async def get_user_orders(self, user_id: int) -> List[Order]:
        return [o for o in await self.get_orders() if o.user_id == user_id]

    async def update_order_status(self, order_id: int, status: str) -> Optional[Order]:
        order = self.orders.get(order_id)
        if not order:
            return None
        updated = order.model_copy(update={"status": status, "updated_at": utcnow()})
        self.orders[order_id] = updated
        return updated

    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        return [i for i in self.order_items.values() if i.order_id == order_id]

    async def get_all_order_items(self) -> List[OrderItem]:
        return list(self.order_items.values())

    # ==================== CONTACT OPERATIONS ====================

    async def create_contact(self, name: str, email: str, message: str) -> Contact:
        contact = Contact(id=self._next_id("contacts"), name=name, email=email, message=message)
        self.contacts[contact.id] = contact
        return contact


# Singleton instance
_db = None


async def init_database():
    """Create the database singleton: Supabase when configured, memory otherwise."""
    global _db
    if _db is None:
        if supabase_configured():
            _db = await Database.create()
            logger.info("Using Supabase database")
        else:
            _db = MemoryDatabase()
            logger.info("Supabase not configured, using in-memory database")
    return _db


def get_database():
    """Get the database singleton (call init_database() at startup first)."""
    if _db is None:
        raise RuntimeError("Database not initialized. Call init_database() at startup.")
    return _db


def set_database(db) -> None:
    """Replace the database singleton (tests, scripts)."""
    global _db
    _db = db
