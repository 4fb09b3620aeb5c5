"""Database Models - Pydantic models for all entities."""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.services.money import to_decimal as _to_decimal, to_float

UserRole = Literal["admin", "customer"]
OrderStatus = Literal["pending", "processing", "completed", "cancelled"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    """User model (password_hash never leaves the server)."""
    model_config = ConfigDict(extra="ignore")

    id: int
    username: str
    email: str
    password_hash: str = Field(default="", exclude=True)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole = "customer"
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def public(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role": self.role,
            "created_at": self.created_at.isoformat(),
        }


class Product(BaseModel):
    """Catalog product."""
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    description: str
    price: Decimal
    image_url: str
    category: str
    in_stock: bool = True
    quantity: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    def public(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": to_float(self.price),
            "image_url": self.image_url,
            "category": self.category,
            "in_stock": self.in_stock,
            "quantity": self.quantity,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class Order(BaseModel):
    """Order header."""
    model_config = ConfigDict(extra="ignore")

    id: int
    user_id: int
    status: OrderStatus = "pending"
    total_amount: Decimal
    idempotency_key: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("total_amount", mode="before")
    @classmethod
    def convert_total_to_decimal(cls, v):
        return _to_decimal(v)

    def public(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "status": self.status,
            "total_amount": to_float(self.total_amount),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class OrderItem(BaseModel):
    """Order line: product, quantity and the unit price paid."""
    model_config = ConfigDict(extra="ignore")

    id: int
    order_id: int
    product_id: int
    quantity: int
    price: Decimal
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    def public(self) -> dict:
        return {
            "id": self.id,
            "order_id": self.order_id,
            "product_id": self.product_id,
            "quantity": self.quantity,
            "price": to_float(self.price),
        }


class Contact(BaseModel):
    """Contact form submission."""
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    email: str
    message: str
    created_at: datetime = Field(default_factory=utcnow)
