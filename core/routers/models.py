"""
Shop API Pydantic Models

Request bodies shared by the shop routers.
"""
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


# ==================== AUTH MODELS ====================

class RegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class LoginRequest(BaseModel):
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)


# ==================== PROFILE MODELS ====================

class UpdateProfileRequest(BaseModel):
    email: Optional[str] = Field(default=None, pattern=EMAIL_PATTERN)
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def email_not_null(cls, v):
        if v is None:
            raise ValueError("email cannot be null")
        return v


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str = Field(min_length=6)


# ==================== PRODUCT MODELS ====================

class ProductRequest(BaseModel):
    name: str = Field(min_length=1)
    description: str
    price: Decimal = Field(ge=0)
    image_url: str
    category: str
    in_stock: bool = True
    quantity: int = Field(default=0, ge=0)


class UpdateProductRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = None
    quantity: Optional[int] = Field(default=None, ge=0)


# ==================== ORDER MODELS ====================

class OrderItemRequest(BaseModel):
    product_id: int
    quantity: int = Field(ge=1)
    price: Decimal = Field(ge=0)


class CreateOrderRequest(BaseModel):
    total_amount: Decimal = Field(ge=0)
    items: List[OrderItemRequest]


class UpdateOrderStatusRequest(BaseModel):
    status: str


# ==================== CONTACT MODELS ====================

class ContactRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(pattern=EMAIL_PATTERN)
    message: str = Field(min_length=1)
