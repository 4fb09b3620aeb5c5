"""
Repository Pattern for Database Operations

Provides clean separation of concerns:
- UserRepository: accounts and profiles
- ProductRepository: product catalog
- OrderRepository: orders and order items
- ContactRepository: contact form submissions
"""
from .user_repo import UserRepository
from .product_repo import ProductRepository
from .order_repo import OrderRepository
from .contact_repo import ContactRepository

__all__ = [
    "UserRepository",
    "ProductRepository",
    "OrderRepository",
    "ContactRepository",
]
