"""
Kira Shop Core Module

- cart: client-side shopping cart store with pluggable persistence
- checkout: cart-to-order submission flow
- orders: Order API client and server-side order services
- auth: sessions, password hashing, FastAPI auth dependencies
- services: database backends, repositories, models, money helpers
- routers: FastAPI routers mounted by api/index.py

Note: subpackages are imported explicitly; nothing is loaded here so the
cart/checkout client does not pull in the server stack.
"""
