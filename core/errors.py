"""
Common Error Constants

Centralized error messages to avoid string duplication (SonarQube S1192).
"""

# Auth errors
ERROR_AUTH_REQUIRED = "Authentication required"
ERROR_ADMIN_REQUIRED = "Admin access required"
ERROR_INVALID_SESSION = "Invalid session token"
ERROR_INVALID_CREDENTIALS = "Invalid username or password"
ERROR_USERNAME_TAKEN = "Username already taken"
ERROR_EMAIL_TAKEN = "Email already in use"
ERROR_WRONG_PASSWORD = "Current password is incorrect"

# User errors
ERROR_USER_NOT_FOUND = "User not found"

# Order errors
ERROR_ORDER_NOT_FOUND = "Order not found"
ERROR_ORDER_ACCESS_DENIED = "Order does not belong to user"
ERROR_ORDER_INVALID_STATUS = "Invalid status"
ERROR_ORDER_TOTAL_MISMATCH = "Order total does not match items"
ERROR_ORDER_EMPTY = "Order must contain at least one item"

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Client-side checkout messages
ERROR_CART_EMPTY = "Your cart is empty. Add some products first."
ERROR_LOGIN_REQUIRED = "Please log in to complete your order."
ERROR_CHECKOUT_IN_PROGRESS = "Your order is already being placed."
ERROR_ORDER_FAILED = "Failed to place order"
ERROR_ORDER_TIMEOUT = "The order service did not respond in time. Please try again."
ERROR_ORDER_UNREACHABLE = "Could not reach the order service. Please try again."

# Generic errors
ERROR_INTERNAL = "Internal server error"
