"""Checkout failures surfaced to the UI as notifications."""
from typing import Optional

from core.errors import (
    ERROR_CART_EMPTY,
    ERROR_CHECKOUT_IN_PROGRESS,
    ERROR_LOGIN_REQUIRED,
    ERROR_ORDER_FAILED,
)


class CheckoutError(Exception):
    """Base class; `message` is safe to show to the user."""

    default_message = ERROR_ORDER_FAILED

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyCartError(CheckoutError):
    """Checkout was requested with nothing in the cart."""

    default_message = ERROR_CART_EMPTY


class AuthenticationRequiredError(CheckoutError):
    """No signed-in user; the caller should send the user to the login page."""

    default_message = ERROR_LOGIN_REQUIRED


class CheckoutInProgressError(CheckoutError):
    """A submission from the same flow is still awaiting the Order API."""

    default_message = ERROR_CHECKOUT_IN_PROGRESS


class SubmissionError(CheckoutError):
    """The Order API call failed; the cart was left untouched."""

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
