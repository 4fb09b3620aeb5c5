"""Checkout package: converts the cart into a submitted order."""
from .errors import (
    AuthenticationRequiredError,
    CheckoutError,
    CheckoutInProgressError,
    EmptyCartError,
    SubmissionError,
)
from .flow import CheckoutFlow
from .models import CheckoutResult, CheckoutState, OrderSubmission, SubmissionItem

__all__ = [
    "AuthenticationRequiredError",
    "CheckoutError",
    "CheckoutInProgressError",
    "EmptyCartError",
    "SubmissionError",
    "CheckoutFlow",
    "CheckoutResult",
    "CheckoutState",
    "OrderSubmission",
    "SubmissionItem",
]
