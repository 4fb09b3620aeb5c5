"""
Checkout Flow

Turns the current cart into one order submission and reconciles the cart with
the outcome: cleared on success, untouched on any failure.

Per invocation: Idle -> Validating -> Submitting -> Succeeded | Failed.
At most one submission is in flight per flow instance.
"""
import asyncio
import uuid
from typing import Callable, List, Optional

import httpx

from core.auth.credentials import AuthSession
from core.cart.service import CartStore
from core.config import get_checkout_timeout
from core.errors import ERROR_ORDER_TIMEOUT, ERROR_ORDER_UNREACHABLE
from core.logging import get_logger, sanitize_id_for_logging
from core.orders.client import OrderApiClient, OrderApiError
from .errors import (
    AuthenticationRequiredError,
    CheckoutInProgressError,
    EmptyCartError,
    SubmissionError,
)
from .models import ORDER_PLACED_MESSAGE, CheckoutResult, CheckoutState, OrderSubmission

logger = get_logger(__name__)

BusyListener = Callable[[bool], None]


class CheckoutFlow:
    """
    Places the cart as an order through the Order API.

    While a submission is in flight the flow reports busy=True to its
    listeners so the UI can disable cart-mutating controls.
    """

    def __init__(
        self,
        cart_store: CartStore,
        order_api: OrderApiClient,
        auth: AuthSession,
        timeout: Optional[float] = None,
    ):
        self._cart_store = cart_store
        self._order_api = order_api
        self._auth = auth
        self._timeout = timeout if timeout is not None else get_checkout_timeout()
        self._state = CheckoutState.IDLE
        self._in_flight = False
        self._busy_listeners: List[BusyListener] = []
        # Key of the last failed attempt, reused while the cart is unchanged
        self._retry_key: Optional[str] = None
        self._retry_fingerprint: Optional[tuple] = None

    @property
    def state(self) -> CheckoutState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._in_flight

    def subscribe_busy(self, listener: BusyListener) -> Callable[[], None]:
        """Register a busy-state listener; returns a callable that unsubscribes it."""
        self._busy_listeners.append(listener)
        return lambda: self.unsubscribe_busy(listener)

    def unsubscribe_busy(self, listener: BusyListener) -> None:
        if listener in self._busy_listeners:
            self._busy_listeners.remove(listener)

    def _set_busy(self, busy: bool) -> None:
        self._in_flight = busy
        for listener in list(self._busy_listeners):
            try:
                listener(busy)
            except Exception:
                logger.exception("Checkout busy listener failed")

    def _build_submission(self) -> OrderSubmission:
        snapshot = self._cart_store.snapshot()
        submission = OrderSubmission.from_snapshot(snapshot, self._retry_key or str(uuid.uuid4()))
        if self._retry_key and submission.fingerprint != self._retry_fingerprint:
            # Cart changed since the failed attempt: this is a different order
            submission = OrderSubmission.from_snapshot(snapshot, str(uuid.uuid4()))
        return submission

    async def _submit(self, submission: OrderSubmission) -> dict:
        try:
            return await asyncio.wait_for(
                self._order_api.create_order(
                    submission.to_payload(),
                    headers=self._auth.auth_headers(),
                    idempotency_key=submission.idempotency_key,
                ),
                timeout=self._timeout,
            )
        except OrderApiError as e:
            raise SubmissionError(e.message, status_code=e.status_code)
        except asyncio.TimeoutError:
            raise SubmissionError(ERROR_ORDER_TIMEOUT)
        except httpx.HTTPError as e:
            logger.warning(f"Order API unreachable: {e}")
            raise SubmissionError(ERROR_ORDER_UNREACHABLE)

    async def checkout(self) -> CheckoutResult:
        """
        Place the current cart as an order.

        Raises:
            CheckoutInProgressError: another submission is still in flight
            EmptyCartError: nothing to order
            AuthenticationRequiredError: no signed-in user
            SubmissionError: the Order API call failed or timed out
        """
        if self._in_flight:
            raise CheckoutInProgressError()

        self._state = CheckoutState.VALIDATING
        if self._cart_store.is_empty:
            self._state = CheckoutState.FAILED
            raise EmptyCartError()
        if not self._auth.is_authenticated:
            self._state = CheckoutState.FAILED
            raise AuthenticationRequiredError()

        submission = self._build_submission()

        self._state = CheckoutState.SUBMITTING
        self._set_busy(True)
        try:
            order_response = await self._submit(submission)
        except BaseException as e:
            # Outcome may be unknown (timeout, cancellation): keep the key for a retry
            self._state = CheckoutState.FAILED
            self._retry_key = submission.idempotency_key
            self._retry_fingerprint = submission.fingerprint
            if isinstance(e, SubmissionError):
                logger.warning(f"Checkout failed: {e.message}")
            raise
        finally:
            self._set_busy(False)

        self._cart_store.clear()
        self._retry_key = None
        self._retry_fingerprint = None
        self._state = CheckoutState.SUCCEEDED

        if not isinstance(order_response, dict):
            order_response = {}
        order = order_response.get("order") or order_response
        logger.info(f"Order {sanitize_id_for_logging(order.get('id'))} placed")
        return CheckoutResult(order=order, message=order_response.get("message") or ORDER_PLACED_MESSAGE)
