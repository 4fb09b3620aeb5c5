"""Order API client used by the checkout flow."""
from typing import Any, Dict, Optional

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from core.config import get_order_api_base_url
from core.errors import ERROR_ORDER_FAILED
from core.logging import get_logger, sanitize_string_for_logging

logger = get_logger(__name__)


class OrderApiError(Exception):
    """Non-2xx response from the Order API."""

    def __init__(self, status_code: int, message: str, payload: Any = None):
        self.status_code = status_code
        self.message = message
        self.payload = payload
        super().__init__(f"{status_code}: {message}")


def _error_message(response: httpx.Response) -> str:
    """Pick the user-facing message out of an error response."""
    try:
        data = response.json()
    except ValueError:
        return ERROR_ORDER_FAILED

    if isinstance(data, dict):
        for key in ("message", "detail"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return ERROR_ORDER_FAILED


class OrderApiClient:
    """
    Thin async client for POST /orders.

    Transport failures are retried; every request carries an Idempotency-Key
    so a retried request never creates a second order.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or get_order_api_base_url()).rstrip("/")
        self._http_client = http_client

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazy shared httpx client with timeouts."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(10.0, connect=5.0),
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            )
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _post(self, url: str, payload: dict, headers: Dict[str, str]) -> httpx.Response:
        client = await self._get_http_client()
        return await client.post(url, json=payload, headers=headers)

    async def create_order(
        self,
        payload: dict,
        headers: Optional[Dict[str, str]] = None,
        idempotency_key: Optional[str] = None,
    ) -> dict:
        """
        Submit an order.

        Returns:
            Decoded JSON body of the 2xx response

        Raises:
            OrderApiError: non-2xx response
            httpx.HTTPError: transport failure after retries
        """
        request_headers = {"Accept": "application/json", **(headers or {})}
        if idempotency_key:
            request_headers["Idempotency-Key"] = idempotency_key

        url = f"{self.base_url}/orders"
        response = await self._post(url, payload, request_headers)

        if not response.is_success:
            message = _error_message(response)
            logger.warning(
                f"Order API rejected order: {response.status_code} {sanitize_string_for_logging(message)}"
            )
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise OrderApiError(response.status_code, message, body)

        try:
            return response.json()
        except ValueError:
            return {}
