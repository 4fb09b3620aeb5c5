"""Tests for the Order API client"""
import json
import pytest
from unittest.mock import AsyncMock, patch

import httpx

from core.orders import OrderApiClient, OrderApiError


def make_client(handler) -> OrderApiClient:
    transport = httpx.MockTransport(handler)
    return OrderApiClient(
        base_url="http://shop.test/api/",
        http_client=httpx.AsyncClient(transport=transport),
    )


@pytest.mark.asyncio
async def test_create_order_posts_payload_and_headers():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["headers"] = request.headers
        captured["body"] = json.loads(request.content)
        return httpx.Response(201, json={"message": "Order created successfully", "order": {"id": 1}})

    client = make_client(handler)
    payload = {"total_amount": 10.0, "items": [{"product_id": 1, "quantity": 1, "price": 10.0}]}

    result = await client.create_order(
        payload, headers={"Authorization": "Bearer tok"}, idempotency_key="key-1"
    )
    await client.aclose()

    assert result["order"]["id"] == 1
    assert captured["url"] == "http://shop.test/api/orders"
    assert captured["body"] == payload
    assert captured["headers"]["Authorization"] == "Bearer tok"
    assert captured["headers"]["Idempotency-Key"] == "key-1"
    assert captured["headers"]["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_error_response_uses_detail_message():
    client = make_client(lambda request: httpx.Response(400, json={"detail": "Order total does not match items"}))

    with pytest.raises(OrderApiError) as exc_info:
        await client.create_order({"items": []})

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Order total does not match items"


@pytest.mark.asyncio
async def test_error_response_uses_message_field():
    client = make_client(lambda request: httpx.Response(401, json={"message": "Authentication required"}))

    with pytest.raises(OrderApiError) as exc_info:
        await client.create_order({"items": []})

    assert exc_info.value.message == "Authentication required"


@pytest.mark.asyncio
async def test_error_without_json_body_gets_generic_message():
    client = make_client(lambda request: httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(OrderApiError) as exc_info:
        await client.create_order({"items": []})

    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Failed to place order"
    assert exc_info.value.payload == "Bad Gateway"


@pytest.mark.asyncio
async def test_empty_success_body():
    client = make_client(lambda request: httpx.Response(204))

    assert await client.create_order({"items": []}) == {}


@pytest.mark.asyncio
async def test_transport_errors_are_retried():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.headers.get("Idempotency-Key"))
        if len(calls) < 3:
            raise httpx.ConnectError("refused", request=request)
        return httpx.Response(201, json={"order": {"id": 9}})

    client = make_client(handler)

    with patch("asyncio.sleep", new=AsyncMock()):
        result = await client.create_order({"items": []}, idempotency_key="same-key")

    assert result["order"]["id"] == 9
    assert calls == ["same-key", "same-key", "same-key"]


@pytest.mark.asyncio
async def test_transport_error_reraised_after_attempts():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = make_client(handler)

    with patch("asyncio.sleep", new=AsyncMock()):
        with pytest.raises(httpx.ConnectError):
            await client.create_order({"items": []})


@pytest.mark.asyncio
async def test_http_errors_are_not_retried():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(1)
        return httpx.Response(500, json={"detail": "Internal server error"})

    client = make_client(handler)

    with pytest.raises(OrderApiError):
        await client.create_order({"items": []})

    assert len(calls) == 1
