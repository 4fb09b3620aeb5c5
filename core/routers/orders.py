"""
Orders Router

Order placement for signed-in users and order management for admins.
"""
import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Response

from core.auth.dependencies import get_current_user, verify_admin
from core.errors import (
    ERROR_ORDER_ACCESS_DENIED,
    ERROR_ORDER_INVALID_STATUS,
    ERROR_ORDER_NOT_FOUND,
)
from core.orders import OrderService, OrderStatusService, OrderValidationError, build_order_payload
from core.services.database import get_database
from core.services.models import User

from .models import CreateOrderRequest, UpdateOrderStatusRequest

router = APIRouter(tags=["orders"])


@router.post("/orders", status_code=201)
async def create_order(
    request: CreateOrderRequest,
    response: Response,
    user: User = Depends(get_current_user),
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key"),
):
    """
    Place an order from the submitted cart lines.

    A repeated Idempotency-Key returns the order already created for it (200).
    """
    service = OrderService(get_database())
    try:
        placed = await service.place_order(
            user.id,
            request.total_amount,
            [item.model_dump() for item in request.items],
            idempotency_key=idempotency_key,
        )
    except OrderValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not placed.created:
        response.status_code = 200
        message = "Order already placed"
    else:
        message = "Order created successfully"

    return {"message": message, "order": build_order_payload(placed.order, placed.items)}


@router.get("/my-orders")
async def get_my_orders(user: User = Depends(get_current_user)):
    """Orders of the signed-in user, newest first, with their lines."""
    db = get_database()
    orders = await db.get_user_orders(user.id)
    items = await asyncio.gather(*(db.get_order_items(o.id) for o in orders))
    return {"orders": [build_order_payload(o, i) for o, i in zip(orders, items)]}


@router.get("/orders")
async def get_all_orders(admin=Depends(verify_admin)):
    db = get_database()
    orders = await db.get_orders()
    return {"orders": [build_order_payload(o) for o in orders]}


@router.get("/orders/{order_id}")
async def get_order(order_id: int, user: User = Depends(get_current_user)):
    """Single order with lines (owner or admin)."""
    db = get_database()
    order = await db.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail=ERROR_ORDER_NOT_FOUND)
    if order.user_id != user.id and not user.is_admin:
        raise HTTPException(status_code=403, detail=ERROR_ORDER_ACCESS_DENIED)

    items = await db.get_order_items(order.id)
    return {"order": build_order_payload(order, items)}


@router.patch("/orders/{order_id}/status")
async def update_order_status(
    order_id: int,
    request: UpdateOrderStatusRequest,
    admin=Depends(verify_admin)
):
    service = OrderStatusService(get_database())
    try:
        order = await service.update_status(order_id, request.status)
    except ValueError:
        raise HTTPException(status_code=400, detail=ERROR_ORDER_INVALID_STATUS)

    if not order:
        raise HTTPException(status_code=404, detail=ERROR_ORDER_NOT_FOUND)

    return {"message": "Order status updated successfully", "order": build_order_payload(order)}
