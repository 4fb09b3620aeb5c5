"""Order processing module."""
from .client import OrderApiClient, OrderApiError
from .serializer import build_item_payload, build_order_payload
from .service import OrderService, OrderValidationError, PlacedOrder, compute_items_total
from .status_service import ORDER_STATUSES, OrderStatusService, is_valid_status

__all__ = [
    "OrderApiClient",
    "OrderApiError",
    "build_order_payload",
    "build_item_payload",
    "OrderService",
    "OrderValidationError",
    "PlacedOrder",
    "compute_items_total",
    "ORDER_STATUSES",
    "OrderStatusService",
    "is_valid_status",
]
