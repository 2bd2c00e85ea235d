# ------ scoutcookies/model/__init__.py ------

from .scout import Scout, normalize_email
from .order import Order, OrderItem, ORDER_STATUSES
from .types import GUID, as_uuid

__all__ = [
    "Scout",
    "normalize_email",
    "Order",
    "OrderItem",
    "ORDER_STATUSES",
    "GUID",
    "as_uuid",
]
