from enum import Enum


class OrderStatus(str, Enum):
    pending = "Pending"
    processing = "Processing"
    shipped = "Shipped"
    delivered = "Delivered"
    cancelled = "Cancelled"


# No transition rules are enforced; orders are always created as pending.
DEFAULT_ORDER_STATUS = OrderStatus.pending
