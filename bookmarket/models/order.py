from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from bookmarket.constants.order_status import DEFAULT_ORDER_STATUS, OrderStatus


class Order(SQLModel):
    id: Optional[int] = Field(default=None)
    user_id: int

    status: OrderStatus = Field(default=DEFAULT_ORDER_STATUS)
    total: float = Field(ge=0)
    shipping_address: str = Field(min_length=1)

    created_at: Optional[datetime] = None
