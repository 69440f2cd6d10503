from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class OrderItem(SQLModel):
    id: Optional[int] = Field(default=None)
    order_id: int
    book_id: int

    # captured at purchase time, independent of the live book
    book_title: Optional[str] = None
    price: float = Field(ge=0)
    quantity: int = Field(ge=1)

    created_at: Optional[datetime] = None
