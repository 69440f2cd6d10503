from sqlmodel import SQLModel
from typing import List, Optional

from bookmarket.models.book import Book
from bookmarket.models.order import Order
from bookmarket.models.order_item import OrderItem


class PlaceOrderRequest(SQLModel):
    shipping_address: str


class OrderItemWithBook(OrderItem):
    book: Optional[Book] = None


class OrderWithItems(Order):
    items: List[OrderItemWithBook] = []
