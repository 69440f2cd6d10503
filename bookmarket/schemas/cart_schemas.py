from sqlmodel import SQLModel, Field
from typing import Optional

from bookmarket.models.book import Book
from bookmarket.models.cart import CartItem


class CartAddRequest(SQLModel):
    book_id: int
    quantity: int = Field(default=1, ge=1)

class CartUpdateRequest(SQLModel):
    quantity: int


class CartItemWithBook(CartItem):
    # live book record; None once the listing has been deleted
    book: Optional[Book] = None


class CartSummary(SQLModel):
    subtotal: float
    count: int
