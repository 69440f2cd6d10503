"""Per-user shopping cart.

Cart items always show the book's *live* price; prices are only frozen
when the cart is turned into an order.
"""
import logging
from typing import List, Optional

from bookmarket.database import EntityStore
from bookmarket.exceptions import NotFoundError, OutOfStockError, ValidationError
from bookmarket.models.book import Book
from bookmarket.models.cart import CartItem
from bookmarket.schemas.cart_schemas import CartItemWithBook, CartSummary

logger = logging.getLogger(__name__)


def _with_book(item: CartItem, book: Optional[Book]) -> CartItemWithBook:
    return CartItemWithBook(**item.model_dump(), book=book)


def get_cart_items(store: EntityStore, user_id: int) -> List[CartItem]:
    return store.list(CartItem, lambda item: item.user_id == user_id)


def get_cart(store: EntityStore, user_id: int) -> List[CartItemWithBook]:
    return [
        _with_book(item, store.get(Book, item.book_id))
        for item in get_cart_items(store, user_id)
    ]


def cart_summary(items: List[CartItemWithBook]) -> CartSummary:
    subtotal = 0.0
    count = 0
    for item in items:
        count += item.quantity
        if item.book is not None:
            subtotal += item.book.price * item.quantity
    return CartSummary(subtotal=subtotal, count=count)


def add_to_cart(store: EntityStore, user_id: int, book_id: int, quantity: int = 1) -> CartItemWithBook:
    if quantity < 1:
        raise ValidationError("Quantity must be at least 1", quantity=quantity)

    with store.user_lock(user_id):
        book = store.get(Book, book_id)
        if book is None:
            raise NotFoundError("Book not found", book_id=book_id)
        if not book.in_stock:
            raise OutOfStockError(
                f'Book "{book.title}" is out of stock', book_id=book.id, title=book.title
            )

        existing = store.first(
            CartItem, lambda item: item.user_id == user_id and item.book_id == book_id
        )
        if existing:
            # merge: one row per (user, book)
            item = store.update(CartItem, existing.id, {"quantity": existing.quantity + quantity})
        else:
            item = store.create(
                CartItem, {"user_id": user_id, "book_id": book_id, "quantity": quantity}
            )

    logger.info(f"User {user_id} cart: book {book_id} quantity now {item.quantity}")
    return _with_book(item, book)


def update_quantity(
    store: EntityStore, cart_item_id: int, quantity: int, user_id: Optional[int] = None
) -> CartItemWithBook:
    """Set an item's quantity. ``user_id`` scopes the lookup to that user's cart."""
    if quantity < 1:
        raise ValidationError("Quantity must be at least 1", quantity=quantity)

    item = store.get(CartItem, cart_item_id)
    if item is None or (user_id is not None and item.user_id != user_id):
        raise NotFoundError("Cart item not found", cart_item_id=cart_item_id)

    with store.user_lock(item.user_id):
        updated = store.update(CartItem, cart_item_id, {"quantity": quantity})
    if updated is None:
        raise NotFoundError("Cart item not found", cart_item_id=cart_item_id)

    return _with_book(updated, store.get(Book, updated.book_id))


def remove_item(store: EntityStore, cart_item_id: int, user_id: Optional[int] = None) -> bool:
    item = store.get(CartItem, cart_item_id)
    if item is None or (user_id is not None and item.user_id != user_id):
        return False
    with store.user_lock(item.user_id):
        return store.delete(CartItem, cart_item_id)


def clear_cart(store: EntityStore, user_id: int) -> int:
    with store.user_lock(user_id):
        items = get_cart_items(store, user_id)
        removed = sum(1 for item in items if store.delete(CartItem, item.id))
    logger.info(f"Cleared {removed} item(s) from cart of user {user_id}")
    return removed
