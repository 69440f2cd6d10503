"""Checkout: turning a user's cart into an order.

Validation (address, non-empty cart, every book present and in stock) runs
before anything is written, so a rejected checkout leaves no trace.  Order
items freeze each book's price at the moment of purchase.
"""
import logging
from typing import List, Optional

from bookmarket.database import EntityStore
from bookmarket.exceptions import (
    EmptyCartError,
    ForbiddenError,
    NotFoundError,
    OutOfStockError,
    ValidationError,
)
from bookmarket.models.book import Book
from bookmarket.models.order import Order
from bookmarket.models.order_item import OrderItem
from bookmarket.schemas.orders_schemas import OrderItemWithBook, OrderWithItems
from bookmarket.services.cart_service import clear_cart, get_cart_items

logger = logging.getLogger(__name__)


def _order_with_items(store: EntityStore, order: Order, items: List[OrderItem]) -> OrderWithItems:
    # the book may have been deleted since; historical orders still read fine
    return OrderWithItems(
        **order.model_dump(),
        items=[
            OrderItemWithBook(**item.model_dump(), book=store.get(Book, item.book_id))
            for item in items
        ],
    )


def get_order_items(store: EntityStore, order_id: int) -> List[OrderItem]:
    return store.list(OrderItem, lambda item: item.order_id == order_id)


def place_order(
    store: EntityStore,
    user_id: int,
    shipping_address: Optional[str],
    mark_sold: bool = False,
) -> OrderWithItems:
    if not shipping_address or not shipping_address.strip():
        raise ValidationError("Shipping address is required")

    with store.user_lock(user_id), store.transaction():
        cart_items = get_cart_items(store, user_id)
        if not cart_items:
            logger.warning(f"Checkout rejected for user {user_id}: cart is empty")
            raise EmptyCartError("Cart is empty")

        lines = []
        for cart_item in cart_items:
            book = store.get(Book, cart_item.book_id)
            if book is None:
                raise NotFoundError(
                    f"Book with ID {cart_item.book_id} not found", book_id=cart_item.book_id
                )
            if not book.in_stock:
                logger.warning(f"Checkout rejected for user {user_id}: book {book.id} out of stock")
                raise OutOfStockError(
                    f'Book "{book.title}" is out of stock', book_id=book.id, title=book.title
                )
            lines.append((cart_item, book))

        total = sum(book.price * cart_item.quantity for cart_item, book in lines)

        order = store.create(
            Order,
            {"user_id": user_id, "total": total, "shipping_address": shipping_address},
        )

        order_items = []
        try:
            for cart_item, book in lines:
                order_items.append(store.create(
                    OrderItem,
                    {
                        "order_id": order.id,
                        "book_id": book.id,
                        "book_title": book.title,
                        "quantity": cart_item.quantity,
                        "price": book.price,
                    },
                ))
        except Exception as e:
            logger.error(f"Error writing items for order {order.id}: {e}")
            for item in order_items:
                store.delete(OrderItem, item.id)
            store.delete(Order, order.id)
            raise

        if mark_sold:
            for _, book in lines:
                store.update(Book, book.id, {"in_stock": False})

        clear_cart(store, user_id)

    logger.info(f"Order {order.id} placed by user {user_id}: {len(order_items)} item(s), total {total:.2f}")
    return _order_with_items(store, order, order_items)


def list_orders(store: EntityStore, user_id: int) -> List[OrderWithItems]:
    """The user's orders, newest first."""
    orders = store.list(Order, lambda order: order.user_id == user_id)
    orders.sort(key=lambda order: (order.created_at, order.id), reverse=True)
    return [_order_with_items(store, order, get_order_items(store, order.id)) for order in orders]


def get_order(store: EntityStore, order_id: int, user_id: Optional[int] = None) -> OrderWithItems:
    order = store.get(Order, order_id)
    if order is None:
        raise NotFoundError("Order not found", order_id=order_id)
    if user_id is not None and order.user_id != user_id:
        raise ForbiddenError("Order belongs to another user", order_id=order_id)
    return _order_with_items(store, order, get_order_items(store, order_id))
