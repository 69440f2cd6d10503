"""Tests for checkout and order history."""

import pytest

from bookmarket.constants.order_status import OrderStatus
from bookmarket.exceptions import (
    EmptyCartError,
    ForbiddenError,
    NotFoundError,
    OutOfStockError,
    ValidationError,
)
from bookmarket.models import Book, Order, OrderItem
from bookmarket.services import cart_service, order_service

from conftest import make_user


class TestPlaceOrder:
    def test_checkout_scenario(self, store, buyer, make_book):
        book = make_book(price=9.99)
        cart_service.add_to_cart(store, buyer.id, book.id, 2)

        cart = cart_service.get_cart(store, buyer.id)
        assert len(cart) == 1
        assert cart[0].quantity == 2
        assert cart_service.cart_summary(cart).subtotal == pytest.approx(19.98)

        order = order_service.place_order(store, buyer.id, "1 Main St")

        assert order.total == pytest.approx(19.98)
        assert order.status == OrderStatus.pending
        assert order.shipping_address == "1 Main St"
        assert len(order.items) == 1
        item = order.items[0]
        assert (item.book_id, item.quantity, item.price) == (book.id, 2, 9.99)
        assert item.order_id == order.id
        assert item.book.title == book.title
        assert cart_service.get_cart(store, buyer.id) == []

    def test_total_over_several_items(self, store, buyer, make_book):
        cart_service.add_to_cart(store, buyer.id, make_book(price=4.5).id, 2)
        cart_service.add_to_cart(store, buyer.id, make_book(price=12.0).id, 1)

        order = order_service.place_order(store, buyer.id, "2 Elm St")

        assert order.total == pytest.approx(21.0)
        assert store.count(OrderItem) == 2

    @pytest.mark.parametrize("address", [None, "", "   "])
    def test_address_is_required(self, store, buyer, make_book, address):
        cart_service.add_to_cart(store, buyer.id, make_book().id)

        with pytest.raises(ValidationError):
            order_service.place_order(store, buyer.id, address)
        assert store.count(Order) == 0
        assert len(cart_service.get_cart(store, buyer.id)) == 1

    def test_empty_cart(self, store, buyer):
        with pytest.raises(EmptyCartError):
            order_service.place_order(store, buyer.id, "1 Main St")
        assert store.count(Order) == 0

    def test_one_out_of_stock_item_fails_whole_order(self, store, buyer, make_book):
        available = make_book(title="Available")
        sold = make_book(title="Sold")
        cart_service.add_to_cart(store, buyer.id, available.id)
        cart_service.add_to_cart(store, buyer.id, sold.id)
        store.update(Book, sold.id, {"in_stock": False})

        with pytest.raises(OutOfStockError) as exc_info:
            order_service.place_order(store, buyer.id, "1 Main St")

        assert exc_info.value.details["title"] == "Sold"
        assert store.count(Order) == 0
        assert store.count(OrderItem) == 0
        assert len(cart_service.get_cart(store, buyer.id)) == 2

    def test_deleted_book_in_cart(self, store, buyer, make_book):
        book = make_book()
        cart_service.add_to_cart(store, buyer.id, book.id)
        store.delete(Book, book.id)

        with pytest.raises(NotFoundError):
            order_service.place_order(store, buyer.id, "1 Main St")
        assert store.count(Order) == 0

    def test_price_is_frozen_at_purchase(self, store, buyer, make_book):
        book = make_book(price=10.0)
        cart_service.add_to_cart(store, buyer.id, book.id)
        order = order_service.place_order(store, buyer.id, "1 Main St")

        store.update(Book, book.id, {"price": 99.0})

        reloaded = order_service.get_order(store, order.id)
        assert reloaded.total == 10.0
        assert reloaded.items[0].price == 10.0
        assert reloaded.items[0].book.price == 99.0

    def test_books_stay_in_stock_by_default(self, store, buyer, make_book):
        book = make_book()
        cart_service.add_to_cart(store, buyer.id, book.id)
        order_service.place_order(store, buyer.id, "1 Main St")

        assert store.get(Book, book.id).in_stock is True

    def test_mark_sold(self, store, buyer, make_book):
        book = make_book()
        cart_service.add_to_cart(store, buyer.id, book.id)
        order_service.place_order(store, buyer.id, "1 Main St", mark_sold=True)

        assert store.get(Book, book.id).in_stock is False

    def test_failed_item_write_removes_order(self, store, buyer, make_book, monkeypatch):
        cart_service.add_to_cart(store, buyer.id, make_book().id)
        cart_service.add_to_cart(store, buyer.id, make_book(title="Emma").id)

        create = store.create
        written = []

        def flaky_create(kind, data):
            if kind is OrderItem and written:
                raise RuntimeError("write failed")
            record = create(kind, data)
            if kind is OrderItem:
                written.append(record)
            return record

        monkeypatch.setattr(store, "create", flaky_create)

        with pytest.raises(RuntimeError):
            order_service.place_order(store, buyer.id, "1 Main St")

        assert store.count(Order) == 0
        assert store.count(OrderItem) == 0
        assert len(cart_service.get_cart(store, buyer.id)) == 2


class TestOrderHistory:
    def test_orders_are_newest_first(self, store, buyer, make_book):
        book = make_book()
        placed = []
        for address in ("first", "second", "third"):
            cart_service.add_to_cart(store, buyer.id, book.id)
            placed.append(order_service.place_order(store, buyer.id, address))

        orders = order_service.list_orders(store, buyer.id)

        assert [o.shipping_address for o in orders] == ["third", "second", "first"]
        assert all(len(o.items) == 1 for o in orders)

    def test_orders_are_per_user(self, store, buyer, make_book):
        other = make_user(store, "other")
        cart_service.add_to_cart(store, buyer.id, make_book().id)
        order_service.place_order(store, buyer.id, "1 Main St")

        assert order_service.list_orders(store, other.id) == []

    def test_get_order_of_another_user(self, store, buyer, make_book):
        other = make_user(store, "other")
        cart_service.add_to_cart(store, buyer.id, make_book().id)
        order = order_service.place_order(store, buyer.id, "1 Main St")

        with pytest.raises(ForbiddenError):
            order_service.get_order(store, order.id, user_id=other.id)
        assert order_service.get_order(store, order.id, user_id=buyer.id).id == order.id

    def test_get_missing_order(self, store):
        with pytest.raises(NotFoundError):
            order_service.get_order(store, 1)

    def test_deleted_book_does_not_break_history(self, store, buyer, make_book):
        book = make_book(title="Gone Soon")
        cart_service.add_to_cart(store, buyer.id, book.id)
        order = order_service.place_order(store, buyer.id, "1 Main St")
        store.delete(Book, book.id)

        reloaded = order_service.get_order(store, order.id)
        assert store.count(OrderItem) == 1
        assert reloaded.items[0].book is None
        assert reloaded.items[0].book_title == "Gone Soon"
        assert order_service.list_orders(store, buyer.id)[0].items[0].book is None
