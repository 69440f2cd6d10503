import pytest
from fastapi.testclient import TestClient

from bookmarket.constants.book_attributes import BookCategory, BookCondition, BookFormat
from bookmarket.database import EntityStore, get_store
from bookmarket.main import app
from bookmarket.models import Book, User
from bookmarket.utils.token import create_access_token


def make_user(store, username):
    # password is not a bcrypt hash, so these users cannot log in with it
    return store.create(User, {
        "username": username,
        "name": username.title(),
        "email": f"{username}@example.com",
        "password": "unused",
    })


def bearer(user):
    return {"Authorization": f"Bearer {create_access_token({'user_id': user.id})}"}


@pytest.fixture()
def store():
    return EntityStore()


@pytest.fixture()
def seller(store):
    return make_user(store, "seller")


@pytest.fixture()
def buyer(store):
    return make_user(store, "buyer")


@pytest.fixture()
def make_book(store, seller):
    def _make(**overrides):
        data = {
            "title": "Dune",
            "author": "Frank Herbert",
            "description": "Desert planet politics and spice.",
            "price": 9.99,
            "condition": BookCondition.good,
            "format": BookFormat.paperback,
            "category": BookCategory.sci_fi,
            "image_url": "https://example.com/dune.jpg",
            "seller_id": seller.id,
        }
        data.update(overrides)
        return store.create(Book, data)

    return _make


@pytest.fixture()
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
