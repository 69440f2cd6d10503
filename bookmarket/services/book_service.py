"""Book listings: storefront filtering and seller-owned CRUD."""
import logging
from typing import List, Optional

from bookmarket.database import EntityStore
from bookmarket.exceptions import ForbiddenError, NotFoundError
from bookmarket.models.book import Book
from bookmarket.schemas.book_schemas import BookCreate, BookFilter, BookUpdate

logger = logging.getLogger(__name__)


def matches_filter(book: Book, filters: BookFilter) -> bool:
    if filters.category is not None and book.category != filters.category:
        return False
    if filters.condition is not None and book.condition != filters.condition:
        return False
    if filters.format is not None and book.format != filters.format:
        return False
    if filters.min_price is not None and book.price < filters.min_price:
        return False
    if filters.max_price is not None and book.price > filters.max_price:
        return False

    # a blank search term is no filter, not a match-everything substring
    term = (filters.search or "").strip().lower()
    if term:
        if not (
            term in book.title.lower()
            or term in book.author.lower()
            or term in book.description.lower()
        ):
            return False

    return True


def list_books(
    store: EntityStore,
    filters: Optional[BookFilter] = None,
    seller_id: Optional[int] = None,
) -> List[Book]:
    """Every book matching ``filters``, in insertion order.

    ``seller_id`` restricts the result to one seller's listings.
    """
    filters = filters or BookFilter()
    return store.list(
        Book,
        lambda book: (seller_id is None or book.seller_id == seller_id)
        and matches_filter(book, filters),
    )


def get_book(store: EntityStore, book_id: int) -> Book:
    book = store.get(Book, book_id)
    if book is None:
        raise NotFoundError("Book not found", book_id=book_id)
    return book


def _owned_book(store: EntityStore, book_id: int, seller_id: int) -> Book:
    book = get_book(store, book_id)
    if book.seller_id != seller_id:
        raise ForbiddenError("Only the seller can modify this listing", book_id=book_id)
    return book


def create_book(store: EntityStore, seller_id: int, data: BookCreate) -> Book:
    book = store.create(Book, {**data.model_dump(), "seller_id": seller_id})
    logger.info(f"Seller {seller_id} listed book {book.id} ({book.title})")
    return book


def update_book(store: EntityStore, book_id: int, seller_id: int, data: BookUpdate) -> Book:
    with store.transaction():
        _owned_book(store, book_id, seller_id)
        changes = data.model_dump(exclude_unset=True)
        # seller_id is not part of BookUpdate; ownership never moves
        book = store.update(Book, book_id, changes)
    if book is None:
        raise NotFoundError("Book not found", book_id=book_id)
    return book


def delete_book(store: EntityStore, book_id: int, seller_id: int) -> None:
    with store.transaction():
        _owned_book(store, book_id, seller_id)
        store.delete(Book, book_id)
    logger.info(f"Seller {seller_id} removed book {book_id}")
