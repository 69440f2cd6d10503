from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status
from bookmarket.constants.book_attributes import BookCategory, BookCondition, BookFormat
from bookmarket.database import EntityStore, get_store
from bookmarket.models.book import Book
from bookmarket.models.user import User
from bookmarket.schemas.book_schemas import BookCreate, BookFilter, BookUpdate
from bookmarket.services import book_service
from bookmarket.utils.token import get_current_user

router = APIRouter()


def book_filters(
    category: Optional[BookCategory] = Query(None),
    condition: Optional[BookCondition] = Query(None),
    format: Optional[BookFormat] = Query(None),
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    search: Optional[str] = Query(None),
) -> BookFilter:
    return BookFilter(
        category=category,
        condition=condition,
        format=format,
        min_price=min_price,
        max_price=max_price,
        search=search,
    )


@router.get("/", response_model=List[Book])
def list_books(
    filters: BookFilter = Depends(book_filters),
    store: EntityStore = Depends(get_store),
):
    return book_service.list_books(store, filters)


# ---------- MY LISTINGS ----------
@router.get("/mine", response_model=List[Book])
def list_my_books(
    filters: BookFilter = Depends(book_filters),
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    return book_service.list_books(store, filters, seller_id=current_user.id)


@router.get("/{book_id}", response_model=Book)
def get_book(book_id: int, store: EntityStore = Depends(get_store)):
    return book_service.get_book(store, book_id)


@router.post("/", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    data: BookCreate,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    return book_service.create_book(store, current_user.id, data)


@router.put("/{book_id}", response_model=Book)
def update_book(
    book_id: int,
    data: BookUpdate,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    return book_service.update_book(store, book_id, current_user.id, data)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int,
    store: EntityStore = Depends(get_store),
    current_user: User = Depends(get_current_user)
):
    book_service.delete_book(store, book_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
