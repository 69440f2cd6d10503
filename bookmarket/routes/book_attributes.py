from fastapi import APIRouter
from bookmarket.constants.book_attributes import (
    BookCategory,
    BookCondition,
    BookFormat,
    attribute_values,
)
from bookmarket.constants.order_status import OrderStatus
from bookmarket.schemas.book_schemas import BookAttributes

router = APIRouter()


@router.get("/", response_model=BookAttributes, summary="Fixed values for filter menus")
def get_book_attributes():
    return BookAttributes(
        categories=attribute_values(BookCategory),
        conditions=attribute_values(BookCondition),
        formats=attribute_values(BookFormat),
        order_statuses=attribute_values(OrderStatus),
    )
