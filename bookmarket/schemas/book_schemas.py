from pydantic import BaseModel, Field
from typing import Optional, List

from bookmarket.constants.book_attributes import BookCategory, BookCondition, BookFormat


class BookCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    author: str = Field(..., min_length=1, max_length=100)
    description: str

    price: float = Field(..., ge=0)
    condition: BookCondition
    format: BookFormat
    category: BookCategory
    in_stock: bool = True

    image_url: str
    additional_images: Optional[List[str]] = None


class BookUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    author: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None

    price: Optional[float] = Field(None, ge=0)
    condition: Optional[BookCondition] = None
    format: Optional[BookFormat] = None
    category: Optional[BookCategory] = None
    in_stock: Optional[bool] = None

    image_url: Optional[str] = None
    additional_images: Optional[List[str]] = None


class BookFilter(BaseModel):
    """Optional listing criteria, combined with AND. Unset means unconstrained."""

    category: Optional[BookCategory] = None
    condition: Optional[BookCondition] = None
    format: Optional[BookFormat] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    search: Optional[str] = None


class BookAttributes(BaseModel):
    categories: List[str]
    conditions: List[str]
    formats: List[str]
    order_statuses: List[str]
