from sqlmodel import SQLModel, Field
from typing import Optional, List
from datetime import datetime

from bookmarket.constants.book_attributes import BookCategory, BookCondition, BookFormat


class Book(SQLModel):
    id: Optional[int] = Field(default=None)

    #main info
    title: str
    author: str
    description: str

    #Shop Details
    price: float = Field(ge=0)
    condition: BookCondition
    format: BookFormat
    category: BookCategory
    in_stock: bool = True

    #Images
    image_url: str
    additional_images: Optional[List[str]] = None

    #seller
    seller_id: int

    created_at: Optional[datetime] = None
