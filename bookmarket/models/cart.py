from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

class CartItem(SQLModel):
    id: Optional[int] = Field(default=None)
    user_id: int
    book_id: int
    quantity: int = Field(default=1, ge=1)
    created_at: Optional[datetime] = None
