from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class UserBase(SQLModel):
    username: str = Field(min_length=1)
    name: str
    email: str
    profile_image: Optional[str] = None


class User(UserBase):
    id: Optional[int] = Field(default=None)
    password: str  # bcrypt hash
    created_at: Optional[datetime] = None


class UserPublic(UserBase):
    id: int
    created_at: Optional[datetime] = None
