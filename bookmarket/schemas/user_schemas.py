from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class UserRegister(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=6, max_length=72)
    name: str = Field(..., min_length=1)
    email: EmailStr
    profile_image: Optional[str] = None

class UserLogin(BaseModel):
    username: str
    password: str

class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=1, max_length=50)
    password: Optional[str] = Field(None, min_length=6, max_length=72)
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    profile_image: Optional[str] = None

class Token(BaseModel):
    access_token: str
    token_type: str
