from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field

from app.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    name: str = Field(min_length=2, max_length=60)
    email: EmailStr
    password: str = Field(min_length=6)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class ProfileUpdateRequest(CamelModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=60)
    email: Optional[EmailStr] = None


class UserPublic(CamelModel):
    id: int
    name: str
    email: str


class UserProfile(UserPublic):
    created_at: datetime
    updated_at: datetime


class TokenResponse(UserPublic):
    token: str
