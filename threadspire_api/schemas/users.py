"""
threadspire_api/schemas/users.py

Registration, login and user read models. No read model carries a
password or password hash.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from .common import APIModel


class UserCreate(APIModel):
    email: EmailStr = Field(..., description="Login e-mail; must be unique.")
    password: str = Field(..., min_length=8, max_length=128)
    name: Optional[str] = Field(default=None, max_length=255)


class LoginRequest(APIModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class UserRead(APIModel):
    id: int
    email: EmailStr
    name: Optional[str] = None
    created_at: datetime


class Token(APIModel):
    """
    Bearer credential returned by a successful login.
    """

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Lifetime in seconds.")


__all__ = ["UserCreate", "LoginRequest", "UserRead", "Token"]
