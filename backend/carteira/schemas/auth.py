"""
Account and session schemas.
"""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class SignUpRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None


class SignInRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    id: str
    email: str
    categories_seeded: bool
    created_at: datetime

    class Config:
        from_attributes = True


class SignUpResponse(BaseModel):
    user: UserResponse
    categories_seeded: bool


class SessionResponse(BaseModel):
    token: str
    user: UserResponse

    class Config:
        from_attributes = True
