from typing import List

from pydantic import BaseModel, EmailStr, Field

from .user_dto import UserResponse


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class AuthResponse(BaseModel):
    """DTO returned after registration or login"""
    token: str
    user: UserResponse


class ErrorResponse(BaseModel):
    """Envelope used on every error path"""
    errors: List[str]
