from .auth_dto import UserLoginRequest, AuthResponse, ErrorResponse
from .user_dto import UserCreateRequest, UserResponse, FriendResponse

__all__ = [
    "UserLoginRequest",
    "AuthResponse",
    "ErrorResponse",
    "UserCreateRequest",
    "UserResponse",
    "FriendResponse",
]
