from .auth import (
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .user import (
    ShowUserUseCase,
    ListUserFriendsUseCase,
    CreateUserUseCase,
    UpdatePictureUseCase,
    ToggleFriendUseCase,
)

__all__ = [
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "ShowUserUseCase",
    "ListUserFriendsUseCase",
    "CreateUserUseCase",
    "UpdatePictureUseCase",
    "ToggleFriendUseCase",
]
