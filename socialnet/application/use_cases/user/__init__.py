from .show_user import ShowUserUseCase
from .list_user_friends import ListUserFriendsUseCase
from .create_user import CreateUserUseCase
from .update_picture import UpdatePictureUseCase
from .toggle_friend import ToggleFriendUseCase

__all__ = [
    "ShowUserUseCase",
    "ListUserFriendsUseCase",
    "CreateUserUseCase",
    "UpdatePictureUseCase",
    "ToggleFriendUseCase",
]
