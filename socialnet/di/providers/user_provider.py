from typing import TYPE_CHECKING
from ...core.security import TokenService
from ...domain.repositories.user_repository import UserRepository
from ...application.services.friend_list_service import FriendListService
from ...application.use_cases.user.show_user import ShowUserUseCase
from ...application.use_cases.user.list_user_friends import ListUserFriendsUseCase
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.update_picture import UpdatePictureUseCase
from ...application.use_cases.user.toggle_friend import ToggleFriendUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers profile and friendship use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            ShowUserUseCase,
            lambda: ShowUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            ListUserFriendsUseCase,
            lambda: ListUserFriendsUseCase(
                user_repository=container.get(UserRepository),
                friend_list_service=container.get(FriendListService),
            )
        )

        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(
                user_repository=container.get(UserRepository),
                token_service=container.get(TokenService),
            )
        )

        container.register_factory(
            UpdatePictureUseCase,
            lambda: UpdatePictureUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            ToggleFriendUseCase,
            lambda: ToggleFriendUseCase(
                user_repository=container.get(UserRepository),
                friend_list_service=container.get(FriendListService),
            )
        )
