from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...core.security import TokenService
from ...domain.repositories.user_repository import UserRepository
from ...application.services.friend_list_service import FriendListService
from ...infrastructure.storage.picture_storage import PictureStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Service provider - builds configured services once and shares them"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register services as singletons.
        Configuration is read here and handed to each service explicitly.
        """
        settings = get_settings()

        container.register_singleton(
            TokenService,
            TokenService(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                expire_minutes=settings.access_token_expire_minutes,
            )
        )

        container.register_singleton(
            PictureStorage,
            PictureStorage(
                upload_dir=settings.picture_upload_dir,
                max_bytes=settings.picture_upload_max_mb * 1024 * 1024,
            )
        )

        container.register_singleton(
            FriendListService,
            FriendListService(user_repository=container.get(UserRepository))
        )
