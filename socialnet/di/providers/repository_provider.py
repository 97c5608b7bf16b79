from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.post_repository import PostRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_post_repository import MongoPostRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        settings = get_settings()

        container.register_singleton(
            UserRepository,
            MongoUserRepository(
                user_collection=container.get("user_collection"),
                use_transactions=settings.mongo_use_transactions,
            )
        )

        container.register_singleton(
            PostRepository,
            MongoPostRepository(post_collection=container.get("post_collection"))
        )
