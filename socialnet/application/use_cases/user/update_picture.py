# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import UserResponse
from ...mappers import to_user_response

logger = logging.getLogger(__name__)


class UpdatePictureUseCase:
    """Use case for pointing a user's profile picture at an uploaded file"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, picture_path: str) -> UserResponse:
        """
        Set the picture path of the authenticated user

        Args:
            user_id: ID of the authenticated user
            picture_path: Filename produced by the picture storage

        Returns:
            UserResponse with the updated user (no password)
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.picture_path = picture_path
        saved_user = await self.user_repository.save(user)
        logger.info("User %s picture set to %s", user_id, picture_path)

        return to_user_response(saved_user)
