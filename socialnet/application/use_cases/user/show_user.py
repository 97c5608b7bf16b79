# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import UserResponse
from ...mappers import to_user_response


class ShowUserUseCase:
    """Use case for getting a user by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID

        Args:
            user_id: ID of the user

        Returns:
            UserResponse with the stored user (no password)

        Raises:
            UserNotFoundError: If the id is unknown or malformed
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return to_user_response(user)
