# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import FriendResponse
from ...services.friend_list_service import FriendListService


class ListUserFriendsUseCase:
    """Use case for listing the friends of a user"""

    def __init__(self, user_repository: UserRepository, friend_list_service: FriendListService) -> None:
        self.user_repository = user_repository
        self.friend_list_service = friend_list_service

    async def execute(self, user_id: str) -> List[FriendResponse]:
        """
        List the friends of a user as public projections

        Args:
            user_id: ID of the user whose friends are listed

        Returns:
            List of FriendResponse in friends-array order, possibly empty

        Raises:
            UserNotFoundError: If the user or any of its friends is missing
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return await self.friend_list_service.resolve(user.friends)
