# Standard library imports
import logging
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import InvalidFriendshipError, UserNotFoundError
from ...dto.user_dto import FriendResponse
from ...services.friend_list_service import FriendListService

logger = logging.getLogger(__name__)


class ToggleFriendUseCase:
    """
    Use case for adding or removing a friendship.

    Friendship is stored on both users. If the friend id is already in
    the user's list, it is removed from the user and the user's id is
    removed from the friend; otherwise both ids are appended. Both
    documents are then saved together through the repository.
    """

    def __init__(self, user_repository: UserRepository, friend_list_service: FriendListService) -> None:
        self.user_repository = user_repository
        self.friend_list_service = friend_list_service

    async def execute(self, user_id: str, friend_id: str) -> List[FriendResponse]:
        """
        Toggle the friendship between two users

        Args:
            user_id: ID of the authenticated user
            friend_id: ID of the other user

        Returns:
            The user's friends after the toggle, as public projections

        Raises:
            InvalidFriendshipError: If both ids are the same user
            UserNotFoundError: If either user is missing
        """
        if user_id == friend_id:
            raise InvalidFriendshipError("A user cannot be their own friend")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        friend = await self.user_repository.find_by_id(friend_id)
        if friend is None:
            raise UserNotFoundError(friend_id)

        if user.is_friend_with(friend_id):
            user.remove_friend(friend_id)
            friend.remove_friend(user_id)
            action = "removed"
        else:
            user.add_friend(friend_id)
            friend.add_friend(user_id)
            action = "added"

        saved_user, _ = await self.user_repository.save_all([user, friend])
        logger.info("Friendship %s between %s and %s", action, user_id, friend_id)

        return await self.friend_list_service.resolve(saved_user.friends)
