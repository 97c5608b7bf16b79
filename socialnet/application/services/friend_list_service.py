# Standard library imports
import asyncio
from typing import List

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.exceptions import UserNotFoundError
from ..dto.user_dto import FriendResponse
from ..mappers import to_friend_response


class FriendListService:
    """Resolves friend ids into their public projections"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def resolve(self, friend_ids: List[str]) -> List[FriendResponse]:
        """
        Fetch every friend concurrently

        Args:
            friend_ids: Friend ids in the order stored on the user

        Returns:
            One FriendResponse per id, in the same order as friend_ids

        Raises:
            UserNotFoundError: If any id no longer resolves to a user
        """
        friends = await asyncio.gather(
            *(self.user_repository.find_by_id(friend_id) for friend_id in friend_ids)
        )

        result = []
        for friend_id, friend in zip(friend_ids, friends):
            if friend is None:
                raise UserNotFoundError(friend_id)
            result.append(to_friend_response(friend))
        return result
