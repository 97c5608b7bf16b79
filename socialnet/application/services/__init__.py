from .friend_list_service import FriendListService

__all__ = ["FriendListService"]
