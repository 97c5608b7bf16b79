from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.post import Post


class PostRepository(ABC):
    """Repository interface - defines contract for post data access"""

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass

    @abstractmethod
    async def find_by_user(self, user_id: str) -> List[Post]:
        """Find all posts written by a user, newest first"""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save post (create or update)"""
        pass
