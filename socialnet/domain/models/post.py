# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class Post:
    """
    Pure domain model for Post entity.

    Author name and picture are copied from the user at creation time;
    nothing keeps them in sync with the user document afterwards.
    A key present in `likes` means that user liked the post.
    """
    id: Optional[str]
    user_id: str
    first_name: str
    last_name: str
    location: Optional[str] = None
    description: Optional[str] = None
    picture_path: Optional[str] = None
    user_picture_path: Optional[str] = None
    likes: Dict[str, bool] = field(default_factory=dict)
    comments: List[Any] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_id:
            raise ValueError("userId não enviado.")
        if not self.first_name:
            raise ValueError("firstName não enviado.")
        if not self.last_name:
            raise ValueError("lastName não enviado.")

    def is_liked_by(self, user_id: str) -> bool:
        return user_id in self.likes

    @property
    def like_count(self) -> int:
        return len(self.likes)
