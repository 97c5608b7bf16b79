# Standard library imports
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50
# Stored schema asked for 3; lowered so two-letter region codes are valid
LOCATION_MIN_LENGTH = 2
EMAIL_MAX_LENGTH = 50


def _check_length(label: str, value: str, min_length: int = NAME_MIN_LENGTH) -> None:
    if not value or not min_length <= len(value.strip()) <= NAME_MAX_LENGTH:
        raise ValueError(
            f"{label} must be between {min_length} and {NAME_MAX_LENGTH} characters"
        )


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.

    `friends` holds user ids in insertion order. Duplicates and self
    references are not rejected here.
    """
    id: Optional[str]
    first_name: str
    last_name: str
    email: str
    hashed_password: str
    location: str
    occupation: str
    picture_path: str = ""
    friends: List[str] = field(default_factory=list)
    viewed_profile: int = 0
    impressions: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        _check_length("First name", self.first_name)
        _check_length("Last name", self.last_name)
        _check_length("Location", self.location, LOCATION_MIN_LENGTH)
        _check_length("Occupation", self.occupation)
        if not self.email or len(self.email) > EMAIL_MAX_LENGTH or not EMAIL_PATTERN.match(self.email):
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")

    def is_friend_with(self, user_id: str) -> bool:
        return user_id in self.friends

    def add_friend(self, user_id: str) -> None:
        self.friends.append(user_id)

    def remove_friend(self, user_id: str) -> None:
        """Drop every occurrence of user_id, keeping the order of the rest"""
        self.friends = [friend_id for friend_id in self.friends if friend_id != user_id]
