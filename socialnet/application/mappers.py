"""Conversions from domain models to response DTOs"""

from ..domain.models.user import User
from .dto.user_dto import FriendResponse, UserResponse


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or "",
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        picture_path=user.picture_path,
        friends=list(user.friends),
        location=user.location,
        occupation=user.occupation,
        viewed_profile=user.viewed_profile,
        impressions=user.impressions,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def to_friend_response(user: User) -> FriendResponse:
    return FriendResponse(
        id=user.id or "",
        first_name=user.first_name,
        last_name=user.last_name,
        occupation=user.occupation,
        location=user.location,
        picture_path=user.picture_path,
    )
