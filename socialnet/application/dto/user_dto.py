from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from ...domain.models.user import (
    EMAIL_MAX_LENGTH,
    LOCATION_MIN_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
)


# Surrounding whitespace is stripped before counting, matching User validation
ProfileName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH),
]
# Relaxes the stored schema's three-character minimum so region codes like "SP" fit
LocationName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=LOCATION_MIN_LENGTH, max_length=NAME_MAX_LENGTH),
]


class CamelModel(BaseModel):
    """Base DTO serialized with camelCase keys, accepting snake_case on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreateRequest(CamelModel):
    """DTO for user creation request"""
    first_name: ProfileName
    last_name: ProfileName
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)
    friends: List[str] = Field(default_factory=list)
    location: LocationName
    occupation: ProfileName

    @field_validator("email")
    @classmethod
    def email_max_length(cls, value: str) -> str:
        if len(value) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
        return value


class UserResponse(CamelModel):
    """DTO for user response (never carries the password)"""
    id: str = Field(alias="_id")
    first_name: str
    last_name: str
    email: str
    picture_path: str = ""
    friends: List[str] = Field(default_factory=list)
    location: str
    occupation: str
    viewed_profile: int = 0
    impressions: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FriendResponse(CamelModel):
    """Public projection of a user, safe to show to other users"""
    id: str = Field(alias="_id")
    first_name: str
    last_name: str
    occupation: str
    location: str
    picture_path: str = ""
