"""Constants for domain model field names"""

from .user_fields import UserFields
from .post_fields import PostFields
from .media_constants import (
    PICTURE_FIELD_NAME,
    ALLOWED_PICTURE_EXTENSIONS,
    UPLOAD_CHUNK_SIZE,
)

__all__ = [
    "UserFields",
    "PostFields",
    "PICTURE_FIELD_NAME",
    "ALLOWED_PICTURE_EXTENSIONS",
    "UPLOAD_CHUNK_SIZE",
]
