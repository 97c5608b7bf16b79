"""
Domain exception hierarchy for the social network backend.

Raised by repositories, services and use cases; the API layer maps each
one to the HTTP status of the operation that observed it.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class SocialNetError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Users and friendships
# -----------------------------------------------------------------------------


class UserNotFoundError(SocialNetError):
    """Raised when a user id does not resolve to a stored user."""

    def __init__(self, user_id: str):
        super().__init__(f"User {user_id} not found", details={"user_id": user_id})
        self.user_id = user_id


class DuplicateEmailError(SocialNetError):
    """Raised when the unique index on email rejects a write."""

    MESSAGE = "Esse endereço de email já está em uso."

    def __init__(self, email: Optional[str] = None):
        super().__init__(self.MESSAGE, details={"email": email})
        self.email = email


class InvalidFriendshipError(SocialNetError):
    """Raised when a friendship toggle cannot be applied."""
    pass


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class InvalidCredentialsError(SocialNetError):
    """Raised on unknown email or wrong password."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class InvalidTokenError(SocialNetError):
    """Raised when an access token cannot be decoded or has expired."""
    pass


# -----------------------------------------------------------------------------
# Uploads
# -----------------------------------------------------------------------------


class PictureUploadError(SocialNetError):
    """Raised when an uploaded picture is rejected."""
    pass


# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------


class RepositoryError(SocialNetError):
    """Raised when the document store fails."""
    pass
