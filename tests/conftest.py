"""
Shared pytest fixtures for socialnet tests.
"""
import copy
import os
from typing import Dict, List, Optional
from unittest.mock import AsyncMock, patch

import pytest
from bson import ObjectId

from socialnet.core.security import TokenService
from socialnet.domain.exceptions import DuplicateEmailError, UserNotFoundError
from socialnet.domain.models.user import User
from socialnet.domain.repositories.user_repository import UserRepository


TEST_SECRET = "test_secret_key_for_testing_only"


class InMemoryUserRepository(UserRepository):
    """UserRepository keeping copies of users in a dict, like a document store would"""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self.save_all_calls = 0

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return copy.deepcopy(user)
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return copy.deepcopy(user) if user is not None else None

    async def save(self, user: User) -> User:
        for stored in self.users.values():
            if stored.email == user.email and stored.id != user.id:
                raise DuplicateEmailError(user.email)
        if user.id is None:
            user = copy.deepcopy(user)
            user.id = str(ObjectId())
        elif user.id not in self.users:
            raise UserNotFoundError(user.id)
        self.users[user.id] = copy.deepcopy(user)
        return copy.deepcopy(user)

    async def save_all(self, users: List[User]) -> List[User]:
        self.save_all_calls += 1
        return [await self.save(user) for user in users]


def make_user(
    user_id: Optional[str] = "usr-1",
    first_name: str = "Ana",
    last_name: str = "Silva",
    email: str = "ana@example.com",
    friends: Optional[List[str]] = None,
    **overrides,
) -> User:
    fields = dict(
        id=user_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        hashed_password="$2b$12$storedhashvalue",
        location="São Paulo",
        occupation="Developer",
        friends=list(friends or []),
    )
    fields.update(overrides)
    return User(**fields)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_socialnet",
        "JWT_SECRET_KEY": TEST_SECRET,
        "ACCESS_TOKEN_EXPIRE_MINUTES": "30",
        "PICTURE_UPLOAD_MAX_MB": "2",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def token_service():
    return TokenService(secret_key=TEST_SECRET, algorithm="HS256", expire_minutes=30)


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def user_factory():
    """Build valid User domain objects; keyword arguments override defaults."""
    return make_user
