"""
Fixtures for API tests: the real application served by TestClient, with the
DI container swapped for one backed by in-memory storage.

TestClient is used without its context manager so the lifespan (MongoDB
indexes) never runs.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from socialnet.application.services.friend_list_service import FriendListService
from socialnet.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from socialnet.application.use_cases.auth.login_user import LoginUserUseCase
from socialnet.application.use_cases.user.create_user import CreateUserUseCase
from socialnet.application.use_cases.user.list_user_friends import ListUserFriendsUseCase
from socialnet.application.use_cases.user.show_user import ShowUserUseCase
from socialnet.application.use_cases.user.toggle_friend import ToggleFriendUseCase
from socialnet.application.use_cases.user.update_picture import UpdatePictureUseCase
from socialnet.core.security import TokenService
from socialnet.di.base_container import BaseContainer
from socialnet.domain.repositories.user_repository import UserRepository
from socialnet.infrastructure.storage.picture_storage import PictureStorage
from socialnet.main import app


CONTAINER_LOOKUPS = (
    "socialnet.api.v1.user_controller.get_container",
    "socialnet.api.v1.auth_controller.get_container",
    "socialnet.api.v1.dependencies.get_container",
)


def build_container(user_repository, token_service, picture_storage) -> BaseContainer:
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(TokenService, token_service)
    container.register_singleton(PictureStorage, picture_storage)
    friend_list_service = FriendListService(user_repository)
    container.register_singleton(FriendListService, friend_list_service)

    container.register_factory(LoginUserUseCase, lambda: LoginUserUseCase(user_repository, token_service))
    container.register_factory(GetCurrentUserUseCase, lambda: GetCurrentUserUseCase(token_service))
    container.register_factory(ShowUserUseCase, lambda: ShowUserUseCase(user_repository))
    container.register_factory(
        ListUserFriendsUseCase, lambda: ListUserFriendsUseCase(user_repository, friend_list_service)
    )
    container.register_factory(CreateUserUseCase, lambda: CreateUserUseCase(user_repository, token_service))
    container.register_factory(UpdatePictureUseCase, lambda: UpdatePictureUseCase(user_repository))
    container.register_factory(
        ToggleFriendUseCase, lambda: ToggleFriendUseCase(user_repository, friend_list_service)
    )
    return container


@pytest.fixture
def picture_storage(tmp_path):
    return PictureStorage(upload_dir=tmp_path / "images", max_bytes=1024)


@pytest.fixture
def container(user_repo, token_service, picture_storage):
    return build_container(user_repo, token_service, picture_storage)


@pytest.fixture
def client(container):
    patches = [patch(target, return_value=container) for target in CONTAINER_LOOKUPS]
    for p in patches:
        p.start()
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        for p in patches:
            p.stop()


@pytest.fixture
def register(client):
    """POST a registration and return the response"""
    def _register(**overrides):
        body = {
            "firstName": "Ana",
            "lastName": "Silva",
            "email": "ana@x.com",
            "password": "secret",
            "location": "SP",
            "occupation": "Dev",
        }
        body.update(overrides)
        return client.post("/api/v1/users", json=body)
    return _register


@pytest.fixture
def auth_header(token_service):
    def _header(user_id: str) -> dict:
        return {"Authorization": f"Bearer {token_service.create_token({'id': user_id})}"}
    return _header
