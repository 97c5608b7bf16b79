"""
API tests for /api/v1/users.
"""
import pytest
from starlette.datastructures import UploadFile as StarletteUploadFile

from socialnet.domain.exceptions import RepositoryError

pytestmark = pytest.mark.integration


def _seed(user_repo, user_factory, user_id, email, friends=None):
    user_repo.users[user_id] = user_factory(user_id=user_id, email=email, friends=friends)


class TestStore:
    """POST /api/v1/users"""

    def test_register_then_duplicate(self, register, token_service, user_repo):
        response = register()

        assert response.status_code == 201
        body = response.json()
        user = body["user"]
        assert user["firstName"] == "Ana"
        assert user["picturePath"] == ""
        assert user["friends"] == []
        assert user["viewedProfile"] == 0
        assert user["impressions"] == 0
        assert "password" not in user
        assert token_service.decode_token(body["token"])["id"] == user["_id"]

        duplicate = register(firstName="Outra")
        assert duplicate.status_code == 409
        assert duplicate.json() == {"errors": ["Esse endereço de email já está em uso."]}
        assert len(user_repo.users) == 1

    def test_missing_fields_give_400_envelope(self, client):
        response = client.post("/api/v1/users", json={"email": "ana@x.com"})

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert any(message.startswith("firstName") for message in errors)
        assert any(message.startswith("occupation") for message in errors)

    def test_invalid_email_gives_400(self, register):
        response = register(email="not-an-email")
        assert response.status_code == 400
        assert response.json()["errors"][0].startswith("email")

    def test_padded_name_gives_400(self, register, user_repo):
        response = register(firstName="  Al  ")

        assert response.status_code == 400
        assert response.json()["errors"][0].startswith("firstName")
        assert user_repo.users == {}

    def test_surrounding_whitespace_is_stripped(self, register):
        response = register(firstName="  Ana  ", location=" SP ")

        assert response.status_code == 201
        user = response.json()["user"]
        assert user["firstName"] == "Ana"
        assert user["location"] == "SP"

    def test_store_failure_gives_500(self, register, user_repo, monkeypatch):
        async def broken_save(user):
            raise RepositoryError("database unavailable")
        monkeypatch.setattr(user_repo, "save", broken_save)

        response = register()

        assert response.status_code == 500
        assert response.json() == {"errors": ["database unavailable"]}


class TestShow:
    """GET /api/v1/users/{user_id}"""

    def test_show_existing_user(self, client, user_repo, user_factory):
        _seed(user_repo, user_factory, "u1", "u1@example.com", friends=["u2"])

        response = client.get("/api/v1/users/u1")

        assert response.status_code == 200
        body = response.json()
        assert body["_id"] == "u1"
        assert body["friends"] == ["u2"]
        assert "password" not in body

    def test_unknown_user_gives_404(self, client):
        response = client.get("/api/v1/users/ghost")
        assert response.status_code == 404
        assert response.json() == {"errors": ["User ghost not found"]}


class TestListUserFriends:
    """GET /api/v1/users/{user_id}/friends"""

    def test_lists_friends_in_order(self, client, user_repo, user_factory):
        _seed(user_repo, user_factory, "u1", "u1@example.com", friends=["u3", "u2"])
        _seed(user_repo, user_factory, "u2", "u2@example.com")
        _seed(user_repo, user_factory, "u3", "u3@example.com")

        response = client.get("/api/v1/users/u1/friends")

        assert response.status_code == 200
        friends = response.json()
        assert [friend["_id"] for friend in friends] == ["u3", "u2"]
        assert set(friends[0]) == {"_id", "firstName", "lastName", "occupation", "location", "picturePath"}

    def test_no_friends_gives_empty_list(self, client, user_repo, user_factory):
        _seed(user_repo, user_factory, "u1", "u1@example.com")
        response = client.get("/api/v1/users/u1/friends")
        assert response.status_code == 200
        assert response.json() == []

    def test_dangling_friend_gives_404(self, client, user_repo, user_factory):
        _seed(user_repo, user_factory, "u1", "u1@example.com", friends=["gone"])
        response = client.get("/api/v1/users/u1/friends")
        assert response.status_code == 404
        assert response.json()["errors"] == ["User gone not found"]


class TestUpdatePicture:
    """PATCH /api/v1/users/picture"""

    def test_upload_sets_picture_path(self, client, user_repo, user_factory, auth_header, picture_storage):
        _seed(user_repo, user_factory, "u1", "u1@example.com")

        response = client.patch(
            "/api/v1/users/picture",
            files={"picture": ("me.png", b"\x89PNG data", "image/png")},
            headers=auth_header("u1"),
        )

        assert response.status_code == 200
        filename = response.json()["picturePath"]
        assert filename.endswith(".png")
        assert user_repo.users["u1"].picture_path == filename
        assert (picture_storage.upload_dir / filename).read_bytes() == b"\x89PNG data"

    def test_bad_extension_gives_400(self, client, user_repo, user_factory, auth_header):
        _seed(user_repo, user_factory, "u1", "u1@example.com")

        response = client.patch(
            "/api/v1/users/picture",
            files={"picture": ("notes.txt", b"hello", "text/plain")},
            headers=auth_header("u1"),
        )

        assert response.status_code == 400
        assert response.json() == {"errors": ["Invalid picture file. Use: jpeg, jpg, png"]}
        assert user_repo.users["u1"].picture_path == ""

    def test_too_large_gives_400(self, client, user_repo, user_factory, auth_header):
        _seed(user_repo, user_factory, "u1", "u1@example.com")

        response = client.patch(
            "/api/v1/users/picture",
            files={"picture": ("big.jpg", b"x" * 2048, "image/jpeg")},
            headers=auth_header("u1"),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0].startswith("File too large")

    def test_interrupted_upload_gives_400_and_leaves_no_file(
        self, client, user_repo, user_factory, auth_header, picture_storage, monkeypatch
    ):
        _seed(user_repo, user_factory, "u1", "u1@example.com")

        async def dropped_read(self, size=-1):
            raise OSError("connection reset by peer")
        monkeypatch.setattr(StarletteUploadFile, "read", dropped_read)

        response = client.patch(
            "/api/v1/users/picture",
            files={"picture": ("me.png", b"data", "image/png")},
            headers=auth_header("u1"),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0].startswith("Could not store picture")
        assert list(picture_storage.upload_dir.iterdir()) == []
        assert user_repo.users["u1"].picture_path == ""

    def test_missing_file_gives_400(self, client, auth_header):
        response = client.patch("/api/v1/users/picture", headers=auth_header("u1"))
        assert response.status_code == 400
        assert response.json()["errors"][0].startswith("picture")

    def test_unknown_user_gives_500_and_removes_file(self, client, auth_header, picture_storage):
        response = client.patch(
            "/api/v1/users/picture",
            files={"picture": ("me.jpg", b"data", "image/jpeg")},
            headers=auth_header("ghost"),
        )

        assert response.status_code == 500
        assert response.json() == {"errors": ["User ghost not found"]}
        assert list(picture_storage.upload_dir.iterdir()) == []

    def test_requires_token(self, client):
        response = client.patch(
            "/api/v1/users/picture",
            files={"picture": ("me.png", b"data", "image/png")},
        )
        assert response.status_code in (401, 403)
        assert "errors" in response.json()

    def test_invalid_token_gives_401(self, client):
        response = client.patch(
            "/api/v1/users/picture",
            files={"picture": ("me.png", b"data", "image/png")},
            headers={"Authorization": "Bearer not.a.token"},
        )
        assert response.status_code == 401
        assert response.json()["errors"][0].startswith("Invalid token")


class TestUpdateToggleFriends:
    """PATCH /api/v1/users/friends/{friend_id}"""

    def test_add_then_remove(self, client, user_repo, user_factory, auth_header):
        _seed(user_repo, user_factory, "u1", "u1@example.com")
        _seed(user_repo, user_factory, "u2", "u2@example.com")

        added = client.patch("/api/v1/users/friends/u2", headers=auth_header("u1"))

        assert added.status_code == 200
        assert [friend["_id"] for friend in added.json()] == ["u2"]
        assert user_repo.users["u1"].friends == ["u2"]
        assert user_repo.users["u2"].friends == ["u1"]

        removed = client.patch("/api/v1/users/friends/u2", headers=auth_header("u1"))

        assert removed.status_code == 200
        assert removed.json() == []
        assert user_repo.users["u1"].friends == []
        assert user_repo.users["u2"].friends == []

    def test_unknown_friend_gives_404(self, client, user_repo, user_factory, auth_header):
        _seed(user_repo, user_factory, "u1", "u1@example.com")

        response = client.patch("/api/v1/users/friends/ghost", headers=auth_header("u1"))

        assert response.status_code == 404
        assert response.json() == {"errors": ["User ghost not found"]}
        assert user_repo.users["u1"].friends == []

    def test_self_toggle_gives_404(self, client, user_repo, user_factory, auth_header):
        _seed(user_repo, user_factory, "u1", "u1@example.com")

        response = client.patch("/api/v1/users/friends/u1", headers=auth_header("u1"))

        assert response.status_code == 404
        assert user_repo.users["u1"].friends == []
        assert user_repo.save_all_calls == 0

    def test_requires_token(self, client):
        response = client.patch("/api/v1/users/friends/u2")
        assert response.status_code in (401, 403)
