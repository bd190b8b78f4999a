import pytest
from pydantic import ValidationError

from plextv_api.models.auth import PinRequest
from plextv_api.models.users import Server, User


@pytest.fixture
def user() -> User:
    return User(
        id=1001,
        title="alice",
        username="alice",
        email="alice@example.com",
        thumb="https://plex.tv/users/abc/avatar",
        allow_sync=True,
        filter_movies="label=kids",
        home=True,
        recommendations_playlist_id=77,
        servers=(
            Server(id=501, server_id=9001, machine_identifier="abc", name="Living Room",
                   owned=True, all_libraries=True, num_libraries=3, last_seen_at=1700000000),
            Server(id=502, name="Cabin", pending=True),
        ),
    )


class TestUserSerialization:
    def test_dump_uses_provider_names(self, user):
        data = user.model_dump(by_alias=True)

        assert data["allowSync"] is True
        assert data["filterMovies"] == "label=kids"
        assert data["recommendationsPlaylistId"] == 77
        assert data["servers"][0]["machineIdentifier"] == "abc"
        assert data["servers"][0]["lastSeenAt"] == 1700000000

    def test_round_trip(self, user):
        assert User.model_validate(user.model_dump(by_alias=True)) == user

    def test_json_round_trip(self, user):
        assert User.model_validate_json(user.model_dump_json(by_alias=True)) == user


class TestRecordsAreImmutable:
    def test_user_frozen(self, user):
        with pytest.raises(ValidationError):
            user.title = "mallory"

    def test_server_frozen(self, user):
        with pytest.raises(ValidationError):
            user.servers[0].owned = False

    def test_servers_is_tuple(self, user):
        assert isinstance(user.servers, tuple)


class TestAttributeCoercion:
    def test_server_from_xml_attributes(self):
        server = Server.model_validate({
            "id": "5",
            "allLibraries": "0",
            "owned": "1",
            "numLibraries": "",
        })

        assert server.id == 5
        assert server.all_libraries is False
        assert server.owned is True
        assert server.num_libraries is None
        assert server.machine_identifier == ""

    def test_pin_request_coerces_id(self):
        pin = PinRequest(id="123", code=None)
        assert pin.id == 123
        assert pin.code is None
