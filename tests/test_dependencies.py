import pytest
from fastapi import HTTPException

from plextv_api.dependencies import get_plex_auth_service, get_plex_token, get_plex_users_service
from plextv_api.services.http import HttpTransport
from plextv_api.services.plex_auth import PlexAuthService
from plextv_api.services.plex_users import PlexUsersService


class TestGetPlexToken:
    def test_present(self):
        assert get_plex_token("abc") == "abc"

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing(self, value):
        with pytest.raises(HTTPException) as exc_info:
            get_plex_token(value)
        assert exc_info.value.status_code == 401


class TestServiceFactories:
    def test_auth_service(self, settings):
        service = get_plex_auth_service(settings)
        assert isinstance(service, PlexAuthService)
        assert isinstance(service.transport, HttpTransport)
        assert service.identity.client_identifier == "test-client-id"

    def test_users_service(self, settings):
        service = get_plex_users_service(settings)
        assert isinstance(service, PlexUsersService)
        assert service.settings is settings
