"""Tests for plextv_api/main.py."""

from unittest.mock import MagicMock

import httpx
import pytest
from httpx import AsyncClient

from plextv_api.dependencies import get_plex_users_service
from plextv_api.exceptions import EmptyBody, Unauthorized
from plextv_api.main import app


@pytest.fixture
def failing_users_service():
    svc = MagicMock()
    app.dependency_overrides[get_plex_users_service] = lambda: svc
    yield svc
    app.dependency_overrides.clear()


async def test_health_check(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestCORS:
    async def test_preflight_from_frontend(self, client: AsyncClient):
        response = await client.options(
            "/api/auth/pin",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == 200
        assert response.headers.get("access-control-allow-origin") == "http://localhost:5173"
        assert response.headers.get("access-control-allow-credentials") == "true"

    async def test_unknown_origin_gets_no_cors_headers(self, client: AsyncClient):
        response = await client.get("/health", headers={"Origin": "http://evil.com"})
        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers

    async def test_error_responses_keep_cors_headers(self, client: AsyncClient):
        # Missing X-Plex-Token header
        response = await client.get("/api/users", headers={"Origin": "http://localhost:5173"})
        assert response.status_code == 401
        assert response.headers.get("access-control-allow-origin") == "http://localhost:5173"


class TestPlexErrorHandlers:
    async def test_unauthorized_is_401(self, client: AsyncClient, failing_users_service):
        failing_users_service.get_users.side_effect = Unauthorized()

        response = await client.get("/api/users", headers={"X-Plex-Token": "bad"})

        assert response.status_code == 401
        assert response.json() == {"detail": "Plex rejected the token"}

    async def test_protocol_error_is_502(self, client: AsyncClient, failing_users_service):
        failing_users_service.get_users.side_effect = EmptyBody()

        response = await client.get("/api/users", headers={"X-Plex-Token": "tok"})

        assert response.status_code == 502
        assert response.json() == {"detail": "Plex.tv request failed: empty HTTP response"}

    async def test_network_error_is_502(self, client: AsyncClient, failing_users_service):
        failing_users_service.get_users.side_effect = httpx.ConnectError("down")

        response = await client.get("/api/users", headers={"X-Plex-Token": "tok"})

        assert response.status_code == 502
