import pytest
from httpx import ASGITransport, AsyncClient

from plextv_api.config import Settings
from plextv_api.main import app
from plextv_api.services.http import HttpReply


class FakeTransport:
    """Records requests and replays canned replies in order."""

    def __init__(self, *replies: HttpReply):
        self.replies = list(replies)
        self.calls: list[dict] = []

    def execute(self, method, url, form=None, extra_headers=None) -> HttpReply:
        self.calls.append(
            {"method": method, "url": url, "form": form, "extra_headers": extra_headers}
        )
        return self.replies.pop(0)


def make_reply(
    body: bytes | str = b"",
    status_code: int = 200,
    content_type: str = "application/json",
) -> HttpReply:
    if isinstance(body, str):
        body = body.encode("utf-8")
    return HttpReply(status_code=status_code, body=body, content_type=content_type)


@pytest.fixture
async def client() -> AsyncClient:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def settings() -> Settings:
    return Settings(
        plex_client_identifier="test-client-id",
        plex_product_name="Test Product",
        plex_api_url="https://plex.tv",
        plex_auth_url="https://app.plex.tv/auth#",
        forward_url_endpoint="/plex/auth",
        connect_timeout=3,
        max_redirects=10,
    )
