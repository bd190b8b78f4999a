import logging
from typing import Protocol

import httpx
from pydantic import BaseModel

from plextv_api.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_ACCEPT = (
    "application/json,text/json;q=0.5,application/xml,application/xhtml+xml,"
    "text/xml;q=0.4,text/html,text/plain,*/*;q=0.1"
)
# 0-100 MiB
DEFAULT_RANGE = "bytes=0-104857600"


class HttpReply(BaseModel):
    """What came back from a single HTTP request."""

    status_code: int
    body: bytes = b""
    content_type: str = ""
    url: str = ""


class Transport(Protocol):
    def execute(
        self,
        method: str,
        url: str,
        form: dict[str, str] | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> HttpReply: ...


class HttpTransport:
    """Sends requests to Plex.tv with a fixed timeout, redirect and header policy.

    No retries: connection errors and redirect loops surface as the
    corresponding ``httpx`` exceptions.
    """

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self._transport = transport
        self._headers = {
            "Accept": DEFAULT_ACCEPT,
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
            "Range": DEFAULT_RANGE,
            "User-Agent": settings.user_agent,
        }

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(None, connect=self.settings.connect_timeout),
            follow_redirects=True,
            max_redirects=self.settings.max_redirects,
            transport=self._transport,
        )

    def execute(
        self,
        method: str,
        url: str,
        form: dict[str, str] | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> HttpReply:
        """Execute one request and return its status, body and content type.

        Args:
            method: HTTP method, e.g. "GET" or "POST"
            url: Fully qualified URL including any query string
            form: Form fields to send url-encoded, if any
            extra_headers: Headers merged over the default ones

        Returns:
            HttpReply for the final response after redirects
        """
        headers = {**self._headers, **(extra_headers or {})}
        with self._client() as client:
            response = client.request(
                method,
                url,
                headers=headers,
                data=form or None,
            )
            # Query strings carry the Plex token, keep them out of the log
            logger.debug(
                "%s %s%s -> %d",
                method,
                response.url.host,
                response.url.path,
                response.status_code,
            )
            return HttpReply(
                status_code=response.status_code,
                body=response.content,
                content_type=response.headers.get("content-type", ""),
                url=str(response.url),
            )
