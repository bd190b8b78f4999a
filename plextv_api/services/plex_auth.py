import logging
import uuid
from typing import Any
from urllib.parse import quote, urlencode

from plextv_api.config import Settings
from plextv_api.exceptions import ParseError, ProtocolError, UnexpectedStatus
from plextv_api.models.auth import PinRequest
from plextv_api.services.http import HttpTransport, Transport
from plextv_api.services.validator import APPLICATION_JSON, decode_json, validate

logger = logging.getLogger(__name__)


def _query(params: dict[str, str]) -> str:
    # RFC 3986 encoding: spaces become %20, not +
    return urlencode(params, quote_via=quote)


def forward_url(scheme: str, host: str, endpoint: str) -> str:
    """Build the URL Plex.tv sends the user back to after signing in."""
    if not endpoint.startswith("/"):
        endpoint = f"/{endpoint}"
    return f"{scheme}://{host}{endpoint}"


class PlexAuthService:
    """Service for handling Plex PIN-based authentication.

    The flow is: issue a PIN, send the user to the interactive auth URL,
    then poll ``verify_pin`` until Plex.tv hands back an access token.
    Nothing is stored between calls.
    """

    PINS_PATH = "/api/v2/pins"
    USER_PATH = "/api/v2/user"

    def __init__(self, settings: Settings, transport: Transport | None = None):
        self.settings = settings
        self.identity = settings.client_identity()
        self.transport = transport or HttpTransport(settings)

    @staticmethod
    def generate_client_identity() -> str:
        """Generate a random client identifier.

        Plex.tv has no format requirements, but the identifier should be
        stored and reused for every later request from this installation.
        """
        return str(uuid.uuid4())

    def _get_json(self, method: str, url: str) -> dict[str, Any]:
        reply = self.transport.execute(method, url)
        data = decode_json(validate(reply, APPLICATION_JSON))
        if not isinstance(data, dict):
            raise ParseError(f"expected a JSON object, got {type(data).__name__}")
        return data

    def issue_pin(self) -> PinRequest:
        """Request a new PIN from Plex.tv.

        Returns:
            PinRequest with id and code, either of which may be None if
            Plex.tv left it out
        """
        params = {
            "strong": "true",
            "X-Plex-Product": self.identity.product_name,
            "X-Plex-Client-Identifier": self.identity.client_identifier,
        }
        url = f"{self.settings.plex_api_url}{self.PINS_PATH}?{_query(params)}"
        data = self._get_json("POST", url)

        pin = PinRequest(
            id=data.get("id"),
            code=data.get("code"),
            expires_at=data.get("expiresAt"),
        )
        logger.info("Issued Plex PIN %s", pin.id)
        return pin

    def build_interactive_url(
        self, client_id: str, pin_code: str, forward_url: str, app_name: str
    ) -> str:
        """Build the Plex.tv sign-in URL to send the end user to.

        Args:
            client_id: The client identifier the PIN was issued to
            pin_code: The PIN code
            forward_url: Where Plex.tv redirects the user afterwards
            app_name: Product name shown to the user

        Returns:
            The fully qualified interactive auth URL
        """
        return (
            f"{self.settings.plex_auth_url}"
            f"?clientID={quote(client_id, safe='')}"
            f"&code={quote(pin_code, safe='')}"
            f"&forwardUrl={quote(forward_url, safe='')}"
            f"&context%5Bdevice%5D%5Bproduct%5D={quote(app_name, safe='')}"
        )

    def interactive_url(self, pin: PinRequest, forward_url: str) -> str:
        """Interactive auth URL for a PIN issued with this service's identity.

        Raises:
            ProtocolError: if Plex.tv issued the PIN without a code
        """
        if not pin.code:
            raise ProtocolError(f"Plex PIN {pin.id} was issued without a code")
        return self.build_interactive_url(
            self.identity.client_identifier,
            pin.code,
            forward_url,
            self.identity.product_name,
        )

    def verify_pin(self, pin_id: int | str, pin_code: str) -> str | None:
        """Check whether a PIN has been claimed and fetch the access token.

        Args:
            pin_id: The PIN id
            pin_code: The PIN code

        Returns:
            The user's access token, or None while the PIN is still pending
        """
        params = {
            "code": pin_code,
            "X-Plex-Client-Identifier": self.identity.client_identifier,
        }
        pin_path = f"{self.PINS_PATH}/{quote(str(pin_id), safe='')}"
        url = f"{self.settings.plex_api_url}{pin_path}?{_query(params)}"
        data = self._get_json("GET", url)

        auth_token = data.get("authToken")
        if auth_token:
            logger.info("Plex PIN %s has been claimed", pin_id)
            return str(auth_token)
        return None

    def check_token_validity(self, token: str) -> bool:
        """Ask Plex.tv whether a stored access token is still valid."""
        params = {
            "X-Plex-Product": self.identity.product_name,
            "X-Plex-Client-Identifier": self.identity.client_identifier,
            "X-Plex-Token": token,
        }
        url = f"{self.settings.plex_api_url}{self.USER_PATH}?{_query(params)}"
        reply = self.transport.execute("GET", url)

        if reply.status_code == 401:
            return False
        if reply.status_code != 200:
            raise UnexpectedStatus(reply.status_code)
        return True
