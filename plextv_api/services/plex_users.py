import logging
from urllib.parse import quote, urlencode
from xml.etree.ElementTree import ParseError as XMLParseError
from xml.etree.ElementTree import Element, XMLPullParser

from plextv_api.config import Settings
from plextv_api.exceptions import ParseError, Unauthorized
from plextv_api.models.users import Server, User
from plextv_api.services.http import HttpTransport, Transport
from plextv_api.services.validator import (
    APPLICATION_XML,
    ValidatedBody,
    decode_text,
    validate,
)

logger = logging.getLogger(__name__)

# Bytes (or characters, once decoded) fed to the XML parser per step
CHUNK_SIZE = 64 * 1024


def parse_sharing_feed(body: bytes, charset: str = "") -> list[User]:
    """Parse the Plex.tv users feed into User records.

    The document is read as a stream of start/end events. Only the
    attributes of the currently open ``User`` and the servers seen under it
    are kept; each finished ``User`` is detached from its parent as soon as
    it closes, so the partial tree never grows with the feed.

    Args:
        body: Raw XML response body
        charset: Charset from the Content-Type header. When empty the
            document's own XML declaration decides, UTF-8 if it has none.

    Returns:
        Users in document order, each with its servers
    """
    data: bytes | str = decode_text(ValidatedBody(body, charset)) if charset else body
    parser = XMLPullParser(events=("start", "end"))

    users: list[User] = []
    open_elements: list[Element] = []
    current_user: dict[str, str] | None = None
    servers: list[Server] = []

    try:
        for offset in range(0, len(data), CHUNK_SIZE):
            parser.feed(data[offset : offset + CHUNK_SIZE])
            for event, element in parser.read_events():
                if event == "start":
                    open_elements.append(element)
                    if element.tag == "User":
                        servers = []
                        current_user = dict(element.attrib)
                    elif element.tag == "Server" and current_user is not None:
                        servers.append(Server.model_validate(dict(element.attrib)))
                    continue

                open_elements.pop()
                if element.tag == "User" and current_user is not None:
                    users.append(User.model_validate({**current_user, "servers": servers}))
                    current_user = None
                    servers = []
                    if open_elements:
                        open_elements[-1].remove(element)
        parser.close()
    except XMLParseError as e:
        raise ParseError(f"cannot parse users XML: {e}") from e

    logger.debug("Parsed %d users from sharing feed", len(users))
    return users


class PlexUsersService:
    """Fetches the users a Plex account has shared its servers with."""

    USERS_PATH = "/api/users"

    def __init__(self, settings: Settings, transport: Transport | None = None):
        self.settings = settings
        self.transport = transport or HttpTransport(settings)

    def get_users(self, plex_token: str) -> list[User]:
        """Get users and their server shares from Plex.tv.

        Args:
            plex_token: The Plex auth token of the server owner

        Returns:
            List of User records

        Raises:
            Unauthorized: if Plex.tv rejects the token
            ProtocolError: if the reply is not a usable XML document
        """
        params = {"X-Plex-Token": plex_token, "X-Plex-Language": "en"}
        query = urlencode(params, quote_via=quote)
        url = f"{self.settings.plex_api_url}{self.USERS_PATH}?{query}"
        reply = self.transport.execute("GET", url)

        if reply.status_code == 401:
            raise Unauthorized()

        validated = validate(reply, APPLICATION_XML)
        return parse_sharing_feed(validated.body, validated.charset)
