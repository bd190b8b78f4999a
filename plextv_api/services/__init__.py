from plextv_api.services.http import HttpReply, HttpTransport, Transport
from plextv_api.services.plex_auth import PlexAuthService, forward_url
from plextv_api.services.plex_users import PlexUsersService, parse_sharing_feed

__all__ = [
    "HttpReply",
    "HttpTransport",
    "Transport",
    "PlexAuthService",
    "PlexUsersService",
    "forward_url",
    "parse_sharing_feed",
]
