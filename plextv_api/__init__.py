from plextv_api.config import Settings, get_settings
from plextv_api.models import ClientIdentity, PinRequest, Server, User
from plextv_api.services import PlexAuthService, PlexUsersService, parse_sharing_feed

__all__ = [
    "Settings",
    "get_settings",
    "ClientIdentity",
    "PinRequest",
    "Server",
    "User",
    "PlexAuthService",
    "PlexUsersService",
    "parse_sharing_feed",
]
