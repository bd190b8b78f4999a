from plextv_api.models.auth import ClientIdentity, PinRequest, PinResponse, TokenValidity
from plextv_api.models.users import Server, User

__all__ = [
    "ClientIdentity",
    "PinRequest",
    "PinResponse",
    "TokenValidity",
    "Server",
    "User",
]
