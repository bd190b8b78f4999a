from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from plextv_api.config import Settings, get_settings
from plextv_api.services.plex_auth import PlexAuthService
from plextv_api.services.plex_users import PlexUsersService


def get_plex_token(
    x_plex_token: Annotated[str | None, Header()] = None,
) -> str:
    """Extract the Plex auth token from the X-Plex-Token header."""
    if not x_plex_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-Plex-Token header required",
        )
    return x_plex_token


def get_plex_auth_service(settings: Settings = Depends(get_settings)) -> PlexAuthService:
    return PlexAuthService(settings)


def get_plex_users_service(settings: Settings = Depends(get_settings)) -> PlexUsersService:
    return PlexUsersService(settings)


PlexToken = Annotated[str, Depends(get_plex_token)]
