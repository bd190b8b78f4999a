import asyncio

from fastapi import APIRouter, Depends, Request

from plextv_api.config import Settings, get_settings
from plextv_api.dependencies import PlexToken, get_plex_auth_service
from plextv_api.models.auth import PinResponse, TokenValidity
from plextv_api.services.plex_auth import PlexAuthService, forward_url

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/pin", response_model=PinResponse)
async def create_pin(
    request: Request,
    settings: Settings = Depends(get_settings),
    auth_service: PlexAuthService = Depends(get_plex_auth_service),
) -> PinResponse:
    """Create a new PIN for Plex authentication.

    Returns PIN details including the auth URL to open in a popup. The user
    is sent back to this host's forward URL endpoint once signed in.
    """
    pin = await asyncio.to_thread(auth_service.issue_pin)
    callback = forward_url(
        request.url.scheme,
        request.url.netloc,
        settings.forward_url_endpoint,
    )
    return PinResponse(
        id=pin.id,
        code=pin.code,
        expires_at=pin.expires_at,
        auth_url=auth_service.interactive_url(pin, callback),
    )


@router.get("/pin/{pin_id}", response_model=PinResponse)
async def check_pin(
    pin_id: int,
    code: str,
    auth_service: PlexAuthService = Depends(get_plex_auth_service),
) -> PinResponse:
    """Check if a PIN has been claimed.

    Poll this endpoint until auth_token is returned.
    """
    auth_token = await asyncio.to_thread(auth_service.verify_pin, pin_id, code)
    return PinResponse(id=pin_id, code=code, auth_token=auth_token)


@router.get("/token", response_model=TokenValidity)
async def check_token(
    plex_token: PlexToken,
    auth_service: PlexAuthService = Depends(get_plex_auth_service),
) -> TokenValidity:
    """Check whether a Plex token is still accepted by Plex.tv."""
    valid = await asyncio.to_thread(auth_service.check_token_validity, plex_token)
    return TokenValidity(valid=valid)
