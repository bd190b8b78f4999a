import asyncio

from fastapi import APIRouter, Depends

from plextv_api.dependencies import PlexToken, get_plex_users_service
from plextv_api.models.users import User
from plextv_api.services.plex_users import PlexUsersService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[User], response_model_by_alias=True)
async def get_users(
    plex_token: PlexToken,
    users_service: PlexUsersService = Depends(get_plex_users_service),
) -> list[User]:
    """Get the users the account has shared servers with."""
    return await asyncio.to_thread(users_service.get_users, plex_token)
