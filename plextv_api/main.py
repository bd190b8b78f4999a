import logging

import httpx
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from plextv_api.config import get_settings
from plextv_api.exceptions import PlexTvAPIError, Unauthorized
from plextv_api.routers import auth_router, users_router

logger = logging.getLogger(__name__)

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(title="Plex.tv API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def plex_unauthorized_handler(request: Request, exc: Exception) -> JSONResponse:
    """Plex.tv rejected the token the caller sent."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": "Plex rejected the token"},
    )


async def plex_upstream_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Plex.tv was unreachable or sent back something unusable."""
    logger.error("Plex.tv request for %s failed", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": f"Plex.tv request failed: {exc}"},
    )


app.add_exception_handler(Unauthorized, plex_unauthorized_handler)
app.add_exception_handler(PlexTvAPIError, plex_upstream_error_handler)
app.add_exception_handler(httpx.HTTPError, plex_upstream_error_handler)

app.include_router(auth_router)
app.include_router(users_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}
