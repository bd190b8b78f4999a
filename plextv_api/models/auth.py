from pydantic import BaseModel, ConfigDict, field_validator

from plextv_api.coerce import to_optional_int, to_optional_str


class ClientIdentity(BaseModel):
    """Identifies this installation of the app to Plex.tv on every request."""

    model_config = ConfigDict(frozen=True)

    client_identifier: str
    product_name: str


class PinRequest(BaseModel):
    """A PIN issued by Plex.tv, waiting to be claimed by the user."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    code: str | None = None
    expires_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return to_optional_int(value)

    @field_validator("code", "expires_at", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return to_optional_str(value)


class PinResponse(BaseModel):
    """PIN details handed to the frontend."""

    id: int | None = None
    code: str | None = None
    auth_url: str = ""
    expires_at: str | None = None
    auth_token: str | None = None


class TokenValidity(BaseModel):
    valid: bool
