from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from plextv_api.coerce import to_bool, to_optional_int, to_optional_str, to_str

# Field names are snake_case; Plex.tv's camelCase attribute names are aliases,
# so records can be built straight from XML attributes and dumped back to the
# same shape with ``by_alias=True``.
_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class Server(BaseModel):
    """A Plex Media Server that has been shared with a user."""

    model_config = _RECORD_CONFIG

    id: int | None = None
    server_id: int | None = None
    machine_identifier: str = ""
    name: str = ""
    owned: bool = False
    pending: bool = False
    all_libraries: bool = False
    num_libraries: int | None = None
    last_seen_at: int | None = None  # unix timestamp

    @field_validator("owned", "pending", "all_libraries", mode="before")
    @classmethod
    def _coerce_flag(cls, value):
        return to_bool(value)

    @field_validator("id", "server_id", "num_libraries", "last_seen_at", mode="before")
    @classmethod
    def _coerce_number(cls, value):
        return to_optional_int(value)

    @field_validator("machine_identifier", "name", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return to_str(value)


class User(BaseModel):
    """A user that has been granted access to one or more servers.

    An empty library filter means the user is not restricted for that
    library type.
    """

    model_config = _RECORD_CONFIG

    id: int | None = None
    title: str = ""
    username: str | None = None
    email: str | None = None
    thumb: str = ""

    allow_camera_upload: bool = False
    allow_channels: bool = False
    allow_sync: bool = False
    allow_tuners: bool = False
    allow_subtitle_admin: bool = False

    filter_all: str = ""
    filter_movies: str = ""
    filter_music: str = ""
    filter_photos: str = ""
    filter_television: str = ""

    protected: bool = False
    restricted: bool = False
    home: bool = False
    recommendations_playlist_id: int | None = None

    servers: tuple[Server, ...] = ()

    @field_validator(
        "allow_camera_upload",
        "allow_channels",
        "allow_sync",
        "allow_tuners",
        "allow_subtitle_admin",
        "protected",
        "restricted",
        "home",
        mode="before",
    )
    @classmethod
    def _coerce_flag(cls, value):
        return to_bool(value)

    @field_validator("id", "recommendations_playlist_id", mode="before")
    @classmethod
    def _coerce_number(cls, value):
        return to_optional_int(value)

    @field_validator("username", "email", mode="before")
    @classmethod
    def _coerce_optional_text(cls, value):
        return to_optional_str(value)

    @field_validator(
        "title",
        "thumb",
        "filter_all",
        "filter_movies",
        "filter_music",
        "filter_photos",
        "filter_television",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value):
        return to_str(value)
