"""Errors raised while talking to the Plex.tv API."""


class PlexTvAPIError(Exception):
    """Base class for every error raised by this package."""


class ProtocolError(PlexTvAPIError):
    """Plex.tv replied with something we cannot use."""


class UnexpectedStatus(ProtocolError):
    def __init__(self, code: int, message: str | None = None):
        self.code = code
        super().__init__(message or f"unexpected HTTP response code: {code}")


class Unauthorized(UnexpectedStatus):
    def __init__(self, message: str = "access unauthorized, check plex token"):
        super().__init__(401, message)


class EmptyBody(ProtocolError):
    def __init__(self) -> None:
        super().__init__("empty HTTP response")


class UnparseableContentType(ProtocolError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"cannot parse Content-Type header returned: {raw}")


class UnexpectedContentType(ProtocolError):
    def __init__(self, actual: str):
        self.actual = actual
        super().__init__(f"unexpected MIME-type returned: {actual}")


class ParseError(ProtocolError):
    """The response body could not be decoded as JSON or XML."""
