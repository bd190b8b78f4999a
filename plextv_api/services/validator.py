"""Shared checks for Plex.tv replies.

Every call goes through the same steps: status code, non-empty body,
Content-Type parse, expected MIME type, then decode. Malformed replies are
reported as one of the ``ProtocolError`` subclasses instead of whatever the
decoder happened to raise.
"""

import json
import re
from typing import Any, NamedTuple

from plextv_api.exceptions import (
    EmptyBody,
    ParseError,
    UnexpectedContentType,
    UnexpectedStatus,
    UnparseableContentType,
)
from plextv_api.services.http import HttpReply

APPLICATION_JSON = "application/json"
APPLICATION_XML = "application/xml"
DEFAULT_CHARSET = "utf-8"

_CONTENT_TYPE_RE = re.compile(
    r"^([A-Za-z0-9+\-/.]+)(?:;\s*charset=([A-Za-z0-9\-_]+))?$",
    re.IGNORECASE,
)


class ValidatedBody(NamedTuple):
    body: bytes
    charset: str


def parse_content_type(raw: str) -> tuple[str, str]:
    """Split a Content-Type header into (type, charset).

    The charset is an empty string when the header does not carry one.
    """
    match = _CONTENT_TYPE_RE.match(raw.strip()) if raw else None
    if match is None:
        raise UnparseableContentType(raw)
    return match.group(1), match.group(2) or ""


def validate(reply: HttpReply, expected_type: str) -> ValidatedBody:
    if reply.status_code != 200:
        raise UnexpectedStatus(reply.status_code)
    if not reply.body:
        raise EmptyBody()

    mime_type, charset = parse_content_type(reply.content_type)
    if mime_type.lower() != expected_type.lower():
        raise UnexpectedContentType(mime_type)

    return ValidatedBody(reply.body, charset)


def decode_text(validated: ValidatedBody) -> str:
    charset = validated.charset or DEFAULT_CHARSET
    try:
        return validated.body.decode(charset)
    except (LookupError, UnicodeDecodeError) as e:
        raise ParseError(f"cannot decode response as {charset}: {e}") from e


def decode_json(validated: ValidatedBody) -> Any:
    text = decode_text(validated)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"unexpected JSON error: {e}") from e
