"""Decoding of individual transcript lines.

Each non-blank line of a session ``.jsonl`` file is one JSON object.
Only ``type`` is required; everything else is optional and unknown keys
are ignored, so new fields written by newer Claude Code versions do not
break older readers.

``decode_line`` never raises for bad input. It returns either a
``RawLogEntry`` or a ``LineError`` describing why the line was rejected,
and leaves it to the caller to log or drop the error.
"""

import json
from typing import Any, Optional

import pydantic

from ..config import PREVIEW_LENGTH
from ..core import LineError
from .content import ContentItem, expand_shorthand


class RecordModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        extra="ignore",
        strict=True,
        frozen=True,
    )


class TokenUsage(RecordModel):
    input_tokens: pydantic.NonNegativeInt
    output_tokens: pydantic.NonNegativeInt
    cache_creation_input_tokens: Optional[pydantic.NonNegativeInt] = None
    cache_read_input_tokens: Optional[pydantic.NonNegativeInt] = None


class MessageObject(RecordModel):
    """The ``message`` payload of a user or assistant record."""

    role: str  # "user" | "assistant"
    content: list[ContentItem]
    model: Optional[str] = None
    id: Optional[str] = None
    stop_reason: Optional[str] = None
    usage: Optional[TokenUsage] = None

    @pydantic.field_validator("content", mode="before")
    @classmethod
    def _expand_string_content(cls, value: Any) -> list[Any]:
        return expand_shorthand(value)


class RawLogEntry(RecordModel):
    """One decoded transcript line."""

    entry_type: str = pydantic.Field(alias="type")
    uuid: Optional[str] = None
    parent_uuid: Optional[str] = pydantic.Field(default=None, alias="parentUuid")
    session_id: Optional[str] = pydantic.Field(default=None, alias="sessionId")
    timestamp: Optional[str] = None  # kept as written, never parsed
    message: Optional[MessageObject] = None

    # Session-scoped metadata
    cwd: Optional[str] = None
    is_sidechain: Optional[bool] = pydantic.Field(default=None, alias="isSidechain")
    user_type: Optional[str] = pydantic.Field(default=None, alias="userType")
    summary: Optional[str] = None
    leaf_uuid: Optional[str] = pydantic.Field(default=None, alias="leafUuid")
    version: Optional[str] = None


def decode_line(line: str, line_number: int) -> RawLogEntry | LineError:
    """Decode one transcript line.

    Callers must skip blank lines before calling this; an empty string
    is reported as a JSON error like any other malformed input.
    """
    try:
        data = json.loads(line, parse_constant=_reject_constant)
    except ValueError as e:
        return _line_error(line, line_number, f"invalid JSON: {e}")

    try:
        return RawLogEntry.model_validate(data)
    except pydantic.ValidationError as e:
        return _line_error(line, line_number, _describe_validation_error(e))


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON.
    raise ValueError(f"non-standard constant {name}")


def _line_error(line: str, line_number: int, message: str) -> LineError:
    return LineError(
        line_number=line_number,
        message=message,
        preview=line[:PREVIEW_LENGTH],
    )


def _describe_validation_error(error: pydantic.ValidationError) -> str:
    """Condense a pydantic error into one line: ``loc: msg; loc: msg``."""
    parts = []
    for detail in error.errors(include_url=False):
        loc = ".".join(str(p) for p in detail["loc"]) or "<root>"
        parts.append(f"{loc}: {detail['msg']}")
    return "schema mismatch: " + "; ".join(parts)
