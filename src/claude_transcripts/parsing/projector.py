"""Projection of decoded records into ``ClaudeMessage`` values."""

import logging

from pydantic_core import PydanticSerializationError

from ..config import THINKING_MARKER, UNKNOWN
from ..core import ClaudeMessage
from .content import (
    ContentItem,
    TextContent,
    ThinkingContent,
    dump_content,
    has_images,
    has_thinking,
    has_tool_use,
)
from .records import RawLogEntry

logger = logging.getLogger(__name__)

MESSAGE_TYPES = ("user", "assistant")


def extract_text_content(items: list[ContentItem]) -> str:
    """Merge text and thinking items into one readable string.

    Thinking is prefixed with ``[Thinking]`` on its own line. Tool calls,
    tool results and images are left out; they stay in ``raw_content``.
    """
    parts = []
    for item in items:
        if isinstance(item, TextContent):
            parts.append(item.text)
        elif isinstance(item, ThinkingContent):
            parts.append(f"{THINKING_MARKER}\n{item.thinking}")
    return "\n\n".join(parts)


def entry_to_message(entry: RawLogEntry) -> ClaudeMessage | None:
    """Convert a record to a message.

    Returns None for anything other than a user or assistant record
    carrying a ``message`` payload.
    """
    if entry.entry_type not in MESSAGE_TYPES:
        return None

    message = entry.message
    if message is None:
        return None

    try:
        raw_content = dump_content(message.content)
    except (PydanticSerializationError, ValueError) as e:
        logger.debug("Could not serialize content of %s: %s", entry.uuid, e)
        raw_content = ""

    usage = message.usage

    return ClaudeMessage(
        message_id=_or_unknown(entry.uuid),
        session_id=_or_unknown(entry.session_id),
        role=message.role,
        content=extract_text_content(message.content),
        timestamp=_or_unknown(entry.timestamp),
        raw_content=raw_content,
        has_thinking=has_thinking(message.content),
        has_tool_use=has_tool_use(message.content),
        has_images=has_images(message.content),
        parent_id=entry.parent_uuid,
        model=message.model,
        stop_reason=message.stop_reason,
        input_tokens=usage.input_tokens if usage else None,
        output_tokens=usage.output_tokens if usage else None,
        cache_creation_tokens=usage.cache_creation_input_tokens if usage else None,
        cache_read_tokens=usage.cache_read_input_tokens if usage else None,
        is_sidechain=entry.is_sidechain,
        user_type=entry.user_type,
    )


def _or_unknown(value: str | None) -> str:
    return UNKNOWN if value is None else value
