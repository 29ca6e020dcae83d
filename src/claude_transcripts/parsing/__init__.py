"""Decoding, projection and aggregation of Claude Code transcript records."""

from .aggregator import SessionAggregator, summarize_entries
from .content import (
    ContentItem,
    ImageContent,
    ImageSource,
    TextContent,
    ThinkingContent,
    ToolResultContent,
    ToolUseContent,
    decode_content,
    dump_content,
)
from .projector import entry_to_message, extract_text_content
from .records import MessageObject, RawLogEntry, TokenUsage, decode_line

__all__ = [
    "ContentItem",
    "ImageContent",
    "ImageSource",
    "MessageObject",
    "RawLogEntry",
    "SessionAggregator",
    "TextContent",
    "ThinkingContent",
    "TokenUsage",
    "ToolResultContent",
    "ToolUseContent",
    "decode_content",
    "decode_line",
    "dump_content",
    "entry_to_message",
    "extract_text_content",
    "summarize_entries",
]
