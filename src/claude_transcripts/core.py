"""Output data models for claude-transcripts."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ClaudeMessage:
    """One user or assistant turn, flattened for display."""

    message_id: str
    session_id: str
    role: str  # "user" | "assistant"
    content: str  # text and thinking items merged
    timestamp: str
    raw_content: str  # content array re-serialized as JSON
    has_thinking: bool = False
    has_tool_use: bool = False
    has_images: bool = False
    parent_id: Optional[str] = None
    model: Optional[str] = None
    stop_reason: Optional[str] = None
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    cache_creation_tokens: Optional[int] = None
    cache_read_tokens: Optional[int] = None
    is_sidechain: Optional[bool] = None
    user_type: Optional[str] = None


@dataclass(frozen=True)
class ClaudeSession:
    """Aggregate statistics for one transcript file."""

    session_id: str
    file_path: str
    message_count: int = 0
    user_message_count: int = 0
    assistant_message_count: int = 0
    first_timestamp: Optional[str] = None
    last_timestamp: Optional[str] = None
    total_input_tokens: Optional[int] = None
    total_output_tokens: Optional[int] = None
    has_thinking: bool = False
    has_tool_use: bool = False
    cwd: Optional[str] = None


@dataclass(frozen=True)
class LineError:
    """A transcript line that could not be decoded."""

    line_number: int
    message: str
    preview: str


@dataclass
class ParseResult:
    """Messages from one file plus the lines that failed to decode."""

    messages: list[ClaudeMessage] = field(default_factory=list)
    errors: list[LineError] = field(default_factory=list)


@dataclass(frozen=True)
class ClaudeProject:
    """A project folder under the Claude Code projects directory."""

    name: str  # e.g. "/Users/farhaj/dev/travel-agency"
    path: str
    session_count: int


@dataclass(frozen=True)
class FileInfo:
    """Size and line count of a transcript file."""

    path: str
    size: int
    line_count: int

    def __str__(self) -> str:
        return f"File: {self.path}\nSize: {self.size} bytes\nLines: {self.line_count}"
