"""Streaming session statistics.

Folds the records of one transcript file into a ``ClaudeSession``
without keeping the messages around, so summarizing a large project
directory stays cheap.
"""

from typing import Iterable, Optional

from ..config import UNKNOWN
from ..core import ClaudeSession
from .content import has_thinking, has_tool_use
from .records import RawLogEntry


class SessionAggregator:
    """Accumulates counts, token totals and flags across records.

    Records are assumed to arrive in file order, which is taken to be
    chronological order: the first timestamp seen is the session start
    and the last one seen is the session end.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path
        self.session_id = UNKNOWN
        self.cwd: Optional[str] = None
        self.message_count = 0
        self.user_message_count = 0
        self.assistant_message_count = 0
        self.first_timestamp: Optional[str] = None
        self.last_timestamp: Optional[str] = None
        self.total_input_tokens = 0
        self.total_output_tokens = 0
        self.has_thinking = False
        self.has_tool_use = False

    def add(self, entry: RawLogEntry) -> None:
        # Last non-null session id wins.
        if entry.session_id is not None:
            self.session_id = entry.session_id

        if self.cwd is None and entry.cwd is not None:
            self.cwd = entry.cwd

        if entry.entry_type == "user":
            self.user_message_count += 1
            self.message_count += 1
        elif entry.entry_type == "assistant":
            self.assistant_message_count += 1
            self.message_count += 1
            self._add_assistant_message(entry)

        if entry.timestamp is not None:
            if self.first_timestamp is None:
                self.first_timestamp = entry.timestamp
            self.last_timestamp = entry.timestamp

    def _add_assistant_message(self, entry: RawLogEntry) -> None:
        message = entry.message
        if message is None:
            return

        if message.usage is not None:
            self.total_input_tokens += message.usage.input_tokens
            self.total_output_tokens += message.usage.output_tokens

        if has_thinking(message.content):
            self.has_thinking = True
        if has_tool_use(message.content):
            self.has_tool_use = True

    def finish(self) -> ClaudeSession:
        """Return the session summary. Zero token totals are reported as None."""
        return ClaudeSession(
            session_id=self.session_id,
            file_path=self.file_path,
            message_count=self.message_count,
            user_message_count=self.user_message_count,
            assistant_message_count=self.assistant_message_count,
            first_timestamp=self.first_timestamp,
            last_timestamp=self.last_timestamp,
            total_input_tokens=self.total_input_tokens or None,
            total_output_tokens=self.total_output_tokens or None,
            has_thinking=self.has_thinking,
            has_tool_use=self.has_tool_use,
            cwd=self.cwd,
        )


def summarize_entries(file_path: str, entries: Iterable[RawLogEntry]) -> ClaudeSession:
    """Fold already-decoded records into a session summary."""
    aggregator = SessionAggregator(file_path)
    for entry in entries:
        aggregator.add(entry)
    return aggregator.finish()
