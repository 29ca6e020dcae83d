"""Reading transcript files.

Two failure tiers apply to every function here:

- A file that cannot be opened, or a line that cannot be read or decoded
  as UTF-8, aborts the whole call with ``TranscriptReadError``. No
  partial results are returned.
- A line that is not valid JSON, or whose JSON does not fit the record
  schema, is skipped. ``parse_session`` logs it at WARNING;
  ``summarize_session`` drops it silently.
"""

import logging
from os import PathLike
from pathlib import Path
from typing import Iterator, Union

from .core import ClaudeMessage, ClaudeSession, FileInfo, LineError, ParseResult
from .parsing import SessionAggregator, decode_line, entry_to_message

logger = logging.getLogger(__name__)

StrPath = Union[str, PathLike]


class TranscriptReadError(Exception):
    """A transcript file could not be opened or read."""

    def __init__(self, path: StrPath, reason: str, line_number: int | None = None):
        self.path = str(path)
        self.reason = reason
        self.line_number = line_number
        if line_number is None:
            message = f"Cannot open file {self.path}: {reason}"
        else:
            message = f"Error reading line {line_number} of {self.path}: {reason}"
        super().__init__(message)


def iter_lines(path: StrPath) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs from a file, 1-based.

    Line terminators (``\\n`` or ``\\r\\n``) are stripped. Each line is
    decoded as UTF-8 on its own, so a bad byte is reported against the
    line that holds it. The file is closed when iteration ends, fails,
    or the generator is discarded.
    """
    try:
        f = Path(path).open("rb")
    except OSError as e:
        raise TranscriptReadError(path, e.strerror or str(e)) from e

    with f:
        line_number = 0
        try:
            for line_number, raw in enumerate(f, 1):
                yield line_number, raw.decode("utf-8").rstrip("\n").rstrip("\r")
        except UnicodeDecodeError as e:
            raise TranscriptReadError(path, str(e), line_number) from e
        except OSError as e:
            raise TranscriptReadError(path, str(e), line_number + 1) from e


def _iter_records(path: StrPath) -> Iterator[tuple[int, str]]:
    """Like ``iter_lines`` but skipping blank and whitespace-only lines."""
    for line_number, line in iter_lines(path):
        if line.strip():
            yield line_number, line


def parse_session_with_diagnostics(path: StrPath) -> ParseResult:
    """Parse a session file into messages, collecting per-line errors."""
    result = ParseResult()

    for line_number, line in _iter_records(path):
        decoded = decode_line(line, line_number)
        if isinstance(decoded, LineError):
            logger.warning(
                "Parse error at %s:%d: %s (line content: %s)",
                path, line_number, decoded.message, decoded.preview,
            )
            result.errors.append(decoded)
            continue

        message = entry_to_message(decoded)
        if message is not None:
            result.messages.append(message)

    return result


def parse_session(path: StrPath) -> list[ClaudeMessage]:
    """Parse a session file and return its user and assistant messages in file order."""
    return parse_session_with_diagnostics(path).messages


def summarize_session(path: StrPath) -> ClaudeSession:
    """Return aggregate statistics for a session file.

    Faster than ``parse_session`` for listing: no message objects are
    built, and lines that fail to decode are ignored.
    """
    aggregator = SessionAggregator(str(path))

    for line_number, line in _iter_records(path):
        decoded = decode_line(line, line_number)
        if isinstance(decoded, LineError):
            continue
        aggregator.add(decoded)

    return aggregator.finish()


# ── File introspection ───────────────────────────────────────────


def count_lines(path: StrPath) -> int:
    """Count every line in the file, blank ones included."""
    return sum(1 for _ in iter_lines(path))


def read_lines(path: StrPath) -> list[str]:
    """Return the non-blank lines of a file."""
    return [line for _, line in _iter_records(path)]


def read_lines_with_pattern(path: StrPath, pattern: str) -> list[str]:
    """Return the lines containing ``pattern`` as a plain substring."""
    return [line for _, line in iter_lines(path) if pattern in line]


def get_file_info(path: StrPath) -> FileInfo:
    file_path = Path(path)
    if not file_path.exists():
        raise TranscriptReadError(path, "File does not exist")

    try:
        size = file_path.stat().st_size
    except OSError as e:
        raise TranscriptReadError(path, f"Cannot read metadata: {e}") from e

    return FileInfo(path=str(file_path), size=size, line_count=count_lines(path))
