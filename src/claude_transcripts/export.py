"""Export parsed sessions to Markdown and JSON formats."""

import json
from dataclasses import asdict

from .config import UNKNOWN
from .core import ClaudeMessage, ClaudeSession


def session_to_markdown(session: ClaudeSession, messages: list[ClaudeMessage]) -> str:
    """Export a session and its messages as clean Markdown."""
    lines = [f"# Session {session.session_id}", ""]

    if session.cwd:
        lines.append(f"**Project:** {session.cwd}")
    lines.append(f"**File:** {session.file_path}")
    if session.first_timestamp:
        lines.append(f"**Started:** {session.first_timestamp}")
    if session.last_timestamp:
        lines.append(f"**Updated:** {session.last_timestamp}")
    lines.append(
        f"**Messages:** {session.message_count} "
        f"({session.user_message_count} user, {session.assistant_message_count} assistant)"
    )
    if session.total_input_tokens or session.total_output_tokens:
        lines.append(
            f"**Tokens:** {format_tokens(session.total_input_tokens or 0)} in, "
            f"{format_tokens(session.total_output_tokens or 0)} out"
        )
    lines.extend(["", "---", ""])

    for msg in messages:
        heading = msg.role.capitalize()
        if msg.timestamp != UNKNOWN:
            heading += f" ({msg.timestamp})"
        lines.append(f"## {heading}")
        lines.append("")

        if msg.content:
            lines.append(msg.content)
        elif msg.has_tool_use:
            lines.append("_(tool call)_")
        elif msg.has_images:
            lines.append("_(image)_")
        else:
            lines.append("_(no text)_")
        lines.extend(["", "---", ""])

    return "\n".join(lines)


def session_to_json(session: ClaudeSession, messages: list[ClaudeMessage]) -> str:
    """Export a session and its messages as structured JSON."""
    data = {
        "session": asdict(session),
        "messages": [asdict(msg) for msg in messages],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_tokens(count: int) -> str:
    """Abbreviate a token count: 950, 12.3k, 1.2M."""
    if count < 1000:
        return str(count)
    if count < 1_000_000:
        return f"{count / 1000:.1f}k"
    return f"{count / 1_000_000:.1f}M"
