"""Path resolution and fixed values shared across the parser."""

import os
from pathlib import Path

# Placeholder for identifiers missing from a record.
UNKNOWN = "unknown"

# Prefix that marks reasoning text inside merged message content.
THINKING_MARKER = "[Thinking]"

# Max characters of an offending line echoed into a diagnostic.
PREVIEW_LENGTH = 100


def get_claude_projects_path() -> Path:
    """Return the path to Claude Code's projects directory."""
    env = os.environ.get("CLAUDE_TRANSCRIPTS_PATH")
    if env:
        return Path(env)

    config_dir = os.environ.get("CLAUDE_CONFIG_DIR")
    if config_dir:
        return Path(config_dir) / "projects"

    return Path.home() / ".claude" / "projects"
