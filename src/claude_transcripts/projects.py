"""Discovery of projects and session files under ~/.claude/projects/.

Claude Code stores one directory per working directory, named after the
path with separators replaced by dashes (``/Users/alice/app`` becomes
``-Users-alice-app``). Each directory holds one ``<session-uuid>.jsonl``
transcript per session.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import get_claude_projects_path
from .core import ClaudeProject, ClaudeSession
from .reader import TranscriptReadError, summarize_session

logger = logging.getLogger(__name__)

SESSION_SUFFIX = ".jsonl"


def decode_project_name(dir_name: str) -> str:
    """Derive a display path from a project folder name.

    ``-Users-farhaj-dev-foo`` -> ``/Users/farhaj/dev/foo``. The encoding
    is lossy: dashes that were part of the original path come back as
    slashes.
    """
    if dir_name.startswith("-"):
        return "/" + dir_name[1:].replace("-", "/")
    return dir_name


def list_session_files(project_dir: Path) -> list[Path]:
    return sorted(p for p in project_dir.iterdir() if p.is_file() and p.suffix == SESSION_SUFFIX)


def list_projects(base: Optional[Path] = None) -> list[ClaudeProject]:
    """Return every project folder with its session count.

    A missing projects directory yields an empty list.
    """
    base = base if base is not None else get_claude_projects_path()
    if not base.is_dir():
        return []

    projects = []
    for project_dir in sorted(base.iterdir()):
        if not project_dir.is_dir():
            continue

        projects.append(ClaudeProject(
            name=decode_project_name(project_dir.name),
            path=str(project_dir),
            session_count=len(list_session_files(project_dir)),
        ))

    return projects


def list_project_sessions(project_dir: Path) -> list[ClaudeSession]:
    """Summarize every session file in a project, newest first.

    Files that cannot be read are logged and left out. Sessions without
    any timestamp sort last.
    """
    sessions = []
    for session_file in list_session_files(project_dir):
        try:
            sessions.append(summarize_session(session_file))
        except TranscriptReadError as e:
            logger.error("Error reading session %s: %s", session_file.name, e)

    # Timestamps are ISO-8601 strings, so lexical order is chronological.
    dated = [s for s in sessions if s.last_timestamp]
    undated = [s for s in sessions if not s.last_timestamp]
    dated.sort(key=lambda s: s.last_timestamp, reverse=True)
    return dated + undated


def resolve_project_dir(project: str, base: Optional[Path] = None) -> Optional[Path]:
    """Map a project folder name to its directory, or None.

    Names containing path separators or starting with a dot are rejected
    so callers cannot reach outside the projects directory.
    """
    if not _is_plain_name(project):
        return None

    base = base if base is not None else get_claude_projects_path()
    project_dir = base / project
    return project_dir if project_dir.is_dir() else None


def resolve_session_file(project_dir: Path, session: str) -> Optional[Path]:
    """Map a session id (file stem) inside a project to its transcript, or None."""
    if not _is_plain_name(session):
        return None

    session_file = project_dir / f"{session}{SESSION_SUFFIX}"
    return session_file if session_file.is_file() else None


def _is_plain_name(name: str) -> bool:
    return bool(name) and "/" not in name and "\\" not in name and not name.startswith(".")
