"""FastAPI web server for claude-transcripts."""

import logging
from dataclasses import asdict
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from .config import get_claude_projects_path
from .export import session_to_json, session_to_markdown
from .projects import (
    list_project_sessions,
    list_projects,
    resolve_project_dir,
    resolve_session_file,
)
from .reader import TranscriptReadError, parse_session, summarize_session

logger = logging.getLogger(__name__)

app = FastAPI(title="claude-transcripts", version="0.1.0")


def _get_base_path() -> Path:
    return get_claude_projects_path()


def _find_project(project: str) -> Path:
    project_dir = resolve_project_dir(project, _get_base_path())
    if project_dir is None:
        raise HTTPException(status_code=404, detail=f"Project not found: {project}")
    return project_dir


def _find_session(project: str, session: str) -> Path:
    session_file = resolve_session_file(_find_project(project), session)
    if session_file is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session}")
    return session_file


# ── Routes ───────────────────────────────────────────────────────


@app.get("/api/projects")
async def get_projects():
    """Return every project with its session count."""
    return [asdict(p) for p in list_projects(_get_base_path())]


@app.get("/api/projects/{project}/sessions")
async def get_project_sessions(project: str):
    """Return session summaries for a project, newest first."""
    project_dir = _find_project(project)
    return [asdict(s) for s in list_project_sessions(project_dir)]


@app.get("/api/projects/{project}/sessions/{session}")
async def get_session(project: str, session: str):
    """Return all messages of a session."""
    session_file = _find_session(project, session)

    try:
        messages = parse_session(session_file)
    except TranscriptReadError as e:
        logger.error("Failed to parse session %s: %s", session_file, e)
        raise HTTPException(status_code=404, detail=str(e))

    return {
        "session_id": session,
        "messages": [asdict(m) for m in messages],
    }


@app.get("/api/projects/{project}/sessions/{session}/summary")
async def get_session_summary(project: str, session: str):
    """Return aggregate statistics for a session."""
    session_file = _find_session(project, session)

    try:
        summary = summarize_session(session_file)
    except TranscriptReadError as e:
        logger.error("Failed to summarize session %s: %s", session_file, e)
        raise HTTPException(status_code=404, detail=str(e))

    return asdict(summary)


@app.get("/api/projects/{project}/sessions/{session}/export")
async def export_session(
    project: str,
    session: str,
    format: str = Query("md", description="Export format: md or json"),
):
    """Export a session as Markdown or JSON."""
    session_file = _find_session(project, session)

    try:
        summary = summarize_session(session_file)
        messages = parse_session(session_file)
    except TranscriptReadError as e:
        logger.error("Failed to load session for export %s: %s", session_file, e)
        raise HTTPException(status_code=404, detail=str(e))

    if format == "json":
        return Response(
            content=session_to_json(summary, messages),
            media_type="application/json",
            headers={"Content-Disposition": f'attachment; filename="{session}.json"'},
        )
    else:
        return Response(
            content=session_to_markdown(summary, messages),
            media_type="text/markdown",
            headers={"Content-Disposition": f'attachment; filename="{session}.md"'},
        )
