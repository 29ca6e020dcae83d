"""CLI entry point for claude-transcripts."""

import json
import logging
from dataclasses import asdict
from pathlib import Path

import click
import uvicorn

from .config import get_claude_projects_path
from .export import format_tokens, session_to_json, session_to_markdown
from .projects import list_project_sessions, list_projects, resolve_project_dir
from .reader import (
    TranscriptReadError,
    get_file_info,
    parse_session,
    read_lines_with_pattern,
    summarize_session,
)


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Verbosity of diagnostics written to stderr.",
)
def main(log_level: str):
    """Read Claude Code session transcripts."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@main.command()
def projects():
    """List projects under the Claude Code projects directory."""
    found = list_projects()
    if not found:
        click.echo(f"No projects found in {get_claude_projects_path()}")
        return
    for project in found:
        click.echo(f"{project.session_count:5d}  {project.name}  ({Path(project.path).name})")


# Project folder names start with "-", so they must not be parsed as options.
@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("project")
def sessions(project: str):
    """List session summaries for PROJECT (folder name), newest first."""
    project_dir = resolve_project_dir(project)
    if project_dir is None:
        raise click.ClickException(f"Project not found: {project}")

    for session in list_project_sessions(project_dir):
        tokens = ""
        if session.total_input_tokens or session.total_output_tokens:
            tokens = (
                f"  {format_tokens(session.total_input_tokens or 0)} in"
                f" / {format_tokens(session.total_output_tokens or 0)} out"
            )
        click.echo(
            f"{session.last_timestamp or '-':<26}  {session.session_id}"
            f"  {session.message_count} msgs{tokens}"
        )


@main.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
def parse(file: Path):
    """Print the messages of a session FILE as JSON lines."""
    for message in _load(parse_session, file):
        click.echo(json.dumps(asdict(message), ensure_ascii=False))


@main.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
def summary(file: Path):
    """Print aggregate statistics for a session FILE."""
    click.echo(json.dumps(asdict(_load(summarize_session, file)), indent=2, ensure_ascii=False))


@main.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
def info(file: Path):
    """Print size and line count of FILE."""
    click.echo(str(_load(get_file_info, file)))


@main.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("pattern")
def grep(file: Path, pattern: str):
    """Print the lines of FILE containing PATTERN."""
    for line in _load(read_lines_with_pattern, file, pattern):
        click.echo(line)


@main.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--format", "fmt", type=click.Choice(["md", "json"]), default="md", help="Export format.")
def export(file: Path, fmt: str):
    """Export a session FILE as Markdown or JSON."""
    session = _load(summarize_session, file)
    messages = _load(parse_session, file)
    if fmt == "json":
        click.echo(session_to_json(session, messages))
    else:
        click.echo(session_to_markdown(session, messages))


@main.command()
@click.option("--port", default=8080, help="Port to serve on.")
@click.option("--host", default="127.0.0.1", help="Host to bind to.")
def serve(port: int, host: str):
    """Start the JSON API server."""
    click.echo(f"Starting claude-transcripts on http://{host}:{port}")
    uvicorn.run("claude_transcripts.server:app", host=host, port=port, reload=False)


def _load(func, *args):
    try:
        return func(*args)
    except TranscriptReadError as e:
        raise click.ClickException(str(e))
