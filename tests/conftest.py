"""Shared test fixtures for claude-transcripts."""

import json

import pytest

PROJECT_DIR_NAME = "-Users-testuser-dev-myapp"


def _session_001_lines():
    """A realistic transcript with every record shape the parser meets.

    Line numbers matter to the tests:
    - 6 and 7 are blank / whitespace-only
    - 8 is truncated JSON
    - 10 carries a content item type the parser does not know
    """
    return [
        # 1. User prompt, string shorthand
        json.dumps({
            "parentUuid": None,
            "isSidechain": False,
            "userType": "external",
            "cwd": "/Users/testuser/dev/myapp",
            "sessionId": "session-001",
            "version": "1.0.51",
            "type": "user",
            "message": {"role": "user", "content": "Help me refactor the auth module"},
            "uuid": "uuid-001",
            "timestamp": "2025-01-20T10:00:00Z",
        }),
        # 2. Assistant text + tool_use, with usage
        json.dumps({
            "parentUuid": "uuid-001",
            "sessionId": "session-001",
            "cwd": "/Users/testuser/dev/other",
            "type": "assistant",
            "message": {
                "id": "msg_01",
                "role": "assistant",
                "model": "claude-sonnet-4-20250514",
                "content": [
                    {"type": "text", "text": "I'll start by reading the current code."},
                    {"type": "tool_use", "id": "toolu_001", "name": "Read", "input": {"file_path": "/src/auth.ts"}},
                ],
                "stop_reason": "tool_use",
                "usage": {
                    "input_tokens": 100,
                    "output_tokens": 50,
                    "cache_creation_input_tokens": 20,
                    "cache_read_input_tokens": 10,
                },
            },
            "uuid": "uuid-002",
            "timestamp": "2025-01-20T10:00:30Z",
        }),
        # 3. Tool result (user record)
        json.dumps({
            "parentUuid": "uuid-002",
            "sessionId": "session-001",
            "type": "user",
            "message": {"role": "user", "content": [
                {"type": "tool_result", "tool_use_id": "toolu_001", "content": "export function authenticate() {}", "is_error": False},
            ]},
            "uuid": "uuid-003",
            "timestamp": "2025-01-20T10:00:31Z",
        }),
        # 4. Assistant with thinking
        json.dumps({
            "parentUuid": "uuid-003",
            "sessionId": "session-001",
            "type": "assistant",
            "message": {
                "role": "assistant",
                "model": "claude-sonnet-4-20250514",
                "content": [
                    {"type": "thinking", "thinking": "Split validation from token refresh.", "signature": "sig=="},
                    {"type": "text", "text": "Let me refactor it into separate concerns."},
                    {"type": "tool_use", "id": "toolu_002", "name": "Edit", "input": {"file_path": "/src/auth.ts"}},
                ],
                "usage": {"input_tokens": 200, "output_tokens": 80},
            },
            "uuid": "uuid-004",
            "timestamp": "2025-01-20T10:01:00Z",
        }),
        # 5. file-history-snapshot
        json.dumps({"type": "file-history-snapshot", "messageId": "uuid-004", "snapshot": {"files": []}}),
        # 6, 7. Blank lines
        "",
        "   ",
        # 8. Truncated JSON
        '{"type": "user", "message": {"role": "user", "content": "cut off',
        # 9. User text + image
        json.dumps({
            "parentUuid": "uuid-004",
            "sessionId": "session-001",
            "type": "user",
            "message": {"role": "user", "content": [
                {"type": "text", "text": "What is in this screenshot?"},
                {"type": "image", "source": {"type": "base64", "media_type": "image/png", "data": "iVBORw0KGgo="}},
            ]},
            "uuid": "uuid-005",
            "timestamp": "2025-01-20T10:05:00Z",
        }),
        # 10. Unknown content item type
        json.dumps({
            "sessionId": "session-001",
            "type": "assistant",
            "message": {"role": "assistant", "content": [
                {"type": "server_tool_use", "id": "srvtoolu_1", "name": "web_search", "input": {}},
            ], "usage": {"input_tokens": 999, "output_tokens": 999}},
            "uuid": "uuid-bad",
            "timestamp": "2025-01-20T10:05:10Z",
        }),
        # 11. Summary record
        json.dumps({"type": "summary", "summary": "Refactored auth module", "leafUuid": "uuid-006"}),
        # 12. Assistant, no usage
        json.dumps({
            "parentUuid": "uuid-005",
            "sessionId": "session-001",
            "type": "assistant",
            "message": {"role": "assistant", "content": [{"type": "text", "text": "Done."}]},
            "uuid": "uuid-006",
            "timestamp": "2025-01-20T10:06:00Z",
        }),
        # 13. System record, not a message
        json.dumps({
            "sessionId": "session-001",
            "type": "system",
            "content": "Conversation compacted",
            "uuid": "uuid-007",
            "timestamp": "2025-01-20T10:06:05Z",
        }),
    ]


def _session_002_lines():
    return [
        json.dumps({
            "type": "user",
            "sessionId": "session-002",
            "cwd": "/Users/testuser/dev/myapp",
            "message": {"role": "user", "content": "Write tests for the API"},
            "uuid": "s2-001",
            "timestamp": "2025-01-19T09:00:00Z",
        }),
        json.dumps({
            "type": "assistant",
            "sessionId": "session-002",
            "message": {"role": "assistant", "content": [{"type": "text", "text": "Sure."}]},
            "uuid": "s2-002",
            "timestamp": "2025-01-19T09:00:05Z",
        }),
    ]


@pytest.fixture
def write_jsonl(tmp_path):
    """Return a helper that writes lines to a .jsonl file and returns its path."""

    def _write(lines, name="session.jsonl"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def session_file(write_jsonl):
    """The mixed transcript described in ``_session_001_lines``."""
    return write_jsonl(_session_001_lines(), name="session-001.jsonl")


@pytest.fixture
def tmp_claude_projects(tmp_path):
    """Create a synthetic ~/.claude/projects directory.

    - one project with three sessions (newest, older, undated) and a
      non-transcript file
    - one project with no sessions
    - a stray file at the top level
    """
    projects = tmp_path / "projects"
    project_dir = projects / PROJECT_DIR_NAME
    project_dir.mkdir(parents=True)
    (projects / "-Users-testuser-dev-empty").mkdir()
    (projects / "stray.txt").write_text("not a project", encoding="utf-8")

    (project_dir / "session-001.jsonl").write_text("\n".join(_session_001_lines()) + "\n", encoding="utf-8")
    (project_dir / "session-002.jsonl").write_text("\n".join(_session_002_lines()) + "\n", encoding="utf-8")
    (project_dir / "session-003.jsonl").write_text(
        json.dumps({"type": "summary", "summary": "Untitled", "leafUuid": "x"}) + "\n",
        encoding="utf-8",
    )
    (project_dir / "notes.txt").write_text("scratch", encoding="utf-8")

    return projects
