"""Test configuration and fixtures."""

from datetime import datetime

import logfire
import pytest

from qeta.config import Settings
from qeta.domain.model import Question
from qeta.domain.value import QuestionId, ViewerId
from qeta.util.jwt import create_token

# Keep telemetry local; spans still run so instrumented code paths are exercised
logfire.configure(send_to_logfire=False, console=False)

ALICE = ViewerId("user:default/alice")
BOB = ViewerId("user:default/bob")


def make_question(
    question_id: int = 1,
    author: str = ALICE,
    title: str = "How do I register a plugin?",
    content: str = "Looking for the extension point.",
    **fields,
) -> Question:
    """Helper to build a question entity for projection tests."""
    return Question(
        id=QuestionId(question_id),
        title=title,
        content=content,
        author=ViewerId(author),
        created=fields.pop("created", datetime(2024, 1, 1, 12, 0)),
        **fields,
    )


def auth_headers(viewer: str) -> dict[str, str]:
    """Authorization header carrying a token for `viewer`."""
    token = create_token(viewer, Settings().auth)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Pin settings the tests rely on, whatever the local environment says."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AUTH__ALLOW_ANONYMOUS", "false")
    monkeypatch.setenv("PERMISSIONS__ENABLED", "false")
    monkeypatch.setenv("PERMISSIONS__MODERATORS", "[]")
    monkeypatch.delenv("PERMISSIONS__RULES", raising=False)
