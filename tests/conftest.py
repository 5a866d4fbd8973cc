"""
Test configuration and fixtures shared by unit and integration tests.

Provides a configuration pointing at a test webhook, fake GitHub and Slack
collaborators, and a fixed run timestamp.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest

from src.config.models import Config
from src.github.models import ChangedFile, CommitDetail
from tests.fixtures.github.mock_data import SLACK_WEBHOOK_URL

RUN_AT = datetime(2024, 3, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def run_at() -> datetime:
    """Fixed 'now' for runs under test."""
    return RUN_AT


@pytest.fixture
def test_config() -> Config:
    """
    Why: Keeps tests from ever targeting the production webhook
    What: Default configuration with the Slack webhook swapped out
    How: Builds Config from defaults plus a test webhook override
    """
    return Config(slack={"webhook_url": SLACK_WEBHOOK_URL})


@pytest.fixture
def make_detail() -> Callable[..., CommitDetail]:
    """Factory for CommitDetail from ``(path, diff_text)`` pairs."""

    def _make(sha: str, *files: tuple[str, str | None]) -> CommitDetail:
        return CommitDetail(
            sha=sha,
            files=tuple(ChangedFile(path=path, diff_text=diff) for path, diff in files),
        )

    return _make


@pytest.fixture
def fake_github() -> Mock:
    """
    Why: Unit tests of the pipeline must not touch the network
    What: Mock with async list_commits/get_commit methods
    How: AsyncMocks whose return values/side effects tests configure
    """
    github = Mock()
    github.list_commits = AsyncMock(return_value=[])
    github.get_commit = AsyncMock()
    return github


@pytest.fixture
def fake_notifier() -> Mock:
    """Notifier double recording every message passed to notify()."""
    notifier = Mock()
    notifier.notify = AsyncMock(return_value=None)
    return notifier
