"""Shared fixtures: isolated environment, payloads, mocked adapter."""

import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Iterator
from unittest.mock import MagicMock

import pytest

from issue_adr.adapters.base import GitPlatformAdapter
from issue_adr.config import ActionInputs, AppConfig, GitHubConfig, LoggingConfig
from issue_adr.models import GitCommit

ADR_BODY = "### Context\nNeed RPC.\n### Decision\nUse gRPC.\n### Consequences\nMore deps."


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Runner variables from the host must not leak into config."""
    for key in list(os.environ):
        if key.startswith(("INPUT_", "GITHUB_", "LOGGING_", "RUNNER_")):
            monkeypatch.delenv(key, raising=False)


def _make_payload(labels: list[str] | None = None, **issue: Any) -> Dict[str, Any]:
    data = {
        "number": 42,
        "title": "Adopt gRPC",
        "body": ADR_BODY,
        "labels": [{"name": name} for name in (labels if labels is not None else ["adr"])],
    }
    data.update(issue)
    return {
        "action": "labeled",
        "issue": data,
        "repository": {"full_name": "octo-org/octo-repo", "name": "octo-repo", "owner": {"login": "octo-org"}},
    }


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """AdrLogging.setup replaces root handlers; put the originals back."""
    handlers = logging.root.handlers[:]
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


@pytest.fixture
def make_payload() -> Callable[..., Dict[str, Any]]:
    """Factory for issue event payloads; keyword args override issue fields."""
    return _make_payload


@pytest.fixture
def payload() -> Dict[str, Any]:
    return _make_payload()


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    """Labeled-issue config writing under tmp_path."""
    return AppConfig(
        inputs=ActionInputs(label_name="adr", destination_folder="adr", adr_status="", github_token=None),
        github=GitHubConfig(
            token="test-token",
            api_url="https://api.github.com",
            repository="octo-org/octo-repo",
            workspace=str(tmp_path),
            branch="main",
            output=None,
            event_path=None,
        ),
        logging=LoggingConfig(level="DEBUG", format="%(message)s"),
    )


@pytest.fixture
def adapter() -> MagicMock:
    """Adapter mock answering the six git data calls."""
    mock = MagicMock(spec=GitPlatformAdapter)
    mock.get_ref.return_value = "base-sha"
    mock.get_commit.return_value = GitCommit(sha="base-sha", tree_sha="base-tree")
    mock.create_blob.return_value = "blob-sha"
    mock.create_tree.return_value = "tree-sha"
    mock.create_commit.return_value = "commit-sha"
    mock.update_ref.return_value = None
    return mock
