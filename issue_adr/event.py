"""Read the triggering webhook payload and decide whether the issue qualifies.

A payload without an issue is a configuration error (the workflow is wired
to the wrong event). An issue without the configured label is skipped.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from issue_adr.models import Issue

log = logging.getLogger("issue_adr.event")


class EventError(Exception):
    """Raised when the event payload is missing or not an issue event."""

    pass


def load_event(path: Path | str | None) -> Dict[str, Any]:
    """Load the JSON payload the runner wrote to GITHUB_EVENT_PATH."""
    if not path:
        raise EventError("No event payload: GITHUB_EVENT_PATH is not set.")
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise EventError(f"Cannot read event payload {path}: {e}") from e
    if not isinstance(data, dict):
        raise EventError(f"Event payload {path} is not a JSON object.")
    return data


def issue_from_payload(payload: Dict[str, Any]) -> Issue:
    """Build Issue from the payload's ``issue`` object."""
    data = payload.get("issue")
    if not data:
        raise EventError("This action must be triggered by an issue event.")
    try:
        labels = [lb["name"] for lb in (data.get("labels") or []) if isinstance(lb, dict) and "name" in lb]
        return Issue(
            number=data["number"],
            title=data.get("title") or "",
            body=data.get("body") or "",
            labels=labels,
        )
    except (KeyError, TypeError, AttributeError, ValidationError) as e:
        raise EventError(f"Malformed issue in event payload: {e!r}") from e


def has_label(issue: Issue, label_name: str) -> bool:
    return label_name in issue.labels


def gate_issue(payload: Dict[str, Any], label_name: str) -> Issue | None:
    """Return the issue when it carries label_name, else None (skip)."""
    issue = issue_from_payload(payload)
    if not has_label(issue, label_name):
        log.info('The issue does not have the label "%s". Skipping.', label_name)
        return None
    return issue


def repository_from_payload(payload: Dict[str, Any]) -> str:
    """owner/repo of the payload's repository, or '' when absent."""
    repo = payload.get("repository") or {}
    if not isinstance(repo, dict):
        return ""
    full_name = repo.get("full_name")
    if full_name:
        return full_name
    owner = (repo.get("owner") or {}).get("login")
    name = repo.get("name")
    if owner and name:
        return f"{owner}/{name}"
    return ""
