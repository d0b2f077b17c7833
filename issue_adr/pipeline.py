"""Issue event -> ADR file -> commit.

Steps run once, in order: resolve inputs, gate on the label, allocate the
sequence number, parse the body, render, write locally, commit remotely.
Every failure ends the run with a single failed RunResult.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from issue_adr.adapters.base import GitPlatformAdapter, GitPlatformError
from issue_adr.adapters.github import GitHubAdapter
from issue_adr.config import AppConfig, ConfigurationError, require_inputs, resolve_status
from issue_adr.event import EventError, gate_issue, repository_from_payload
from issue_adr.models import AdrDocument, RunResult
from issue_adr.parser import parse_issue_body
from issue_adr.publisher import commit_message, publish_remote, remote_path, write_local
from issue_adr.sequence import next_sequence_number

log = logging.getLogger("issue_adr.pipeline")

MISSING_TOKEN_MESSAGE = "No GitHub token provided. Please set the GITHUB_TOKEN secret."


def run_pipeline(
    config: AppConfig,
    payload: Dict[str, Any],
    adapter: GitPlatformAdapter | None = None,
) -> RunResult:
    """Run the whole flow for one event payload.

    ``adapter`` defaults to a GitHubAdapter built from the resolved token.
    Never raises for expected failures; inspect ``RunResult.outcome``.
    """
    try:
        return _run(config, payload, adapter)
    except (ConfigurationError, EventError, GitPlatformError, OSError) as e:
        log.error("%s", e)
        return RunResult(outcome="failed", message=str(e))


def _run(
    config: AppConfig,
    payload: Dict[str, Any],
    adapter: GitPlatformAdapter | None,
) -> RunResult:
    inputs = config.inputs
    require_inputs(inputs)
    status = resolve_status(inputs.adr_status)

    issue = gate_issue(payload, inputs.label_name)
    if issue is None:
        return RunResult(
            outcome="skipped",
            message=f'The issue does not have the label "{inputs.label_name}". Skipping.',
        )

    # No filesystem or remote effects before this point
    token = config.token_resolved
    if not token:
        raise ConfigurationError(MISSING_TOKEN_MESSAGE)
    repo = config.github.repository or repository_from_payload(payload)
    if not repo:
        raise ConfigurationError("Repository unknown: set GITHUB_REPOSITORY.")
    if adapter is None:
        adapter = GitHubAdapter(token=token, api_url=config.github.api_url)

    status_folder = Path(config.github.workspace) / inputs.destination_folder / status.value
    sequence = next_sequence_number(status_folder)
    fields = parse_issue_body(issue.body)
    document = AdrDocument(title=issue.title, status=status, fields=fields, sequence=sequence)
    log.info("Issue #%s -> ADR %s (%s)", issue.number, sequence, status.value)

    local_path = write_local(document, status_folder)
    target = remote_path(inputs.destination_folder, document)
    commit_sha = publish_remote(
        adapter,
        repo=repo,
        branch=config.github.branch,
        path=target,
        content=document.render(),
        message=commit_message(issue),
    )
    return RunResult(
        outcome="created",
        message=f"ADR file committed and pushed: {target}",
        path=str(local_path),
        remote_path=target,
        sequence=sequence,
        commit_sha=commit_sha,
    )
