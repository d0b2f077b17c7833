"""Write the ADR locally, then add it to the branch through the git data API.

The local write happens first and is not undone if a remote step fails.
Remote objects created before a failing step are left unreferenced; there is
no retry and no cleanup.
"""

import logging
from pathlib import Path, PurePosixPath

from issue_adr.adapters.base import GitPlatformAdapter
from issue_adr.adapters.github import tree_entry
from issue_adr.models import AdrDocument, Issue

log = logging.getLogger("issue_adr.publisher")


def commit_message(issue: Issue) -> str:
    return f"Add ADR #{issue.number}: {issue.title}"


def remote_path(destination_folder: str, document: AdrDocument) -> str:
    """Path of the ADR inside the repository (POSIX, no leading './')."""
    return str(PurePosixPath(destination_folder, document.status.value, document.filename))


def write_local(document: AdrDocument, status_folder: Path) -> Path:
    """Write the rendered ADR under status_folder; returns the file path."""
    status_folder.mkdir(parents=True, exist_ok=True)
    path = status_folder / document.filename
    path.write_text(document.render(), encoding="utf-8")
    log.info("ADR file created: %s", path)
    return path


def publish_remote(
    adapter: GitPlatformAdapter,
    repo: str,
    branch: str,
    path: str,
    content: str,
    message: str,
) -> str:
    """Commit content at path on top of branch; returns the new commit SHA.

    Steps run strictly in order: ref -> commit -> blob -> tree -> commit ->
    ref update. Any GitPlatformError propagates from the failing step.
    """
    ref = f"heads/{branch}"
    base_sha = adapter.get_ref(repo, ref)
    log.debug("%s is at %s", ref, base_sha)

    base_commit = adapter.get_commit(repo, base_sha)
    log.debug("Base tree %s", base_commit.tree_sha)

    blob_sha = adapter.create_blob(repo, content)
    log.debug("Created blob %s", blob_sha)

    tree_sha = adapter.create_tree(repo, base_commit.tree_sha, [tree_entry(path, blob_sha)])
    log.debug("Created tree %s", tree_sha)

    commit_sha = adapter.create_commit(repo, message, tree_sha, [base_sha])
    log.debug("Created commit %s", commit_sha)

    adapter.update_ref(repo, ref, commit_sha)
    log.info("ADR file committed and pushed: %s (%s)", path, commit_sha)
    return commit_sha
