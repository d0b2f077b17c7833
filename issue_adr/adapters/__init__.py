"""Git platform adapters."""

from issue_adr.adapters.base import GitPlatformAdapter, GitPlatformError
from issue_adr.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
