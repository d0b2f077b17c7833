"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from issue_adr.models import GitCommit


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Git data operations needed to add a commit without a working copy."""

    @abstractmethod
    def get_ref(self, repo: str, ref: str) -> str:
        """Return the SHA a ref (e.g. heads/main) points at."""
        ...

    @abstractmethod
    def get_commit(self, repo: str, sha: str) -> GitCommit:
        """Fetch a commit by SHA."""
        ...

    @abstractmethod
    def create_blob(self, repo: str, content: str) -> str:
        """Store file content; return the blob SHA."""
        ...

    @abstractmethod
    def create_tree(self, repo: str, base_tree: str, entries: List[Dict[str, Any]]) -> str:
        """Layer entries onto base_tree; return the new tree SHA."""
        ...

    @abstractmethod
    def create_commit(self, repo: str, message: str, tree: str, parents: List[str]) -> str:
        """Create a commit object; return its SHA."""
        ...

    @abstractmethod
    def update_ref(self, repo: str, ref: str, sha: str) -> None:
        """Move a ref to sha."""
        ...
