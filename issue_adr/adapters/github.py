"""GitHub git data API adapter."""

import base64
from typing import Any, Dict, List

import requests

from issue_adr.adapters.base import GitPlatformAdapter, GitPlatformError
from issue_adr.models import GitCommit

BLOB_FILE_MODE = "100644"


def _commit_from_api(data: Dict[str, Any]) -> GitCommit:
    tree = data.get("tree") or {}
    return GitCommit(sha=data["sha"], tree_sha=tree.get("sha", ""))


def tree_entry(path: str, blob_sha: str) -> Dict[str, Any]:
    """Regular-file tree entry pointing at an existing blob."""
    return {"path": path, "mode": BLOB_FILE_MODE, "type": "blob", "sha": blob_sha}


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        try:
            resp = self._session.request(method, url, json=json, timeout=30)
        except requests.RequestException as e:
            raise GitPlatformError(f"{method} {path} failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                data = resp.json()
            except ValueError:
                data = None
            if isinstance(data, dict):
                msg = data.get("message", msg)
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def get_ref(self, repo: str, ref: str) -> str:
        data = self._request("GET", f"/repos/{repo}/git/ref/{ref}").json()
        return data["object"]["sha"]

    def get_commit(self, repo: str, sha: str) -> GitCommit:
        data = self._request("GET", f"/repos/{repo}/git/commits/{sha}").json()
        return _commit_from_api(data)

    def create_blob(self, repo: str, content: str) -> str:
        encoded = base64.b64encode(content.encode("utf-8")).decode("ascii")
        resp = self._request(
            "POST",
            f"/repos/{repo}/git/blobs",
            json={"content": encoded, "encoding": "base64"},
        )
        return resp.json()["sha"]

    def create_tree(self, repo: str, base_tree: str, entries: List[Dict[str, Any]]) -> str:
        resp = self._request(
            "POST",
            f"/repos/{repo}/git/trees",
            json={"base_tree": base_tree, "tree": entries},
        )
        return resp.json()["sha"]

    def create_commit(self, repo: str, message: str, tree: str, parents: List[str]) -> str:
        resp = self._request(
            "POST",
            f"/repos/{repo}/git/commits",
            json={"message": message, "tree": tree, "parents": parents},
        )
        return resp.json()["sha"]

    def update_ref(self, repo: str, ref: str, sha: str) -> None:
        self._request("PATCH", f"/repos/{repo}/git/refs/{ref}", json={"sha": sha})
