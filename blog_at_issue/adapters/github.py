"""GitHub API adapter."""

from typing import Any, Dict, List
from urllib.parse import quote

import requests

from blog_at_issue.adapters.base import CodeHostAdapter, CodeHostError, RefNotFoundError
from blog_at_issue.models import PR, Comment, SearchItem


def _pr_from_api(data: Dict[str, Any]) -> PR:
    head = data.get("head") or {}
    base = data.get("base") or {}
    return PR(
        number=data["number"],
        title=data.get("title") or "",
        body=data.get("body") or "",
        head_branch=head.get("ref", ""),
        base_branch=base.get("ref", ""),
        state=data.get("state", "open"),
        html_url=data.get("html_url"),
    )


def _comment_from_api(data: Dict[str, Any]) -> Comment:
    user = data.get("user") or {}
    return Comment(
        id=data["id"],
        body=data.get("body") or "",
        author=user.get("login", ""),
        html_url=data.get("html_url"),
    )


def _search_item_from_api(data: Dict[str, Any]) -> SearchItem:
    return SearchItem(
        number=data["number"],
        title=data.get("title") or "",
        state=data.get("state", "open"),
        is_pull_request="pull_request" in data,
    )


class GitHubAdapter(CodeHostAdapter):
    """GitHub REST API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com", timeout: int = 30) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        resp = self._session.request(method, url, params=params, json=json, timeout=self._timeout)
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                data = resp.json()
            except ValueError:
                data = None
            if isinstance(data, dict) and data.get("message"):
                msg = data["message"]
            raise CodeHostError(f"{resp.status_code}: {msg}")
        return resp

    def search_issues(self, query: str) -> List[SearchItem]:
        resp = self._request("GET", "/search/issues", params={"q": query})
        data = resp.json() or {}
        return [_search_item_from_api(d) for d in data.get("items") or []]

    def delete_ref(self, repo: str, ref: str) -> None:
        try:
            # "#" and "%" in branch names must not end the path or be decoded
            self._request("DELETE", f"/repos/{repo}/git/refs/{quote(ref, safe='/')}")
        except CodeHostError as e:
            msg = str(e)
            # GitHub answers 422 "Reference does not exist" (sometimes 404) for a missing ref
            if msg.startswith("404") or (msg.startswith("422") and "does not exist" in msg.lower()):
                raise RefNotFoundError(f"Ref not found: {ref}") from e
            raise

    def create_pr(
        self,
        repo: str,
        title: str,
        body: str,
        head: str,
        base: str,
    ) -> PR:
        resp = self._request(
            "POST",
            f"/repos/{repo}/pulls",
            json={"title": title, "body": body, "head": head, "base": base},
        )
        return _pr_from_api(resp.json())

    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        resp = self._request("POST", f"/repos/{repo}/issues/{issue_number}/comments", json={"body": body})
        return _comment_from_api(resp.json())

    def get_default_branch(self, repo: str) -> str:
        data = self._request("GET", f"/repos/{repo}").json()
        return data.get("default_branch", "main")
