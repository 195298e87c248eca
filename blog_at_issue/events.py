"""Parse the GitHub webhook payload that triggered the run into an
IssueEvent.

Only the fields the sync procedure reads are kept. A payload without an
``issue`` object yields an event with ``has_issue=False`` so that the
gate can reject it with its own reason.
"""

import json
from pathlib import Path
from typing import Any, Dict

from blog_at_issue.models import IssueAction, IssueEvent


def _labels_from_payload(issue_payload: Dict[str, Any]) -> frozenset[str]:
    labels = issue_payload.get("labels") or []
    names = []
    for lb in labels:
        if isinstance(lb, dict) and lb.get("name"):
            names.append(lb["name"])
        elif isinstance(lb, str):
            names.append(lb)
    return frozenset(names)


def _split_repository(full_name: str | None) -> tuple[str, str]:
    if not full_name or "/" not in full_name:
        return "", full_name or ""
    owner, _, name = full_name.partition("/")
    return owner, name


def load_event(event_name: str | None, payload: Dict[str, Any], repository: str | None = None) -> IssueEvent:
    """Build IssueEvent from event name and payload.

    Repository owner/name come from ``payload.repository``; ``repository``
    (GITHUB_REPOSITORY) fills in when the payload has none.
    """
    issue_payload = payload.get("issue")
    repo_payload = payload.get("repository") or {}
    owner_payload = repo_payload.get("owner") or {}

    fallback_owner, fallback_name = _split_repository(repo_payload.get("full_name") or repository)
    repo_owner = owner_payload.get("login") or fallback_owner
    repo_name = repo_payload.get("name") or fallback_name

    if not isinstance(issue_payload, dict):
        return IssueEvent(
            event_name=event_name or "",
            action=IssueAction.parse(payload.get("action")),
            has_issue=False,
            repo_owner=repo_owner,
            repo_name=repo_name,
            default_branch=repo_payload.get("default_branch"),
        )

    number = issue_payload.get("number")
    return IssueEvent(
        event_name=event_name or "",
        action=IssueAction.parse(payload.get("action")),
        has_issue=True,
        locked=bool(issue_payload.get("locked")),
        title=issue_payload.get("title") or "",
        body=issue_payload.get("body"),
        labels=_labels_from_payload(issue_payload),
        issue_number=int(number) if number is not None else None,
        repo_owner=repo_owner,
        repo_name=repo_name,
        default_branch=repo_payload.get("default_branch"),
    )


def read_event_file(path: Path, event_name: str | None = None, repository: str | None = None) -> IssueEvent:
    """Read the payload JSON written by the runner (GITHUB_EVENT_PATH)."""
    payload = json.loads(Path(path).read_text(encoding="utf-8")) or {}
    return load_event(event_name, payload, repository=repository)
