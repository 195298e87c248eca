"""Tests for blog_at_issue.events (payload -> IssueEvent)."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from blog_at_issue.events import load_event, read_event_file
from blog_at_issue.models import IssueAction


def _payload(**issue_overrides) -> dict:
    issue = {
        "number": 7,
        "title": "Hello World",
        "body": "# Hi",
        "locked": False,
        "labels": [{"name": "blog"}, {"name": "draft"}],
    }
    issue.update(issue_overrides)
    return {
        "action": "opened",
        "issue": issue,
        "repository": {
            "name": "site",
            "full_name": "octo/site",
            "owner": {"login": "octo"},
            "default_branch": "main",
        },
    }


def test_load_event_issue_fields() -> None:
    event = load_event("issues", _payload())
    assert event.event_name == "issues"
    assert event.action is IssueAction.OPENED
    assert event.has_issue is True
    assert event.locked is False
    assert event.title == "Hello World"
    assert event.body == "# Hi"
    assert event.labels == frozenset({"blog", "draft"})
    assert event.issue_number == 7
    assert event.repo == "octo/site"
    assert event.default_branch == "main"


def test_unknown_action_maps_to_other() -> None:
    payload = _payload()
    payload["action"] = "transferred"
    assert load_event("issues", payload).action is IssueAction.OTHER


def test_null_body_kept_as_none() -> None:
    assert load_event("issues", _payload(body=None)).body is None


def test_payload_without_issue() -> None:
    payload = {"action": "created", "repository": {"name": "site", "owner": {"login": "octo"}}}
    event = load_event("push", payload)
    assert event.has_issue is False
    assert event.repo == "octo/site"


def test_repository_falls_back_to_argument() -> None:
    payload = _payload()
    del payload["repository"]
    event = load_event("issues", payload, repository="octo/blog")
    assert event.repo_owner == "octo"
    assert event.repo_name == "blog"
    assert event.default_branch is None


def test_event_is_frozen() -> None:
    event = load_event("issues", _payload())
    with pytest.raises(ValidationError):
        event.title = "Changed"


def test_read_event_file(tmp_path: Path) -> None:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(_payload(title="From file")), encoding="utf-8")
    event = read_event_file(path, "issues")
    assert event.title == "From file"
    assert event.issue_number == 7
