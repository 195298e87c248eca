"""Tests for blog_at_issue.services.gate (event gate order and reasons)."""

from blog_at_issue.models import IssueAction, IssueEvent
from blog_at_issue.services.gate import RejectReason, check_event

LABELS = ["blog"]


def _event(**overrides) -> IssueEvent:
    fields = dict(
        event_name="issues",
        action=IssueAction.OPENED,
        has_issue=True,
        locked=False,
        title="Hello World",
        body="# Hi",
        labels=frozenset({"blog"}),
        issue_number=1,
        repo_owner="octo",
        repo_name="site",
    )
    fields.update(overrides)
    return IssueEvent(**fields)


def test_valid_event_passes() -> None:
    assert check_event(_event(), LABELS) is None


def test_all_handled_actions_pass() -> None:
    for action in (IssueAction.OPENED, IssueAction.EDITED, IssueAction.REOPENED, IssueAction.LABELED):
        assert check_event(_event(action=action), LABELS) is None


def test_not_issue_event() -> None:
    assert check_event(_event(has_issue=False), LABELS) is RejectReason.NOT_ISSUE


def test_locked_issue() -> None:
    assert check_event(_event(locked=True), LABELS) is RejectReason.LOCKED


def test_unhandled_action() -> None:
    assert check_event(_event(action=IssueAction.OTHER), LABELS) is RejectReason.ACTION


def test_empty_or_missing_body() -> None:
    assert check_event(_event(body=None), LABELS) is RejectReason.EMPTY_BODY
    assert check_event(_event(body=""), LABELS) is RejectReason.EMPTY_BODY
    assert check_event(_event(body="  \n"), LABELS) is RejectReason.EMPTY_BODY


def test_non_matching_label() -> None:
    assert check_event(_event(labels=frozenset({"bug"})), LABELS) is RejectReason.NO_LABEL
    assert check_event(_event(labels=frozenset()), LABELS) is RejectReason.NO_LABEL


def test_custom_labels() -> None:
    event = _event(labels=frozenset({"post"}))
    assert check_event(event, ["news", "post"]) is None


def test_first_failing_condition_is_reported() -> None:
    """Locked + wrong action + empty body + no label reports the lock."""
    event = _event(locked=True, action=IssueAction.OTHER, body=None, labels=frozenset())
    assert check_event(event, LABELS) is RejectReason.LOCKED
    event = _event(action=IssueAction.OTHER, body=None, labels=frozenset())
    assert check_event(event, LABELS) is RejectReason.ACTION
    event = _event(body=None, labels=frozenset())
    assert check_event(event, LABELS) is RejectReason.EMPTY_BODY


def test_other_event_name_with_issue_payload() -> None:
    """issue_comment payloads carry an issue but are not issue events."""
    assert check_event(_event(event_name="issue_comment"), LABELS) is RejectReason.NOT_ISSUE
    assert check_event(_event(event_name="pull_request"), LABELS) is RejectReason.NOT_ISSUE


def test_missing_event_name_falls_back_to_payload() -> None:
    assert check_event(_event(event_name=""), LABELS) is None
    assert check_event(_event(event_name="", has_issue=False), LABELS) is RejectReason.NOT_ISSUE
