"""Decide from the raw event whether the sync should run at all."""

from enum import Enum
from typing import Iterable

from blog_at_issue.models import IssueAction, IssueEvent

ISSUE_EVENT_NAME = "issues"
HANDLED_ACTIONS = frozenset({IssueAction.OPENED, IssueAction.EDITED, IssueAction.REOPENED, IssueAction.LABELED})


class RejectReason(str, Enum):
    """Why an event was ignored; checked in declaration order."""

    NOT_ISSUE = "not an issue event"
    LOCKED = "issue is locked"
    ACTION = "action is not handled"
    EMPTY_BODY = "issue body is empty"
    NO_LABEL = "issue has no trigger label"


def check_event(event: IssueEvent, labels: Iterable[str]) -> RejectReason | None:
    """Return the first failing condition, or None when the event should be
    processed.

    An empty event name (run outside a workflow without GITHUB_EVENT_NAME)
    leaves the decision to the payload.
    """
    if not event.has_issue or (event.event_name and event.event_name != ISSUE_EVENT_NAME):
        return RejectReason.NOT_ISSUE
    if event.locked:
        return RejectReason.LOCKED
    if event.action not in HANDLED_ACTIONS:
        return RejectReason.ACTION
    if not event.body or not event.body.strip():
        return RejectReason.EMPTY_BODY
    if not event.labels.intersection(labels):
        return RejectReason.NO_LABEL
    return None
