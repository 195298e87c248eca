"""Data models for issue events, target files, pull requests and sync
results."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class IssueAction(str, Enum):
    """Issue webhook actions; anything unhandled maps to OTHER."""

    OPENED = "opened"
    EDITED = "edited"
    REOPENED = "reopened"
    LABELED = "labeled"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> "IssueAction":
        try:
            return cls(value or "")
        except ValueError:
            return cls.OTHER


class IssueEvent(BaseModel):
    """Triggering event, parsed once per run from the webhook payload."""

    model_config = ConfigDict(frozen=True)

    event_name: str = Field(default="", description="GitHub event name, e.g. issues")
    action: IssueAction = IssueAction.OTHER
    has_issue: bool = Field(default=False, description="Payload carries an issue object")
    locked: bool = False
    title: str = ""
    body: str | None = None
    labels: frozenset[str] = Field(default_factory=frozenset)
    issue_number: int | None = None
    repo_owner: str = ""
    repo_name: str = ""
    default_branch: str | None = None

    @property
    def repo(self) -> str:
        """Repository full name (owner/name)."""
        return f"{self.repo_owner}/{self.repo_name}"


class TargetFile:
    """File in the working tree that holds the issue body."""

    def __init__(self, path: Path, filename: str, content: str, existed_before: bool = False) -> None:
        self.path = path
        self.filename = filename
        self.content = content
        self.existed_before = existed_before

    @property
    def verb(self) -> str:
        """Commit verb: Update for an existing file, Create otherwise."""
        return "Update" if self.existed_before else "Create"


class PR:
    """Pull request as returned by the code host."""

    def __init__(
        self,
        number: int,
        title: str,
        body: str,
        head_branch: str,
        base_branch: str,
        state: str,
        html_url: str | None = None,
    ) -> None:
        self.number = number
        self.title = title
        self.body = body or ""
        self.head_branch = head_branch
        self.base_branch = base_branch
        self.state = state
        self.html_url = html_url


class Comment:
    """Comment on an issue or PR."""

    def __init__(self, id: int, body: str, author: str, html_url: str | None = None) -> None:
        self.id = id
        self.body = body
        self.author = author
        self.html_url = html_url


class SearchItem:
    """One hit of an issue/PR search."""

    def __init__(self, number: int, title: str, state: str, is_pull_request: bool) -> None:
        self.number = number
        self.title = title
        self.state = state
        self.is_pull_request = is_pull_request


class WorkingTreeStatus:
    """Paths reported by git status, split the way the sync procedure needs."""

    def __init__(self, modified: list[str] | None = None, created: list[str] | None = None) -> None:
        self.modified = modified or []
        self.created = created or []

    @property
    def has_changes(self) -> bool:
        return bool(self.modified or self.created)


class SyncOutcome(str, Enum):
    SKIPPED = "skipped"
    UNCHANGED = "unchanged"
    CREATED = "created"
    UPDATED = "updated"


class SyncResult(BaseModel):
    """What one run of the sync procedure did."""

    outcome: SyncOutcome
    reason: str = ""
    filename: str | None = None
    branch: str | None = None
    pr_number: int | None = None
