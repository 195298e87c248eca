"""Abstract base for code host adapters."""

from abc import ABC, abstractmethod
from typing import List

from blog_at_issue.models import PR, Comment, SearchItem


class CodeHostError(Exception):
    """Raised when a code host API call fails."""

    pass


class RefNotFoundError(CodeHostError):
    """Raised when a git ref to delete does not exist."""

    pass


class CodeHostAdapter(ABC):
    """Abstract interface for the code host (search, refs, PRs, comments)."""

    @abstractmethod
    def search_issues(self, query: str) -> List[SearchItem]:
        """Search issues and pull requests with the host's query syntax."""
        ...

    @abstractmethod
    def delete_ref(self, repo: str, ref: str) -> None:
        """Delete a git ref such as "heads/<branch>".

        Raises RefNotFoundError when the ref does not exist.
        """
        ...

    @abstractmethod
    def create_pr(
        self,
        repo: str,
        title: str,
        body: str,
        head: str,
        base: str,
    ) -> PR:
        """Create a pull request."""
        ...

    @abstractmethod
    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        """Post a comment on an issue."""
        ...

    @abstractmethod
    def get_default_branch(self, repo: str) -> str:
        """Return default branch name (e.g. main)."""
        ...

    def find_open_pr(self, repo: str, author: str, text: str) -> SearchItem | None:
        """Return the first open PR in repo by author whose text matches."""
        query = f'repo:{repo} is:pr author:{author} is:open "{text}"'
        items = self.search_issues(query)
        return items[0] if items else None
