"""Code host adapters."""

from blog_at_issue.adapters.base import CodeHostAdapter, CodeHostError, RefNotFoundError
from blog_at_issue.adapters.github import GitHubAdapter

__all__ = ["CodeHostAdapter", "CodeHostError", "GitHubAdapter", "RefNotFoundError"]
