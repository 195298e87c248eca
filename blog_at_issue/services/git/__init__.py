"""Git operations: clone, branches, status, commits, push."""

from blog_at_issue.services.git._run import GitRunnerError
from blog_at_issue.services.git.branches import (
    checkout_new_branch,
    delete_local_branch,
    escape_ref_name,
    fetch_and_checkout_branch,
    is_valid_ref_name,
    list_local_branches,
)
from blog_at_issue.services.git.commits import add_path, commit, get_status, parse_porcelain_status
from blog_at_issue.services.git.push_pull import authenticated_clone_url, clone_repo, push_branch
from blog_at_issue.services.git.repository import GitRepository

__all__ = [
    "GitRepository",
    "GitRunnerError",
    "add_path",
    "authenticated_clone_url",
    "checkout_new_branch",
    "clone_repo",
    "commit",
    "delete_local_branch",
    "escape_ref_name",
    "fetch_and_checkout_branch",
    "get_status",
    "is_valid_ref_name",
    "list_local_branches",
    "parse_porcelain_status",
    "push_branch",
]
