"""Working copy bound to one directory and one commit identity.

Groups the git helpers behind a single object so the sync procedure can
take it as a dependency (and tests can pass a fake).
"""

import logging
from pathlib import Path

from blog_at_issue.models import WorkingTreeStatus
from blog_at_issue.services.git.branches import (
    checkout_new_branch,
    delete_local_branch,
    fetch_and_checkout_branch,
    list_local_branches,
)
from blog_at_issue.services.git.commits import add_path, commit, get_status
from blog_at_issue.services.git.push_pull import clone_repo, push_branch


class GitRepository:
    """Local clone of the target repository."""

    def __init__(
        self,
        repo_dir: Path,
        clone_url: str,
        bot_name: str,
        bot_email: str,
        log: logging.Logger | None = None,
    ) -> None:
        self.repo_dir = Path(repo_dir)
        self._clone_url = clone_url
        self._bot_name = bot_name
        self._bot_email = bot_email
        self._log = log or logging.getLogger("blog_at_issue.git")

    def clone(self) -> None:
        clone_repo(self._clone_url, self.repo_dir, log=self._log)

    def local_branches(self) -> list[str]:
        return list_local_branches(self.repo_dir, log=self._log)

    def delete_local_branch(self, branch_name: str) -> None:
        delete_local_branch(branch_name, self.repo_dir, log=self._log)

    def checkout_new_branch(self, branch_name: str) -> None:
        checkout_new_branch(branch_name, self.repo_dir, log=self._log)

    def checkout_remote_branch(self, branch_name: str) -> None:
        fetch_and_checkout_branch(branch_name, self.repo_dir, log=self._log)

    def add(self, path: Path) -> None:
        add_path(path, self.repo_dir, log=self._log)

    def status(self, path: Path | None = None) -> WorkingTreeStatus:
        return get_status(self.repo_dir, log=self._log, paths=[path] if path is not None else None)

    def commit(self, message: str) -> None:
        commit(message, self._bot_name, self._bot_email, self.repo_dir, log=self._log)

    def push(self, branch_name: str) -> None:
        push_branch(branch_name, self.repo_dir, log=self._log)
