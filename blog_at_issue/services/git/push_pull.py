"""Clone from and push to remote (origin)."""

import logging
from pathlib import Path
from urllib.parse import quote, urlsplit

from blog_at_issue.services.git._run import _run_git


def authenticated_clone_url(server_url: str, repository: str, actor: str, token: str) -> str:
    """Build https://<actor>:<token>@<host>/<owner/repo>.git."""
    parts = urlsplit(server_url.rstrip("/"))
    host = parts.netloc or parts.path
    user = quote(actor or "x-access-token", safe="")
    return f"https://{user}:{quote(token, safe='')}@{host}/{repository}.git"


def clone_repo(
    url: str,
    target_dir: Path,
    log: logging.Logger | None = None,
) -> None:
    """Clone url into target_dir (which must not exist or be empty)."""
    target = Path(target_dir)
    target.parent.mkdir(parents=True, exist_ok=True)
    _run_git(["clone", "--quiet", url, str(target)], cwd=target.parent, log=log)
    if log:
        log.info("Cloned repository into %s", target)


def push_branch(
    branch_name: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Push the given branch to origin."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["push", "origin", branch_name], cwd=cwd, log=log)
    if log:
        log.info("Pushed branch %s to origin", branch_name)
