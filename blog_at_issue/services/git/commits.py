"""Stage files, read working tree status and commit with bot identity."""

import logging
from pathlib import Path

from blog_at_issue.models import WorkingTreeStatus
from blog_at_issue.services.git._run import _run_git


def add_path(
    path: Path,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Stage a single file."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["add", "--", str(path)], cwd=cwd, log=log)


def parse_porcelain_status(output: str) -> WorkingTreeStatus:
    """Parse ``git status --porcelain`` (v1) into modified and created paths.

    Index or worktree "M" counts as modified; index "A" counts as created.
    Renames, deletions and untracked files are ignored.
    """
    modified: list[str] = []
    created: list[str] = []
    for line in output.splitlines():
        if len(line) < 4:
            continue
        index, worktree, path = line[0], line[1], line[3:]
        if path.startswith('"') and path.endswith('"'):
            path = path[1:-1]
        if index == "A":
            created.append(path)
        elif index == "M" or worktree == "M":
            modified.append(path)
    return WorkingTreeStatus(modified=modified, created=created)


def get_status(
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
    paths: list[Path] | None = None,
) -> WorkingTreeStatus:
    """Return modified and created paths of the working tree, optionally
    limited to paths."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    args = ["status", "--porcelain"]
    if paths:
        args += ["--"] + [str(p) for p in paths]
    out = _run_git(args, cwd=cwd, log=log)
    return parse_porcelain_status(out)


def commit(
    commit_message: str,
    bot_name: str,
    bot_email: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Commit staged changes with bot identity.

    Args:
        commit_message: Commit message.
        bot_name: Git user.name for the commit.
        bot_email: Git user.email for the commit.
        repo_dir: Repository directory; uses cwd if None.
        log: Optional logger.
    """
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(
        [
            "-c",
            f"user.name={bot_name}",
            "-c",
            f"user.email={bot_email}",
            "commit",
            "-m",
            commit_message,
        ],
        cwd=cwd,
        log=log,
    )
    if log:
        log.info("Committed: %s", commit_message)
