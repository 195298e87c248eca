"""Ref name escaping and local branch operations (list, delete,
checkout)."""

import logging
import re
from pathlib import Path

from blog_at_issue.services.git._run import _run_git

# Git ref name rules (git check-ref-format): no space, control chars, ~ ^ : ? * [ \ , "..", "@{"
_FORBIDDEN_REF_CHARS_RE = re.compile(r"[\x00-\x20\x7f~^:?*\[\\]")
# "%" is escaped too so that unquoting an escaped name gives back the input
_ESCAPED_CHARS_RE = re.compile(r"[\x00-\x20\x7f~^:?*\[\\%]")
_DOT_BEFORE_DOT_RE = re.compile(r"\.(?=\.)")


def _percent(match: re.Match) -> str:
    return f"%{ord(match.group(0)):02X}"


def escape_ref_name(text: str) -> str:
    """Make text usable as (part of) a git ref name.

    Characters git rejects are percent-escaped instead of replaced, so two
    different file paths never share a branch (``posts/Hello World.md`` and
    ``posts/Hello-World.md`` give ``posts/Hello%20World.md`` and
    ``posts/Hello-World.md``). Case, dots and slashes are kept; empty path
    components are dropped.

    Args:
        text: Raw string (e.g. a relative file path).

    Returns:
        Escaped string; empty only if the input has no path component.
    """
    if not text:
        return ""
    s = _ESCAPED_CHARS_RE.sub(_percent, text)
    s = s.replace("@{", "%40{")
    parts = []
    for part in s.split("/"):
        if not part:
            continue
        if part == "@":
            part = "%40"
        part = _DOT_BEFORE_DOT_RE.sub("%2E", part)
        if part.startswith("."):
            part = "%2E" + part[1:]
        if part.endswith("."):
            part = part[:-1] + "%2E"
        if part.endswith(".lock"):
            part = part[:-5] + "%2Elock"
        parts.append(part)
    return "/".join(parts)


def is_valid_ref_name(name: str) -> bool:
    """Check a branch name against the git ref format rules."""
    if not name or name == "@":
        return False
    if _FORBIDDEN_REF_CHARS_RE.search(name) or ".." in name or "@{" in name:
        return False
    if name.endswith(".") or name.startswith("/") or name.endswith("/"):
        return False
    for part in name.split("/"):
        if not part or part.startswith(".") or part.endswith(".lock"):
            return False
    return True


def list_local_branches(
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> list[str]:
    """Return names of local branches."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    out = _run_git(["branch", "--list", "--format=%(refname:short)"], cwd=cwd, log=log)
    return [line.strip() for line in out.splitlines() if line.strip()]


def delete_local_branch(
    branch_name: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Force-delete a local branch (git branch -D)."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["branch", "-D", branch_name], cwd=cwd, log=log)
    if log:
        log.info("Deleted local branch %s", branch_name)


def checkout_new_branch(
    branch_name: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Create branch from the current HEAD and switch to it."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["checkout", "-b", branch_name], cwd=cwd, log=log)
    if log:
        log.info("Created and checked out branch %s", branch_name)


def fetch_and_checkout_branch(
    branch_name: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Fetch branch from origin and check it out tracking the remote tip."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["fetch", "origin", branch_name], cwd=cwd, log=log)
    _run_git(["checkout", "-B", branch_name, f"origin/{branch_name}"], cwd=cwd, log=log)
    if log:
        log.info("Checked out branch %s", branch_name)
