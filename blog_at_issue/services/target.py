"""Resolve the target file and sync branch from the issue title.

Both are pure functions of the title so that re-edits of the same issue
land on the same file, branch and pull request.
"""

import os
from pathlib import Path

from blog_at_issue.services.git.branches import escape_ref_name

BRANCH_PREFIX = "blog-at-issue"
TITLE_PLACEHOLDER = "{title}"


class TargetPathError(ValueError):
    """Raised when the filepath template cannot produce a usable path."""

    pass


def render_filepath(template: str, title: str) -> str:
    """Substitute every {title} placeholder; other text is kept as is."""
    return template.replace(TITLE_PLACEHOLDER, title)


def resolve_target(repo_dir: Path, template: str, title: str) -> tuple[str, Path]:
    """Return (filename relative to the repo, absolute path).

    Raises:
        TargetPathError: template lacks {title}, title is blank, or the
            path would leave the working tree.
    """
    if TITLE_PLACEHOLDER not in template:
        raise TargetPathError(f"filepath template has no {TITLE_PLACEHOLDER} placeholder: {template!r}")
    if not title.strip():
        raise TargetPathError("issue title is empty")
    filename = render_filepath(template, title)
    root = Path(repo_dir).resolve()
    path = Path(os.path.normpath(root / filename))
    if path == root or root not in path.parents:
        raise TargetPathError(f"filepath {filename!r} resolves outside the repository")
    return filename, path


def sync_branch_name(filename: str) -> str:
    """Branch dedicated to one target file: blog-at-issue/<filename>."""
    slug = escape_ref_name(filename)
    if not slug:
        raise TargetPathError(f"cannot derive a branch name from {filename!r}")
    return f"{BRANCH_PREFIX}/{slug}"
