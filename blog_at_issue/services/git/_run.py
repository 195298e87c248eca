"""Internal helpers: run git commands, GitRunnerError."""

import logging
import re
import subprocess
from pathlib import Path

# user:token@ part of an authenticated https remote
_CREDENTIALS_RE = re.compile(r"(https?://)[^/@\s]+@")


class GitRunnerError(Exception):
    """Raised when a git command fails."""

    pass


def _scrub(text: str) -> str:
    """Drop credentials from clone URLs before they reach logs or errors."""
    return _CREDENTIALS_RE.sub(r"\1***@", text)


def _run_git(
    args: list[str],
    cwd: Path,
    log: logging.Logger | None = None,
    timeout: int | None = None,
) -> str:
    """Run git command and return stdout; raise GitRunnerError on non-zero
    exit."""
    cmd = ["git"] + args
    try:
        result = subprocess.run(cmd, cwd=cwd, check=True, capture_output=True, text=True, timeout=timeout)
    except subprocess.CalledProcessError as e:
        err = _scrub((e.stderr or e.stdout or "").strip())
        shown = _scrub(" ".join(args))
        if log:
            log.warning("Git %s failed: %s", shown, err)
        raise GitRunnerError(f"git {shown}: {err}") from e
    except subprocess.TimeoutExpired as e:
        raise GitRunnerError(f"git {_scrub(' '.join(args))}: timed out after {timeout}s") from e
    except FileNotFoundError as e:
        raise GitRunnerError("git not found") from e
    return result.stdout or ""
