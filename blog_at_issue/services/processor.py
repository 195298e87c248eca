"""Content processor: format then lint the target file in place.

Commands come from ProcessorConfig; every "{path}" argument is replaced by
the target file. Failures raise ProcessorError and are not retried, so an
unformatted or unlintable post never reaches a commit.
"""

import logging
import subprocess
from pathlib import Path
from typing import List

from blog_at_issue.config import ProcessorConfig


class ProcessorError(Exception):
    """Raised when setup, formatting or linting fails."""

    pass


class ContentProcessor:
    """Run the configured formatter and linter over a file."""

    def __init__(self, config: ProcessorConfig, log: logging.Logger | None = None) -> None:
        self._config = config
        self._log = log or logging.getLogger("blog_at_issue.processor")

    def _run(self, step: str, command: List[str], cwd: Path, path: Path | None = None) -> None:
        if not command:
            self._log.debug("No %s command configured, skipping", step)
            return
        cmd = [arg.replace("{path}", str(path)) if path is not None else arg for arg in command]
        self._log.info("Running %s: %s", step, " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                timeout=self._config.timeout,
                check=False,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise ProcessorError(f"{step}: command not found: {cmd[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise ProcessorError(f"{step}: timed out after {self._config.timeout}s") from e
        if result.returncode != 0:
            out = ((result.stdout or "") + (result.stderr or "")).strip()
            raise ProcessorError(f"{step} failed (exit {result.returncode}): {out}")
        self._log.debug("%s output: %s", step, (result.stdout or "").strip())

    def prepare(self, repo_dir: Path) -> None:
        """Install the clone's formatter/linter rules when it ships a
        package.json."""
        repo_dir = Path(repo_dir)
        if not (repo_dir / "package.json").is_file():
            self._log.debug("No package.json in %s, skipping setup", repo_dir)
            return
        self._run("setup", self._config.setup_command, cwd=repo_dir)

    def format(self, path: Path, repo_dir: Path) -> None:
        self._run("format", self._config.format_command, cwd=Path(repo_dir), path=Path(path))

    def lint(self, path: Path, repo_dir: Path) -> None:
        self._run("lint", self._config.lint_command, cwd=Path(repo_dir), path=Path(path))

    def process(self, path: Path, repo_dir: Path) -> None:
        """Format, then lint (lint rules may depend on formatted output)."""
        self.format(path, repo_dir)
        self.lint(path, repo_dir)
