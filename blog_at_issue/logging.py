"""Log setup for a GitHub Actions step.

Records go to stderr with the configured level and format. When
annotations are enabled, WARNING and ERROR records are also written to
stdout as workflow commands (``::warning::`` / ``::error::``) so the runner
shows them on the run summary and marks the failing step.
"""

import logging
import sys

from blog_at_issue.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Workflow command data escaping used by @actions/core
_COMMAND_ESCAPES = (("%", "%25"), ("\r", "%0D"), ("\n", "%0A"))


def _resolve_level(level: str) -> int:
    """Unknown names fall back to INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


def escape_command_data(message: str) -> str:
    for raw, escaped in _COMMAND_ESCAPES:
        message = message.replace(raw, escaped)
    return message


class ActionsAnnotationHandler(logging.Handler):
    """Write WARNING/ERROR records as GitHub Actions workflow commands."""

    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)

    def emit(self, record: logging.LogRecord) -> None:
        command = "error" if record.levelno >= logging.ERROR else "warning"
        try:
            # Looked up per record: stdout may be swapped after setup
            sys.stdout.write(f"::{command}::{escape_command_data(record.getMessage())}\n")
            sys.stdout.flush()
        except Exception:
            self.handleError(record)


class BlogLogging:
    """Configures the root logger once per run from LoggingConfig."""

    def __init__(self, config: LoggingConfig) -> None:
        self._level = _resolve_level(config.level)
        self._format = config.format or DEFAULT_FORMAT
        self._annotations = config.annotations

    def setup(self) -> None:
        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        if self._annotations:
            handlers.append(ActionsAnnotationHandler())
        logging.basicConfig(level=self._level, format=self._format, handlers=handlers, force=True)
