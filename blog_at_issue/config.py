"""Configuration loading from YAML and environment.

Action inputs follow the GitHub Actions convention (INPUT_TOKEN,
INPUT_LABELS, INPUT_FILEPATH). Runner context comes from GITHUB_* variables.
Secrets (tokens) are taken from inputs, environment variables or files
(Docker secrets). Never put real tokens in config files committed to the
repo.
"""

import os
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_LABELS = ["blog"]


class ConfigError(ValueError):
    """Raised when a required setting is missing or invalid."""

    pass


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so properties can read env/file
_current_env: dict[str, str] = {}


def _split_labels(value: Any) -> Any:
    """Accept labels as list or as comma/newline separated string."""
    if value is None:
        return list(DEFAULT_LABELS)
    if isinstance(value, str):
        parts = [p.strip() for chunk in value.splitlines() for p in chunk.split(",")]
        labels = [p for p in parts if p]
        return labels or list(DEFAULT_LABELS)
    return value


class InputsConfig(BaseSettings):
    """Action inputs (with: token, labels, filepath)."""

    model_config = SettingsConfigDict(env_prefix="INPUT_", extra="ignore")

    token: str | None = Field(default=None, description="GitHub token used for API calls and clone")
    labels: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_LABELS), description="Trigger labels"
    )
    filepath: str | None = Field(default=None, description="Target path template, e.g. posts/{title}.md")

    @field_validator("labels", mode="before")
    @classmethod
    def _parse_labels(cls, value: Any) -> Any:
        return _split_labels(value)


class BotConfig(BaseSettings):
    """Bot identity for commits and PR lookup."""

    model_config = SettingsConfigDict(env_prefix="BOT_", extra="ignore")

    name: str = Field(default="github-actions[bot]", description="Git user.name for commits")
    email: str = Field(
        default="41898282+github-actions[bot]@users.noreply.github.com",
        description="Git user.email for commits",
    )
    pr_author: str = Field(default="app/github-actions", description="Search qualifier for PRs opened by the bot")
    pr_title_suffix: str = Field(default="by Blog@Issue", description="Appended to the commit message in PR titles")


class GitHubConfig(BaseSettings):
    """GitHub runner context and API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    repository: str | None = Field(default=None, description="owner/repo being synced")
    actor: str | None = Field(default=None, description="Login used in the authenticated clone URL")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    server_url: str = Field(default="https://github.com", description="Server URL used for clone")
    event_name: str | None = Field(default=None, description="Triggering event name (e.g. issues)")
    event_path: str | None = Field(default=None, description="Path to the event payload JSON")
    workspace: str = Field(default=".", description="Directory the repository is cloned into")


class ProcessorConfig(BaseSettings):
    """Formatter and linter commands; "{path}" is replaced by the target
    file."""

    model_config = SettingsConfigDict(env_prefix="PROCESSOR_", extra="ignore")

    format_command: list[str] = Field(
        default_factory=lambda: ["npx", "--no-install", "prettier", "--write", "{path}"],
        description="Formatter command, runs first",
    )
    lint_command: list[str] = Field(
        default_factory=lambda: ["npx", "--no-install", "textlint", "--fix", "{path}"],
        description="Linter command, runs after the formatter",
    )
    setup_command: list[str] = Field(
        default_factory=lambda: ["npm", "install", "--no-audit", "--no-fund"],
        description="Installs formatter/linter rules from the clone's package.json",
    )
    timeout: int | None = Field(default=None, ge=1, description="Per-command timeout in seconds; none by default")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    annotations: bool = Field(
        default=True,
        description="Also print warnings/errors as ::warning::/::error:: workflow commands",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    inputs: InputsConfig = Field(default_factory=InputsConfig)
    bot: BotConfig = Field(default_factory=BotConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    processor: ProcessorConfig = Field(default_factory=ProcessorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def token_resolved(self) -> str | None:
        """Resolve token from input, GITHUB_TOKEN or Docker secret file."""
        t = self.inputs.token
        if t and not t.startswith("${"):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    def validate_required(self) -> None:
        """Raise ConfigError when a required input is missing."""
        if not self.token_resolved:
            raise ConfigError("Input required and not supplied: token")
        if not self.inputs.filepath:
            raise ConfigError("Input required and not supplied: filepath")
        if not self.github.repository:
            raise ConfigError("GITHUB_REPOSITORY is not set")


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def _with_env(section: dict[str, Any], prefix: str, keys: tuple[str, ...]) -> dict[str, Any]:
    """Let environment variables override YAML values for the given keys."""
    merged = dict(section)
    for key in keys:
        env_value = _current_env.get(f"{prefix}{key.upper()}")
        if env_value:
            merged[key] = env_value
    return merged


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file (optional) and environment.

    Environment wins over YAML for action inputs and GITHUB_* runner
    context.
    """
    global _current_env

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    inputs_raw = _with_env(raw.get("inputs") or {}, "INPUT_", ("token", "labels", "filepath"))
    github_raw = _with_env(
        raw.get("github") or {},
        "GITHUB_",
        ("repository", "actor", "event_name", "event_path", "workspace"),
    )

    return AppConfig(
        inputs=InputsConfig(**inputs_raw),
        bot=BotConfig(**(raw.get("bot") or {})),
        github=GitHubConfig(**github_raw),
        processor=ProcessorConfig(**(raw.get("processor") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
