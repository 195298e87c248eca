"""Tests for blog_at_issue.config (YAML + env loading, inputs, secrets)."""

from pathlib import Path

import pytest

from blog_at_issue.config import AppConfig, ConfigError, InputsConfig, load_config

_ENV_KEYS = (
    "INPUT_TOKEN",
    "INPUT_LABELS",
    "INPUT_FILEPATH",
    "GITHUB_TOKEN",
    "GITHUB_TOKEN_FILE",
    "GITHUB_REPOSITORY",
    "GITHUB_ACTOR",
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "GITHUB_WORKSPACE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestInputs:
    """Action inputs: labels parsing and defaults."""

    def test_labels_default_to_blog(self) -> None:
        assert InputsConfig().labels == ["blog"]

    def test_labels_from_comma_separated_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_LABELS", "blog, post ,news")
        assert InputsConfig().labels == ["blog", "post", "news"]

    def test_labels_from_newline_separated_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_LABELS", "blog\npost\n")
        assert InputsConfig().labels == ["blog", "post"]

    def test_empty_labels_input_falls_back_to_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Actions passes unset inputs as empty strings."""
        monkeypatch.setenv("INPUT_LABELS", "")
        assert InputsConfig().labels == ["blog"]

    def test_labels_as_list(self) -> None:
        assert InputsConfig(labels=["a", "b"]).labels == ["a", "b"]


class TestLoadConfig:
    """load_config: YAML file, env overrides, missing file."""

    def test_missing_file_returns_env_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_FILEPATH", "posts/{title}.md")
        monkeypatch.setenv("GITHUB_REPOSITORY", "owner/blog")
        config = load_config(tmp_path / "missing.yaml")
        assert isinstance(config, AppConfig)
        assert config.inputs.filepath == "posts/{title}.md"
        assert config.github.repository == "owner/blog"
        assert config.bot.pr_author == "app/github-actions"

    def test_yaml_values_loaded(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "inputs:\n"
            "  filepath: content/{title}.md\n"
            "  labels: [blog, post]\n"
            "bot:\n"
            "  name: Blog Bot\n"
            "processor:\n"
            "  format_command: [prettier, --write, '{path}']\n"
            "  timeout: 120\n"
            "logging:\n"
            "  level: DEBUG\n"
        )
        config = load_config(path)
        assert config.inputs.filepath == "content/{title}.md"
        assert config.inputs.labels == ["blog", "post"]
        assert config.bot.name == "Blog Bot"
        assert config.processor.format_command == ["prettier", "--write", "{path}"]
        assert config.processor.timeout == 120
        assert config.logging.level == "DEBUG"

    def test_env_overrides_yaml_inputs(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("inputs:\n  filepath: yaml/{title}.md\n")
        monkeypatch.setenv("INPUT_FILEPATH", "env/{title}.md")
        monkeypatch.setenv("GITHUB_REPOSITORY", "owner/from-env")
        config = load_config(path)
        assert config.inputs.filepath == "env/{title}.md"
        assert config.github.repository == "owner/from-env"

    def test_env_substitution_in_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("inputs:\n  token: ${MY_TOKEN}\n")
        monkeypatch.setenv("MY_TOKEN", "secret-value")
        config = load_config(path)
        assert config.token_resolved == "secret-value"


class TestTokenAndValidation:
    """token_resolved fallbacks and validate_required."""

    def test_token_from_github_token_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        config = load_config(tmp_path / "missing.yaml")
        assert config.token_resolved == "env-token"

    def test_token_from_secret_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        secret = tmp_path / "token"
        secret.write_text("file-token\n")
        monkeypatch.setenv("GITHUB_TOKEN_FILE", str(secret))
        config = load_config(tmp_path / "missing.yaml")
        assert config.token_resolved == "file-token"

    def test_input_token_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_TOKEN", "input-token")
        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        config = load_config(tmp_path / "missing.yaml")
        assert config.token_resolved == "input-token"

    def test_validate_required_missing_token(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_FILEPATH", "posts/{title}.md")
        monkeypatch.setenv("GITHUB_REPOSITORY", "owner/blog")
        config = load_config(tmp_path / "missing.yaml")
        with pytest.raises(ConfigError, match="token"):
            config.validate_required()

    def test_validate_required_missing_filepath(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_TOKEN", "t")
        monkeypatch.setenv("GITHUB_REPOSITORY", "owner/blog")
        config = load_config(tmp_path / "missing.yaml")
        with pytest.raises(ConfigError, match="filepath"):
            config.validate_required()

    def test_validate_required_ok(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUT_TOKEN", "t")
        monkeypatch.setenv("INPUT_FILEPATH", "posts/{title}.md")
        monkeypatch.setenv("GITHUB_REPOSITORY", "owner/blog")
        load_config(tmp_path / "missing.yaml").validate_required()
