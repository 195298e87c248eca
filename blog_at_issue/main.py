"""blog-at-issue entry point.

Runs once per GitHub Actions event: reads the event payload, syncs the
issue body into a pull request and exits. Usage: blog-at-issue [--config PATH].
"""

import argparse
import logging
import sys
from pathlib import Path

from blog_at_issue.adapters.github import GitHubAdapter
from blog_at_issue.config import AppConfig, ConfigError, load_config
from blog_at_issue.events import read_event_file
from blog_at_issue.logging import BlogLogging
from blog_at_issue.models import SyncResult
from blog_at_issue.services.git import GitRepository, authenticated_clone_url
from blog_at_issue.services.processor import ContentProcessor
from blog_at_issue.services.sync import run


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    argv = argv if argv is not None else sys.argv[1:]
    parser = argparse.ArgumentParser(
        prog="blog-at-issue",
        description="Write a labeled issue to a file in the repository and open a pull request",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to optional YAML config file",
    )
    parser.add_argument("--event-path", type=Path, default=None, help="Event payload JSON (GITHUB_EVENT_PATH)")
    parser.add_argument("--event-name", default=None, help="Event name (GITHUB_EVENT_NAME)")
    parser.add_argument("--workspace", type=Path, default=None, help="Clone parent directory (GITHUB_WORKSPACE)")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def sync_from_config(
    config: AppConfig,
    event_path: Path | None = None,
    event_name: str | None = None,
    workspace: Path | None = None,
    log: logging.Logger | None = None,
) -> SyncResult:
    """Wire the real collaborators from config and run the sync once."""
    logger = log or logging.getLogger("blog_at_issue")
    config.validate_required()
    token = config.token_resolved or ""
    repository_name = config.github.repository or ""

    path = event_path or (Path(config.github.event_path) if config.github.event_path else None)
    if path is None:
        raise ConfigError("GITHUB_EVENT_PATH is not set")
    event = read_event_file(path, event_name or config.github.event_name, repository=repository_name)

    parent = workspace or Path(config.github.workspace)
    repo_dir = Path(parent).resolve() / (event.repo_name or repository_name.split("/")[-1])
    clone_url = authenticated_clone_url(
        config.github.server_url,
        repository_name,
        config.github.actor or "",
        token,
    )

    return run(
        event,
        config,
        code_host=GitHubAdapter(token=token, api_url=config.github.api_url),
        repository=GitRepository(
            repo_dir,
            clone_url,
            bot_name=config.bot.name,
            bot_email=config.bot.email,
            log=logging.getLogger("blog_at_issue.git"),
        ),
        processor=ContentProcessor(config.processor),
        log=logger,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point: exit 0 on success or no-op, 1 on failure."""
    args = parse_args(argv)
    config = load_config(args.config)
    BlogLogging(config.logging).setup()
    logger = logging.getLogger("blog_at_issue")

    if args.check:
        try:
            config.validate_required()
        except ConfigError as e:
            logger.error("Config error: %s", e)
            return 1
        print("Config OK:", config.github.repository, config.inputs.filepath)
        return 0

    try:
        result = sync_from_config(
            config,
            event_path=args.event_path,
            event_name=args.event_name,
            workspace=args.workspace,
            log=logger,
        )
    except Exception as e:
        logger.error("Sync failed: %s", e)
        return 1
    logger.info("Done: %s (%s)", result.outcome.value, result.reason)
    return 0


if __name__ == "__main__":
    sys.exit(main())
