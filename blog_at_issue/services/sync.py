"""
Sync one issue into a pull request: gate, clone, reconcile branch, write and
process the file, then commit, push and open the PR when none exists yet.

Runs once per event, sequentially. Expected no-ops (rejected events, no
content change) return a SyncResult; every other failure propagates to the
caller and aborts the remaining steps. Re-running after a failure is safe:
stale branches are cleaned up when no PR tracks the file.
"""

import logging

from blog_at_issue.adapters.base import CodeHostAdapter, RefNotFoundError
from blog_at_issue.config import AppConfig
from blog_at_issue.models import IssueEvent, SyncOutcome, SyncResult, TargetFile
from blog_at_issue.services.gate import check_event
from blog_at_issue.services.git.repository import GitRepository
from blog_at_issue.services.processor import ContentProcessor
from blog_at_issue.services.target import resolve_target, sync_branch_name

CONGRATS_COMMENT = "Congrats!✨ A pull request: #{number} has been created!"
PR_BODY = "Generated from #{number}."


def _remove_stale_branch(
    code_host: CodeHostAdapter,
    repository: GitRepository,
    repo: str,
    branch: str,
    logger: logging.Logger,
) -> None:
    """Delete leftovers of an aborted run: local branch and remote ref."""
    if branch in repository.local_branches():
        repository.delete_local_branch(branch)
    try:
        code_host.delete_ref(repo, f"heads/{branch}")
        logger.info("Deleted stale remote branch %s", branch)
    except RefNotFoundError:
        logger.debug("No remote branch %s to delete", branch)


def run(
    event: IssueEvent,
    config: AppConfig,
    code_host: CodeHostAdapter,
    repository: GitRepository,
    processor: ContentProcessor,
    log: logging.Logger | None = None,
) -> SyncResult:
    """
    Run the sync procedure for one event.

    1. Gate the event; on rejection log the reason and stop (no side effects).
    2. Clone, resolve target file and sync branch from the title.
    3. Look for an open PR by the bot for this file. If found, check out its
       branch; otherwise delete stale branch remnants and start a new branch.
    4. Write the issue body, format and lint it, stage it.
    5. Stop if nothing changed; else commit, push, and (new branch only)
       open the PR and comment on the issue.
    """
    logger = log or logging.getLogger("blog_at_issue.sync")

    reason = check_event(event, config.inputs.labels)
    if reason is not None:
        logger.info("exit: %s", reason.value)
        return SyncResult(outcome=SyncOutcome.SKIPPED, reason=reason.value)

    repository.clone()
    repo_dir = repository.repo_dir
    filename, path = resolve_target(repo_dir, config.inputs.filepath or "", event.title)
    branch = sync_branch_name(filename)
    repo = event.repo

    existing_pr = code_host.find_open_pr(repo, config.bot.pr_author, filename)
    if existing_pr is not None:
        logger.info("Open PR #%s tracks %s, updating branch %s", existing_pr.number, filename, branch)
        repository.checkout_remote_branch(branch)
    else:
        _remove_stale_branch(code_host, repository, repo, branch, logger)
        repository.checkout_new_branch(branch)

    processor.prepare(repo_dir)

    target = TargetFile(path, filename, event.body or "", existed_before=path.is_file())
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(target.content, encoding="utf-8", newline="")
    processor.process(path, repo_dir)
    repository.add(path)

    status = repository.status(path)
    if not status.has_changes:
        logger.info("exit: has not any changes")
        return SyncResult(
            outcome=SyncOutcome.UNCHANGED,
            reason="no changes",
            filename=filename,
            branch=branch,
            pr_number=existing_pr.number if existing_pr is not None else None,
        )

    message = f"{target.verb} {filename}"
    repository.commit(message)
    repository.push(branch)

    if existing_pr is not None:
        logger.info("Pushed %s to existing PR #%s", branch, existing_pr.number)
        return SyncResult(
            outcome=SyncOutcome.UPDATED,
            reason=message,
            filename=filename,
            branch=branch,
            pr_number=existing_pr.number,
        )

    base = event.default_branch or code_host.get_default_branch(repo)
    title = f"{message} {config.bot.pr_title_suffix}".strip()
    pr = code_host.create_pr(
        repo,
        title=title,
        body=PR_BODY.format(number=event.issue_number),
        head=branch,
        base=base,
    )
    logger.info("Created PR #%s (%s -> %s)", pr.number, branch, base)
    code_host.create_comment(repo, event.issue_number, CONGRATS_COMMENT.format(number=pr.number))
    return SyncResult(
        outcome=SyncOutcome.CREATED,
        reason=message,
        filename=filename,
        branch=branch,
        pr_number=pr.number,
    )
