"""EchoBot: logs every event it receives."""

from __future__ import annotations

import logging

from baipiao_bot.core.types import (
    Bot,
    CommentCreatedEvent,
    CommentUpdatedEvent,
    IssueCreatedEvent,
    IssueReopenedEvent,
    IssueUpdatedEvent,
    PullRequestCreatedEvent,
    PullRequestUpdatedEvent,
    Repository,
    RunningInfo,
)

logger = logging.getLogger(__name__)


class EchoBot(Bot):
    """Logs each hook invocation at INFO. Useful for inspecting live payloads."""

    def _echo(
        self, hook: str, repo: Repository, running_info: RunningInfo | None, event: object
    ) -> None:
        if running_info is not None:
            logger.info(
                "%s: %s (run %d #%d), %r",
                hook,
                repo.full_name,
                running_info.run_id,
                running_info.run_number,
                event,
            )
        else:
            logger.info("%s: %s, %r", hook, repo.full_name, event)

    async def on_issue_created(
        self, repo: Repository, running_info: RunningInfo | None, event: IssueCreatedEvent
    ) -> None:
        self._echo("on_issue_created", repo, running_info, event)

    async def on_issue_updated(
        self, repo: Repository, running_info: RunningInfo | None, event: IssueUpdatedEvent
    ) -> None:
        self._echo("on_issue_updated", repo, running_info, event)

    async def on_issue_closed(
        self, repo: Repository, running_info: RunningInfo | None, issue_id: int
    ) -> None:
        self._echo("on_issue_closed", repo, running_info, issue_id)

    async def on_issue_reopened(
        self, repo: Repository, running_info: RunningInfo | None, event: IssueReopenedEvent
    ) -> None:
        self._echo("on_issue_reopened", repo, running_info, event)

    async def on_pull_request_created(
        self,
        repo: Repository,
        running_info: RunningInfo | None,
        event: PullRequestCreatedEvent,
    ) -> None:
        self._echo("on_pull_request_created", repo, running_info, event)

    async def on_pull_request_updated(
        self,
        repo: Repository,
        running_info: RunningInfo | None,
        event: PullRequestUpdatedEvent,
    ) -> None:
        self._echo("on_pull_request_updated", repo, running_info, event)

    async def on_pull_request_closed(
        self, repo: Repository, running_info: RunningInfo | None, pull_request_id: int
    ) -> None:
        self._echo("on_pull_request_closed", repo, running_info, pull_request_id)

    async def on_comment_created(
        self, repo: Repository, running_info: RunningInfo | None, event: CommentCreatedEvent
    ) -> None:
        self._echo("on_comment_created", repo, running_info, event)

    async def on_comment_updated(
        self, repo: Repository, running_info: RunningInfo | None, event: CommentUpdatedEvent
    ) -> None:
        self._echo("on_comment_updated", repo, running_info, event)

    async def on_comment_deleted(
        self, repo: Repository, running_info: RunningInfo | None, comment_id: int
    ) -> None:
        self._echo("on_comment_deleted", repo, running_info, comment_id)
