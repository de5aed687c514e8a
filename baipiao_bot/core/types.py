from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Union


@dataclass(frozen=True)
class Repository:
    """A forge repository, identified by owner login and repository name."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class RunningInfo:
    """The CI run that carried the event."""

    run_id: int
    run_number: int


@dataclass(frozen=True)
class TitleUpdate:
    from_: str
    to: str

    field: ClassVar[Literal["title"]] = "title"


@dataclass(frozen=True)
class BodyUpdate:
    from_: str
    to: str

    field: ClassVar[Literal["body"]] = "body"


# Exactly one changed field per update event
FieldUpdate = Union[TitleUpdate, BodyUpdate]


@dataclass(frozen=True)
class IssueTarget:
    id: int


@dataclass(frozen=True)
class PullRequestTarget:
    id: int


# What a comment was posted on. Both variants expose `id` (the issue/PR number).
CommentTarget = Union[IssueTarget, PullRequestTarget]


@dataclass(frozen=True)
class IssueCreatedEvent:
    id: int  # issue number
    title: str
    body: str
    user: str  # author login


@dataclass(frozen=True)
class IssueUpdatedEvent:
    id: int
    updated_part: FieldUpdate
    user: str


@dataclass(frozen=True)
class IssueReopenedEvent:
    id: int
    title: str
    body: str
    user: str


@dataclass(frozen=True)
class PullRequestCreatedEvent:
    """A newly opened merge proposal from `from_repo`:`from_ref` into `to_ref`."""

    id: int
    title: str
    body: str
    user: str
    from_repo: Repository
    from_ref: str
    to_ref: str


@dataclass(frozen=True)
class PullRequestUpdatedEvent:
    id: int
    updated_part: FieldUpdate
    user: str


@dataclass(frozen=True)
class CommentCreatedEvent:
    id: int  # comment id
    user: str
    target: CommentTarget
    body: str


@dataclass(frozen=True)
class CommentUpdatedEvent:
    id: int
    user: str
    target: CommentTarget
    from_: str
    to: str


HookName = Literal[
    "on_issue_created",
    "on_issue_updated",
    "on_issue_closed",
    "on_issue_reopened",
    "on_pull_request_created",
    "on_pull_request_updated",
    "on_pull_request_closed",
    "on_comment_created",
    "on_comment_updated",
    "on_comment_deleted",
]

# Closed and deleted events carry only the bare id
Event = Union[
    IssueCreatedEvent,
    IssueUpdatedEvent,
    IssueReopenedEvent,
    PullRequestCreatedEvent,
    PullRequestUpdatedEvent,
    CommentCreatedEvent,
    CommentUpdatedEvent,
    int,
]


@dataclass(frozen=True)
class DecodedEvent:
    """A fully validated payload, ready to be handed to a bot hook."""

    hook: HookName
    repository: Repository
    running_info: RunningInfo | None
    event: Event


class Bot:
    """Callback interface driven by the Dispatcher.

    Every hook is a no-op by default, so a bot overrides only the events it
    cares about. Each hook receives the repository, the CI run metadata (None
    when the envelope carries none) and the decoded event or bare id. Hooks may
    do arbitrary async work; the dispatcher awaits them to completion.
    """

    async def on_issue_created(
        self, repo: Repository, running_info: RunningInfo | None, event: IssueCreatedEvent
    ) -> None:
        return None

    async def on_issue_updated(
        self, repo: Repository, running_info: RunningInfo | None, event: IssueUpdatedEvent
    ) -> None:
        return None

    async def on_issue_closed(
        self, repo: Repository, running_info: RunningInfo | None, issue_id: int
    ) -> None:
        return None

    async def on_issue_reopened(
        self, repo: Repository, running_info: RunningInfo | None, event: IssueReopenedEvent
    ) -> None:
        return None

    async def on_pull_request_created(
        self,
        repo: Repository,
        running_info: RunningInfo | None,
        event: PullRequestCreatedEvent,
    ) -> None:
        return None

    async def on_pull_request_updated(
        self,
        repo: Repository,
        running_info: RunningInfo | None,
        event: PullRequestUpdatedEvent,
    ) -> None:
        return None

    async def on_pull_request_closed(
        self, repo: Repository, running_info: RunningInfo | None, pull_request_id: int
    ) -> None:
        return None

    async def on_comment_created(
        self, repo: Repository, running_info: RunningInfo | None, event: CommentCreatedEvent
    ) -> None:
        return None

    async def on_comment_updated(
        self, repo: Repository, running_info: RunningInfo | None, event: CommentUpdatedEvent
    ) -> None:
        return None

    async def on_comment_deleted(
        self, repo: Repository, running_info: RunningInfo | None, comment_id: int
    ) -> None:
        return None
