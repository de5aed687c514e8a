"""Decode GitHub issue, pull request and comment events and dispatch them to a bot."""

from baipiao_bot.core.dispatcher import Dispatcher
from baipiao_bot.core.errors import (
    DecodeError,
    DecodeErrorKind,
    MalformedFieldError,
    RepositoryMismatchError,
    UnknownActionError,
    UnknownEventFamilyError,
)
from baipiao_bot.core.types import (
    BodyUpdate,
    Bot,
    CommentCreatedEvent,
    CommentTarget,
    CommentUpdatedEvent,
    DecodedEvent,
    FieldUpdate,
    IssueCreatedEvent,
    IssueReopenedEvent,
    IssueTarget,
    IssueUpdatedEvent,
    PullRequestCreatedEvent,
    PullRequestTarget,
    PullRequestUpdatedEvent,
    Repository,
    RunningInfo,
    TitleUpdate,
)

__all__ = [
    "BodyUpdate",
    "Bot",
    "CommentCreatedEvent",
    "CommentTarget",
    "CommentUpdatedEvent",
    "DecodeError",
    "DecodeErrorKind",
    "DecodedEvent",
    "Dispatcher",
    "FieldUpdate",
    "IssueCreatedEvent",
    "IssueReopenedEvent",
    "IssueTarget",
    "IssueUpdatedEvent",
    "MalformedFieldError",
    "PullRequestCreatedEvent",
    "PullRequestTarget",
    "PullRequestUpdatedEvent",
    "Repository",
    "RepositoryMismatchError",
    "RunningInfo",
    "TitleUpdate",
    "UnknownActionError",
    "UnknownEventFamilyError",
]
