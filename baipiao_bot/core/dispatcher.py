"""Classifies GitHub Actions event envelopes and routes them to Bot hooks.

An envelope looks like::

    {
        "event_name": "issue_comment",
        "repository": "acme/widgets",
        "run_id": "1234", "run_number": "7",   # optional
        "head_ref": "...", "base_ref": "...",  # pull_request opened only
        "event": { ...GitHub webhook payload... }
    }

Decoding happens entirely before any hook runs, so a malformed payload never
causes a partial invocation.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import StrictStr, TypeAdapter, ValidationError

from baipiao_bot.core.errors import (
    DecodeError,
    MalformedFieldError,
    RepositoryMismatchError,
    UnknownActionError,
    UnknownEventFamilyError,
)
from baipiao_bot.core.types import (
    Bot,
    BodyUpdate,
    CommentCreatedEvent,
    CommentTarget,
    CommentUpdatedEvent,
    DecodedEvent,
    Event,
    FieldUpdate,
    HookName,
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
from baipiao_bot.services.github.models import (
    DecimalString,
    FieldChange,
    GitHubComment,
    GitHubCommentRef,
    GitHubIssue,
    GitHubIssueAuthor,
    GitHubIssueBody,
    GitHubIssueRef,
    GitHubIssueTitle,
    GitHubPullRequest,
    GitHubRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

EVENT_FAMILIES = ("issues", "pull_request", "issue_comment")


class _Missing:
    pass


_MISSING = _Missing()


@functools.lru_cache(maxsize=None)
def _adapter(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


def _lookup(payload: Any, *path: str) -> Any:
    """Walk `path` through nested objects, returning _MISSING if any step is absent."""
    node = payload
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return _MISSING
        node = node[key]
    return node


def _has(payload: Any, *path: str) -> bool:
    return _lookup(payload, *path) is not _MISSING


def _load(schema: type[T] | Any, payload: Any, *path: str) -> T:
    """Validate the value at `path` against `schema`.

    Raises MalformedFieldError naming the full dotted path of the first
    offending field.
    """
    value = _lookup(payload, *path)
    if value is _MISSING:
        raise MalformedFieldError(".".join(path), "missing")
    try:
        return _adapter(schema).validate_python(value)
    except ValidationError as exc:
        error = exc.errors()[0]
        loc = [*path, *(str(part) for part in error["loc"])]
        raise MalformedFieldError(".".join(loc), error["msg"]) from exc


def _action(payload: Any) -> str:
    action = _lookup(payload, "event", "action")
    if action is _MISSING or not isinstance(action, str):
        raise MalformedFieldError("event.action", "missing or not a string")
    return action


class Dispatcher:
    """Decodes one envelope per call and invokes exactly one hook on the bot.

    The dispatcher keeps no state between calls and can be shared by
    concurrent dispatches.
    """

    def __init__(self, bot: Bot, *, require_running_info: bool = False) -> None:
        self._bot = bot
        self._require_running_info = require_running_info

    @property
    def bot(self) -> Bot:
        return self._bot

    async def dispatch_event(self, payload: Any) -> DecodedEvent:
        """Decode `payload` and await the matching bot hook.

        Raises DecodeError (before any hook runs) if the payload is not a
        recognised, well-formed event. Exceptions raised by the hook propagate
        unchanged.
        """
        decoded = self.decode_event(payload)
        hook = getattr(self._bot, decoded.hook)
        await hook(decoded.repository, decoded.running_info, decoded.event)
        return decoded

    def decode_event(self, payload: Any) -> DecodedEvent:
        """Classify and validate `payload` without invoking the bot."""
        try:
            return self._decode(payload)
        except DecodeError as exc:
            logger.warning("Rejected event payload (%s): %s", exc.kind.value, exc)
            raise

    def _decode(self, payload: Any) -> DecodedEvent:
        if not isinstance(payload, Mapping):
            raise MalformedFieldError("<root>", "payload is not a JSON object")

        event_name = payload.get("event_name")
        if not isinstance(event_name, str) or event_name not in EVENT_FAMILIES:
            raise UnknownEventFamilyError(event_name)

        if not isinstance(payload.get("event"), Mapping):
            raise MalformedFieldError("event", "missing or not an object")

        # Issue-shaped shadows of pull requests arrive as "issues" events
        if event_name == "issues" and _has(payload, "event", "issue", "pull_request"):
            logger.debug("issues event refers to a pull request, routing as pull_request")
            family = "pull_request"
        else:
            family = event_name

        if family == "issues":
            hook, event = self._decode_issues(payload)
        elif family == "pull_request":
            hook, event = self._decode_pull_request(payload)
        else:
            hook, event = self._decode_issue_comment(payload)

        decoded = DecodedEvent(
            hook=hook,
            repository=self._extract_repository(payload),
            running_info=self._extract_running_info(payload),
            event=event,
        )
        logger.debug(
            "Decoded %s event for %s -> %s",
            event_name,
            decoded.repository.full_name,
            decoded.hook,
        )
        return decoded

    def _decode_issues(self, payload: Any) -> tuple[HookName, Event]:
        action = _action(payload)

        if action == "opened":
            issue = _load(GitHubIssue, payload, "event", "issue")
            return "on_issue_created", IssueCreatedEvent(
                id=issue.number, title=issue.title, body=issue.body, user=issue.user.login
            )

        if action == "closed":
            return "on_issue_closed", _load(GitHubIssueRef, payload, "event", "issue").number

        # GitHub itself calls this action "edited"
        if action in ("updated", "edited"):
            author = _load(GitHubIssueAuthor, payload, "event", "issue")
            return "on_issue_updated", IssueUpdatedEvent(
                id=author.number,
                updated_part=self._decode_field_update(payload, "issue"),
                user=author.user.login,
            )

        if action == "reopened":
            issue = _load(GitHubIssue, payload, "event", "issue")
            return "on_issue_reopened", IssueReopenedEvent(
                id=issue.number, title=issue.title, body=issue.body, user=issue.user.login
            )

        raise UnknownActionError("issues", action)

    def _decode_pull_request(self, payload: Any) -> tuple[HookName, Event]:
        action = _action(payload)

        if action == "opened":
            pr = _load(GitHubPullRequest, payload, "event", "pull_request")
            return "on_pull_request_created", PullRequestCreatedEvent(
                id=pr.number,
                title=pr.title,
                body=pr.body,
                user=pr.user.login,
                from_repo=Repository(owner=pr.head.user.login, name=pr.head.repo.name),
                from_ref=_load(StrictStr, payload, "head_ref"),
                to_ref=_load(StrictStr, payload, "base_ref"),
            )

        if action == "closed":
            # Prefer the issue shadow's number; plain pull_request deliveries have none
            if _has(payload, "event", "issue"):
                pr_id = _load(GitHubIssueRef, payload, "event", "issue").number
            else:
                pr_id = _load(GitHubIssueRef, payload, "event", "pull_request").number
            return "on_pull_request_closed", pr_id

        if action == "edited":
            # Id and author come from the issue shadow when there is one, as for closed
            subject = "issue" if _has(payload, "event", "issue") else "pull_request"
            author = _load(GitHubIssueAuthor, payload, "event", subject)
            return "on_pull_request_updated", PullRequestUpdatedEvent(
                id=author.number,
                updated_part=self._decode_field_update(payload, "pull_request"),
                user=author.user.login,
            )

        raise UnknownActionError("pull_request", action)

    def _decode_issue_comment(self, payload: Any) -> tuple[HookName, Event]:
        target = self._resolve_comment_target(payload)
        action = _action(payload)

        if action == "created":
            comment = _load(GitHubComment, payload, "event", "comment")
            return "on_comment_created", CommentCreatedEvent(
                id=comment.id, user=comment.user.login, target=target, body=comment.body
            )

        if action == "deleted":
            return "on_comment_deleted", _load(GitHubCommentRef, payload, "event", "comment").id

        if action == "edited":
            comment = _load(GitHubComment, payload, "event", "comment")
            if _has(payload, "event", "changes", "body"):
                previous = _load(FieldChange, payload, "event", "changes", "body").from_
            else:
                # Older envelopes flattened the previous body into changes.from
                previous = _load(StrictStr, payload, "event", "changes", "from")
            return "on_comment_updated", CommentUpdatedEvent(
                id=comment.id,
                user=comment.user.login,
                target=target,
                from_=previous,
                to=comment.body,
            )

        raise UnknownActionError("issue_comment", action)

    @staticmethod
    def _resolve_comment_target(payload: Any) -> CommentTarget:
        number = _load(GitHubIssueRef, payload, "event", "issue").number
        if _has(payload, "event", "issue", "pull_request"):
            return PullRequestTarget(number)
        return IssueTarget(number)

    @staticmethod
    def _decode_field_update(payload: Any, subject: str) -> FieldUpdate:
        """Work out which single field an edit changed.

        `subject` is the nested object holding the current values ("issue" or
        "pull_request").
        """
        if _has(payload, "event", "changes", "body"):
            return BodyUpdate(
                from_=_load(FieldChange, payload, "event", "changes", "body").from_,
                to=_load(GitHubIssueBody, payload, "event", subject).body,
            )

        if _has(payload, "event", "changes", "title"):
            previous = _load(FieldChange, payload, "event", "changes", "title").from_
        else:
            # Legacy envelopes put the old title under changed.body
            previous = _load(FieldChange, payload, "event", "changed", "body").from_
        return TitleUpdate(
            from_=previous,
            to=_load(GitHubIssueTitle, payload, "event", subject).title,
        )

    @staticmethod
    def _extract_repository(payload: Any) -> Repository:
        owner = _load(GitHubRepository, payload, "event", "repository").owner.login
        full_name = _load(StrictStr, payload, "repository")

        segments = full_name.split("/")
        if len(segments) < 2 or not segments[0] or not segments[1]:
            raise MalformedFieldError("repository", f"expected 'owner/name', got {full_name!r}")
        if segments[0] != owner:
            raise RepositoryMismatchError(full_name, owner)

        return Repository(owner=owner, name=segments[1])

    def _extract_running_info(self, payload: Any) -> RunningInfo | None:
        if not self._require_running_info and not (
            _has(payload, "run_id") or _has(payload, "run_number")
        ):
            return None

        return RunningInfo(
            run_id=int(_load(DecimalString, payload, "run_id")),
            run_number=int(_load(DecimalString, payload, "run_number")),
        )
