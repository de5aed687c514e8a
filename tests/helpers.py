"""Builders for GitHub Actions event envelopes used across the test suite."""

from __future__ import annotations

import typing as typ
from dataclasses import dataclass

from baipiao_bot.core.types import Bot, HookName, Repository, RunningInfo

HOOKS: tuple[str, ...] = typ.get_args(HookName)


def envelope(
    event_name: str,
    event: dict[str, typ.Any],
    *,
    repository: str = "acme/widgets",
    owner: str = "acme",
    **top_level: typ.Any,
) -> dict[str, typ.Any]:
    """Wrap a webhook payload the way the Actions runner hands it over."""
    return {
        "event_name": event_name,
        "repository": repository,
        "event": {"repository": {"owner": {"login": owner}}, **event},
        **top_level,
    }


def issue(
    number: int = 42,
    title: str = "Widgets fall over",
    body: str = "Steps to reproduce: stack three widgets.",
    login: str = "alice",
    **extra: typ.Any,
) -> dict[str, typ.Any]:
    return {"number": number, "title": title, "body": body, "user": {"login": login}, **extra}


def pull_request(
    number: int = 7,
    title: str = "Stop widgets falling over",
    body: str = "Fixes #42",
    login: str = "bob",
    head_owner: str = "bob",
    head_repo: str = "widgets-fork",
) -> dict[str, typ.Any]:
    return {
        "number": number,
        "title": title,
        "body": body,
        "user": {"login": login},
        "head": {"user": {"login": head_owner}, "repo": {"name": head_repo}},
    }


def comment(
    comment_id: int = 7, body: str = "hi", login: str = "alice"
) -> dict[str, typ.Any]:
    return {"id": comment_id, "body": body, "user": {"login": login}}


@dataclass(frozen=True)
class Call:
    hook: str
    repo: Repository
    running_info: RunningInfo | None
    event: typ.Any


class RecordingBot(Bot):
    """Bot that records every hook invocation in order."""

    def __init__(self) -> None:
        self.calls: list[Call] = []


def _recorder(hook: str) -> typ.Callable[..., typ.Awaitable[None]]:
    async def record(
        self: RecordingBot,
        repo: Repository,
        running_info: RunningInfo | None,
        event: typ.Any,
    ) -> None:
        self.calls.append(Call(hook, repo, running_info, event))

    record.__name__ = hook
    return record


for _hook in HOOKS:
    setattr(RecordingBot, _hook, _recorder(_hook))
