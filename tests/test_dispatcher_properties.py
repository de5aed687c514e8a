"""Property-based tests for event classification using Hypothesis."""

from __future__ import annotations

import asyncio

from hypothesis import given
from hypothesis import strategies as st

from baipiao_bot.core.dispatcher import Dispatcher
from baipiao_bot.core.errors import DecodeError
from baipiao_bot.core.types import BodyUpdate, Bot, IssueCreatedEvent, TitleUpdate
from tests.helpers import RecordingBot, comment, envelope, issue

numbers = st.integers(min_value=0, max_value=2**31)
logins = st.text(min_size=1, max_size=39)
texts = st.text(max_size=200)


@given(number=numbers, title=texts, body=texts, login=logins)
def test_opened_issue_round_trips_fields(number: int, title: str, body: str, login: str) -> None:
    bot = RecordingBot()
    payload = envelope(
        "issues",
        {"action": "opened", "issue": issue(number=number, title=title, body=body, login=login)},
    )

    asyncio.run(Dispatcher(bot).dispatch_event(payload))

    assert [call.hook for call in bot.calls] == ["on_issue_created"]
    assert bot.calls[0].event == IssueCreatedEvent(id=number, title=title, body=body, user=login)


@given(
    event_name=st.sampled_from(["issues", "issue_comment"]),
    action=st.sampled_from(["opened", "closed", "created", "deleted"]),
    number=numbers,
)
def test_pull_request_marker_never_reaches_issue_hooks(
    event_name: str, action: str, number: int
) -> None:
    payload = envelope(
        event_name,
        {
            "action": action,
            "issue": issue(number=number, pull_request={}),
            "comment": comment(),
        },
        head_ref="feature",
        base_ref="main",
    )
    try:
        decoded = Dispatcher(Bot()).decode_event(payload)
    except DecodeError:
        # Some action/family pairs are invalid; they must simply not become issue events
        return
    assert not decoded.hook.startswith("on_issue_")


@given(
    number=numbers,
    has_pull_request=st.booleans(),
    action=st.sampled_from(["created", "edited"]),
)
def test_comment_target_id_is_issue_number(
    number: int, has_pull_request: bool, action: str
) -> None:
    issue_payload: dict = {"number": number}
    if has_pull_request:
        issue_payload["pull_request"] = {"url": "https://example.invalid"}
    payload = envelope(
        "issue_comment",
        {
            "action": action,
            "issue": issue_payload,
            "comment": comment(),
            "changes": {"body": {"from": "before"}},
        },
    )

    decoded = Dispatcher(Bot()).decode_event(payload)

    assert decoded.event.target.id == number


@given(
    family=st.sampled_from([("issues", "issue"), ("pull_request", "pull_request")]),
    body_changed=st.booleans(),
    title_changed=st.booleans(),
    previous=texts,
)
def test_edit_yields_exactly_one_field_update(
    family: tuple[str, str], body_changed: bool, title_changed: bool, previous: str
) -> None:
    event_name, subject = family
    changes: dict = {}
    if body_changed:
        changes["body"] = {"from": previous}
    if title_changed:
        changes["title"] = {"from": previous}
    event = {
        "action": "edited",
        subject: issue(),
        "changes": changes,
        # legacy location, only consulted when changes.title is absent
        "changed": {"body": {"from": previous}},
    }

    decoded = Dispatcher(Bot()).decode_event(envelope(event_name, event))

    expected = BodyUpdate if body_changed else TitleUpdate
    assert type(decoded.event.updated_part) is expected
    assert decoded.event.updated_part.from_ == previous


@given(action=st.sampled_from(["opened", "closed", "reopened"]), number=numbers)
def test_dispatching_twice_gives_same_invocations(action: str, number: int) -> None:
    payload = envelope("issues", {"action": action, "issue": issue(number=number)})

    first, second = RecordingBot(), RecordingBot()
    asyncio.run(Dispatcher(first).dispatch_event(payload))
    asyncio.run(Dispatcher(second).dispatch_event(payload))

    assert first.calls == second.calls
    assert len(first.calls) == 1
