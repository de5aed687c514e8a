"""Decode failures raised while classifying and extracting a payload."""

from __future__ import annotations

import enum


class DecodeErrorKind(str, enum.Enum):
    UNKNOWN_EVENT_FAMILY = "unknown_event_family"
    UNKNOWN_ACTION = "unknown_action"
    MALFORMED_FIELD = "malformed_field"


class DecodeError(Exception):
    """Base class for payloads the dispatcher cannot turn into an event.

    No bot hook has run when one of these is raised.
    """

    kind: DecodeErrorKind
    path: str | None = None


class UnknownEventFamilyError(DecodeError):
    """`event_name` is missing, not a string, or not a supported family."""

    kind = DecodeErrorKind.UNKNOWN_EVENT_FAMILY
    path = "event_name"

    def __init__(self, event_name: object) -> None:
        self.event_name = event_name
        super().__init__(f"Unrecognized event family: {event_name!r}")


class UnknownActionError(DecodeError):
    """`event.action` is not in the vocabulary of its family.

    The issues family accepts GitHub's own "edited" as well as "updated" for
    field edits, so "edited" is not an unknown issues action.
    """

    kind = DecodeErrorKind.UNKNOWN_ACTION
    path = "event.action"

    def __init__(self, family: str, action: object) -> None:
        self.family = family
        self.action = action
        super().__init__(f"Unrecognized {family} action: {action!r}")


class MalformedFieldError(DecodeError):
    """A required field is absent, null, or of the wrong JSON type."""

    kind = DecodeErrorKind.MALFORMED_FIELD

    def __init__(self, path: str, reason: str = "missing or malformed") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class RepositoryMismatchError(MalformedFieldError):
    """The two encodings of the repository identity disagree on the owner."""

    def __init__(self, full_name: str, owner: str) -> None:
        self.full_name = full_name
        self.owner = owner
        super().__init__(
            "repository",
            f"owner of {full_name!r} does not match event.repository.owner.login {owner!r}",
        )
