"""Pydantic models for the fragments of GitHub event payloads the dispatcher reads.

Models are strict: a string where a number is expected, or null where a string
is expected, is rejected rather than coerced. Each model only declares the
fields a decoder needs, so one action's payload is never rejected for a field
only another action uses.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# Actions exposes run_id / run_number as decimal strings
DecimalString = Annotated[str, StringConstraints(strict=True, pattern=r"^[0-9]+$")]


class _Payload(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)


class GitHubUser(_Payload):
    login: str


class GitHubRepository(_Payload):
    """The nested `event.repository` object."""

    owner: GitHubUser


class GitHubHeadRepo(_Payload):
    name: str


class GitHubHead(_Payload):
    """Source side of a pull request."""

    user: GitHubUser
    repo: GitHubHeadRepo


# Issues and pull requests share these shapes: both are numbered, authored
# items with a title and a body.


class GitHubIssueRef(_Payload):
    number: int = Field(ge=0)


class GitHubIssueAuthor(GitHubIssueRef):
    user: GitHubUser


class GitHubIssueTitle(_Payload):
    title: str


class GitHubIssueBody(_Payload):
    body: str


class GitHubIssue(GitHubIssueAuthor):
    title: str
    body: str


class GitHubPullRequest(GitHubIssue):
    head: GitHubHead


class GitHubCommentRef(_Payload):
    id: int = Field(ge=0)


class GitHubComment(GitHubCommentRef):
    body: str
    user: GitHubUser


class FieldChange(_Payload):
    """Previous value of an edited field, e.g. `changes.title`."""

    from_: str = Field(alias="from")
