"""Issue, comment, label and milestone resources.

References:
- https://docs.github.com/en/rest/issues/issues
- https://docs.github.com/en/rest/issues/comments
"""

from datetime import datetime

from pydantic import BaseModel

from .common import Links, ListOptions, Options, Resource, Timestamps
from .repos import Repository
from .users import User

__all__ = [
    "Issue",
    "IssueComment",
    "IssueListByRepoOptions",
    "IssueListCommentsOptions",
    "IssueListOptions",
    "IssueRequest",
    "Label",
    "LockIssueOptions",
    "Milestone",
    "PullRequestLinks",
]


class Label(Resource):
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    name: str | None = None
    color: str | None = None
    description: str | None = None
    default: bool | None = None


class Milestone(Timestamps, Links, Resource):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    state: str | None = None
    title: str | None = None
    description: str | None = None
    creator: User | None = None
    open_issues: int | None = None
    closed_issues: int | None = None
    closed_at: datetime | None = None
    due_on: datetime | None = None


class PullRequestLinks(Links, Resource):
    """Present on issues that are actually pull requests."""

    diff_url: str | None = None
    patch_url: str | None = None
    merged_at: datetime | None = None


class Issue(Timestamps, Links, Resource):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    state: str | None = None
    state_reason: str | None = None
    locked: bool | None = None
    active_lock_reason: str | None = None
    title: str | None = None
    body: str | None = None
    author_association: str | None = None
    user: User | None = None
    labels: list[Label] | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    comments: int | None = None
    closed_at: datetime | None = None
    closed_by: User | None = None
    milestone: Milestone | None = None
    pull_request: PullRequestLinks | None = None
    repository: Repository | None = None
    draft: bool | None = None
    comments_url: str | None = None
    events_url: str | None = None
    labels_url: str | None = None
    repository_url: str | None = None

    def is_pull_request(self) -> bool:
        """Report whether this issue is a pull request.

        The issues API returns pull requests too; they carry pull_request links.
        """
        return self.pull_request is not None


class IssueRequest(BaseModel):
    """Request body for creating or editing an issue.

    Passing an empty list for labels or assignees clears them on edit.
    """

    title: str | None = None
    body: str | None = None
    labels: list[str] | None = None
    assignee: str | None = None
    assignees: list[str] | None = None
    state: str | None = None
    state_reason: str | None = None
    milestone: int | None = None


class IssueComment(Timestamps, Links, Resource):
    id: int | None = None
    node_id: str | None = None
    body: str | None = None
    user: User | None = None
    author_association: str | None = None
    issue_url: str | None = None


class IssueListOptions(ListOptions):
    """Options for listing issues across repositories (user or org scope)."""

    filter: str | None = None  # assigned, created, mentioned, subscribed, all
    state: str | None = None  # open, closed, all
    labels: list[str] | None = None
    sort: str | None = None  # created, updated, comments
    direction: str | None = None
    since: datetime | None = None


class IssueListByRepoOptions(ListOptions):
    milestone: str | None = None  # number, "none" or "*"
    state: str | None = None
    assignee: str | None = None
    creator: str | None = None
    mentioned: str | None = None
    labels: list[str] | None = None
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None


class IssueListCommentsOptions(ListOptions):
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None


class LockIssueOptions(Options):
    """Request body for locking an issue.

    Attributes:
        lock_reason: off-topic, too heated, resolved or spam
    """

    lock_reason: str | None = None
