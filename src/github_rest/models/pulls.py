"""Pull request resources.

Reference: https://docs.github.com/en/rest/pulls/pulls
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel

from .common import Links, ListOptions, Options, Resource, Timestamps
from .issues import Label, Milestone
from .repos import Repository
from .users import User

__all__ = [
    "NewPullRequest",
    "PullRequest",
    "PullRequestBranch",
    "PullRequestListOptions",
    "PullRequestMergeResult",
    "PullRequestOptions",
    "RawType",
]


class PullRequestBranch(Resource):
    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    repo: Repository | None = None
    user: User | None = None


class PullRequest(Timestamps, Links, Resource):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    state: str | None = None
    locked: bool | None = None
    title: str | None = None
    body: str | None = None
    user: User | None = None
    draft: bool | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    mergeable_state: str | None = None
    rebaseable: bool | None = None
    merged_by: User | None = None
    merge_commit_sha: str | None = None
    closed_at: datetime | None = None
    merged_at: datetime | None = None
    comments: int | None = None
    review_comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    maintainer_can_modify: bool | None = None
    author_association: str | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    requested_reviewers: list[User] | None = None
    labels: list[Label] | None = None
    milestone: Milestone | None = None
    head: PullRequestBranch | None = None
    base: PullRequestBranch | None = None
    issue_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    commits_url: str | None = None
    statuses_url: str | None = None


class NewPullRequest(BaseModel):
    """Request body for opening a pull request.

    Either title or issue must be set; head and base are required.
    """

    title: str | None = None
    head: str | None = None
    head_repo: str | None = None
    base: str | None = None
    body: str | None = None
    issue: int | None = None
    maintainer_can_modify: bool | None = None
    draft: bool | None = None


class PullRequestListOptions(ListOptions):
    state: str | None = None  # open, closed, all
    head: str | None = None  # user:ref-name
    base: str | None = None
    sort: str | None = None  # created, updated, popularity, long-running
    direction: str | None = None


class PullRequestOptions(Options):
    """Optional merge parameters.

    Attributes:
        commit_title: Title for the merge commit
        sha: Head SHA the pull request must still point at
        merge_method: merge, squash or rebase
    """

    commit_title: str | None = None
    sha: str | None = None
    merge_method: str | None = None


class PullRequestMergeResult(Resource):
    sha: str | None = None
    merged: bool | None = None
    message: str | None = None


class RawType(str, Enum):
    """Raw representations of a pull request."""

    DIFF = "diff"
    PATCH = "patch"
