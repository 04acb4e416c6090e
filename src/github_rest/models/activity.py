"""Notification and starring resources.

References:
- https://docs.github.com/en/rest/activity/notifications
- https://docs.github.com/en/rest/activity/starring
"""

from datetime import datetime

from .common import ListOptions, Resource
from .repos import Repository
from .users import User

__all__ = [
    "ActivityListStarredOptions",
    "Notification",
    "NotificationListOptions",
    "NotificationSubject",
    "StarredRepository",
    "Stargazer",
]


class NotificationSubject(Resource):
    title: str | None = None
    url: str | None = None
    latest_comment_url: str | None = None
    type: str | None = None  # Issue, PullRequest, Commit, Release, ...


class Notification(Resource):
    """A notification thread.

    Thread IDs are strings on the wire, unlike most other resource IDs.
    """

    id: str | None = None
    repository: Repository | None = None
    subject: NotificationSubject | None = None
    reason: str | None = None
    unread: bool | None = None
    updated_at: datetime | None = None
    last_read_at: datetime | None = None
    url: str | None = None
    subscription_url: str | None = None


class NotificationListOptions(ListOptions):
    all: bool | None = None  # Include read notifications
    participating: bool | None = None
    since: datetime | None = None
    before: datetime | None = None


class Stargazer(Resource):
    """A user who starred a repository (star preview media type)."""

    starred_at: datetime | None = None
    user: User | None = None


class StarredRepository(Resource):
    """A repository starred by a user (star preview media type)."""

    starred_at: datetime | None = None
    repository: Repository | None = None


class ActivityListStarredOptions(ListOptions):
    sort: str | None = None  # created or updated
    direction: str | None = None
