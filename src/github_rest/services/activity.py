"""Notification and starring endpoints.

References:
- https://docs.github.com/en/rest/activity/notifications
- https://docs.github.com/en/rest/activity/starring
"""

from datetime import datetime, timezone

from ..config import MEDIA_TYPE_STAR_PREVIEW
from ..models.activity import (
    ActivityListStarredOptions,
    Notification,
    NotificationListOptions,
    StarredRepository,
    Stargazer,
)
from ..models.common import ListOptions, format_timestamp
from ..request import expand_path
from ..response import Response
from .base import Service

__all__ = ["ActivityService"]


def _last_read_body(last_read: datetime | None) -> dict[str, str]:
    return {"last_read_at": format_timestamp(last_read or datetime.now(timezone.utc))}


class ActivityService(Service):
    # --- Notifications ---

    async def list_notifications(
        self, opts: NotificationListOptions | None = None
    ) -> tuple[list[Notification] | None, Response]:
        return await self._client.call(
            "GET", "notifications", params=opts, result_type=list[Notification]
        )

    async def list_repository_notifications(
        self, owner: str, repo: str, opts: NotificationListOptions | None = None
    ) -> tuple[list[Notification] | None, Response]:
        path = expand_path("repos/{owner}/{repo}/notifications", owner=owner, repo=repo)
        return await self._client.call("GET", path, params=opts, result_type=list[Notification])

    async def mark_notifications_read(self, last_read: datetime | None = None) -> Response:
        """Mark every notification up to last_read (default: now) as read."""
        _, response = await self._client.call(
            "PUT", "notifications", body=_last_read_body(last_read)
        )
        return response

    async def mark_repository_notifications_read(
        self, owner: str, repo: str, last_read: datetime | None = None
    ) -> Response:
        path = expand_path("repos/{owner}/{repo}/notifications", owner=owner, repo=repo)
        _, response = await self._client.call("PUT", path, body=_last_read_body(last_read))
        return response

    async def get_thread(self, thread_id: str) -> tuple[Notification | None, Response]:
        path = expand_path("notifications/threads/{id}", id=thread_id)
        return await self._client.call("GET", path, result_type=Notification)

    async def mark_thread_read(self, thread_id: str) -> Response:
        path = expand_path("notifications/threads/{id}", id=thread_id)
        _, response = await self._client.call("PATCH", path)
        return response

    # --- Starring ---

    async def list_stargazers(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[Stargazer] | None, Response]:
        """List stargazers with the time each one starred the repository."""
        path = expand_path("repos/{owner}/{repo}/stargazers", owner=owner, repo=repo)
        return await self._client.call(
            "GET", path, params=opts, accept=MEDIA_TYPE_STAR_PREVIEW, result_type=list[Stargazer]
        )

    async def list_starred(
        self, user: str = "", opts: ActivityListStarredOptions | None = None
    ) -> tuple[list[StarredRepository] | None, Response]:
        """List repositories starred by a user (empty user: the authenticated user)."""
        if user:
            path = expand_path("users/{user}/starred", user=user)
        else:
            path = "user/starred"
        return await self._client.call(
            "GET",
            path,
            params=opts,
            accept=MEDIA_TYPE_STAR_PREVIEW,
            result_type=list[StarredRepository],
        )

    async def is_starred(self, owner: str, repo: str) -> tuple[bool, Response | None]:
        path = expand_path("user/starred/{owner}/{repo}", owner=owner, repo=repo)
        return await self._client.check("GET", path)

    async def star(self, owner: str, repo: str) -> Response:
        path = expand_path("user/starred/{owner}/{repo}", owner=owner, repo=repo)
        _, response = await self._client.call("PUT", path)
        return response

    async def unstar(self, owner: str, repo: str) -> Response:
        path = expand_path("user/starred/{owner}/{repo}", owner=owner, repo=repo)
        _, response = await self._client.call("DELETE", path)
        return response
