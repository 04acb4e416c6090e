"""Organizations endpoints.

Reference: https://docs.github.com/en/rest/orgs
"""

from __future__ import annotations

from ..models.common import ListOptions
from ..models.orgs import ListMembersOptions, Organization, OrganizationsListOptions
from ..models.users import User
from ..request import expand_path
from ..response import Response
from .base import Service

__all__ = ["OrganizationsService"]


class OrganizationsService(Service):
    async def list(
        self, user: str = "", opts: ListOptions | None = None
    ) -> tuple[list[Organization] | None, Response]:
        """List organizations for a user. An empty user lists the authenticated user's."""
        if user:
            path = expand_path("users/{user}/orgs", user=user)
        else:
            path = "user/orgs"
        return await self._client.call("GET", path, params=opts, result_type=list[Organization])

    async def list_all(
        self, opts: OrganizationsListOptions | None = None
    ) -> tuple[list[Organization] | None, Response]:
        """List every organization in creation order (paginates by opts.since)."""
        return await self._client.call(
            "GET", "organizations", params=opts, result_type=list[Organization]
        )

    async def get(self, org: str) -> tuple[Organization | None, Response]:
        path = expand_path("orgs/{org}", org=org)
        return await self._client.call("GET", path, result_type=Organization)

    async def get_by_id(self, org_id: int) -> tuple[Organization | None, Response]:
        path = expand_path("organizations/{id}", id=org_id)
        return await self._client.call("GET", path, result_type=Organization)

    async def edit(self, org: str, changes: Organization) -> tuple[Organization | None, Response]:
        path = expand_path("orgs/{org}", org=org)
        return await self._client.call("PATCH", path, body=changes, result_type=Organization)

    async def list_members(
        self, org: str, opts: ListMembersOptions | None = None
    ) -> tuple[list[User] | None, Response]:
        path = expand_path("orgs/{org}/members", org=org)
        return await self._client.call("GET", path, params=opts, result_type=list[User])

    async def is_member(self, org: str, user: str) -> tuple[bool, Response | None]:
        path = expand_path("orgs/{org}/members/{user}", org=org, user=user)
        return await self._client.check("GET", path)
