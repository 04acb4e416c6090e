"""GitHub Enterprise Server administration endpoints.

Only available on Enterprise Server instances; configure the client with
with_enterprise_url() before calling these.

References:
- https://docs.github.com/en/enterprise-server/rest/enterprise-admin/users
- https://docs.github.com/en/enterprise-server/rest/enterprise-admin/admin-stats
"""

from ..models.admin import AdminStats, CreateUserRequest
from ..models.users import User
from ..request import expand_path
from ..response import Response
from .base import Service

__all__ = ["AdminService"]


class AdminService(Service):
    async def create_user(
        self, login: str, email: str | None = None
    ) -> tuple[User | None, Response]:
        body = CreateUserRequest(login=login, email=email)
        return await self._client.call("POST", "admin/users", body=body, result_type=User)

    async def delete_user(self, username: str) -> Response:
        path = expand_path("admin/users/{username}", username=username)
        _, response = await self._client.call("DELETE", path)
        return response

    async def get_admin_stats(self) -> tuple[AdminStats | None, Response]:
        return await self._client.call("GET", "enterprise/stats/all", result_type=AdminStats)
