"""Users endpoints.

Reference: https://docs.github.com/en/rest/users
"""

from ..models.common import ListOptions
from ..models.users import User, UserListOptions
from ..request import expand_path
from ..response import Response
from .base import Service

__all__ = ["UsersService"]


class UsersService(Service):
    async def get(self, user: str = "") -> tuple[User | None, Response]:
        """Fetch a user. An empty user fetches the authenticated user."""
        if user:
            path = expand_path("users/{user}", user=user)
        else:
            path = "user"
        return await self._client.call("GET", path, result_type=User)

    async def get_by_id(self, user_id: int) -> tuple[User | None, Response]:
        path = expand_path("user/{id}", id=user_id)
        return await self._client.call("GET", path, result_type=User)

    async def edit(self, user: User) -> tuple[User | None, Response]:
        """Update the authenticated user's profile. Only set fields are sent."""
        return await self._client.call("PATCH", "user", body=user, result_type=User)

    async def list_all(
        self, opts: UserListOptions | None = None
    ) -> tuple[list[User] | None, Response]:
        """List every user in signup order.

        Paginates by user ID: pass the last seen ID as opts.since.
        """
        return await self._client.call("GET", "users", params=opts, result_type=list[User])

    async def list_followers(
        self, user: str = "", opts: ListOptions | None = None
    ) -> tuple[list[User] | None, Response]:
        if user:
            path = expand_path("users/{user}/followers", user=user)
        else:
            path = "user/followers"
        return await self._client.call("GET", path, params=opts, result_type=list[User])
