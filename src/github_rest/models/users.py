"""User resources.

Reference: https://docs.github.com/en/rest/users/users
"""

from datetime import datetime

from .common import Links, Options, Resource, Timestamps

__all__ = ["User", "UserListOptions"]


class User(Timestamps, Links, Resource):
    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    hireable: bool | None = None
    bio: str | None = None
    twitter_username: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    type: str | None = None
    site_admin: bool | None = None
    suspended_at: datetime | None = None

    # Only populated for the authenticated user
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    two_factor_authentication: bool | None = None


class UserListOptions(Options):
    """Options for listing every user (since-cursor pagination).

    Attributes:
        since: Only return users with an ID greater than this one
        per_page: Results per page
    """

    since: int | None = None
    per_page: int | None = None

