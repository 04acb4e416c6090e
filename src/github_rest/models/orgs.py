"""Organization resources.

Reference: https://docs.github.com/en/rest/orgs/orgs
"""

from .common import Links, ListOptions, Options, Resource, Timestamps

__all__ = ["ListMembersOptions", "Organization", "OrganizationsListOptions"]


class Organization(Timestamps, Links, Resource):
    login: str | None = None
    id: int | None = None
    node_id: str | None = None
    avatar_url: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    twitter_username: str | None = None
    description: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    type: str | None = None
    billing_email: str | None = None
    is_verified: bool | None = None
    has_organization_projects: bool | None = None
    has_repository_projects: bool | None = None
    two_factor_requirement_enabled: bool | None = None
    default_repository_permission: str | None = None
    members_can_create_repositories: bool | None = None
    members_can_create_public_repositories: bool | None = None
    members_can_create_private_repositories: bool | None = None
    web_commit_signoff_required: bool | None = None

    # API URLs
    repos_url: str | None = None
    events_url: str | None = None
    hooks_url: str | None = None
    issues_url: str | None = None
    members_url: str | None = None
    public_members_url: str | None = None


class OrganizationsListOptions(Options):
    """Options for listing every organization (since-cursor pagination)."""

    since: int | None = None
    per_page: int | None = None


class ListMembersOptions(ListOptions):
    """Options for listing organization members.

    Attributes:
        filter: 2fa_disabled or all
        role: all, admin or member
    """

    filter: str | None = None
    role: str | None = None
