"""Team resources.

Reference: https://docs.github.com/en/rest/teams/teams
"""

from pydantic import BaseModel

from .common import Links, ListOptions, Resource, Timestamps
from .orgs import Organization

__all__ = ["NewTeam", "Team", "TeamListTeamMembersOptions"]


class Team(Timestamps, Links, Resource):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    privacy: str | None = None
    permission: str | None = None
    notification_setting: str | None = None
    members_count: int | None = None
    repos_count: int | None = None
    members_url: str | None = None
    repositories_url: str | None = None
    organization: Organization | None = None
    parent: "Team | None" = None


class NewTeam(BaseModel):
    """Request body for creating or editing a team.

    Only name is required; every other field is sent only when set.
    """

    name: str
    description: str | None = None
    maintainers: list[str] | None = None
    repo_names: list[str] | None = None
    parent_team_id: int | None = None
    notification_setting: str | None = None
    privacy: str | None = None  # secret or closed
    permission: str | None = None  # deprecated upstream, still accepted


class TeamListTeamMembersOptions(ListOptions):
    role: str | None = None  # member, maintainer or all
