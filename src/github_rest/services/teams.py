"""Teams endpoints (addressed by organization and team slug).

Reference: https://docs.github.com/en/rest/teams
"""

from ..models.common import ListOptions
from ..models.teams import NewTeam, Team, TeamListTeamMembersOptions
from ..models.users import User
from ..request import expand_path
from ..response import Response
from .base import Service

__all__ = ["TeamsService"]


class TeamsService(Service):
    async def list_teams(
        self, org: str, opts: ListOptions | None = None
    ) -> tuple[list[Team] | None, Response]:
        path = expand_path("orgs/{org}/teams", org=org)
        return await self._client.call("GET", path, params=opts, result_type=list[Team])

    async def get_team_by_slug(self, org: str, slug: str) -> tuple[Team | None, Response]:
        path = expand_path("orgs/{org}/teams/{slug}", org=org, slug=slug)
        return await self._client.call("GET", path, result_type=Team)

    async def create_team(self, org: str, team: NewTeam) -> tuple[Team | None, Response]:
        path = expand_path("orgs/{org}/teams", org=org)
        return await self._client.call("POST", path, body=team, result_type=Team)

    async def edit_team_by_slug(
        self, org: str, slug: str, team: NewTeam
    ) -> tuple[Team | None, Response]:
        path = expand_path("orgs/{org}/teams/{slug}", org=org, slug=slug)
        return await self._client.call("PATCH", path, body=team, result_type=Team)

    async def delete_team_by_slug(self, org: str, slug: str) -> Response:
        path = expand_path("orgs/{org}/teams/{slug}", org=org, slug=slug)
        _, response = await self._client.call("DELETE", path)
        return response

    async def list_team_members_by_slug(
        self, org: str, slug: str, opts: TeamListTeamMembersOptions | None = None
    ) -> tuple[list[User] | None, Response]:
        path = expand_path("orgs/{org}/teams/{slug}/members", org=org, slug=slug)
        return await self._client.call("GET", path, params=opts, result_type=list[User])
