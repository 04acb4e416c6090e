"""Unit tests for UsersService, OrganizationsService and TeamsService."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from github_rest.models import (
    ListMembersOptions,
    NewTeam,
    Organization,
    OrganizationsListOptions,
    TeamListTeamMembersOptions,
    User,
    UserListOptions,
)

# =============================================================================
# Users
# =============================================================================


class TestUsers:
    """Test user endpoints."""

    @pytest.mark.asyncio
    async def test_get_authenticated_user(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data={"login": "me"}))

        with patch.object(github_client._client, "send", new=mock_send):
            user, _ = await github_client.users.get()

        assert user.login == "me"
        assert mock_send.call_args.args[0].url.path == "/user"

    @pytest.mark.asyncio
    async def test_get_named_user_and_by_id(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data={"login": "octocat", "id": 1}))

        with patch.object(github_client._client, "send", new=mock_send):
            await github_client.users.get("octocat")
            await github_client.users.get_by_id(1)

        paths = [call.args[0].url.path for call in mock_send.call_args_list]
        assert paths == ["/users/octocat", "/user/1"]

    @pytest.mark.asyncio
    async def test_edit(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data={"login": "me", "bio": "hi"}))

        with patch.object(github_client._client, "send", new=mock_send):
            user, _ = await github_client.users.edit(User(bio="hi"))

        request = mock_send.call_args.args[0]
        assert request.method == "PATCH"
        assert json.loads(request.content) == {"bio": "hi"}
        assert user.bio == "hi"

    @pytest.mark.asyncio
    async def test_list_all_since(self, github_client, response_factory):
        resp = response_factory(
            json_data=[{"id": 134}, {"id": 135}],
            headers={"Link": '<https://api.github.com/users?since=135>; rel="next"'},
        )
        mock_send = AsyncMock(return_value=resp)

        with patch.object(github_client._client, "send", new=mock_send):
            users, response = await github_client.users.list_all(UserListOptions(since=133))

        assert [u.id for u in users] == [134, 135]
        assert response.next_page == 135
        assert dict(mock_send.call_args.args[0].url.params) == {"since": "133"}

    @pytest.mark.asyncio
    async def test_list_followers(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data=[]))

        with patch.object(github_client._client, "send", new=mock_send):
            followers, _ = await github_client.users.list_followers("octocat")

        assert followers == []
        assert mock_send.call_args.args[0].url.path == "/users/octocat/followers"


# =============================================================================
# Organizations
# =============================================================================


class TestOrganizations:
    """Test organization endpoints."""

    @pytest.mark.asyncio
    async def test_list_for_authenticated_user(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data=[{"login": "github"}]))

        with patch.object(github_client._client, "send", new=mock_send):
            orgs, _ = await github_client.organizations.list()

        assert orgs[0].login == "github"
        assert mock_send.call_args.args[0].url.path == "/user/orgs"

    @pytest.mark.asyncio
    async def test_list_all(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data=[{"id": 4321}]))

        with patch.object(github_client._client, "send", new=mock_send):
            await github_client.organizations.list_all(OrganizationsListOptions(since=1342004))

        request = mock_send.call_args.args[0]
        assert request.url.path == "/organizations"
        assert dict(request.url.params) == {"since": "1342004"}

    @pytest.mark.asyncio
    async def test_get_and_edit(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data={"login": "o", "id": 1}))

        with patch.object(github_client._client, "send", new=mock_send):
            org, _ = await github_client.organizations.get("o")
            await github_client.organizations.edit("o", Organization(description="d"))

        assert org.id == 1
        edit_request = mock_send.call_args.args[0]
        assert edit_request.method == "PATCH"
        assert json.loads(edit_request.content) == {"description": "d"}

    @pytest.mark.asyncio
    async def test_list_members_filter(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data=[{"login": "a"}]))

        with patch.object(github_client._client, "send", new=mock_send):
            await github_client.organizations.list_members(
                "o", ListMembersOptions(filter="2fa_disabled", role="admin")
            )

        params = dict(mock_send.call_args.args[0].url.params)
        assert params == {"filter": "2fa_disabled", "role": "admin"}

    @pytest.mark.asyncio
    async def test_is_member(self, github_client, response_factory):
        with patch.object(
            github_client._client, "send", new=AsyncMock(return_value=response_factory(204))
        ):
            member, _ = await github_client.organizations.is_member("o", "u")
        assert member is True


# =============================================================================
# Teams
# =============================================================================


class TestTeams:
    """Test team endpoints."""

    @pytest.mark.asyncio
    async def test_create_team(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(201, json_data={"id": 1, "slug": "justice-league"}))

        with patch.object(github_client._client, "send", new=mock_send):
            team, _ = await github_client.teams.create_team(
                "o", NewTeam(name="Justice League", privacy="closed")
            )

        request = mock_send.call_args.args[0]
        assert request.url.path == "/orgs/o/teams"
        assert json.loads(request.content) == {"name": "Justice League", "privacy": "closed"}
        assert team.slug == "justice-league"

    @pytest.mark.asyncio
    async def test_get_edit_delete_by_slug(self, github_client, response_factory):
        ok = response_factory(json_data={"id": 1, "slug": "s"})
        gone = response_factory(204)
        mock_send = AsyncMock(side_effect=[ok, ok, gone])

        with patch.object(github_client._client, "send", new=mock_send):
            await github_client.teams.get_team_by_slug("o", "s")
            await github_client.teams.edit_team_by_slug("o", "s", NewTeam(name="S"))
            response = await github_client.teams.delete_team_by_slug("o", "s")

        methods = [call.args[0].method for call in mock_send.call_args_list]
        assert methods == ["GET", "PATCH", "DELETE"]
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_list_team_members(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data=[{"login": "a"}]))

        with patch.object(github_client._client, "send", new=mock_send):
            members, _ = await github_client.teams.list_team_members_by_slug(
                "o", "s", TeamListTeamMembersOptions(role="maintainer")
            )

        request = mock_send.call_args.args[0]
        assert request.url.path == "/orgs/o/teams/s/members"
        assert dict(request.url.params) == {"role": "maintainer"}
        assert members[0].login == "a"
