"""Unit tests for PagesService and AdminService."""

import json
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest

from github_rest import APIError
from github_rest.models import ListOptions, NewPages, PagesSource, PagesUpdate

# =============================================================================
# Pages
# =============================================================================


class TestPagesSite:
    """Test site configuration endpoints."""

    @pytest.mark.asyncio
    async def test_get(self, github_client, response_factory):
        body = {
            "url": "https://api.github.com/repos/o/r/pages",
            "status": "built",
            "cname": "docs.example.com",
            "custom_404": False,
            "build_type": "legacy",
            "source": {"branch": "main", "path": "/docs"},
            "https_enforced": True,
        }
        mock_send = AsyncMock(return_value=response_factory(json_data=body))

        with patch.object(github_client._client, "send", new=mock_send):
            pages, _ = await github_client.pages.get("o", "r")

        assert mock_send.call_args.args[0].url.path == "/repos/o/r/pages"
        assert pages.status == "built"
        assert pages.custom_404 is False
        assert pages.source.path == "/docs"
        assert pages.https_enforced is True

    @pytest.mark.asyncio
    async def test_enable(self, github_client, response_factory):
        resp = response_factory(201, json_data={"status": "queued", "build_type": "legacy"})
        mock_send = AsyncMock(return_value=resp)
        new = NewPages(build_type="legacy", source=PagesSource(branch="gh-pages"))

        with patch.object(github_client._client, "send", new=mock_send):
            pages, response = await github_client.pages.enable("o", "r", new)

        request = mock_send.call_args.args[0]
        assert request.method == "POST"
        assert json.loads(request.content) == {
            "build_type": "legacy",
            "source": {"branch": "gh-pages"},
        }
        assert response.status_code == 201
        assert pages.status == "queued"

    @pytest.mark.asyncio
    async def test_update_sends_only_set_fields(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(204))

        with patch.object(github_client._client, "send", new=mock_send):
            response = await github_client.pages.update(
                "o", "r", PagesUpdate(cname="www.example.com", https_enforced=False)
            )

        request = mock_send.call_args.args[0]
        assert request.method == "PUT"
        assert json.loads(request.content) == {"cname": "www.example.com", "https_enforced": False}
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_disable(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(204))

        with patch.object(github_client._client, "send", new=mock_send):
            response = await github_client.pages.disable("o", "r")

        request = mock_send.call_args.args[0]
        assert request.method == "DELETE"
        assert request.url.path == "/repos/o/r/pages"
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_get_not_found(self, github_client, response_factory):
        resp = response_factory(404, json_data={"message": "Not Found"})

        with patch.object(github_client._client, "send", new=AsyncMock(return_value=resp)):
            with pytest.raises(APIError) as exc_info:
                await github_client.pages.get("o", "r")

        assert exc_info.value.status_code == 404


class TestPagesBuilds:
    """Test build endpoints."""

    @pytest.mark.asyncio
    async def test_list_builds(self, github_client, response_factory):
        body = [
            {
                "url": "https://api.github.com/repos/o/r/pages/builds/5472601",
                "status": "built",
                "error": {"message": None},
                "pusher": {"login": "octocat"},
                "commit": "351391cdcb88ffae71ec3028c91f375a8036a26b",
                "duration": 2104,
                "created_at": "2014-02-10T19:00:49Z",
            }
        ]
        mock_send = AsyncMock(return_value=response_factory(json_data=body))

        with patch.object(github_client._client, "send", new=mock_send):
            builds, _ = await github_client.pages.list_builds("o", "r", ListOptions(per_page=10))

        request = mock_send.call_args.args[0]
        assert request.url.path == "/repos/o/r/pages/builds"
        assert dict(request.url.params) == {"per_page": "10"}
        assert builds[0].pusher.login == "octocat"
        assert builds[0].duration == 2104
        assert builds[0].error.message is None
        assert builds[0].created_at == datetime(2014, 2, 10, 19, 0, 49, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_get_latest_and_by_id(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data={"status": "built"}))

        with patch.object(github_client._client, "send", new=mock_send):
            await github_client.pages.get_latest_build("o", "r")
            build, _ = await github_client.pages.get_build("o", "r", 5472601)

        paths = [call.args[0].url.path for call in mock_send.call_args_list]
        assert paths == ["/repos/o/r/pages/builds/latest", "/repos/o/r/pages/builds/5472601"]
        assert build.status == "built"

    @pytest.mark.asyncio
    async def test_request_build(self, github_client, response_factory):
        body = {"url": "https://api.github.com/repos/o/r/pages/builds/latest", "status": "queued"}
        mock_send = AsyncMock(return_value=response_factory(201, json_data=body))

        with patch.object(github_client._client, "send", new=mock_send):
            build, _ = await github_client.pages.request_build("o", "r")

        request = mock_send.call_args.args[0]
        assert request.method == "POST"
        assert request.content == b""
        assert build.status == "queued"


# =============================================================================
# Enterprise administration
# =============================================================================


@pytest.fixture
def enterprise_client(github_client):
    return github_client.with_enterprise_url("https://ghe.example.com")


class TestAdmin:
    """Test Enterprise Server admin endpoints."""

    @pytest.mark.asyncio
    async def test_create_user(self, enterprise_client, response_factory):
        resp = response_factory(201, json_data={"login": "github", "id": 1})
        mock_send = AsyncMock(return_value=resp)

        with patch.object(enterprise_client._client, "send", new=mock_send):
            user, _ = await enterprise_client.admin.create_user("github", "email@example.com")

        request = mock_send.call_args.args[0]
        assert request.method == "POST"
        assert str(request.url) == "https://ghe.example.com/api/v3/admin/users"
        assert json.loads(request.content) == {"login": "github", "email": "email@example.com"}
        assert user.login == "github"

    @pytest.mark.asyncio
    async def test_delete_user(self, enterprise_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(204))

        with patch.object(enterprise_client._client, "send", new=mock_send):
            response = await enterprise_client.admin.delete_user("github")

        request = mock_send.call_args.args[0]
        assert request.method == "DELETE"
        assert request.url.path == "/api/v3/admin/users/github"
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_get_admin_stats(self, enterprise_client, response_factory):
        body = {
            "repos": {"total_repos": 212, "fork_repos": 18, "total_wikis": 15},
            "pages": {"total_pages": 36},
            "orgs": {"total_orgs": 33, "disabled_orgs": 0},
            "pulls": {"mergeable_pulls": 21, "unmergeable_pulls": 3},
            "comments": {"total_pull_request_comments": 30},
        }
        mock_send = AsyncMock(return_value=response_factory(json_data=body))

        with patch.object(enterprise_client._client, "send", new=mock_send):
            stats, _ = await enterprise_client.admin.get_admin_stats()

        assert mock_send.call_args.args[0].url.path == "/api/v3/enterprise/stats/all"
        assert stats.repos.total_repos == 212
        assert stats.pages.total_pages == 36
        assert stats.orgs.disabled_orgs == 0
        assert stats.pulls.unmergeable_pulls == 3
        assert stats.comments.total_pull_request_comments == 30
        assert stats.users is None
