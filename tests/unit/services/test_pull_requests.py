"""Unit tests for PullRequestsService."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from github_rest.models import (
    NewPullRequest,
    PullRequest,
    PullRequestBranch,
    PullRequestListOptions,
    PullRequestOptions,
    RawType,
)


class TestPullRequests:
    """Test pull request endpoints."""

    @pytest.mark.asyncio
    async def test_list(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data=[{"number": 1}, {"number": 2}]))

        with patch.object(github_client._client, "send", new=mock_send):
            pulls, _ = await github_client.pull_requests.list(
                "o", "r", PullRequestListOptions(state="closed", base="main")
            )

        assert [p.number for p in pulls] == [1, 2]
        assert dict(mock_send.call_args.args[0].url.params) == {"state": "closed", "base": "main"}

    @pytest.mark.asyncio
    async def test_get(self, github_client, response_factory):
        body = {"number": 1, "head": {"ref": "feature", "sha": "abc"}, "merged": False}
        mock_send = AsyncMock(return_value=response_factory(json_data=body))

        with patch.object(github_client._client, "send", new=mock_send):
            pull, _ = await github_client.pull_requests.get("o", "r", 1)

        assert pull.head.ref == "feature"
        assert pull.merged is False

    @pytest.mark.parametrize(
        "raw_type,media_type",
        [
            (RawType.DIFF, "application/vnd.github.diff"),
            (RawType.PATCH, "application/vnd.github.patch"),
        ],
    )
    @pytest.mark.asyncio
    async def test_get_raw(self, github_client, response_factory, raw_type, media_type):
        resp = response_factory(content=b"diff --git a/x b/x", headers={"Content-Type": "text/plain"})
        mock_send = AsyncMock(return_value=resp)

        with patch.object(github_client._client, "send", new=mock_send):
            text, _ = await github_client.pull_requests.get_raw("o", "r", 1, raw_type)

        assert text == "diff --git a/x b/x"
        assert mock_send.call_args.args[0].headers["Accept"] == media_type

    @pytest.mark.asyncio
    async def test_create(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(201, json_data={"number": 3}))

        with patch.object(github_client._client, "send", new=mock_send):
            pull, _ = await github_client.pull_requests.create(
                "o", "r", NewPullRequest(title="t", head="feature", base="main", draft=True)
            )

        assert json.loads(mock_send.call_args.args[0].content) == {
            "title": "t",
            "head": "feature",
            "base": "main",
            "draft": True,
        }
        assert pull.number == 3

    @pytest.mark.asyncio
    async def test_edit_sends_base_ref(self, github_client, response_factory):
        mock_send = AsyncMock(return_value=response_factory(json_data={"number": 3}))

        with patch.object(github_client._client, "send", new=mock_send):
            await github_client.pull_requests.edit(
                "o", "r", 3, PullRequest(title="new", base=PullRequestBranch(ref="develop"))
            )

        request = mock_send.call_args.args[0]
        assert request.method == "PATCH"
        assert json.loads(request.content) == {"title": "new", "base": "develop"}

    @pytest.mark.asyncio
    async def test_is_merged(self, github_client, response_factory):
        with patch.object(
            github_client._client, "send", new=AsyncMock(return_value=response_factory(204))
        ):
            merged, _ = await github_client.pull_requests.is_merged("o", "r", 3)
        assert merged is True

        resp = response_factory(404, json_data={"message": "Not Found"})
        with patch.object(github_client._client, "send", new=AsyncMock(return_value=resp)):
            merged, _ = await github_client.pull_requests.is_merged("o", "r", 3)
        assert merged is False

    @pytest.mark.asyncio
    async def test_merge(self, github_client, response_factory):
        body = {"sha": "6dcb09b", "merged": True, "message": "Pull Request successfully merged"}
        mock_send = AsyncMock(return_value=response_factory(json_data=body))

        with patch.object(github_client._client, "send", new=mock_send):
            result, _ = await github_client.pull_requests.merge(
                "o", "r", 3, "merging", PullRequestOptions(merge_method="squash")
            )

        request = mock_send.call_args.args[0]
        assert request.method == "PUT"
        assert request.url.path == "/repos/o/r/pulls/3/merge"
        assert json.loads(request.content) == {"commit_message": "merging", "merge_method": "squash"}
        assert result.merged is True
