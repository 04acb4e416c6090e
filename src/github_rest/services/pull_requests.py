"""Pull request endpoints.

Reference: https://docs.github.com/en/rest/pulls/pulls
"""

from __future__ import annotations

from typing import Any

from ..config import MEDIA_TYPE_DIFF, MEDIA_TYPE_PATCH
from ..models.pulls import (
    NewPullRequest,
    PullRequest,
    PullRequestListOptions,
    PullRequestMergeResult,
    PullRequestOptions,
    RawType,
)
from ..request import expand_path
from ..response import Response
from .base import Service

__all__ = ["PullRequestsService"]

_RAW_MEDIA_TYPES = {
    RawType.DIFF: MEDIA_TYPE_DIFF,
    RawType.PATCH: MEDIA_TYPE_PATCH,
}


class PullRequestsService(Service):
    async def list(
        self, owner: str, repo: str, opts: PullRequestListOptions | None = None
    ) -> tuple[list[PullRequest] | None, Response]:
        path = expand_path("repos/{owner}/{repo}/pulls", owner=owner, repo=repo)
        return await self._client.call("GET", path, params=opts, result_type=list[PullRequest])

    async def get(
        self, owner: str, repo: str, number: int
    ) -> tuple[PullRequest | None, Response]:
        path = expand_path(
            "repos/{owner}/{repo}/pulls/{number}", owner=owner, repo=repo, number=number
        )
        return await self._client.call("GET", path, result_type=PullRequest)

    async def get_raw(
        self, owner: str, repo: str, number: int, raw_type: RawType = RawType.DIFF
    ) -> tuple[str, Response]:
        """Fetch a pull request as a unified diff or as a patch series."""
        path = expand_path(
            "repos/{owner}/{repo}/pulls/{number}", owner=owner, repo=repo, number=number
        )
        _, response = await self._client.call("GET", path, accept=_RAW_MEDIA_TYPES[RawType(raw_type)])
        return response.text, response

    async def create(
        self, owner: str, repo: str, pull: NewPullRequest
    ) -> tuple[PullRequest | None, Response]:
        path = expand_path("repos/{owner}/{repo}/pulls", owner=owner, repo=repo)
        return await self._client.call("POST", path, body=pull, result_type=PullRequest)

    async def edit(
        self, owner: str, repo: str, number: int, pull: PullRequest
    ) -> tuple[PullRequest | None, Response]:
        """Update title, body, state, base or maintainer_can_modify."""
        path = expand_path(
            "repos/{owner}/{repo}/pulls/{number}", owner=owner, repo=repo, number=number
        )
        changes = {
            "title": pull.title,
            "body": pull.body,
            "state": pull.state,
            "maintainer_can_modify": pull.maintainer_can_modify,
        }
        if pull.base is not None and pull.base.ref is not None:
            changes["base"] = pull.base.ref
        body = {key: value for key, value in changes.items() if value is not None}
        return await self._client.call("PATCH", path, body=body, result_type=PullRequest)

    async def is_merged(
        self, owner: str, repo: str, number: int
    ) -> tuple[bool, Response | None]:
        path = expand_path(
            "repos/{owner}/{repo}/pulls/{number}/merge", owner=owner, repo=repo, number=number
        )
        return await self._client.check("GET", path)

    async def merge(
        self,
        owner: str,
        repo: str,
        number: int,
        commit_message: str = "",
        opts: PullRequestOptions | None = None,
    ) -> tuple[PullRequestMergeResult | None, Response]:
        path = expand_path(
            "repos/{owner}/{repo}/pulls/{number}/merge", owner=owner, repo=repo, number=number
        )
        body: dict[str, Any] = {}
        if commit_message:
            body["commit_message"] = commit_message
        if opts is not None:
            body.update(opts.model_dump(exclude_none=True))
        return await self._client.call("PUT", path, body=body, result_type=PullRequestMergeResult)
