"""Issues, issue comments and issue labels endpoints.

Reference: https://docs.github.com/en/rest/issues
"""

from ..config import MEDIA_TYPE_LOCK_REASON_PREVIEW
from ..models.common import ListOptions
from ..models.issues import (
    Issue,
    IssueComment,
    IssueListByRepoOptions,
    IssueListCommentsOptions,
    IssueListOptions,
    IssueRequest,
    Label,
    LockIssueOptions,
)
from ..request import expand_path
from ..response import Response
from .base import Service

__all__ = ["IssuesService"]


class IssuesService(Service):
    """Issues endpoints.

    Pull requests are issues too: listings include them, and
    Issue.is_pull_request() tells them apart.
    """

    async def list_by_repo(
        self, owner: str, repo: str, opts: IssueListByRepoOptions | None = None
    ) -> tuple[list[Issue] | None, Response]:
        path = expand_path("repos/{owner}/{repo}/issues", owner=owner, repo=repo)
        return await self._client.call("GET", path, params=opts, result_type=list[Issue])

    async def list_by_org(
        self, org: str, opts: IssueListOptions | None = None
    ) -> tuple[list[Issue] | None, Response]:
        path = expand_path("orgs/{org}/issues", org=org)
        return await self._client.call("GET", path, params=opts, result_type=list[Issue])

    async def get(self, owner: str, repo: str, number: int) -> tuple[Issue | None, Response]:
        path = expand_path(
            "repos/{owner}/{repo}/issues/{number}", owner=owner, repo=repo, number=number
        )
        return await self._client.call("GET", path, result_type=Issue)

    async def create(
        self, owner: str, repo: str, issue: IssueRequest
    ) -> tuple[Issue | None, Response]:
        path = expand_path("repos/{owner}/{repo}/issues", owner=owner, repo=repo)
        return await self._client.call("POST", path, body=issue, result_type=Issue)

    async def edit(
        self, owner: str, repo: str, number: int, issue: IssueRequest
    ) -> tuple[Issue | None, Response]:
        path = expand_path(
            "repos/{owner}/{repo}/issues/{number}", owner=owner, repo=repo, number=number
        )
        return await self._client.call("PATCH", path, body=issue, result_type=Issue)

    async def lock(
        self, owner: str, repo: str, number: int, opts: LockIssueOptions | None = None
    ) -> Response:
        """Lock an issue's conversation, optionally recording a reason."""
        path = expand_path(
            "repos/{owner}/{repo}/issues/{number}/lock", owner=owner, repo=repo, number=number
        )
        accept = MEDIA_TYPE_LOCK_REASON_PREVIEW if opts is not None else None
        _, response = await self._client.call("PUT", path, body=opts, accept=accept)
        return response

    async def unlock(self, owner: str, repo: str, number: int) -> Response:
        path = expand_path(
            "repos/{owner}/{repo}/issues/{number}/lock", owner=owner, repo=repo, number=number
        )
        _, response = await self._client.call("DELETE", path)
        return response

    # --- Comments ---

    async def list_comments(
        self,
        owner: str,
        repo: str,
        number: int = 0,
        opts: IssueListCommentsOptions | None = None,
    ) -> tuple[list[IssueComment] | None, Response]:
        """List comments on one issue, or on every issue when number is 0."""
        if number:
            path = expand_path(
                "repos/{owner}/{repo}/issues/{number}/comments",
                owner=owner,
                repo=repo,
                number=number,
            )
        else:
            path = expand_path("repos/{owner}/{repo}/issues/comments", owner=owner, repo=repo)
        return await self._client.call("GET", path, params=opts, result_type=list[IssueComment])

    async def get_comment(
        self, owner: str, repo: str, comment_id: int
    ) -> tuple[IssueComment | None, Response]:
        path = expand_path(
            "repos/{owner}/{repo}/issues/comments/{id}", owner=owner, repo=repo, id=comment_id
        )
        return await self._client.call("GET", path, result_type=IssueComment)

    async def create_comment(
        self, owner: str, repo: str, number: int, comment: IssueComment
    ) -> tuple[IssueComment | None, Response]:
        path = expand_path(
            "repos/{owner}/{repo}/issues/{number}/comments", owner=owner, repo=repo, number=number
        )
        return await self._client.call("POST", path, body=comment, result_type=IssueComment)

    async def edit_comment(
        self, owner: str, repo: str, comment_id: int, comment: IssueComment
    ) -> tuple[IssueComment | None, Response]:
        path = expand_path(
            "repos/{owner}/{repo}/issues/comments/{id}", owner=owner, repo=repo, id=comment_id
        )
        return await self._client.call("PATCH", path, body=comment, result_type=IssueComment)

    async def delete_comment(self, owner: str, repo: str, comment_id: int) -> Response:
        path = expand_path(
            "repos/{owner}/{repo}/issues/comments/{id}", owner=owner, repo=repo, id=comment_id
        )
        _, response = await self._client.call("DELETE", path)
        return response

    # --- Labels ---

    async def list_labels_by_issue(
        self, owner: str, repo: str, number: int, opts: ListOptions | None = None
    ) -> tuple[list[Label] | None, Response]:
        path = expand_path(
            "repos/{owner}/{repo}/issues/{number}/labels", owner=owner, repo=repo, number=number
        )
        return await self._client.call("GET", path, params=opts, result_type=list[Label])

    async def add_labels_to_issue(
        self, owner: str, repo: str, number: int, labels: list[str]
    ) -> tuple[list[Label] | None, Response]:
        path = expand_path(
            "repos/{owner}/{repo}/issues/{number}/labels", owner=owner, repo=repo, number=number
        )
        return await self._client.call("POST", path, body=labels, result_type=list[Label])
