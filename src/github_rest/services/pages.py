"""GitHub Pages endpoints for a repository.

Reference: https://docs.github.com/en/rest/pages/pages
"""

from ..models.common import ListOptions
from ..models.pages import NewPages, Pages, PagesBuild, PagesUpdate
from ..request import expand_path
from ..response import Response
from .base import Service

__all__ = ["PagesService"]

_PAGES = "repos/{owner}/{repo}/pages"


class PagesService(Service):
    # --- Site ---

    async def get(self, owner: str, repo: str) -> tuple[Pages | None, Response]:
        path = expand_path(_PAGES, owner=owner, repo=repo)
        return await self._client.call("GET", path, result_type=Pages)

    async def enable(
        self, owner: str, repo: str, pages: NewPages
    ) -> tuple[Pages | None, Response]:
        path = expand_path(_PAGES, owner=owner, repo=repo)
        return await self._client.call("POST", path, body=pages, result_type=Pages)

    async def update(self, owner: str, repo: str, opts: PagesUpdate) -> Response:
        """Change the site configuration. The server answers 204 No Content."""
        path = expand_path(_PAGES, owner=owner, repo=repo)
        _, response = await self._client.call("PUT", path, body=opts)
        return response

    async def disable(self, owner: str, repo: str) -> Response:
        path = expand_path(_PAGES, owner=owner, repo=repo)
        _, response = await self._client.call("DELETE", path)
        return response

    # --- Builds ---

    async def list_builds(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[list[PagesBuild] | None, Response]:
        path = expand_path(_PAGES + "/builds", owner=owner, repo=repo)
        return await self._client.call("GET", path, params=opts, result_type=list[PagesBuild])

    async def get_latest_build(self, owner: str, repo: str) -> tuple[PagesBuild | None, Response]:
        path = expand_path(_PAGES + "/builds/latest", owner=owner, repo=repo)
        return await self._client.call("GET", path, result_type=PagesBuild)

    async def get_build(
        self, owner: str, repo: str, build_id: int
    ) -> tuple[PagesBuild | None, Response]:
        path = expand_path(_PAGES + "/builds/{id}", owner=owner, repo=repo, id=build_id)
        return await self._client.call("GET", path, result_type=PagesBuild)

    async def request_build(self, owner: str, repo: str) -> tuple[PagesBuild | None, Response]:
        """Queue a build of the latest revision.

        The returned build carries only url and status ("queued").
        """
        path = expand_path(_PAGES + "/builds", owner=owner, repo=repo)
        return await self._client.call("POST", path, result_type=PagesBuild)
