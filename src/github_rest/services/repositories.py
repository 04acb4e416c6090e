"""Repository and repository contents endpoints.

References:
- https://docs.github.com/en/rest/repos/repos
- https://docs.github.com/en/rest/repos/contents
"""

import posixpath

from ..errors import GitHubClientError, RequestValidationError
from ..models.repos import (
    Repository,
    RepositoryContent,
    RepositoryContentFileOptions,
    RepositoryContentGetOptions,
    RepositoryContentResponse,
    RepositoryListByAuthenticatedUserOptions,
    RepositoryListByOrgOptions,
    RepositoryListByUserOptions,
)
from ..request import expand_path
from ..response import Response, decode_either
from .base import Service

__all__ = ["RepositoriesService"]


class RepositoriesService(Service):
    # --- Repositories ---

    async def get(self, owner: str, repo: str) -> tuple[Repository | None, Response]:
        path = expand_path("repos/{owner}/{repo}", owner=owner, repo=repo)
        return await self._client.call("GET", path, result_type=Repository)

    async def get_by_id(self, repo_id: int) -> tuple[Repository | None, Response]:
        path = expand_path("repositories/{id}", id=repo_id)
        return await self._client.call("GET", path, result_type=Repository)

    async def list_by_org(
        self, org: str, opts: RepositoryListByOrgOptions | None = None
    ) -> tuple[list[Repository] | None, Response]:
        path = expand_path("orgs/{org}/repos", org=org)
        return await self._client.call("GET", path, params=opts, result_type=list[Repository])

    async def list_by_user(
        self, user: str, opts: RepositoryListByUserOptions | None = None
    ) -> tuple[list[Repository] | None, Response]:
        path = expand_path("users/{user}/repos", user=user)
        return await self._client.call("GET", path, params=opts, result_type=list[Repository])

    async def list_by_authenticated_user(
        self, opts: RepositoryListByAuthenticatedUserOptions | None = None
    ) -> tuple[list[Repository] | None, Response]:
        return await self._client.call(
            "GET", "user/repos", params=opts, result_type=list[Repository]
        )

    async def create(self, org: str, repo: Repository) -> tuple[Repository | None, Response]:
        """Create a repository. An empty org creates it for the authenticated user."""
        if org:
            path = expand_path("orgs/{org}/repos", org=org)
        else:
            path = "user/repos"
        return await self._client.call("POST", path, body=repo, result_type=Repository)

    async def edit(
        self, owner: str, repo: str, changes: Repository
    ) -> tuple[Repository | None, Response]:
        path = expand_path("repos/{owner}/{repo}", owner=owner, repo=repo)
        return await self._client.call("PATCH", path, body=changes, result_type=Repository)

    async def delete(self, owner: str, repo: str) -> Response:
        path = expand_path("repos/{owner}/{repo}", owner=owner, repo=repo)
        _, response = await self._client.call("DELETE", path)
        return response

    async def is_collaborator(
        self, owner: str, repo: str, user: str
    ) -> tuple[bool, Response | None]:
        path = expand_path(
            "repos/{owner}/{repo}/collaborators/{user}", owner=owner, repo=repo, user=user
        )
        return await self._client.check("GET", path)

    # --- Contents ---

    async def get_readme(
        self, owner: str, repo: str, opts: RepositoryContentGetOptions | None = None
    ) -> tuple[RepositoryContent | None, Response]:
        path = expand_path("repos/{owner}/{repo}/readme", owner=owner, repo=repo)
        return await self._client.call("GET", path, params=opts, result_type=RepositoryContent)

    async def get_contents(
        self,
        owner: str,
        repo: str,
        path: str,
        opts: RepositoryContentGetOptions | None = None,
    ) -> tuple[RepositoryContent | None, list[RepositoryContent] | None, Response]:
        """Fetch a file or a directory listing.

        The server answers with a single object for files, symlinks and
        submodules, and with an array for directories. Exactly one of the
        first two returned values is set.

        Returns:
            (file_content, directory_content, Response)

        Raises:
            RequestValidationError: If path contains '..' segments or
                control characters.
            DecodeError: If the body is neither shape.
        """
        url = expand_path(
            "repos/{owner}/{repo}/contents/{path*}", owner=owner, repo=repo, path=path
        )
        descriptor = self._client.new_request("GET", url, params=opts)
        response = await self._client.do(descriptor)
        file_content, directory_content = decode_either(
            response, RepositoryContent, list[RepositoryContent]
        )
        return file_content, directory_content, response

    async def _write_file(
        self, method: str, owner: str, repo: str, path: str, opts: RepositoryContentFileOptions
    ) -> tuple[RepositoryContentResponse | None, Response]:
        if not path.strip("/"):
            raise RequestValidationError("file path must not be empty")
        url = expand_path(
            "repos/{owner}/{repo}/contents/{path*}", owner=owner, repo=repo, path=path
        )
        return await self._client.call(
            method, url, body=opts, result_type=RepositoryContentResponse
        )

    async def create_file(
        self, owner: str, repo: str, path: str, opts: RepositoryContentFileOptions
    ) -> tuple[RepositoryContentResponse | None, Response]:
        """Create a file. opts.message and opts.content are required by the API."""
        return await self._write_file("PUT", owner, repo, path, opts)

    async def update_file(
        self, owner: str, repo: str, path: str, opts: RepositoryContentFileOptions
    ) -> tuple[RepositoryContentResponse | None, Response]:
        """Replace a file. opts.sha must be the blob SHA being replaced."""
        return await self._write_file("PUT", owner, repo, path, opts)

    async def delete_file(
        self, owner: str, repo: str, path: str, opts: RepositoryContentFileOptions
    ) -> tuple[RepositoryContentResponse | None, Response]:
        """Delete a file. opts.message and opts.sha are required by the API."""
        return await self._write_file("DELETE", owner, repo, path, opts)

    async def download_contents_url(
        self,
        owner: str,
        repo: str,
        path: str,
        opts: RepositoryContentGetOptions | None = None,
    ) -> tuple[str, Response]:
        """Resolve the raw download URL of a file.

        Lists the parent directory rather than the file itself, so files
        too large for inline content still resolve.

        Raises:
            GitHubClientError: If no file with that name exists in the
                parent directory.
        """
        directory, filename = posixpath.split(path.strip("/"))
        _, entries, response = await self.get_contents(owner, repo, directory, opts)
        for entry in entries or []:
            if entry.name == filename and entry.download_url:
                return entry.download_url, response
        raise GitHubClientError(f"no file named {filename!r} found in {directory or '/'!r}")
