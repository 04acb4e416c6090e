"""Repository and repository contents resources.

References:
- https://docs.github.com/en/rest/repos/repos
- https://docs.github.com/en/rest/repos/contents
"""

import base64
import binascii
from datetime import datetime

from pydantic import BaseModel, field_serializer

from .common import Links, ListOptions, Options, Resource, Timestamps
from .orgs import Organization
from .users import User

__all__ = [
    "Commit",
    "CommitAuthor",
    "Repository",
    "RepositoryContent",
    "RepositoryContentFileOptions",
    "RepositoryContentGetOptions",
    "RepositoryContentResponse",
    "RepositoryListByAuthenticatedUserOptions",
    "RepositoryListByOrgOptions",
    "RepositoryListByUserOptions",
]


class Repository(Timestamps, Links, Resource):
    id: int | None = None
    node_id: str | None = None
    owner: User | None = None
    name: str | None = None
    full_name: str | None = None
    description: str | None = None
    homepage: str | None = None
    default_branch: str | None = None
    master_branch: str | None = None
    pushed_at: datetime | None = None
    language: str | None = None
    visibility: str | None = None
    topics: list[str] | None = None

    private: bool | None = None
    fork: bool | None = None
    archived: bool | None = None
    disabled: bool | None = None
    is_template: bool | None = None

    size: int | None = None
    forks_count: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    subscribers_count: int | None = None
    open_issues_count: int | None = None

    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_pages: bool | None = None
    has_projects: bool | None = None
    has_downloads: bool | None = None
    has_discussions: bool | None = None
    allow_merge_commit: bool | None = None
    allow_squash_merge: bool | None = None
    allow_rebase_merge: bool | None = None
    allow_auto_merge: bool | None = None
    delete_branch_on_merge: bool | None = None

    # Write-only creation parameters
    auto_init: bool | None = None
    gitignore_template: str | None = None
    license_template: str | None = None
    team_id: int | None = None

    permissions: dict[str, bool] | None = None
    organization: Organization | None = None
    parent: "Repository | None" = None
    source: "Repository | None" = None
    template_repository: "Repository | None" = None

    clone_url: str | None = None
    git_url: str | None = None
    ssh_url: str | None = None
    svn_url: str | None = None
    mirror_url: str | None = None
    contents_url: str | None = None
    issues_url: str | None = None
    pulls_url: str | None = None


class RepositoryListByOrgOptions(ListOptions):
    type: str | None = None  # all, public, private, forks, sources, member
    sort: str | None = None  # created, updated, pushed, full_name
    direction: str | None = None  # asc or desc


class RepositoryListByUserOptions(ListOptions):
    type: str | None = None  # all, owner, member
    sort: str | None = None
    direction: str | None = None


class RepositoryListByAuthenticatedUserOptions(ListOptions):
    visibility: str | None = None  # all, public, private
    affiliation: str | None = None  # owner,collaborator,organization_member
    type: str | None = None
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None
    before: datetime | None = None


class RepositoryContent(Links, Resource):
    """A file, directory, symlink or submodule in a repository.

    Attributes:
        type: file, dir, symlink or submodule
        encoding: Content encoding (base64 for files)
        content: Encoded file content; absent for directory listings
        target: Symlink target
        submodule_git_url: Submodule repository URL
    """

    type: str | None = None
    target: str | None = None
    encoding: str | None = None
    size: int | None = None
    name: str | None = None
    path: str | None = None
    content: str | None = None
    sha: str | None = None
    git_url: str | None = None
    download_url: str | None = None
    submodule_git_url: str | None = None

    def get_content(self) -> str | None:
        """Return the decoded file content.

        Returns:
            Decoded text, or None when no content was sent.

        Raises:
            ValueError: If the encoding is unsupported or the payload is
                not valid base64.
        """
        if self.content is None:
            return None
        if self.encoding in (None, ""):
            return self.content
        if self.encoding == "base64":
            try:
                return base64.b64decode(self.content).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError) as e:
                raise ValueError(f"invalid base64 content in {self.path!r}: {e}") from e
        if self.encoding == "none":
            # Files over 1MB come back without inline content
            return ""
        raise ValueError(f"unsupported content encoding: {self.encoding!r}")


class RepositoryContentGetOptions(Options):
    ref: str | None = None  # Branch, tag or commit SHA


class CommitAuthor(Resource):
    name: str | None = None
    email: str | None = None
    date: datetime | None = None


class Commit(Links, Resource):
    sha: str | None = None
    node_id: str | None = None
    message: str | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None
    parents: list["Commit"] | None = None


class RepositoryContentResponse(Resource):
    """Result of creating, updating or deleting a file."""

    content: RepositoryContent | None = None
    commit: Commit | None = None


class RepositoryContentFileOptions(BaseModel):
    """Request body for creating, updating or deleting a file.

    Attributes:
        message: Commit message (required by the API)
        content: Raw file bytes; base64-encoded on the wire
        sha: Blob SHA of the file being replaced (update and delete only)
        branch: Target branch (default: repository default branch)
    """

    message: str | None = None
    content: bytes | None = None
    sha: str | None = None
    branch: str | None = None
    author: CommitAuthor | None = None
    committer: CommitAuthor | None = None

    @field_serializer("content")
    def _encode_content(self, value: bytes | None) -> str | None:
        if value is None:
            return None
        return base64.b64encode(value).decode("ascii")
