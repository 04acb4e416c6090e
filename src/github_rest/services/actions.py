"""GitHub Actions workflow endpoints.

Workflows are addressed either by numeric ID or by file name
(e.g. "main.yml"); each operation comes in both flavours.

References:
- https://docs.github.com/en/rest/actions/workflows
- https://docs.github.com/en/rest/actions/required-workflows
"""

from ..models.actions import OrgRequiredWorkflows, RepoRequiredWorkflows, Workflow, Workflows
from ..models.common import ListOptions
from ..request import expand_path
from ..response import Response
from .base import Service

__all__ = ["ActionsService"]

_WORKFLOW_PATH = "repos/{owner}/{repo}/actions/workflows/{workflow}"


class ActionsService(Service):
    async def list_workflows(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[Workflows | None, Response]:
        path = expand_path("repos/{owner}/{repo}/actions/workflows", owner=owner, repo=repo)
        return await self._client.call("GET", path, params=opts, result_type=Workflows)

    async def _get_workflow(
        self, owner: str, repo: str, workflow: int | str
    ) -> tuple[Workflow | None, Response]:
        path = expand_path(_WORKFLOW_PATH, owner=owner, repo=repo, workflow=workflow)
        return await self._client.call("GET", path, result_type=Workflow)

    async def get_workflow_by_id(
        self, owner: str, repo: str, workflow_id: int
    ) -> tuple[Workflow | None, Response]:
        return await self._get_workflow(owner, repo, workflow_id)

    async def get_workflow_by_file_name(
        self, owner: str, repo: str, file_name: str
    ) -> tuple[Workflow | None, Response]:
        return await self._get_workflow(owner, repo, file_name)

    async def _set_workflow_state(
        self, owner: str, repo: str, workflow: int | str, action: str
    ) -> Response:
        # PUT with no body; only the status code carries meaning
        path = expand_path(_WORKFLOW_PATH + "/" + action, owner=owner, repo=repo, workflow=workflow)
        _, response = await self._client.call("PUT", path)
        return response

    async def enable_workflow_by_id(self, owner: str, repo: str, workflow_id: int) -> Response:
        return await self._set_workflow_state(owner, repo, workflow_id, "enable")

    async def enable_workflow_by_file_name(
        self, owner: str, repo: str, file_name: str
    ) -> Response:
        return await self._set_workflow_state(owner, repo, file_name, "enable")

    async def disable_workflow_by_id(self, owner: str, repo: str, workflow_id: int) -> Response:
        return await self._set_workflow_state(owner, repo, workflow_id, "disable")

    async def disable_workflow_by_file_name(
        self, owner: str, repo: str, file_name: str
    ) -> Response:
        return await self._set_workflow_state(owner, repo, file_name, "disable")

    # --- Required workflows ---

    async def list_org_required_workflows(
        self, org: str, opts: ListOptions | None = None
    ) -> tuple[OrgRequiredWorkflows | None, Response]:
        path = expand_path("orgs/{org}/actions/required_workflows", org=org)
        return await self._client.call("GET", path, params=opts, result_type=OrgRequiredWorkflows)

    async def list_repo_required_workflows(
        self, owner: str, repo: str, opts: ListOptions | None = None
    ) -> tuple[RepoRequiredWorkflows | None, Response]:
        path = expand_path(
            "repos/{owner}/{repo}/actions/required_workflows", owner=owner, repo=repo
        )
        return await self._client.call(
            "GET", path, params=opts, result_type=RepoRequiredWorkflows
        )
