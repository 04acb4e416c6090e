"""GitHub Actions workflow resources.

References:
- https://docs.github.com/en/rest/actions/workflows
- https://docs.github.com/en/rest/actions/required-workflows
"""

from .common import Links, Resource, Timestamps
from .repos import Repository

__all__ = [
    "OrgRequiredWorkflow",
    "OrgRequiredWorkflows",
    "RepoRequiredWorkflow",
    "RepoRequiredWorkflows",
    "Workflow",
    "Workflows",
]


class Workflow(Timestamps, Links, Resource):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    path: str | None = None
    state: str | None = None  # active, disabled_manually, disabled_inactivity
    badge_url: str | None = None


class Workflows(Resource):
    total_count: int | None = None
    workflows: list[Workflow] | None = None


class OrgRequiredWorkflow(Timestamps, Resource):
    id: int | None = None
    name: str | None = None
    path: str | None = None
    scope: str | None = None  # all or selected
    ref: str | None = None
    state: str | None = None
    selected_repositories_url: str | None = None
    repository: Repository | None = None


class OrgRequiredWorkflows(Resource):
    total_count: int | None = None
    required_workflows: list[OrgRequiredWorkflow] | None = None


class RepoRequiredWorkflow(Timestamps, Links, Resource):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    path: str | None = None
    state: str | None = None
    badge_url: str | None = None
    source_repository: Repository | None = None


class RepoRequiredWorkflows(Resource):
    total_count: int | None = None
    required_workflows: list[RepoRequiredWorkflow] | None = None
