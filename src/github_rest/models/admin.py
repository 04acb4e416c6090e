"""GitHub Enterprise Server administration resources.

These endpoints exist only on Enterprise Server; point the client at the
instance with GitHubClient.with_enterprise_url() first.

Reference: https://docs.github.com/en/enterprise-server/rest/enterprise-admin
"""

from pydantic import BaseModel

from .common import Resource

__all__ = [
    "AdminStats",
    "CommentStats",
    "CreateUserRequest",
    "GistStats",
    "HookStats",
    "IssueStats",
    "MilestoneStats",
    "OrgStats",
    "PageStats",
    "PullStats",
    "RepoStats",
    "UserStats",
]


class IssueStats(Resource):
    total_issues: int | None = None
    open_issues: int | None = None
    closed_issues: int | None = None


class HookStats(Resource):
    total_hooks: int | None = None
    active_hooks: int | None = None
    inactive_hooks: int | None = None


class MilestoneStats(Resource):
    total_milestones: int | None = None
    open_milestones: int | None = None
    closed_milestones: int | None = None


class OrgStats(Resource):
    total_orgs: int | None = None
    disabled_orgs: int | None = None
    total_teams: int | None = None
    total_team_members: int | None = None


class CommentStats(Resource):
    total_commit_comments: int | None = None
    total_gist_comments: int | None = None
    total_issue_comments: int | None = None
    total_pull_request_comments: int | None = None


class PageStats(Resource):
    total_pages: int | None = None


class UserStats(Resource):
    total_users: int | None = None
    admin_users: int | None = None
    suspended_users: int | None = None


class GistStats(Resource):
    total_gists: int | None = None
    private_gists: int | None = None
    public_gists: int | None = None


class PullStats(Resource):
    total_pulls: int | None = None
    merged_pulls: int | None = None
    mergeable_pulls: int | None = None
    unmergeable_pulls: int | None = None


class RepoStats(Resource):
    total_repos: int | None = None
    root_repos: int | None = None
    fork_repos: int | None = None
    org_repos: int | None = None
    total_pushes: int | None = None
    total_wikis: int | None = None


class AdminStats(Resource):
    """Instance-wide counters from GET /enterprise/stats/all."""

    issues: IssueStats | None = None
    hooks: HookStats | None = None
    milestones: MilestoneStats | None = None
    orgs: OrgStats | None = None
    comments: CommentStats | None = None
    pages: PageStats | None = None
    users: UserStats | None = None
    gists: GistStats | None = None
    pulls: PullStats | None = None
    repos: RepoStats | None = None


class CreateUserRequest(BaseModel):
    login: str
    email: str | None = None
