"""Resource and option models for the GitHub REST API."""

from .actions import (
    OrgRequiredWorkflow,
    OrgRequiredWorkflows,
    RepoRequiredWorkflow,
    RepoRequiredWorkflows,
    Workflow,
    Workflows,
)
from .admin import (
    AdminStats,
    CommentStats,
    CreateUserRequest,
    GistStats,
    HookStats,
    IssueStats,
    MilestoneStats,
    OrgStats,
    PageStats,
    PullStats,
    RepoStats,
    UserStats,
)
from .activity import (
    ActivityListStarredOptions,
    Notification,
    NotificationListOptions,
    NotificationSubject,
    StarredRepository,
    Stargazer,
)
from .common import (
    Links,
    ListCursorOptions,
    ListOptions,
    Options,
    Resource,
    Timestamps,
    format_timestamp,
)
from .issues import (
    Issue,
    IssueComment,
    IssueListByRepoOptions,
    IssueListCommentsOptions,
    IssueListOptions,
    IssueRequest,
    Label,
    LockIssueOptions,
    Milestone,
    PullRequestLinks,
)
from .orgs import ListMembersOptions, Organization, OrganizationsListOptions
from .pages import (
    NewPages,
    Pages,
    PagesBuild,
    PagesError,
    PagesHTTPSCertificate,
    PagesSource,
    PagesUpdate,
)
from .pulls import (
    NewPullRequest,
    PullRequest,
    PullRequestBranch,
    PullRequestListOptions,
    PullRequestMergeResult,
    PullRequestOptions,
    RawType,
)
from .rate_limit import Rate, RateLimits
from .repos import (
    Commit,
    CommitAuthor,
    Repository,
    RepositoryContent,
    RepositoryContentFileOptions,
    RepositoryContentGetOptions,
    RepositoryContentResponse,
    RepositoryListByAuthenticatedUserOptions,
    RepositoryListByOrgOptions,
    RepositoryListByUserOptions,
)
from .teams import NewTeam, Team, TeamListTeamMembersOptions
from .users import User, UserListOptions

__all__ = [
    "ActivityListStarredOptions",
    "AdminStats",
    "CommentStats",
    "Commit",
    "CommitAuthor",
    "CreateUserRequest",
    "GistStats",
    "HookStats",
    "Issue",
    "IssueComment",
    "IssueListByRepoOptions",
    "IssueListCommentsOptions",
    "IssueListOptions",
    "IssueRequest",
    "IssueStats",
    "Label",
    "Links",
    "ListCursorOptions",
    "ListMembersOptions",
    "ListOptions",
    "LockIssueOptions",
    "Milestone",
    "MilestoneStats",
    "NewPages",
    "NewPullRequest",
    "NewTeam",
    "Notification",
    "NotificationListOptions",
    "NotificationSubject",
    "Options",
    "OrgRequiredWorkflow",
    "OrgRequiredWorkflows",
    "OrgStats",
    "Organization",
    "OrganizationsListOptions",
    "PageStats",
    "Pages",
    "PagesBuild",
    "PagesError",
    "PagesHTTPSCertificate",
    "PagesSource",
    "PagesUpdate",
    "PullRequest",
    "PullRequestBranch",
    "PullRequestLinks",
    "PullRequestListOptions",
    "PullRequestMergeResult",
    "PullRequestOptions",
    "PullStats",
    "Rate",
    "RateLimits",
    "RawType",
    "RepoRequiredWorkflow",
    "RepoRequiredWorkflows",
    "RepoStats",
    "Repository",
    "RepositoryContent",
    "RepositoryContentFileOptions",
    "RepositoryContentGetOptions",
    "RepositoryContentResponse",
    "RepositoryListByAuthenticatedUserOptions",
    "RepositoryListByOrgOptions",
    "RepositoryListByUserOptions",
    "Resource",
    "Stargazer",
    "StarredRepository",
    "Team",
    "TeamListTeamMembersOptions",
    "Timestamps",
    "User",
    "UserListOptions",
    "UserStats",
    "Workflow",
    "Workflows",
    "format_timestamp",
]
