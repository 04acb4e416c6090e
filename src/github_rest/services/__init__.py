"""Per-resource services mounted on GitHubClient."""

from .actions import ActionsService
from .activity import ActivityService
from .admin import AdminService
from .base import Service
from .issues import IssuesService
from .organizations import OrganizationsService
from .pages import PagesService
from .pull_requests import PullRequestsService
from .rate_limit import RateLimitService
from .repositories import RepositoriesService
from .teams import TeamsService
from .users import UsersService

__all__ = [
    "ActionsService",
    "ActivityService",
    "AdminService",
    "IssuesService",
    "OrganizationsService",
    "PagesService",
    "PullRequestsService",
    "RateLimitService",
    "RepositoriesService",
    "Service",
    "TeamsService",
    "UsersService",
]
