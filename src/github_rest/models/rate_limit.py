"""Rate limit resources.

Reference: https://docs.github.com/en/rest/rate-limit/rate-limit
"""

from datetime import datetime

from .common import Resource

__all__ = ["Rate", "RateLimits"]


class Rate(Resource):
    """Request budget for one rate-limit resource category.

    Attributes:
        limit: Requests allowed per window
        remaining: Requests left in the current window
        used: Requests already consumed in the current window
        reset: When the window resets (decoded from epoch seconds)
        resource: Category the budget applies to (core, search, graphql, ...)
    """

    limit: int | None = None
    remaining: int | None = None
    used: int | None = None
    reset: datetime | None = None
    resource: str | None = None

    @property
    def exhausted(self) -> bool:
        return self.remaining is not None and self.remaining <= 0


class RateLimits(Resource):
    """Budgets for every rate-limit category, as returned by GET /rate_limit."""

    core: Rate | None = None
    search: Rate | None = None
    graphql: Rate | None = None
    integration_manifest: Rate | None = None
    source_import: Rate | None = None
    code_scanning_upload: Rate | None = None
    actions_runner_registration: Rate | None = None
    scim: Rate | None = None
    dependency_snapshots: Rate | None = None
    code_search: Rate | None = None
    audit_log: Rate | None = None

    def categories(self) -> dict[str, Rate]:
        """Return the populated categories keyed by resource name."""
        return {
            name: rate
            for name, rate in self.__dict__.items()
            if isinstance(rate, Rate)
        }
