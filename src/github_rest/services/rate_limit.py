"""Rate limit status endpoint.

Reference: https://docs.github.com/en/rest/rate-limit/rate-limit
"""

from ..models.common import Resource
from ..models.rate_limit import RateLimits
from ..response import Response
from .base import Service

__all__ = ["RateLimitService"]


class _RateLimitBody(Resource):
    resources: RateLimits | None = None


class RateLimitService(Service):
    async def get(self) -> tuple[RateLimits | None, Response]:
        """Fetch budgets for every category and refresh the client snapshot.

        Calling this endpoint does not count against the primary limit.
        """
        body, response = await self._client.call("GET", "rate_limit", result_type=_RateLimitBody)
        if body is None or body.resources is None:
            return None, response
        limits = body.resources
        self._client.update_rate_limits(limits.categories())
        return limits, response
