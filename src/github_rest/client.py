"""GitHub REST API client.

Async httpx-based client with Bearer token auth. Builds requests from
relative path templates, executes them over a pooled httpx.AsyncClient,
classifies failures and decodes bodies into typed models. Rate-limit
headers are recorded per resource category but never enforced: callers
decide whether and when to retry.

Reference: https://docs.github.com/en/rest
Rate limits: https://docs.github.com/en/rest/using-the-rest-api/rate-limits-for-the-rest-api
"""

import logging
import threading
import time
from typing import Any

import httpx
from pydantic import BaseModel

from . import metrics
from .config import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    MEDIA_TYPE_JSON,
    ClientSettings,
)
from .errors import (
    APIError,
    AbuseRateLimitError,
    DecodeError,
    RateLimitError,
    RequestValidationError,
    TransportError,
    TwoFactorAuthError,
)
from .models.rate_limit import Rate
from .request import RequestDescriptor, build_request
from .response import Response, check_response, decode, parse_bool_response
from .services import (
    ActionsService,
    ActivityService,
    AdminService,
    IssuesService,
    OrganizationsService,
    PagesService,
    PullRequestsService,
    RateLimitService,
    RepositoriesService,
    TeamsService,
    UsersService,
)

logger = logging.getLogger("github_rest.client")

__all__ = ["GitHubClient"]


def _error_kind(error: APIError) -> str:
    if isinstance(error, RateLimitError):
        return "rate_limit"
    if isinstance(error, AbuseRateLimitError):
        return "abuse_rate_limit"
    if isinstance(error, TwoFactorAuthError):
        return "two_factor"
    return "api"


class GitHubClient:
    """GitHub REST API client using httpx with Bearer token auth.

    Uses one long-lived httpx.AsyncClient with connection pooling. Safe to
    share between concurrent tasks: each call builds its own request and
    response, and the credential and rate-limit snapshot sit behind a lock.

    Attributes:
        base_url: API root; must end with a slash
        api_version: Value of the X-GitHub-Api-Version header
        user_agent: Value of the User-Agent header
        users, organizations, teams, repositories, issues, pull_requests,
        actions, activity, pages, admin, rate_limit: Per-resource services

    Example:
        >>> async with GitHubClient("ghp_token") as client:
        ...     repo, resp = await client.repositories.get("octocat", "hello-world")
        ...     print(repo.full_name, resp.rate.remaining)
    """

    # Timeout configuration
    CONNECT_TIMEOUT = 5.0  # seconds
    READ_TIMEOUT = 30.0  # seconds
    WRITE_TIMEOUT = 5.0  # seconds
    POOL_TIMEOUT = 5.0  # seconds

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        *,
        api_version: str = DEFAULT_API_VERSION,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: httpx.Timeout | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: Personal access token or installation token. None sends
                unauthenticated requests.
            base_url: API root (default: https://api.github.com/). A missing
                trailing slash is added.
            api_version: REST API version header value
            user_agent: User-Agent header value
            timeout: Default timeouts for every call
            http_client: Pre-built httpx.AsyncClient (transport injection)
        """
        base_url = base_url or DEFAULT_BASE_URL
        if not base_url.endswith("/"):
            base_url += "/"
        self.base_url = base_url
        self.api_version = api_version
        self.user_agent = user_agent

        self._lock = threading.Lock()
        self._token = token or None
        self._rates: dict[str, Rate] = {}

        self._client = http_client or httpx.AsyncClient(
            headers={
                "Accept": MEDIA_TYPE_JSON,
                "X-GitHub-Api-Version": api_version,
                "User-Agent": user_agent,
            },
            timeout=timeout
            or httpx.Timeout(
                connect=self.CONNECT_TIMEOUT,
                read=self.READ_TIMEOUT,
                write=self.WRITE_TIMEOUT,
                pool=self.POOL_TIMEOUT,
            ),
        )

        self.users = UsersService(self)
        self.organizations = OrganizationsService(self)
        self.teams = TeamsService(self)
        self.repositories = RepositoriesService(self)
        self.issues = IssuesService(self)
        self.pull_requests = PullRequestsService(self)
        self.actions = ActionsService(self)
        self.activity = ActivityService(self)
        self.pages = PagesService(self)
        self.admin = AdminService(self)
        self.rate_limit = RateLimitService(self)

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "GitHubClient":
        """Build a client from ClientSettings (environment / .env)."""
        return cls(
            settings.token.get_secret_value() or None,
            settings.base_url,
            api_version=settings.api_version,
            user_agent=settings.user_agent,
            timeout=httpx.Timeout(
                connect=settings.connect_timeout,
                read=settings.read_timeout,
                write=settings.write_timeout,
                pool=settings.pool_timeout,
            ),
        )

    def with_enterprise_url(self, base_url: str) -> "GitHubClient":
        """Point the client at a GitHub Enterprise Server instance.

        Appends "api/v3/" unless the URL already ends with it.

        Args:
            base_url: Enterprise host URL, e.g. https://github.example.com

        Returns:
            This client, for chaining.

        Raises:
            RequestValidationError: If base_url is not an http(s) URL.
        """
        if not base_url.startswith(("http://", "https://")):
            raise RequestValidationError(f"enterprise URL must be http(s), got {base_url!r}")
        if not base_url.endswith("/"):
            base_url += "/"
        if not base_url.endswith("/api/v3/"):
            base_url += "api/v3/"
        with self._lock:
            self.base_url = base_url
        logger.info("enterprise_url_configured", extra={"base_url": base_url})
        return self

    async def __aenter__(self) -> "GitHubClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit -- close httpx client."""
        await self.close()

    async def close(self) -> None:
        """Close the httpx client and release connections."""
        await self._client.aclose()

    # --- Credential & Rate Snapshot ---

    def set_token(self, token: str | None) -> None:
        """Rotate the credential used by subsequent calls."""
        with self._lock:
            self._token = token or None
        logger.info("token_rotated", extra={"authenticated": bool(token)})

    def rate_limits(self) -> dict[str, Rate]:
        """Copy of the latest rate budget seen per resource category."""
        with self._lock:
            return dict(self._rates)

    def _record_rate(self, rate: Rate) -> None:
        if rate.limit is None and rate.remaining is None:
            return
        resource = rate.resource or "core"
        with self._lock:
            self._rates[resource] = rate
        if rate.remaining is not None:
            metrics.rate_limit_remaining.labels(resource=resource).set(rate.remaining)

    def update_rate_limits(self, rates: dict[str, Rate]) -> None:
        """Replace snapshot entries with budgets from GET /rate_limit."""
        with self._lock:
            self._rates.update(rates)
        for resource, rate in rates.items():
            if rate.remaining is not None:
                metrics.rate_limit_remaining.labels(resource=resource).set(rate.remaining)

    # --- Request Execution ---

    def new_request(
        self,
        method: str,
        path: str,
        params: BaseModel | dict[str, Any] | None = None,
        body: Any = None,
        accept: str | None = None,
    ) -> RequestDescriptor:
        """Build a request for a path relative to base_url.

        Raises:
            RequestValidationError: On a malformed path, query or body.
        """
        with self._lock:
            base_url = self.base_url
        try:
            return build_request(method, path, base_url, params=params, body=body, accept=accept)
        except RequestValidationError:
            metrics.errors_total.labels(kind="validation").inc()
            raise

    async def do(self, descriptor: RequestDescriptor, timeout: float | None = None) -> Response:
        """Send a request and classify the response.

        Args:
            descriptor: Request built by new_request()
            timeout: Per-call timeout in seconds (overrides client default)

        Returns:
            Response envelope for a 2xx answer.

        Raises:
            RequestValidationError: httpx rejects the request URL.
            TransportError: Network failure, timeout or closed client (no response).
            APIError: Non-2xx answer (or a rate-limit / 2FA subclass).
        """
        headers = dict(descriptor.headers)
        with self._lock:
            token = self._token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if descriptor.body is not None:
            headers["Content-Type"] = "application/json"

        try:
            request = self._client.build_request(
                descriptor.method,
                descriptor.url,
                params=descriptor.params or None,
                content=descriptor.body,
                headers=headers,
                timeout=httpx.Timeout(timeout) if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.InvalidURL as e:
            metrics.errors_total.labels(kind="validation").inc()
            raise RequestValidationError(f"invalid request URL {descriptor.url!r}: {e}") from e

        if self._client.is_closed:
            metrics.errors_total.labels(kind="transport").inc()
            raise TransportError(
                f"{descriptor.method} {descriptor.url}: client has been closed",
                method=descriptor.method,
                url=descriptor.url,
            )

        start = time.monotonic()
        try:
            raw = await self._client.send(request)
        except httpx.TimeoutException as e:
            metrics.requests_total.labels(method=descriptor.method, status_class="transport_error").inc()
            metrics.errors_total.labels(kind="transport").inc()
            logger.warning(
                "github_request_timeout",
                extra={"method": descriptor.method, "url": descriptor.url},
            )
            raise TransportError(
                f"{descriptor.method} {descriptor.url}: request timed out",
                method=descriptor.method,
                url=descriptor.url,
                is_timeout=True,
            ) from e
        except httpx.HTTPError as e:
            metrics.requests_total.labels(method=descriptor.method, status_class="transport_error").inc()
            metrics.errors_total.labels(kind="transport").inc()
            logger.warning(
                "github_request_failed",
                extra={"method": descriptor.method, "url": descriptor.url, "error": str(e)},
            )
            raise TransportError(
                f"{descriptor.method} {descriptor.url}: {e}",
                method=descriptor.method,
                url=descriptor.url,
            ) from e
        duration = time.monotonic() - start

        response = Response.from_httpx(raw, descriptor)
        self._record_rate(response.rate)

        metrics.requests_total.labels(
            method=descriptor.method, status_class=metrics.status_class(response.status_code)
        ).inc()
        metrics.request_duration_seconds.labels(method=descriptor.method).observe(duration)
        logger.debug(
            "github_request",
            extra={
                "method": descriptor.method,
                "url": descriptor.url,
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 1),
                "rate_remaining": response.rate.remaining,
            },
        )

        try:
            check_response(response)
        except APIError as e:
            metrics.errors_total.labels(kind=_error_kind(e)).inc()
            raise
        return response

    async def call(
        self,
        method: str,
        path: str,
        *,
        params: BaseModel | dict[str, Any] | None = None,
        body: Any = None,
        accept: str | None = None,
        result_type: Any = None,
        timeout: float | None = None,
    ) -> tuple[Any, Response]:
        """Build, send and decode in one step.

        Args:
            method: HTTP method
            path: Expanded relative path
            params: Query options
            body: JSON body
            accept: Accept header override
            result_type: Type to decode the body into; None skips decoding
            timeout: Per-call timeout in seconds

        Returns:
            (decoded value or None, Response)
        """
        descriptor = self.new_request(method, path, params=params, body=body, accept=accept)
        response = await self.do(descriptor, timeout=timeout)
        if result_type is None:
            return None, response
        try:
            return decode(response, result_type), response
        except DecodeError:
            metrics.errors_total.labels(kind="decode").inc()
            raise

    async def check(
        self, method: str, path: str, *, timeout: float | None = None
    ) -> tuple[bool, Response | None]:
        """Call a yes/no endpoint (204 = yes, 404 = no)."""
        try:
            _, response = await self.call(method, path, timeout=timeout)
        except APIError as e:
            return parse_bool_response(e), e.response
        return True, response
