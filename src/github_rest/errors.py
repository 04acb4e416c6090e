"""Error taxonomy for the GitHub REST client.

Four kinds of failure are kept distinct so callers can choose their own
retry or backoff policy:

- RequestValidationError: a path, query or body was rejected before any
  network call was made
- TransportError: the network call itself did not complete
- APIError: the server answered with a non-2xx status (with subclasses for
  primary/secondary rate limits and two-factor challenges)
- DecodeError: the server answered 2xx with a body of an unexpected shape

Reference: https://docs.github.com/en/rest/using-the-rest-api/troubleshooting-the-rest-api
"""

from datetime import datetime
from typing import TYPE_CHECKING, Any

from pydantic import model_validator

from .models.common import Resource
from .models.rate_limit import Rate

if TYPE_CHECKING:
    from .response import Response

__all__ = [
    "APIError",
    "AbuseRateLimitError",
    "DecodeError",
    "ErrorBlock",
    "ErrorPayload",
    "FieldError",
    "GitHubClientError",
    "RateLimitError",
    "RequestValidationError",
    "TransportError",
    "TwoFactorAuthError",
]


class FieldError(Resource):
    """Detail on one field-level failure inside an error payload.

    Validation codes: missing, missing_field, invalid, already_exists,
    unprocessable, custom.
    """

    resource: str | None = None
    field: str | None = None
    code: str | None = None
    message: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_string(cls, data: Any) -> Any:
        # Some endpoints return errors as a list of plain strings
        if isinstance(data, str):
            return {"message": data}
        return data

    def __str__(self) -> str:
        if self.code == "custom" or (self.code is None and self.message):
            return self.message or ""
        return f"{self.code} error caused by {self.field} field on {self.resource} resource"


class ErrorBlock(Resource):
    """Why access to a resource was blocked (HTTP 451)."""

    reason: str | None = None
    created_at: datetime | None = None
    html_url: str | None = None


class ErrorPayload(Resource):
    """JSON body of a non-2xx response."""

    message: str | None = None
    errors: list[FieldError] | None = None
    documentation_url: str | None = None
    block: ErrorBlock | None = None


class GitHubClientError(Exception):
    """Base class for every error raised by this package."""

    pass


class RequestValidationError(GitHubClientError, ValueError):
    """Raised when a request cannot be built.

    Covers path parameters with path-breaking characters, unsupported query
    values and bodies that cannot be serialized. No network call was made.
    """

    pass


class TransportError(GitHubClientError):
    """Raised when the network call could not complete.

    DNS failure, refused connection, TLS failure, timeout. Wraps the
    underlying httpx exception as __cause__.
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
        is_timeout: bool = False,
    ):
        self.method = method
        self.url = url
        self.is_timeout = is_timeout
        super().__init__(message)


class APIError(GitHubClientError):
    """Raised when the server answers with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response
        message: Top-level message from the error body ("" when absent)
        errors: Field-level sub-errors
        documentation_url: Link to the relevant API documentation
        block: Block details for HTTP 451 responses
        response: Envelope of the failed response (headers, rate, pages)
    """

    def __init__(
        self,
        status_code: int,
        message: str = "",
        errors: list[FieldError] | None = None,
        documentation_url: str | None = None,
        block: ErrorBlock | None = None,
        response: "Response | None" = None,
    ):
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        self.documentation_url = documentation_url
        self.block = block
        self.response = response
        super().__init__(self._describe())

    @classmethod
    def from_payload(
        cls, status_code: int, payload: ErrorPayload, response: "Response | None" = None, **kwargs: Any
    ) -> "APIError":
        return cls(
            status_code,
            payload.message or "",
            errors=payload.errors,
            documentation_url=payload.documentation_url,
            block=payload.block,
            response=response,
            **kwargs,
        )

    def _describe(self) -> str:
        target = ""
        if self.response is not None and self.response.request is not None:
            target = f"{self.response.request.method} {self.response.request.url}: "
        text = f"{target}{self.status_code} {self.message}".rstrip()
        if self.errors:
            text += f" {[str(e) for e in self.errors]}"
        return text

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class TwoFactorAuthError(APIError):
    """Raised on 401 when the account requires a two-factor OTP code."""

    pass


class RateLimitError(APIError):
    """Raised when the primary rate limit for the token is exhausted.

    Attributes:
        rate: Budget reported with the rejected response; rate.reset says
            when requests may resume
    """

    def __init__(self, status_code: int, message: str = "", rate: Rate | None = None, **kwargs: Any):
        self.rate = rate or Rate()
        super().__init__(status_code, message, **kwargs)

    def _describe(self) -> str:
        text = super()._describe()
        if self.rate.reset is not None:
            text += f" [rate reset at {self.rate.reset.isoformat()}]"
        return text


class AbuseRateLimitError(APIError):
    """Raised when a secondary (abuse) rate limit was triggered.

    Attributes:
        retry_after: Seconds to wait before retrying, when the server said
    """

    def __init__(self, status_code: int, message: str = "", retry_after: float | None = None, **kwargs: Any):
        self.retry_after = retry_after
        super().__init__(status_code, message, **kwargs)


class DecodeError(GitHubClientError):
    """Raised when a 2xx body does not match the expected type.

    Attributes:
        target: Name of the type(s) decoding was attempted against
        content: Raw response body
        response: Envelope of the response
    """

    def __init__(
        self,
        message: str,
        target: str,
        content: bytes = b"",
        response: "Response | None" = None,
    ):
        self.target = target
        self.content = content
        self.response = response
        super().__init__(message)
