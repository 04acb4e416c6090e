"""Response envelope and decoding.

Every call yields a Response carrying status, headers, pagination hints
parsed from the Link header and the rate-limit budget reported by the
server. check_response() maps non-2xx statuses onto the APIError family;
decode() turns a 2xx body into typed models.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import parse_qs, urlsplit

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import (
    APIError,
    AbuseRateLimitError,
    DecodeError,
    ErrorPayload,
    RateLimitError,
    TwoFactorAuthError,
)
from .models.rate_limit import Rate
from .request import RequestDescriptor

logger = logging.getLogger("github_rest.response")

__all__ = [
    "Response",
    "check_response",
    "decode",
    "decode_either",
    "parse_bool_response",
    "parse_link_header",
    "parse_rate",
    "parse_retry_after",
]

T = TypeVar("T")
U = TypeVar("U")

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_REL_RE = re.compile(r'^rel="([^"]*)"$')

# Header names
HEADER_LINK = "Link"
HEADER_RATE_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_REMAINING = "X-RateLimit-Remaining"
HEADER_RATE_USED = "X-RateLimit-Used"
HEADER_RATE_RESET = "X-RateLimit-Reset"
HEADER_RATE_RESOURCE = "X-RateLimit-Resource"
HEADER_RETRY_AFTER = "Retry-After"
HEADER_OTP = "X-GitHub-OTP"
HEADER_TOKEN_EXPIRATION = "GitHub-Authentication-Token-Expiration"

_TOKEN_EXPIRATION_FORMATS = ("%Y-%m-%d %H:%M:%S %Z", "%Y-%m-%d %H:%M:%S %z")


@dataclass
class Response:
    """Envelope for one API response.

    Page attributes are None when the Link header does not carry them.
    Pagination by cursor uses after/before/cursor; endpoints that paginate
    with an opaque page string set next_page_token instead of next_page.
    """

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    content: bytes = b""
    request: RequestDescriptor | None = None
    first_page: int | None = None
    prev_page: int | None = None
    next_page: int | None = None
    last_page: int | None = None
    next_page_token: str | None = None
    cursor: str | None = None
    before: str | None = None
    after: str | None = None
    rate: Rate = field(default_factory=Rate)
    token_expiration: datetime | None = None

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @classmethod
    def from_httpx(
        cls, raw: httpx.Response, request: RequestDescriptor | None = None
    ) -> "Response":
        """Build an envelope from a completed httpx response."""
        response = cls(
            status_code=raw.status_code,
            headers=raw.headers,
            content=raw.content,
            request=request,
            rate=parse_rate(raw.headers),
            token_expiration=parse_token_expiration(raw.headers),
        )
        link = raw.headers.get(HEADER_LINK)
        if link:
            for name, value in parse_link_header(link).items():
                setattr(response, name, value)
        return response


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_link_header(value: str) -> dict[str, Any]:
    """Parse a Link header into Response pagination attributes.

    Malformed parts (no angle brackets, bad percent escapes, missing or
    non-numeric page values) are skipped rather than raised.

    Returns:
        Mapping of Response attribute name to value, only for parsed parts.
    """
    pages: dict[str, Any] = {}
    for part in value.split(","):
        segments = [segment.strip() for segment in part.split(";")]
        if len(segments) < 2:
            continue
        target = segments[0]
        if not (target.startswith("<") and target.endswith(">")):
            continue
        url = target[1:-1]
        if _BAD_ESCAPE_RE.search(url):
            continue
        query = parse_qs(urlsplit(url).query)

        def first(key: str) -> str | None:
            values = query.get(key)
            return values[0] if values else None

        page = first("page")
        since = first("since")
        after = first("after")
        before = first("before")
        cursor = first("cursor")

        for segment in segments[1:]:
            match = _REL_RE.match(segment)
            if not match:
                continue
            rel = match.group(1)
            if rel == "next":
                number = _to_int(page)
                if number is not None:
                    pages["next_page"] = number
                elif page:
                    pages["next_page_token"] = page
                elif since is not None and _to_int(since) is not None:
                    # since-based listings (users, organizations) page by id
                    pages["next_page"] = _to_int(since)
                if after:
                    pages["after"] = after
                if cursor:
                    pages["cursor"] = cursor
            elif rel == "prev":
                number = _to_int(page)
                if number is not None:
                    pages["prev_page"] = number
                if before:
                    pages["before"] = before
            elif rel == "first":
                number = _to_int(page)
                if number is not None:
                    pages["first_page"] = number
            elif rel == "last":
                number = _to_int(page)
                if number is not None:
                    pages["last_page"] = number
    return pages


def parse_rate(headers: httpx.Headers) -> Rate:
    """Read the X-RateLimit-* headers into a Rate.

    Missing headers leave the matching attribute None. Non-numeric values
    and reset times outside the platform's datetime range are logged and
    ignored.
    """
    values: dict[str, Any] = {}
    for attr, header in (
        ("limit", HEADER_RATE_LIMIT),
        ("remaining", HEADER_RATE_REMAINING),
        ("used", HEADER_RATE_USED),
        ("reset", HEADER_RATE_RESET),
    ):
        raw = headers.get(header)
        if raw is None:
            continue
        number = _to_int(raw)
        if number is None:
            logger.warning(
                "rate_limit_header_invalid",
                extra={"header": header, "value": raw},
            )
            continue
        values[attr] = number

    if "reset" in values:
        try:
            values["reset"] = datetime.fromtimestamp(values["reset"], tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.warning(
                "rate_limit_header_invalid",
                extra={"header": HEADER_RATE_RESET, "value": headers.get(HEADER_RATE_RESET)},
            )
            del values["reset"]
    resource = headers.get(HEADER_RATE_RESOURCE)
    if resource:
        values["resource"] = resource
    return Rate(**values)


def parse_retry_after(headers: httpx.Headers, now: datetime | None = None) -> float | None:
    """Seconds to wait before retrying after a secondary rate limit.

    Retry-After wins; otherwise the distance to X-RateLimit-Reset is used.
    """
    retry_after = headers.get(HEADER_RETRY_AFTER)
    if retry_after is not None:
        seconds = _to_int(retry_after)
        if seconds is not None:
            return float(max(seconds, 0))
    reset = _to_int(headers.get(HEADER_RATE_RESET))
    if reset is not None:
        now = now or datetime.now(timezone.utc)
        return max(reset - now.timestamp(), 0.0)
    return None


def parse_token_expiration(headers: httpx.Headers) -> datetime | None:
    """Expiry of the credential, when the server reports one."""
    value = headers.get(HEADER_TOKEN_EXPIRATION)
    if not value:
        return None
    for fmt in _TOKEN_EXPIRATION_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    logger.warning("token_expiration_header_invalid", extra={"value": value})
    return None


def _error_payload(response: Response) -> ErrorPayload:
    if not response.content:
        return ErrorPayload()
    try:
        return ErrorPayload.model_validate_json(response.content)
    except ValidationError:
        # Non-JSON error pages (proxies, HTML 502s) keep an empty message
        logger.debug(
            "error_body_not_json",
            extra={"status_code": response.status_code},
        )
        return ErrorPayload()


def _is_secondary_rate_limit(payload: ErrorPayload) -> bool:
    url = payload.documentation_url or ""
    return url.endswith("#abuse-rate-limits") or url.endswith("secondary-rate-limits")


def check_response(response: Response) -> None:
    """Raise the matching APIError subclass for a non-2xx response.

    Raises:
        TwoFactorAuthError: 401 with an X-GitHub-OTP "required" challenge
        RateLimitError: 403/429 with the primary budget exhausted
        AbuseRateLimitError: 403/429 from a secondary rate limit
        APIError: Any other non-2xx status
    """
    if response.ok:
        return

    payload = _error_payload(response)
    status = response.status_code

    if status == 401 and response.headers.get(HEADER_OTP, "").startswith("required"):
        raise TwoFactorAuthError.from_payload(status, payload, response)

    if status in (403, 429):
        if response.headers.get(HEADER_RATE_REMAINING) == "0":
            raise RateLimitError.from_payload(status, payload, response, rate=response.rate)
        if _is_secondary_rate_limit(payload):
            raise AbuseRateLimitError.from_payload(
                status,
                payload,
                response,
                retry_after=parse_retry_after(response.headers),
            )

    raise APIError.from_payload(status, payload, response)


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", None) or str(type_)


def decode(response: Response, type_: type[T] | Any) -> T | None:
    """Decode a 2xx JSON body into type_.

    Args:
        response: Checked 2xx response
        type_: Model class or typing form (e.g. list[Repository])

    Returns:
        Decoded value, or None for an empty or JSON null body.

    Raises:
        DecodeError: Body is not JSON or does not match type_.
    """
    body = response.content.strip() if response.content else b""
    if not body or body == b"null":
        return None
    try:
        return _adapter(type_).validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(
            f"cannot decode response body as {_type_name(type_)}: {e.error_count()} error(s)",
            target=_type_name(type_),
            content=response.content,
            response=response,
        ) from e


def decode_either(
    response: Response, primary: type[T] | Any, alternate: type[U] | Any
) -> tuple[T | None, U | None]:
    """Decode a body that may take one of two shapes.

    Exactly one side of the returned tuple is populated.

    Raises:
        DecodeError: Neither shape matches.
    """
    try:
        data = json.loads(response.content)
    except ValueError as e:
        raise DecodeError(
            "response body is not JSON",
            target=f"{_type_name(primary)} | {_type_name(alternate)}",
            content=response.content,
            response=response,
        ) from e

    try:
        return _adapter(primary).validate_python(data), None
    except ValidationError:
        pass
    try:
        return None, _adapter(alternate).validate_python(data)
    except ValidationError as e:
        raise DecodeError(
            f"response body matches neither {_type_name(primary)} nor {_type_name(alternate)}",
            target=f"{_type_name(primary)} | {_type_name(alternate)}",
            content=response.content,
            response=response,
        ) from e


def parse_bool_response(error: APIError) -> bool:
    """Map a failed check endpoint call onto a boolean.

    Check endpoints answer 204 for "yes" and 404 for "no". A 404 becomes
    False; every other error is re-raised.
    """
    if error.status_code == 404:
        return False
    raise error
