"""Request builder: path templates, query encoding and body serialization.

Turns a relative path template, path parameters, query options and an
optional body into a RequestDescriptor. Nothing here touches the network;
every failure is a RequestValidationError raised before a request exists.

Path templates use {name} for a single path segment and {name*} for a
multi-segment path such as a file path inside a repository:

    >>> expand_path("repos/{owner}/{repo}/contents/{path*}",
    ...             owner="octo", repo="hello", path="docs/read me.md")
    'repos/octo/hello/contents/docs/read%20me.md'
"""

import json
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from .errors import RequestValidationError
from .models.common import format_timestamp

logger = logging.getLogger("github_rest.request")

__all__ = [
    "RequestDescriptor",
    "build_request",
    "encode_query",
    "expand_path",
    "serialize_body",
]

_PLACEHOLDER_RE = re.compile(r"\{(\w+)(\*?)\}")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")


@dataclass
class RequestDescriptor:
    """Fully resolved method, URL, query, body and headers for one call.

    Attributes:
        method: HTTP method (GET, POST, PUT, PATCH, DELETE)
        url: Absolute URL without query string
        params: Encoded query parameters
        body: Serialized JSON body, or None for an empty body
        headers: Per-request headers (e.g. a preview Accept value)
    """

    method: str
    url: str
    params: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    headers: dict[str, str] = field(default_factory=dict)


def _check_control_chars(kind: str, name: str, value: str) -> None:
    if _CONTROL_CHARS_RE.search(value):
        raise RequestValidationError(
            f"{kind} parameter {name!r} contains control characters: {value!r}"
        )


def _escape_segment(name: str, segment: str) -> str:
    if segment in ("", ".", ".."):
        raise RequestValidationError(
            f"path parameter {name!r} must be a non-empty path segment, got {segment!r}"
        )
    return quote(segment, safe="")


def _expand_value(name: str, value: Any, multi_segment: bool) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise RequestValidationError(
            f"path parameter {name!r} must be str or int, got {type(value).__name__}"
        )
    text = str(value)
    _check_control_chars("path", name, text)

    if not multi_segment:
        if "/" in text:
            raise RequestValidationError(
                f"path parameter {name!r} must not contain '/': {text!r}"
            )
        return _escape_segment(name, text)

    # Multi-segment paths may be empty (repository root) and may not climb
    text = text.strip("/")
    if not text:
        return ""
    segments = text.split("/")
    if ".." in segments:
        raise RequestValidationError(
            f"path parameter {name!r} must not contain '..' segments: {text!r}"
        )
    return "/".join(quote(segment, safe="") for segment in segments)


def expand_path(template: str, **params: Any) -> str:
    """Substitute path parameters into a relative path template.

    Args:
        template: Relative path with {name} / {name*} placeholders
        **params: Values for every placeholder (str or int)

    Returns:
        Relative path with every value percent-encoded.

    Raises:
        RequestValidationError: If a placeholder has no value, or a value
            contains control characters, embedded separators or '..'.
    """

    def replace(match: re.Match) -> str:
        name, star = match.group(1), match.group(2)
        if name not in params:
            raise RequestValidationError(
                f"missing path parameter {name!r} for template {template!r}"
            )
        return _expand_value(name, params[name], multi_segment=bool(star))

    return _PLACEHOLDER_RE.sub(replace, template)


def _query_value(name: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _query_value(name, value.value)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(name, item) for item in value)
    if isinstance(value, (str, int, float)):
        text = str(value)
        _check_control_chars("query", name, text)
        return text
    raise RequestValidationError(
        f"unsupported value for query parameter {name!r}: {type(value).__name__}"
    )


def encode_query(*options: BaseModel | dict[str, Any] | None) -> dict[str, str]:
    """Encode one or more option objects into query parameters.

    Later options override earlier ones. None values are never sent.

    Args:
        *options: Option models, plain dicts, or None

    Returns:
        Mapping of query parameter name to encoded string value.

    Raises:
        RequestValidationError: If a value cannot be encoded.
    """
    params: dict[str, str] = {}
    for opts in options:
        if opts is None:
            continue
        if isinstance(opts, BaseModel):
            values = opts.model_dump(by_alias=True, exclude_none=True)
        elif isinstance(opts, dict):
            values = {k: v for k, v in opts.items() if v is not None}
        else:
            raise RequestValidationError(
                f"query options must be a model or dict, got {type(opts).__name__}"
            )
        for name, value in values.items():
            params[name] = _query_value(name, value)
    return params


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True, by_alias=True)
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_body(body: Any) -> bytes | None:
    """Serialize a request body to JSON bytes.

    Pydantic models drop their None fields; dicts and lists are sent as given.

    Raises:
        RequestValidationError: If the body cannot be serialized.
    """
    if body is None:
        return None
    try:
        if isinstance(body, BaseModel):
            payload = body.model_dump(mode="json", exclude_none=True, by_alias=True)
        else:
            payload = body
        return json.dumps(payload, default=_json_default, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError, PydanticSerializationError) as e:
        raise RequestValidationError(f"request body is not JSON serializable: {e}") from e


def build_request(
    method: str,
    path: str,
    base_url: str,
    params: BaseModel | dict[str, Any] | None = None,
    body: Any = None,
    accept: str | None = None,
) -> RequestDescriptor:
    """Build a RequestDescriptor for a relative API path.

    Args:
        method: HTTP method
        path: Relative path, already expanded (no leading slash)
        base_url: API root; must end with a slash
        params: Query options
        body: JSON body (model, dict or list)
        accept: Accept header override (preview or raw media types)

    Returns:
        RequestDescriptor ready for GitHubClient.do()

    Raises:
        RequestValidationError: On a malformed base URL, path, query or body.
    """
    if not base_url.endswith("/"):
        raise RequestValidationError(
            f"base URL must have a trailing slash, but {base_url!r} does not"
        )
    if path.startswith("/"):
        raise RequestValidationError(
            f"path must be relative to the base URL, got {path!r}"
        )
    _check_control_chars("path", "path", path)

    headers: dict[str, str] = {}
    if accept:
        headers["Accept"] = accept

    descriptor = RequestDescriptor(
        method=method.upper(),
        url=base_url + path,
        params=encode_query(params),
        body=serialize_body(body),
        headers=headers,
    )
    logger.debug(
        "request_built",
        extra={"method": descriptor.method, "url": descriptor.url},
    )
    return descriptor
