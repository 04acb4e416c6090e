"""github-rest - Typed async client for the GitHub REST API v3.

Provides:
- Request building from relative path templates with strict validation
- Async transport over httpx with Bearer auth and rate-limit tracking
- Typed resource models (pydantic) and classified errors
- Per-resource services (users, orgs, teams, repos, issues, pulls,
  actions, activity, pages, enterprise admin, rate limit) and Link-header
  pagination

Logging is never configured on import; call configure_logging() from the
application if JSON/text log output is wanted.

Python Version: 3.10+ required
"""

from .__version__ import __version__, __version_info__

# Client
from .client import GitHubClient

# Configuration
from .config import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    ClientSettings,
    get_settings,
    reset_settings,
)

# Errors
from .errors import (
    APIError,
    AbuseRateLimitError,
    DecodeError,
    ErrorBlock,
    FieldError,
    GitHubClientError,
    RateLimitError,
    RequestValidationError,
    TransportError,
    TwoFactorAuthError,
)
from .logging_config import StructuredFormatter, TextFormatter, configure_logging
from .pagination import paginate

# Request / Response
from .request import RequestDescriptor, build_request, encode_query, expand_path
from .response import Response, check_response, decode, decode_either, parse_bool_response

__all__ = [
    "APIError",
    "AbuseRateLimitError",
    "ClientSettings",
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DecodeError",
    "ErrorBlock",
    "FieldError",
    "GitHubClient",
    "GitHubClientError",
    "RateLimitError",
    "RequestDescriptor",
    "RequestValidationError",
    "Response",
    "StructuredFormatter",
    "TextFormatter",
    "TransportError",
    "TwoFactorAuthError",
    "__version__",
    "__version_info__",
    "build_request",
    "check_response",
    "configure_logging",
    "decode",
    "decode_either",
    "encode_query",
    "expand_path",
    "get_settings",
    "paginate",
    "parse_bool_response",
    "reset_settings",
]
