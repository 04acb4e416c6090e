"""Configuration management with pydantic-settings for the GitHub REST client.

Loads client settings from (in order of precedence):
1. Environment variables prefixed with GITHUB_REST_ (highest priority)
2. .env file in the working directory
3. Default values (lowest priority)

Settings are frozen after load, so a single instance can be shared between
tasks and threads without copying.

References:
- Pydantic Settings: https://docs.pydantic.dev/latest/concepts/pydantic_settings/
- API versions: https://docs.github.com/en/rest/about-the-rest-api/api-versions
"""

import logging
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .__version__ import __version__

logger = logging.getLogger("github_rest.config")

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "MEDIA_TYPE_DIFF",
    "MEDIA_TYPE_HTML",
    "MEDIA_TYPE_JSON",
    "MEDIA_TYPE_LOCK_REASON_PREVIEW",
    "MEDIA_TYPE_PATCH",
    "MEDIA_TYPE_RAW",
    "MEDIA_TYPE_STAR_PREVIEW",
    "ClientSettings",
    "get_settings",
    "reset_settings",
]

DEFAULT_BASE_URL = "https://api.github.com/"
DEFAULT_API_VERSION = "2022-11-28"
DEFAULT_USER_AGENT = f"github-rest/{__version__}"

# Media types (Accept header values)
MEDIA_TYPE_JSON = "application/vnd.github+json"  # Default for every request
MEDIA_TYPE_RAW = "application/vnd.github.raw+json"  # Raw file contents
MEDIA_TYPE_HTML = "application/vnd.github.html+json"  # Rendered markdown
MEDIA_TYPE_DIFF = "application/vnd.github.diff"  # Pull request diff
MEDIA_TYPE_PATCH = "application/vnd.github.patch"  # Pull request patch

# Preview media types opt into response shapes that are still evolving
MEDIA_TYPE_STAR_PREVIEW = "application/vnd.github.star+json"  # starred_at timestamps
MEDIA_TYPE_LOCK_REASON_PREVIEW = "application/vnd.github.sailor-v-preview+json"


class ClientSettings(BaseSettings):
    """Settings for GitHubClient.

    Attributes:
        token: Personal access token or installation token (stored as SecretStr)
        base_url: API root, always normalized to end with a slash
        api_version: Value of the X-GitHub-Api-Version header
        user_agent: Value of the User-Agent header
        connect_timeout: Connection establishment timeout in seconds
        read_timeout: Read timeout for API responses in seconds
        write_timeout: Write timeout for request bodies in seconds
        pool_timeout: Connection pool acquisition timeout in seconds
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log format (json for production, text for development)
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_REST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,  # Use defaults instead of empty strings
        case_sensitive=False,
        validate_default=True,
        frozen=True,  # Immutable after creation (thread-safe)
        extra="ignore",
    )

    token: SecretStr = Field(
        default=SecretStr(""),
        description="GitHub token sent as a Bearer credential. Empty means unauthenticated.",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API root URL. GitHub Enterprise Server uses https://HOST/api/v3/.",
    )

    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="REST API version (X-GitHub-Api-Version header)",
    )

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent header. GitHub rejects requests without one.",
    )

    connect_timeout: float = Field(default=5.0, gt=0, le=120)
    read_timeout: float = Field(default=30.0, gt=0, le=600)
    write_timeout: float = Field(default=5.0, gt=0, le=120)
    pool_timeout: float = Field(default=5.0, gt=0, le=120)

    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )

    log_format: str = Field(
        default="json",
        pattern="^(json|text)$",
        description="Log format: json (production), text (development)",
    )

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, value: str) -> str:
        """Require an http(s) URL and append the trailing slash relative paths need."""
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        if not value.endswith("/"):
            value += "/"
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> ClientSettings:
    """Get global settings singleton.

    First call loads from environment + .env file, subsequent calls return
    the cached instance.

    Raises:
        ValidationError: If settings values are invalid.
    """
    return ClientSettings()


def reset_settings() -> None:
    """Reset settings singleton for testing.

    Warning:
        Only use in test code. Production code should not reset settings.
    """
    get_settings.cache_clear()
