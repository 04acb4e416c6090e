"""Base types shared by every resource and option model.

Every resource field is optional and defaults to None, which means "absent
from the JSON payload". Zero values (0, "", False, []) are kept as-is, so a
partial payload never gets confused with an explicit empty value.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict

__all__ = [
    "Links",
    "ListCursorOptions",
    "ListOptions",
    "Options",
    "Resource",
    "Timestamps",
    "format_timestamp",
]


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO 8601 UTC with a 'Z' suffix.

    Naive datetimes are treated as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class Resource(BaseModel):
    """Typed representation of one JSON object exchanged with the API.

    Unknown keys are ignored so new server-side fields never break decoding.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, dropping absent (None) fields."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True, by_alias=True)

    def __str__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}"
            for name, value in self.__dict__.items()
            if value is not None
        )
        return f"{type(self).__name__}({fields})"


class Timestamps(BaseModel):
    """Creation and modification timestamps carried by most resources."""

    created_at: datetime | None = None
    updated_at: datetime | None = None


class Links(BaseModel):
    """API and browser URLs carried by most resources."""

    url: str | None = None
    html_url: str | None = None


class Options(BaseModel):
    """Query parameters for one operation.

    Unknown names are rejected so a misspelled option fails loudly instead of
    being silently dropped from the request.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ListOptions(Options):
    """Offset pagination for list operations.

    Attributes:
        page: Page of results to retrieve (1-based)
        per_page: Results per page (max 100 for most endpoints)
    """

    page: int | None = None
    per_page: int | None = None


class ListCursorOptions(Options):
    """Cursor pagination for list operations that do not support page numbers."""

    page: str | None = None
    per_page: int | None = None
    after: str | None = None
    before: str | None = None
    cursor: str | None = None
