"""GitHub Pages site and build resources.

Reference: https://docs.github.com/en/rest/pages/pages
"""

from pydantic import BaseModel

from .common import Resource, Timestamps
from .users import User

__all__ = [
    "NewPages",
    "Pages",
    "PagesBuild",
    "PagesError",
    "PagesHTTPSCertificate",
    "PagesSource",
    "PagesUpdate",
]


class PagesSource(Resource):
    branch: str | None = None
    path: str | None = None  # "/" or "/docs"


class PagesHTTPSCertificate(Resource):
    state: str | None = None
    description: str | None = None
    domains: list[str] | None = None
    expires_at: str | None = None


class Pages(Resource):
    url: str | None = None
    status: str | None = None
    cname: str | None = None
    custom_404: bool | None = None
    html_url: str | None = None
    build_type: str | None = None  # legacy or workflow
    source: PagesSource | None = None
    public: bool | None = None
    https_certificate: PagesHTTPSCertificate | None = None
    https_enforced: bool | None = None


class PagesError(Resource):
    message: str | None = None


class PagesBuild(Timestamps, Resource):
    url: str | None = None
    status: str | None = None
    error: PagesError | None = None
    pusher: User | None = None
    commit: str | None = None
    duration: int | None = None


class NewPages(BaseModel):
    """Request body for enabling a Pages site.

    A workflow build_type needs no source; legacy builds publish from
    source.branch.
    """

    build_type: str | None = None
    source: PagesSource | None = None


class PagesUpdate(BaseModel):
    cname: str | None = None
    https_enforced: bool | None = None
    public: bool | None = None
    build_type: str | None = None
    source: PagesSource | None = None
