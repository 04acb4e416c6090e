"""Async iteration across paginated list endpoints.

Every list method returns one page plus a Response whose Link-derived
attributes say where the next page lives. paginate() follows them:

    >>> opts = RepositoryListByOrgOptions(per_page=100)
    >>> async for repo in paginate(client.repositories.list_by_org, "octo-org", opts=opts):
    ...     print(repo.full_name)

Three schemes are handled, checked in this order: cursor (after),
opaque page token and page number. Since-based listings (all users, all
organizations) report the next starting ID as next_page, which is fed
back as opts.since.
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from typing import Any

from pydantic import BaseModel

from .response import Response

logger = logging.getLogger("github_rest.pagination")

__all__ = ["DEFAULT_MAX_PAGES", "next_options", "paginate"]

DEFAULT_MAX_PAGES = 100


def next_options(opts: BaseModel, response: Response) -> BaseModel | None:
    """Options for the page after response, or None on the last page."""
    fields = type(opts).model_fields

    if response.after and "after" in fields:
        return opts.model_copy(update={"after": response.after})
    if response.next_page_token and "page" in fields:
        return opts.model_copy(update={"page": response.next_page_token})
    if response.next_page is not None:
        if "page" in fields:
            return opts.model_copy(update={"page": response.next_page})
        if "since" in fields:
            return opts.model_copy(update={"since": response.next_page})
    return None


async def paginate(
    fetch: Callable[..., Awaitable[tuple[Any, Response]]],
    *args: Any,
    opts: BaseModel,
    max_pages: int = DEFAULT_MAX_PAGES,
    extract: Callable[[Any], Iterable[Any] | None] | None = None,
    **kwargs: Any,
) -> AsyncIterator[Any]:
    """Yield items from every page of a list endpoint.

    Args:
        fetch: Service list method, called as fetch(*args, opts=..., **kwargs)
        *args: Positional arguments for fetch (owner, repo, ...)
        opts: First-page options; never mutated
        max_pages: Stop after this many pages
        extract: Pulls the item list out of wrapper bodies, e.g.
            ``lambda w: w.workflows`` for Workflows
        **kwargs: Extra keyword arguments for fetch

    Yields:
        Items from each page in server order.
    """
    current: BaseModel | None = opts
    pages = 0
    while current is not None and pages < max_pages:
        value, response = await fetch(*args, opts=current, **kwargs)
        pages += 1
        items = extract(value) if extract is not None and value is not None else value
        for item in items or []:
            yield item
        current = next_options(current, response)

    if current is not None:
        logger.info(
            "pagination_limit_reached",
            extra={"max_pages": max_pages, "fetch": getattr(fetch, "__qualname__", repr(fetch))},
        )
