"""Shared plumbing for per-resource services."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import GitHubClient


class Service:
    """A group of endpoints bound to one GitHubClient.

    Services hold no state of their own; every call goes through the
    client's call()/check() so credentials, rate tracking and error
    classification stay in one place.
    """

    def __init__(self, client: "GitHubClient") -> None:
        self._client = client
