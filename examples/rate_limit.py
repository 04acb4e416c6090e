"""Print the rate-limit budget for every category.

Demonstrates:
- Building a client from GITHUB_REST_* environment settings
- Structured logging via configure_logging()
- Reading the per-resource rate snapshot

Requirements:
- GITHUB_REST_TOKEN environment variable set (optional; unauthenticated
  requests get a much smaller budget)

Run:
    python3 examples/rate_limit.py
"""

import asyncio
import logging

from github_rest import GitHubClient, configure_logging, get_settings

logger = logging.getLogger("github_rest.examples.rate_limit")


async def main() -> None:
    configure_logging()

    async with GitHubClient.from_settings(get_settings()) as client:
        limits, _ = await client.rate_limit.get()
        if limits is None:
            logger.error("rate_limit_unavailable")
            return

        for resource, rate in sorted(limits.categories().items()):
            print(f"{resource:>28}: {rate.remaining}/{rate.limit} (resets {rate.reset})")


if __name__ == "__main__":
    asyncio.run(main())
