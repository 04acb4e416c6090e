"""Iterate over every repository of an organization.

Demonstrates:
- paginate() following Link headers across pages
- Handling APIError / TransportError without retries in the library

Run:
    python3 examples/iter_pagination.py <org>
"""

import asyncio
import sys

from github_rest import APIError, GitHubClient, TransportError, get_settings, paginate
from github_rest.models import RepositoryListByOrgOptions


async def main(org: str) -> int:
    async with GitHubClient.from_settings(get_settings()) as client:
        opts = RepositoryListByOrgOptions(type="public", per_page=100)
        try:
            count = 0
            async for repo in paginate(client.repositories.list_by_org, org, opts=opts):
                print(repo.full_name, repo.stargazers_count)
                count += 1
        except APIError as e:
            print(f"GitHub answered {e.status_code}: {e.message}", file=sys.stderr)
            return 1
        except TransportError as e:
            print(f"Network failure: {e}", file=sys.stderr)
            return 1

    print(f"{count} repositories")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: iter_pagination.py <org>", file=sys.stderr)
        sys.exit(2)
    sys.exit(asyncio.run(main(sys.argv[1])))
