"""Version information for the GitHub REST client.

Single source of truth for version number.
Follows PEP 440 and semantic versioning principles.
"""

__version__ = "0.4.0"
__version_info__ = tuple(int(part) for part in __version__.split("."))

# Version history:
# 0.4.0 - Actions workflows, required workflows, notifications and starring
# 0.3.0 - Two-shape contents decoding, file create/update/delete
# 0.2.0 - Prometheus metrics, structured logging, pydantic-settings config
# 0.1.0 - Initial release (users, orgs, repos, issues, pulls)
