"""Process-wide settings for the approvers server.

Settings are read once at startup from environment variables (populated from
``.env`` by the server) and passed explicitly to the API client and the
resolver. Nothing below the server reads the environment again.

Token resolution order (first non-empty wins):
  1. GIT_APPROVERS_GITHUB_TOKEN (host-provided setting)
  2. GITHUB_TOKEN
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "https://api.github.com"

TOKEN_SETTING = "GIT_APPROVERS_GITHUB_TOKEN"
TOKEN_FALLBACK = "GITHUB_TOKEN"
WORKSPACE_SETTING = "GIT_APPROVERS_WORKSPACE"
API_URL_SETTING = "GITHUB_API_URL"


@dataclass(frozen=True)
class Settings:
    """
    Immutable configuration shared by all queries.

    Attributes:
        github_token: GitHub API token, or None when not configured
        workspace_root: Root of the checked-out repository
        api_url: GitHub API base URL
    """

    github_token: str | None
    workspace_root: Path
    api_url: str = DEFAULT_API_URL

    def __repr__(self) -> str:
        token = "***" if self.github_token else None
        return (
            f"Settings(github_token={token!r}, "
            f"workspace_root={str(self.workspace_root)!r}, api_url={self.api_url!r})"
        )


def _first_set(environ: Mapping[str, str], *names: str) -> str | None:
    for name in names:
        value = environ.get(name, "").strip()
        if value:
            return value
    return None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the environment (or an explicit mapping)."""
    if environ is None:
        environ = os.environ

    workspace = _first_set(environ, WORKSPACE_SETTING)
    workspace_root = Path(workspace).expanduser() if workspace else Path.cwd()

    return Settings(
        github_token=_first_set(environ, TOKEN_SETTING, TOKEN_FALLBACK),
        workspace_root=workspace_root.resolve(),
        api_url=(_first_set(environ, API_URL_SETTING) or DEFAULT_API_URL).rstrip("/"),
    )
