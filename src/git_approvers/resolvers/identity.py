"""Repository identity resolution from the local ``.git/config``.

Reads the ``origin`` remote URL and extracts the GitHub owner and repository
name from it. Failures never raise: they come back as a Lookup carrying the
reason, which the orchestrator renders as "identity missing".
"""

import configparser
import logging
import re
from pathlib import Path

from ..utils.types import FailureReason, Lookup, RepositoryIdentity

logger = logging.getLogger(__name__)

ORIGIN_SECTION = 'remote "origin"'

# SSH is tried before HTTPS
REMOTE_URL_PATTERNS = (
    re.compile(r"^git@github\.com:(?P<owner>[^/]+)/(?P<name>[^/]+)\.git$"),
    re.compile(r"^https://github\.com/(?P<owner>[^/]+)/(?P<name>[^/]+)\.git$"),
)


def parse_remote_url(url: str) -> RepositoryIdentity | None:
    """
    Extract owner and name from a GitHub remote URL.

    Accepts ``git@github.com:OWNER/NAME.git`` and
    ``https://github.com/OWNER/NAME.git``. Anything else returns None.
    """
    url = url.strip()
    for pattern in REMOTE_URL_PATTERNS:
        match = pattern.match(url)
        if match:
            owner, name = match.group("owner"), match.group("name")
            if owner and name:
                return RepositoryIdentity(owner=owner, name=name)
            return None
    return None


def find_git_config(workspace_root: Path) -> Path | None:
    """
    Locate the config file for the repository checked out at workspace_root.

    Follows ``gitdir:`` pointer files (linked worktrees, submodules) and the
    ``commondir`` indirection worktrees use to share the main config.
    """
    dot_git = workspace_root / ".git"
    if dot_git.is_dir():
        git_dir = dot_git
    elif dot_git.is_file():
        pointer = dot_git.read_text(encoding="utf-8").strip()
        if not pointer.startswith("gitdir:"):
            return None
        git_dir = Path(pointer.removeprefix("gitdir:").strip())
        if not git_dir.is_absolute():
            git_dir = (workspace_root / git_dir).resolve()
        commondir = git_dir / "commondir"
        if commondir.is_file():
            git_dir = (git_dir / commondir.read_text(encoding="utf-8").strip()).resolve()
    else:
        return None

    config_path = git_dir / "config"
    return config_path if config_path.is_file() else None


def read_origin_url(config_path: Path) -> str | None:
    """Return ``remote.origin.url`` from a git config file, if present."""
    parser = configparser.ConfigParser(
        strict=False,
        interpolation=None,
        allow_no_value=True,
        comment_prefixes=("#", ";"),
    )
    parser.read_string(config_path.read_text(encoding="utf-8"), source=str(config_path))
    if not parser.has_section(ORIGIN_SECTION):
        return None
    url = (parser.get(ORIGIN_SECTION, "url", fallback=None) or "").strip()
    # git allows the value to be wrapped in double quotes
    if len(url) >= 2 and url.startswith('"') and url.endswith('"'):
        url = url[1:-1]
    return url or None


def resolve_repository_identity(workspace_root: Path | None) -> Lookup[RepositoryIdentity]:
    """Resolve the GitHub owner/name of the repository at workspace_root."""
    if workspace_root is None:
        return Lookup.missing(FailureReason.NO_WORKSPACE)

    try:
        config_path = find_git_config(workspace_root)
        if config_path is None:
            logger.debug(f"No git config found under {workspace_root}")
            return Lookup.missing(FailureReason.NO_GIT_CONFIG, str(workspace_root))

        origin_url = read_origin_url(config_path)
        if not origin_url:
            logger.debug(f"No origin remote configured in {config_path}")
            return Lookup.missing(FailureReason.NO_ORIGIN, str(config_path))

        identity = parse_remote_url(origin_url)
        if identity is None:
            logger.debug(f"Origin URL is not a recognized GitHub remote: {origin_url}")
            return Lookup.missing(FailureReason.UNRECOGNIZED_REMOTE, origin_url)

        return Lookup.ok(identity)
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        logger.error(f"Error reading git config under {workspace_root}: {e}")
        return Lookup.missing(FailureReason.CONFIG_UNREADABLE, str(e))
