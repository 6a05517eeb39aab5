"""Line attribution via ``git blame``."""

import asyncio
import logging
import re
from pathlib import Path

from ..utils.types import FailureReason, LineQuery, Lookup

logger = logging.getLogger(__name__)

# git blame reports uncommitted lines against the all-zero hash
_NOT_COMMITTED_RE = re.compile(r"^0+$")


async def run_git(*args: str, cwd: Path) -> tuple[int, str, str]:
    """Run a git command without blocking the event loop.

    Returns:
        (returncode, stdout, stderr)
    """
    process = await asyncio.create_subprocess_exec(
        "git",
        *args,
        cwd=str(cwd),
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    return (
        process.returncode,
        stdout.decode("utf-8", errors="replace"),
        stderr.decode("utf-8", errors="replace"),
    )


def parse_blame_hash(output: str) -> Lookup[str]:
    """Take the commit hash from the first token of ``git blame`` output."""
    tokens = output.split()
    if not tokens:
        return Lookup.missing(FailureReason.EMPTY_BLAME)

    # boundary commits are prefixed with "^"
    commit_hash = tokens[0].lstrip("^")
    if not commit_hash:
        return Lookup.missing(FailureReason.EMPTY_BLAME)
    if _NOT_COMMITTED_RE.match(commit_hash):
        return Lookup.missing(FailureReason.NOT_COMMITTED, commit_hash)
    return Lookup.ok(commit_hash)


async def blame_line(query: LineQuery, repo_root: Path) -> Lookup[str]:
    """
    Find the commit that last changed ``query.line_number`` of ``query.file_path``.

    Runs a single ``git blame -L n,n`` in repo_root. Any failure (git missing,
    untracked file, path outside the repository, line out of range) comes back
    as a missing Lookup rather than an exception.
    """
    line = query.line_number
    try:
        returncode, stdout, stderr = await run_git(
            "blame", "-L", f"{line},{line}", "--", str(query.file_path), cwd=repo_root
        )
    except (OSError, ValueError) as e:
        logger.error(f"Error running git blame: {e}")
        return Lookup.missing(FailureReason.GIT_FAILED, str(e))

    if returncode != 0:
        logger.warning(f"git blame failed for {query.file_path}:{line}: {stderr.strip()}")
        return Lookup.missing(FailureReason.GIT_FAILED, stderr.strip())

    return parse_blame_hash(stdout)
