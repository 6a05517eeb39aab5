"""Line approvers resolution and its MCP tool.

Chains repository identity → git blame → commit's pull request → approving
reviews, and renders the outcome as hover text. Each stage short-circuits to
its own message; unexpected errors become the generic error message, so the
host always gets a displayable result.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from ..config.settings import Settings
from ..resolvers.blame import blame_line
from ..resolvers.identity import resolve_repository_identity
from ..resolvers.pulls import find_pull_request_for_commit
from ..resolvers.reviews import get_pull_request_approvals
from ..utils.formatter import format_hover_message
from ..utils.github_client import GitHubClient
from ..utils.types import HoverResponse, HoverStatus, LineQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HoverResult:
    """Rendered outcome of one query."""

    status: HoverStatus
    message: str

    @classmethod
    def of(cls, status: HoverStatus, **fields) -> "HoverResult":
        return cls(status=status, message=format_hover_message(status, **fields))


class ApproversResolver:
    """
    Resolves who approved the change behind a line of code.

    Holds only read-only collaborators, so one instance serves any number of
    concurrent queries.
    """

    def __init__(self, settings: Settings, client: GitHubClient) -> None:
        self.settings = settings
        self.client = client

    async def resolve(self, query: LineQuery) -> HoverResult:
        """Resolve a line query. Never raises."""
        try:
            return await self._resolve(query)
        except Exception as e:
            logger.error(f"Error while fetching PR approval info: {e}", exc_info=True)
            return HoverResult.of(HoverStatus.ERROR)

    async def _resolve(self, query: LineQuery) -> HoverResult:
        identity = resolve_repository_identity(self.settings.workspace_root)
        if not identity.found:
            logger.info(f"Could not determine repository identity ({identity.reason.value})")
            return HoverResult.of(HoverStatus.IDENTITY_MISSING)
        repository = identity.value

        commit = await blame_line(query, self.settings.workspace_root)
        if not commit.found:
            logger.info(
                f"No commit found for {query.file_path}:{query.line_number} "
                f"({commit.reason.value})"
            )
            return HoverResult.of(HoverStatus.COMMIT_MISSING)
        commit_hash = commit.value

        pull = await find_pull_request_for_commit(self.client, repository, commit_hash)
        if not pull.found:
            logger.info(
                f"No PR found for commit {commit_hash} in {repository.full_name} "
                f"({pull.reason.value})"
            )
            return HoverResult.of(HoverStatus.PR_MISSING, commit_hash=commit_hash)
        pr_number = pull.value

        approvals = await get_pull_request_approvals(self.client, repository, pr_number)
        if not approvals.value:
            reason = approvals.reason.value if approvals.reason else "none approved"
            logger.info(f"No approvals found for PR #{pr_number} ({reason})")
            return HoverResult.of(HoverStatus.APPROVERS_MISSING, pr_number=pr_number)

        logins = [review.reviewer_login for review in approvals.value]
        logger.info(f"PR #{pr_number} approved by: {', '.join(logins)}")
        return HoverResult.of(HoverStatus.APPROVERS_FOUND, approvers=logins)

    async def resolve_position(
        self, file_path: str, line: int, character: int = 0
    ) -> HoverResponse:
        """
        Resolve an editor hover position into the host response.

        Args:
            file_path: Hovered file; relative paths are taken from the workspace root
            line: Zero-based line index, as editors report it
            character: Zero-based column of the hover, used for the anchor range

        Returns: {status, message, file_path, line_number, range}
        """
        position = {"line": line, "character": character}
        path = Path(file_path)
        if not path.is_absolute():
            path = self.settings.workspace_root / path

        try:
            query = LineQuery.from_editor_position(path, line)
        except ValueError as e:
            logger.error(f"Invalid hover position {file_path}:{line}: {e}")
            result = HoverResult.of(HoverStatus.ERROR)
        else:
            result = await self.resolve(query)

        return {
            "status": result.status.value,
            "message": result.message,
            "file_path": str(path),
            "line_number": line + 1,
            "range": {"start": dict(position), "end": dict(position)},
        }


def register_approvers_tool(server: FastMCP, resolver: ApproversResolver) -> None:
    """Register the line approvers tool on ``server``, bound to ``resolver``."""

    @server.tool()
    async def get_line_approvers(
        file_path: str,
        line: int,
        character: int = 0,
    ) -> dict[str, Any]:
        """Show who approved the PR that last changed a line of code.

        - file_path: file being viewed (absolute, or relative to the workspace)
        - line: zero-based line number
        - character: zero-based column, echoed back in the anchor range

        Returns: {status, message, file_path, line_number, range}

        status: "identity_missing", "commit_missing", "pr_missing",
                "approvers_missing", "approvers_found" or "error"
        """
        return dict(await resolver.resolve_position(file_path, line, character))

    logger.info("Approvers tools registered: get_line_approvers")
