"""Git Approvers MCP Server - Main entry point.

FastMCP server that answers, for a line in the workspace repository, who
approved the pull request that last changed it.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

# Import the singleton mcp instance from package level
from . import mcp
from .config.settings import TOKEN_FALLBACK, TOKEN_SETTING, Settings, load_settings
from .tools.approvers import ApproversResolver, register_approvers_tool
from .utils.github_client import GitHubClient

__all__ = ["mcp", "activate", "main"]

# Load environment variables from project root .env file
# This file is at: git-approvers/src/git_approvers/server.py
# Project root is 3 levels up
project_root = Path(__file__).parent.parent.parent
env_path = project_root / ".env"
load_dotenv(env_path)

# Configure logging to stderr (stdout is used for MCP protocol)
logging.basicConfig(
    level=os.getenv("GIT_APPROVERS_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def activate(settings: Settings, server: FastMCP = mcp) -> bool:
    """
    Register the approvers tool on ``server`` if a GitHub token is configured.

    Without a token nothing is registered and a single error is logged; the
    server stays inert.

    Returns:
        True if the tool was registered
    """
    if not settings.github_token:
        logger.error(
            f"GitHub token is not set. Please set {TOKEN_SETTING} or {TOKEN_FALLBACK}."
        )
        return False

    client = GitHubClient(settings)
    resolver = ApproversResolver(settings, client)
    register_approvers_tool(server, resolver)

    logger.info(f"Git approvers activated for workspace {settings.workspace_root}")
    return True


def main() -> None:
    """
    Run the MCP server.

    Loads settings, activates the approvers tool and starts the FastMCP server
    on stdio. Exits with status 1 when no GitHub token is configured.
    """
    logger.info("Git Approvers MCP Server starting...")

    settings = load_settings()
    if not activate(settings):
        raise SystemExit(1)

    tools = mcp._tool_manager.list_tools()
    logger.info(f"✅ {len(tools)} tools registered: {', '.join(t.name for t in tools)}")
    logger.info("Listening on stdio for MCP protocol messages")

    try:
        # Run the MCP server (blocks until terminated)
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
