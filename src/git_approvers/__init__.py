"""Git Approvers Package.

Provides an MCP tool that answers "who approved the change behind this line?"
via a FastMCP server.
"""

from mcp.server.fastmcp import FastMCP

# Single global MCP server instance
# This MUST be at package level to avoid double-instantiation when module is run as __main__
mcp = FastMCP("git-approvers")

__all__ = ["mcp"]
