"""Git approvers utilities."""

from .errors import GitHubAPIError, handle_github_error
from .formatter import format_hover_message
from .github_client import GitHubClient

__all__ = [
    "GitHubAPIError",
    "handle_github_error",
    "format_hover_message",
    "GitHubClient",
]
