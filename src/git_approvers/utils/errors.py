"""Structured error handling for GitHub API operations.

Provides a custom error class and a converter that turns PyGithub and
``requests`` exceptions into structured errors, so lookups can record why a
request failed while still degrading to "not found" for the user.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import requests

logger = logging.getLogger(__name__)


@dataclass
class GitHubAPIError(Exception):
    """
    Custom error class for GitHub API errors with structured information.

    Attributes:
        code: Error code for categorization (e.g., "RESOURCE_NOT_FOUND")
        message: Human-readable error message
        details: Optional additional error details
        suggestions: Optional troubleshooting suggestions

    Example:
        >>> error = GitHubAPIError(
        ...     code="RESOURCE_NOT_FOUND",
        ...     message="Commit abc123 not found",
        ...     details={"status": 404},
        ...     suggestions=["Push the commit", "Check repository access"]
        ... )
        >>> error.to_dict()
        {'error': True, 'code': 'RESOURCE_NOT_FOUND', ...}
    """

    code: str
    message: str
    details: dict[str, Any] | None = None
    suggestions: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Initialize the exception base class."""
        super().__init__(self.message)

    @property
    def status(self) -> int | None:
        """HTTP status of the failed request, if the server answered."""
        if self.details:
            return self.details.get("status")
        return None

    def to_dict(self) -> dict[str, Any]:
        """
        Convert error to dictionary for structured responses.

        Returns:
            Dictionary with error information including code, message, details, and suggestions
        """
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }


def _extract_message(data: Any) -> str | None:
    """Pull the ``message`` field out of a GitHub error payload."""
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def handle_github_error(error: Exception) -> GitHubAPIError:
    """
    Handle GitHub API errors and convert to structured GitHubAPIError.

    Transport failures (``requests`` connection errors and timeouts) are
    reported as ``NETWORK_ERROR``. HTTP failures are classified by status
    code using the ``status`` and ``data`` attributes PyGithub's
    GithubException carries.

    Args:
        error: Exception raised while talking to the GitHub API

    Returns:
        GitHubAPIError with structured information

    Example:
        >>> try:
        ...     client.get_json("/repos/acme/widgets/pulls/42/reviews")
        ... except Exception as e:
        ...     structured_error = handle_github_error(e)
        ...     print(structured_error.to_dict())
    """
    if isinstance(error, GitHubAPIError):
        return error

    if isinstance(error, requests.exceptions.RequestException):
        return GitHubAPIError(
            code="NETWORK_ERROR",
            message=f"Could not reach the GitHub API: {error}",
            details={"original_error": type(error).__name__},
            suggestions=["Check network connectivity", "Verify GITHUB_API_URL"],
        )

    status = getattr(error, "status", None)
    data = getattr(error, "data", None)
    api_message = _extract_message(data)

    if status == 404:
        return GitHubAPIError(
            code="RESOURCE_NOT_FOUND",
            message=api_message or str(error),
            details={"status": 404},
            suggestions=[
                "Verify the commit has been pushed to GitHub",
                "Check you have access to this repository",
            ],
        )

    if status == 403:
        return GitHubAPIError(
            code="FORBIDDEN",
            message="Access denied. Check token permissions or rate limit.",
            details={"status": 403},
            suggestions=[
                "Verify the GitHub token has the repo scope",
                "Check the API rate limit has not been exhausted",
            ],
        )

    if status == 401:
        return GitHubAPIError(
            code="UNAUTHORIZED",
            message="Authentication failed.",
            details={"status": 401},
            suggestions=["Verify the GitHub token is valid", "Token may have expired"],
        )

    if status == 422:
        return GitHubAPIError(
            code="VALIDATION_FAILED",
            message=api_message or "Validation failed",
            details={"status": 422, "raw_data": data},
            suggestions=["Verify the commit SHA is a valid hash"],
        )

    if isinstance(status, int):
        return GitHubAPIError(
            code="HTTP_ERROR",
            message=api_message or str(error),
            details={"status": status},
        )

    return GitHubAPIError(
        code="GITHUB_API_ERROR",
        message=str(error),
        details={"original_error": type(error).__name__},
    )
