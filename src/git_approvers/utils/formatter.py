"""Hover message formatting.

Turns a resolution outcome into the display text shown to the user. Every
HoverStatus maps to exactly one message shape.
"""

from .types import HoverStatus

IDENTITY_MISSING_MESSAGE = "Could not determine repository owner or name."
COMMIT_MISSING_MESSAGE = "No commit found for this line."
ERROR_MESSAGE = "Error fetching PR approval info."


def format_hover_message(
    status: HoverStatus,
    commit_hash: str | None = None,
    pr_number: int | None = None,
    approvers: list[str] | None = None,
) -> str:
    """Format the hover text for a resolution outcome.

    Args:
        status: Outcome category
        commit_hash: Attributed commit (PR_MISSING)
        pr_number: Pull request number (APPROVERS_MISSING)
        approvers: Approver logins in review order (APPROVERS_FOUND)

    Returns:
        Display string for the hover
    """
    if status is HoverStatus.IDENTITY_MISSING:
        return IDENTITY_MISSING_MESSAGE
    if status is HoverStatus.COMMIT_MISSING:
        return COMMIT_MISSING_MESSAGE
    if status is HoverStatus.PR_MISSING:
        return f"No PR found for commit {commit_hash}."
    if status is HoverStatus.APPROVERS_MISSING:
        return f"No approvals found for PR #{pr_number}."
    if status is HoverStatus.APPROVERS_FOUND:
        return f"Approved by: {', '.join(approvers or [])}"
    return ERROR_MESSAGE
