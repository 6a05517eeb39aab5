"""Common type definitions using TypedDict, enums and dataclasses.

Provides the query-scoped values passed between resolution stages and the
structured response returned to the host.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar, TypedDict

T = TypeVar("T")


class FailureReason(str, Enum):
    """Why a lookup stage produced no value. Kept for diagnostics only."""

    NO_WORKSPACE = "no_workspace"
    NO_GIT_CONFIG = "no_git_config"
    CONFIG_UNREADABLE = "config_unreadable"
    NO_ORIGIN = "no_origin"
    UNRECOGNIZED_REMOTE = "unrecognized_remote"
    GIT_FAILED = "git_failed"
    EMPTY_BLAME = "empty_blame"
    NOT_COMMITTED = "not_committed"
    NOT_FOUND = "not_found"
    REQUEST_FAILED = "request_failed"
    INVALID_RESPONSE = "invalid_response"


class HoverStatus(str, Enum):
    """The six categories a resolved hover can fall into."""

    IDENTITY_MISSING = "identity_missing"
    COMMIT_MISSING = "commit_missing"
    PR_MISSING = "pr_missing"
    APPROVERS_MISSING = "approvers_missing"
    APPROVERS_FOUND = "approvers_found"
    ERROR = "error"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """
    Outcome of one resolution stage.

    Either ``value`` is set, or ``reason`` says why it is not. ``detail``
    carries free-form context (stderr, error code) for logs.
    """

    value: T | None = None
    reason: FailureReason | None = None
    detail: str | None = None

    @classmethod
    def ok(cls, value: T) -> "Lookup[T]":
        return cls(value=value)

    @classmethod
    def missing(cls, reason: FailureReason, detail: str | None = None) -> "Lookup[T]":
        return cls(reason=reason, detail=detail)

    @property
    def found(self) -> bool:
        return self.reason is None and self.value is not None


@dataclass(frozen=True)
class RepositoryIdentity:
    """
    GitHub repository identity derived from the ``origin`` remote.

    Attributes:
        owner: Repository owner username or organization
        name: Repository name
    """

    owner: str
    name: str

    def __post_init__(self) -> None:
        if not self.owner or not self.name:
            raise ValueError("Repository owner and name must both be non-empty")

    @property
    def full_name(self) -> str:
        """
        Get full repository name in 'owner/name' format.

        Returns:
            Full repository name
        """
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class LineQuery:
    """
    A single line to attribute.

    Attributes:
        file_path: Absolute path of the file
        line_number: One-based line number, as git blame expects
    """

    file_path: Path
    line_number: int

    def __post_init__(self) -> None:
        if not self.file_path.is_absolute():
            raise ValueError(f"File path must be absolute: {self.file_path}")
        if self.line_number < 1:
            raise ValueError(f"Line number must be positive, got {self.line_number}")

    @classmethod
    def from_editor_position(cls, file_path: str | Path, line: int) -> "LineQuery":
        """Build a query from the editor's zero-based line index."""
        return cls(file_path=Path(file_path), line_number=line + 1)


class Position(TypedDict):
    line: int
    character: int


class Range(TypedDict):
    start: Position
    end: Position


class HoverResponse(TypedDict):
    """
    Response format for the line approvers tool.

    Attributes:
        status: One of the HoverStatus values
        message: Display text for the hover
        file_path: File the hover was requested for
        line_number: One-based line that was attributed
        range: Anchor range (the hovered position)
    """

    status: str
    message: str
    file_path: str
    line_number: int
    range: Range
