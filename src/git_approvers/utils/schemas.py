"""Pydantic models for the GitHub API payloads the resolver reads.

Only the fields the resolution pipeline depends on are declared; everything
else GitHub sends is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, TypeAdapter

APPROVED = "APPROVED"

# GitHub renders deleted accounts as "ghost"
GHOST_LOGIN = "ghost"


class PullRequestRef(BaseModel):
    """A pull request as listed by the commit → pulls endpoint."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    number: PositiveInt


class ReviewUser(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    login: str = Field(min_length=1)


class Review(BaseModel):
    """One review record on a pull request."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    state: str
    user: ReviewUser | None = None

    @property
    def reviewer_login(self) -> str:
        return self.user.login if self.user else GHOST_LOGIN

    @property
    def is_approval(self) -> bool:
        return self.state == APPROVED


PULL_REQUEST_LIST = TypeAdapter(list[PullRequestRef])
REVIEW_LIST = TypeAdapter(list[Review])
