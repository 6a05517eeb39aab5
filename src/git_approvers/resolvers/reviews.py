"""Pull request approvals lookup."""

import logging

from pydantic import ValidationError

from ..utils.errors import GitHubAPIError
from ..utils.github_client import GitHubClient
from ..utils.schemas import REVIEW_LIST, Review
from ..utils.types import FailureReason, Lookup, RepositoryIdentity

logger = logging.getLogger(__name__)

REVIEWS_PER_PAGE = 100


def filter_approvals(reviews: list[Review]) -> list[Review]:
    """Keep APPROVED reviews in order. Repeat approvals are kept."""
    return [review for review in reviews if review.is_approval]


async def get_pull_request_approvals(
    client: GitHubClient,
    repository: RepositoryIdentity,
    pr_number: int,
) -> Lookup[list[Review]]:
    """
    Fetch the reviews of a pull request and return the approving ones.

    A failed request yields an empty list, with the reason kept on the Lookup.
    """
    path = f"/repos/{repository.owner}/{repository.name}/pulls/{pr_number}/reviews"
    try:
        data = await client.get_json(path, params={"per_page": REVIEWS_PER_PAGE})
        reviews = REVIEW_LIST.validate_python(data)
    except GitHubAPIError as e:
        logger.warning(f"Error fetching reviews for PR #{pr_number}: [{e.code}] {e.message}")
        reason = FailureReason.NOT_FOUND if e.status == 404 else FailureReason.REQUEST_FAILED
        return Lookup(value=[], reason=reason, detail=e.code)
    except ValidationError as e:
        logger.warning(f"Unexpected reviews payload for PR #{pr_number}: {e}")
        return Lookup(value=[], reason=FailureReason.INVALID_RESPONSE, detail=str(e))

    approvals = filter_approvals(reviews)
    logger.debug(f"PR #{pr_number} has {len(reviews)} reviews, {len(approvals)} approvals")
    return Lookup.ok(approvals)
