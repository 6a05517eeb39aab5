"""Commit to pull request lookup."""

import logging

from pydantic import ValidationError

from ..utils.errors import GitHubAPIError
from ..utils.github_client import GROOT_PREVIEW, GitHubClient
from ..utils.schemas import PULL_REQUEST_LIST
from ..utils.types import FailureReason, Lookup, RepositoryIdentity

logger = logging.getLogger(__name__)


async def find_pull_request_for_commit(
    client: GitHubClient,
    repository: RepositoryIdentity,
    commit_hash: str,
) -> Lookup[int]:
    """
    Return the number of the pull request that introduced ``commit_hash``.

    When GitHub associates the commit with several pull requests, the first
    one in response order wins. Request failures degrade to a missing Lookup.
    """
    path = f"/repos/{repository.owner}/{repository.name}/commits/{commit_hash}/pulls"
    try:
        data = await client.get_json(path, accept=GROOT_PREVIEW)
        pulls = PULL_REQUEST_LIST.validate_python(data)
    except GitHubAPIError as e:
        logger.warning(f"Error fetching PR for commit {commit_hash}: [{e.code}] {e.message}")
        reason = FailureReason.NOT_FOUND if e.status == 404 else FailureReason.REQUEST_FAILED
        return Lookup.missing(reason, e.code)
    except ValidationError as e:
        logger.warning(f"Unexpected pulls payload for commit {commit_hash}: {e}")
        return Lookup.missing(FailureReason.INVALID_RESPONSE, str(e))

    if not pulls:
        return Lookup.missing(FailureReason.NOT_FOUND, commit_hash)

    if len(pulls) > 1:
        logger.debug(
            f"Commit {commit_hash} is in {len(pulls)} PRs, using #{pulls[0].number}"
        )
    return Lookup.ok(pulls[0].number)
