"""Pytest configuration and fixtures for integration tests.

Provides test configuration and a real GitHub API client.
"""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from dotenv import load_dotenv
from git_approvers.config.settings import load_settings
from git_approvers.utils.github_client import GitHubClient
from git_approvers.utils.types import RepositoryIdentity

# Load test environment variables
TEST_ENV_FILE = Path(__file__).parent.parent.parent / ".env.test"
if TEST_ENV_FILE.exists():
    load_dotenv(TEST_ENV_FILE)
else:
    # Fall back to regular .env for local development
    load_dotenv()


@pytest.fixture(scope="session")
def test_config() -> dict:
    """Provide test configuration from environment variables.

    Returns:
        Dictionary with owner, repo, a commit merged through a PR, and that PR's number.

    Raises:
        pytest.skip: If GITHUB_TOKEN or the test repository variables are not set.
    """
    token = os.getenv("GITHUB_TOKEN")
    if not token:
        pytest.skip("GITHUB_TOKEN not set - skipping integration tests")

    owner = os.getenv("TEST_OWNER")
    repo = os.getenv("TEST_REPO")
    commit = os.getenv("TEST_COMMIT")
    pr_number = os.getenv("TEST_PR")
    if not owner or not repo or not commit or not pr_number:
        pytest.skip("TEST_OWNER, TEST_REPO, TEST_COMMIT and TEST_PR must be set for integration tests")

    return {
        "owner": owner,
        "repo": repo,
        "commit": commit,
        "pr_number": int(pr_number),
    }


@pytest.fixture(scope="session")
def test_repository(test_config: dict) -> RepositoryIdentity:
    return RepositoryIdentity(owner=test_config["owner"], name=test_config["repo"])


@pytest.fixture(scope="session")
def github_client(test_config: dict) -> Generator[GitHubClient, None, None]:
    """Provide an authenticated API client built from the environment."""
    client = GitHubClient(load_settings())
    yield client
    client.close()
