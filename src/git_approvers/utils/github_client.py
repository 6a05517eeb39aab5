"""GitHub API client used by the pull request and review lookups."""

import asyncio
import logging
import threading
from typing import Any

import requests
from github import Auth, Github, GithubException

from ..config.settings import Settings
from .errors import handle_github_error

logger = logging.getLogger(__name__)

# The commit -> pulls endpoint was introduced behind this preview media type
GROOT_PREVIEW = "application/vnd.github.groot-preview+json"


class GitHubClient:
    """
    Authenticated transport for the GitHub REST API.

    Wraps PyGithub's requester so every request carries the configured token
    and targets the configured base URL. Retries are disabled: a failed
    request is reported once, as a GitHubAPIError.
    """

    def __init__(self, settings: Settings) -> None:
        if not settings.github_token:
            raise ValueError("GitHub token is required to build an API client")

        self._github = Github(
            auth=Auth.Token(settings.github_token),
            base_url=settings.api_url,
            retry=None,
        )
        self.api_url = settings.api_url
        # PyGithub's requester keeps one connection whose request and response
        # calls must not interleave across threads
        self._request_lock = threading.Lock()

    def _get(
        self,
        path: str,
        accept: str | None,
        params: dict[str, Any] | None,
    ) -> Any:
        headers = {"Accept": accept} if accept else None
        try:
            with self._request_lock:
                _, data = self._github.requester.requestJsonAndCheck(
                    "GET", path, parameters=params, headers=headers
                )
        except (GithubException, requests.exceptions.RequestException) as e:
            raise handle_github_error(e) from e
        return data

    async def get_json(
        self,
        path: str,
        accept: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        GET ``path`` (relative to the API base URL) and return decoded JSON.

        The blocking HTTP call runs in a worker thread so the event loop keeps
        serving other queries. Requests on one client are sent one at a time.

        Raises:
            GitHubAPIError: on transport failure or a non-2xx response
        """
        logger.debug(f"GET {self.api_url}{path}")
        return await asyncio.to_thread(self._get, path, accept, params)

    def close(self) -> None:
        self._github.close()
