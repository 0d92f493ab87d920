"""GitHub REST client for listing a user's public repositories."""

import logging
from typing import Any

import httpx

from core.config import settings
from core.exceptions import ExternalServiceError, GithubProfileNotFoundError

logger = logging.getLogger(__name__)


class GitHubClient:
    """Thin async wrapper around ``GET /users/{username}/repos``."""

    def __init__(
        self,
        base_url: str = settings.github_api_url,
        client_id: str = settings.github_client_id,
        client_secret: str = settings.github_client_secret,
        timeout: float = settings.github_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client_id = client_id
        self._client_secret = client_secret
        self._timeout = timeout
        self._transport = transport

    async def get_repos(self, username: str, limit: int = 5) -> list[dict[str, Any]]:
        """
        Fetch the user's most recently created public repositories.

        Raises:
            GithubProfileNotFoundError: GitHub answered with a non-200 status
            ExternalServiceError: GitHub could not be reached
        """
        params: dict[str, Any] = {"per_page": limit, "sort": "created", "direction": "desc"}
        if self._client_id and self._client_secret:
            params["client_id"] = self._client_id
            params["client_secret"] = self._client_secret

        url = f"{self._base_url}/users/{username}/repos"
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    url,
                    params=params,
                    headers={"User-Agent": "devconnector-api"},
                    timeout=self._timeout,
                )
        except httpx.HTTPError:
            logger.exception("GitHub request failed for %s", username)
            raise ExternalServiceError("github")

        if response.status_code != 200:
            logger.info("GitHub returned %s for %s", response.status_code, username)
            raise GithubProfileNotFoundError(username)

        return response.json()  # type: ignore[no-any-return]
