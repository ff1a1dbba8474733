"""GitHub REST API client for profile, repository and language data."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field

from how_person.core.config import settings

logger = logging.getLogger(__name__)

API_BASE = "https://api.github.com"


class GitHubUser(BaseModel):
    """The subset of ``GET /users/{username}`` the analysis reads."""

    login: str
    name: str | None = None
    bio: str | None = None
    company: str | None = None
    location: str | None = None
    public_repos: int = 0
    followers: int = 0

    model_config = {"extra": "allow"}


class GitHubRepo(BaseModel):
    name: str
    full_name: str = ""
    description: str | None = None
    fork: bool = False
    stargazers_count: int = 0
    topics: list[str] = Field(default_factory=list)
    contributors_url: str | None = None

    model_config = {"extra": "allow"}


def _headers(token: str) -> dict[str, str]:
    # mercy-preview enables topics array on repository objects
    headers = {
        "Accept": "application/vnd.github.mercy-preview+json",
        "User-Agent": settings.user_agent,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


class GitHubClient:
    """Thin async wrapper over the three GitHub endpoints the extractor needs.

    Methods raise ``httpx.HTTPError`` for transport/status failures and
    ``pydantic.ValidationError`` when a payload does not have the expected
    shape.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token = settings.github_token if token is None else token
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GitHubClient:
        self._client = httpx.AsyncClient(
            base_url=API_BASE,
            headers=_headers(self.token),
            timeout=self.timeout,
            transport=self.transport,
        )
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get(self, url: str, params: dict | None = None) -> Any:
        if self._client is None:
            raise RuntimeError("GitHubClient must be used as an async context manager")
        resp = await self._client.get(url, params=params)
        if resp.status_code == 403 and "rate limit" in resp.text.lower():
            logger.warning("GitHub rate limit hit for %s", url)
        resp.raise_for_status()
        return resp.json()

    async def get_user(self, username: str) -> GitHubUser:
        data = await self._get(f"/users/{username}")
        return GitHubUser.model_validate(data)

    async def list_repos(self, username: str, per_page: int | None = None) -> list[GitHubRepo]:
        """Most recently updated repositories owned by the user (single page)."""
        data = await self._get(
            f"/users/{username}/repos",
            params={
                "per_page": str(per_page or settings.max_repos),
                "sort": "updated",
                "type": "owner",
            },
        )
        if not isinstance(data, list):
            raise ValueError(f"Expected a repository list for {username}, got {type(data).__name__}")
        return [GitHubRepo.model_validate(item) for item in data]

    async def list_languages(self, owner: str, repo: str) -> dict[str, int]:
        """Language name -> bytes of code for one repository."""
        data = await self._get(f"/repos/{owner}/{repo}/languages")
        if not isinstance(data, dict):
            raise ValueError(f"Expected a language map for {owner}/{repo}")
        return {str(lang): int(count) for lang, count in data.items()}
