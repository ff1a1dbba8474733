"""GitHub source plugin: repository languages, topic tags and profile facts."""

from __future__ import annotations

import logging
import re
from typing import Any

import httpx
from pydantic import ValidationError

from how_person.core.errors import ExtractorError, InvalidInputError
from how_person.ingestion.github import GitHubClient, GitHubRepo, GitHubUser
from how_person.models.schemas import (
    Communication,
    Personality,
    Platform,
    PlatformAnalysis,
    TechStack,
)
from how_person.plugins.base import PlatformSource
from how_person.synthesis.extraction import Extraction, bump, classify_tag
from how_person.synthesis.matching import MatchStrategy
from how_person.synthesis.style import RepoStats, github_communication_style

logger = logging.getLogger(__name__)

_USERNAME_RE = re.compile(r"github\.com/([^/?#]+)")

_MAX_INTERESTS = 10


def extract_username(url: str) -> str:
    match = _USERNAME_RE.search(url)
    if not match:
        raise InvalidInputError(f"Invalid GitHub URL: {url!r}")
    return match.group(1)


class GitHubSource(PlatformSource):
    """Analyzes a GitHub profile through the REST API."""

    platform = Platform.GITHUB
    url_pattern = re.compile(r"^https?://(www\.)?github\.com/[^/]+/?$")
    example_url = "https://github.com/username"

    def __init__(
        self,
        client_factory: Any = None,
        matcher: MatchStrategy | None = None,
    ) -> None:
        super().__init__(matcher)
        self.client_factory = client_factory or GitHubClient

    async def analyze(self, url: str, **config: Any) -> PlatformAnalysis:
        """Fetch the user and repositories and derive the tech stack.

        Args:
            url: GitHub profile URL.
            **config: Optional ``max_repos`` (default from settings).
        """
        username = extract_username(url)

        async with self.client_factory() as client:
            try:
                user = await client.get_user(username)
                repos = await client.list_repos(username, per_page=config.get("max_repos"))
            except (httpx.HTTPError, ValidationError, ValueError) as exc:
                raise ExtractorError(self.name, f"could not fetch user or repositories for {username}: {exc}") from exc

            extraction = Extraction()
            for repo in repos:
                if repo.fork:
                    continue
                await self._add_repo_languages(client, username, repo, extraction)
                for topic in repo.topics:
                    extraction.add_topic(topic)
                    self._categorize_topic(topic, extraction)

        topics = extraction.topic_list()
        personality = Personality(
            interests=topics[:_MAX_INTERESTS],
            activities=_activities(user, repos),
            communication=Communication(style=github_communication_style(repo_stats(repos))),
        )

        logger.info(
            "Analyzed GitHub user %s: %d repos, %d languages, %d topics",
            username, len(repos), len(extraction.languages), len(topics),
        )
        return PlatformAnalysis(
            platform=self.platform,
            url=url,
            tech_stack=TechStack(
                languages=extraction.languages,
                frameworks=extraction.frameworks,
                tools=extraction.tools,
                topics=topics,
            ),
            personality=personality,
            raw_data={
                "user": user.model_dump(),
                "repos": [r.model_dump() for r in repos],
            },
        )

    async def _add_repo_languages(
        self, client: GitHubClient, owner: str, repo: GitHubRepo, extraction: Extraction
    ) -> None:
        """Add byte counts per language. One repo failing is skipped, not fatal."""
        try:
            languages = await client.list_languages(owner, repo.name)
        except (httpx.HTTPError, ValueError, TypeError) as exc:
            logger.warning("Failed to fetch languages for %s/%s: %s", owner, repo.name, exc)
            return
        for lang, byte_count in languages.items():
            bump(extraction.languages, lang, byte_count)

    def _categorize_topic(self, topic: str, extraction: Extraction) -> None:
        category = classify_tag(topic, self.matcher)
        if category == "frameworks":
            bump(extraction.frameworks, topic)
        elif category == "tools":
            bump(extraction.tools, topic)


def repo_stats(repos: list[GitHubRepo]) -> RepoStats:
    return RepoStats(
        repo_count=len(repos),
        max_stars=max((r.stargazers_count for r in repos), default=0),
        max_description_length=max((len(r.description or "") for r in repos), default=0),
        # The listing carries a contributors URL rather than the contributors;
        # its length is the reference count used here.
        max_contributor_refs=max((len(r.contributors_url or "") for r in repos), default=0),
    )


def _activities(user: GitHubUser, repos: list[GitHubRepo]) -> list[str]:
    activities = [
        user.bio or "",
        f"Owns {len(repos)} repositories",
        f"Affiliated with {user.company}" if user.company else "",
    ]
    return [a for a in activities if a.strip()]
