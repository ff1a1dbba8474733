"""SpeakerDeck source plugin: scrapes the public profile page for decks."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any
from urllib.parse import urljoin

import httpx

from how_person.core.errors import ExtractorError, InvalidInputError
from how_person.ingestion.web import PageFetcher, parse_html, select_attr, select_text
from how_person.models.schemas import (
    Communication,
    Personality,
    Platform,
    PlatformAnalysis,
)
from how_person.plugins.base import PlatformSource
from how_person.synthesis.extraction import SLIDE_PROFILE, extract
from how_person.synthesis.matching import MatchStrategy
from how_person.synthesis.style import (
    SLIDE_WORK_KEYWORDS,
    decks_per_month,
    speakerdeck_communication_style,
    work_style,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://speakerdeck.com"

_USERNAME_RE = re.compile(r"speakerdeck\.com/([^/?#]+)")

_MAX_INTERESTS = 10
_MAX_COMM_TOPICS = 5


@dataclass
class Deck:
    title: str
    description: str
    url: str
    date: str

    @property
    def text(self) -> str:
        return f"{self.title} {self.description}"


def extract_username(url: str) -> str:
    match = _USERNAME_RE.search(url)
    if not match:
        raise InvalidInputError(f"Invalid SpeakerDeck URL: {url!r}")
    return match.group(1)


def parse_profile(markup: str) -> tuple[dict[str, str], list[Deck]]:
    """Pull the profile header and the deck cards out of a profile page."""
    doc = parse_html(markup)
    decks = []
    for card in doc.select(".talk-listing .container"):
        href = select_attr(card, "h3.title a[href]", "href")
        decks.append(
            Deck(
                title=select_text(card, "h3.title"),
                description=select_text(card, ".description"),
                url=urljoin(BASE_URL, href) if href else "",
                date=select_text(card, ".date"),
            )
        )
    profile = {
        "name": select_text(doc, ".profile-header h1"),
        "bio": select_text(doc, ".profile-header .bio"),
    }
    return profile, decks


class SpeakerDeckSource(PlatformSource):
    platform = Platform.SPEAKERDECK
    url_pattern = re.compile(r"^https?://(www\.)?speakerdeck\.com/[^/]+/?$")
    example_url = "https://speakerdeck.com/username"

    def __init__(
        self,
        fetcher: PageFetcher | None = None,
        matcher: MatchStrategy | None = None,
    ) -> None:
        super().__init__(matcher)
        self.fetcher = fetcher or PageFetcher()

    async def analyze(self, url: str, **config: Any) -> PlatformAnalysis:
        username = extract_username(url)
        page_url = f"{BASE_URL}/{username}"
        try:
            markup = await self.fetcher.fetch_text(page_url)
        except httpx.HTTPError as exc:
            raise ExtractorError(self.name, f"could not fetch {page_url}: {exc}") from exc

        profile, decks = parse_profile(markup)
        corpus = [deck.text for deck in decks]
        extraction = extract(corpus, SLIDE_PROFILE, self.matcher)
        topics = extraction.topic_list()

        activities = [profile["bio"], f"Published {len(decks)} presentations"]
        personality = Personality(
            interests=topics[:_MAX_INTERESTS],
            activities=[a for a in activities if a.strip()],
            communication=Communication(
                style=speakerdeck_communication_style(
                    [d.title for d in decks], [d.description for d in decks], self.matcher
                ),
                frequency=decks_per_month(len(decks)),
                topics=topics[:_MAX_COMM_TOPICS],
            ),
            work_style=work_style(corpus, SLIDE_WORK_KEYWORDS, self.matcher),
        )

        logger.info("Analyzed SpeakerDeck user %s: %d decks, %d topics", username, len(decks), len(topics))
        return PlatformAnalysis(
            platform=self.platform,
            url=url,
            tech_stack=extraction.tech_stack(),
            personality=personality,
            raw_data={"profile": profile, "presentations": [asdict(d) for d in decks]},
        )
