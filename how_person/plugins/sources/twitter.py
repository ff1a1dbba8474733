"""X/Twitter source plugin: topics, hashtags and posting behaviour from the v2 API."""

from __future__ import annotations

import logging
import re
from typing import Any

import httpx
from pydantic import ValidationError

from how_person.core.errors import ExtractorError, InvalidInputError
from how_person.ingestion.twitter import Tweet, TwitterClient, TwitterUser
from how_person.models.schemas import (
    Communication,
    Personality,
    Platform,
    PlatformAnalysis,
    TechStack,
)
from how_person.plugins.base import PlatformSource
from how_person.synthesis import taxonomy
from how_person.synthesis.extraction import MICROBLOG_PROFILE, Extraction, detect_topics
from how_person.synthesis.matching import MatchStrategy, contains_any
from how_person.synthesis.style import PostStats, posts_per_day, twitter_communication_style

logger = logging.getLogger(__name__)

_USERNAME_RE = re.compile(r"(?:twitter|x)\.com/([^/?#]+)")

_MAX_INTERESTS = 10
_MAX_COMM_TOPICS = 5
_MAX_TWEETS = 100


def extract_username(url: str) -> str:
    match = _USERNAME_RE.search(url)
    if not match:
        raise InvalidInputError(f"Invalid Twitter/X URL: {url!r}")
    return match.group(1)


class TwitterSource(PlatformSource):
    """Analyzes an X/Twitter account. Needs a bearer token to see any tweets."""

    platform = Platform.TWITTER
    url_pattern = re.compile(r"^https?://(www\.)?(twitter|x)\.com/[^/]+/?$")
    example_url = "https://x.com/username"

    def __init__(
        self,
        client: TwitterClient | None = None,
        matcher: MatchStrategy | None = None,
    ) -> None:
        super().__init__(matcher)
        self.client = client or TwitterClient()

    async def analyze(self, url: str, **config: Any) -> PlatformAnalysis:
        username = extract_username(url)
        user: TwitterUser | None = None
        tweets: list[Tweet] = []

        if self.client.enabled:
            try:
                user = await self.client.get_user_by_username(username)
                tweets = await self.client.get_user_timeline(
                    user.id, max_results=config.get("max_tweets", _MAX_TWEETS)
                )
            except (httpx.HTTPError, ValidationError, ValueError) as exc:
                raise ExtractorError(self.name, f"could not fetch @{username}: {exc}") from exc
        else:
            # Tweets are never scraped
            logger.warning("Twitter API token not provided; skipping tweet analysis for @%s", username)

        extraction = self.extract_topics(tweets)
        topics = extraction.topic_list()
        hashtags = extract_hashtags(tweets)

        personality = Personality(
            interests=hashtags[:_MAX_INTERESTS],
            activities=[user.description] if user and user.description.strip() else [],
            communication=Communication(
                style=twitter_communication_style(post_stats(user, tweets)),
                frequency=posts_per_day(len(tweets), [t.created_at for t in tweets if t.created_at]),
                topics=topics[:_MAX_COMM_TOPICS],
            ),
        )

        logger.info("Analyzed @%s: %d tweets, %d topics, %d hashtags", username, len(tweets), len(topics), len(hashtags))
        return PlatformAnalysis(
            platform=self.platform,
            url=url,
            # Tweets only yield topics; no language/framework/tool tallies
            tech_stack=TechStack(topics=topics),
            personality=personality,
            raw_data={
                "user": user.model_dump() if user else None,
                "tweets": [t.model_dump(mode="json") for t in tweets],
            },
        )

    def extract_topics(self, tweets: list[Tweet]) -> Extraction:
        """Keyword topics from text, plus tech hashtags and tech-account mentions."""
        extraction = Extraction()
        vocabulary = MICROBLOG_PROFILE.topic_vocabulary
        for tweet in tweets:
            if not tweet.text:
                continue
            detect_topics([tweet.text], vocabulary, self.matcher, into=extraction)
            if tweet.entities is None:
                continue
            for hashtag in tweet.entities.hashtags:
                tag = hashtag.tag.lower()
                if contains_any(tag, vocabulary, self.matcher):
                    extraction.add_topic(tag)
            for mention in tweet.entities.mentions:
                handle = mention.username.lower()
                if contains_any(handle, taxonomy.TECH_ACCOUNTS, self.matcher):
                    extraction.add_topic(handle)
        return extraction


def extract_hashtags(tweets: list[Tweet]) -> list[str]:
    """Every hashtag used, lower-cased, first-seen order."""
    hashtags: dict[str, None] = {}
    for tweet in tweets:
        if tweet.entities is None:
            continue
        for hashtag in tweet.entities.hashtags:
            hashtags.setdefault(hashtag.tag.lower(), None)
    return list(hashtags)


def post_stats(user: TwitterUser | None, tweets: list[Tweet]) -> PostStats | None:
    if user is None:
        return None
    return PostStats(
        post_count=len(tweets),
        followers=user.followers_count,
        repost_count=sum(1 for t in tweets if t.is_retweet),
        reply_count=sum(1 for t in tweets if t.is_reply),
        total_length=sum(len(t.text) for t in tweets),
    )
