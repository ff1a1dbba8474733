"""X/Twitter API v2 client (bearer-token only).

Without a token no request is ever made and the extractor works with empty
data. Tweets are never scraped.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field

from how_person.core.config import settings

logger = logging.getLogger(__name__)

API_BASE = "https://api.twitter.com/2"

_USER_FIELDS = "description,public_metrics,created_at,location,url"
_TWEET_FIELDS = "created_at,public_metrics,entities,referenced_tweets"


class TwitterUser(BaseModel):
    id: str
    username: str
    name: str = ""
    description: str = ""
    location: str | None = None
    public_metrics: dict[str, int] = Field(default_factory=dict)

    @property
    def followers_count(self) -> int:
        return self.public_metrics.get("followers_count", 0)


class Hashtag(BaseModel):
    tag: str


class Mention(BaseModel):
    username: str


class TweetEntities(BaseModel):
    hashtags: list[Hashtag] = Field(default_factory=list)
    mentions: list[Mention] = Field(default_factory=list)


class ReferencedTweet(BaseModel):
    type: str
    id: str = ""


class Tweet(BaseModel):
    id: str
    text: str = ""
    created_at: datetime.datetime | None = None
    public_metrics: dict[str, int] = Field(default_factory=dict)
    entities: TweetEntities | None = None
    referenced_tweets: list[ReferencedTweet] = Field(default_factory=list)

    @property
    def is_retweet(self) -> bool:
        return self.text.startswith("RT @")

    @property
    def is_reply(self) -> bool:
        return any(ref.type == "replied_to" for ref in self.referenced_tweets)


class TwitterClient:
    """Async client for the two timeline endpoints the extractor needs."""

    def __init__(
        self,
        token: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token = settings.twitter_token if token is None else token
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.token)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=API_BASE,
            headers={
                "Authorization": f"Bearer {self.token}",
                "User-Agent": settings.user_agent,
            },
            timeout=self.timeout,
            transport=self.transport,
        )

    async def _get(self, client: httpx.AsyncClient, url: str, params: dict[str, Any]) -> dict[str, Any]:
        resp = await client.get(url, params=params)
        if resp.status_code == 429:
            logger.warning("Twitter rate limit hit for %s", url)
        resp.raise_for_status()
        payload = resp.json()
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected Twitter payload for {url}")
        return payload

    async def get_user_by_username(self, username: str) -> TwitterUser:
        async with self._client() as client:
            payload = await self._get(
                client, f"/users/by/username/{username}", {"user.fields": _USER_FIELDS}
            )
        if "data" not in payload:
            errors = payload.get("errors") or []
            detail = errors[0].get("detail", "user not found") if errors else "user not found"
            raise ValueError(f"Twitter user @{username}: {detail}")
        return TwitterUser.model_validate(payload["data"])

    async def get_user_timeline(self, user_id: str, max_results: int = 100) -> list[Tweet]:
        async with self._client() as client:
            payload = await self._get(
                client,
                f"/users/{user_id}/tweets",
                {"max_results": str(max_results), "tweet.fields": _TWEET_FIELDS},
            )
        return [Tweet.model_validate(item) for item in payload.get("data") or []]
