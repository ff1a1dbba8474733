"""Application settings and logging setup."""

import logging

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings, loaded from environment variables and .env file.

    Optional env vars:
        GITHUB_TOKEN   - GitHub PAT; without it only unauthenticated (rate-limited) API calls are made
        TWITTER_TOKEN  - X/Twitter API v2 bearer token; without it tweets are not fetched at all
    """

    model_config = {"env_file": ".env", "extra": "ignore", "env_prefix": "HOW_PERSON_"}

    # Platform credentials (read without prefix, as the MCP host passes them through)
    github_token: str = Field("", validation_alias=AliasChoices("GITHUB_TOKEN", "HOW_PERSON_GITHUB_TOKEN"))
    twitter_token: str = Field("", validation_alias=AliasChoices("TWITTER_TOKEN", "HOW_PERSON_TWITTER_TOKEN"))

    # HTTP
    http_timeout: float = 30.0
    user_agent: str = "how-person/0.1 (+profile analysis)"

    # GitHub repo listing size (the API caps a page at 100)
    max_repos: int = 100

    # Request-signature cache
    cache_max_entries: int = 128
    cache_ttl_seconds: float = 0  # 0 disables time-based expiry

    # Keyword matching: "substring" (default) or "token"
    match_strategy: str = "substring"

    log_level: str = "INFO"

    @property
    def has_github_token(self) -> bool:
        return bool(self.github_token)

    @property
    def has_twitter_token(self) -> bool:
        return bool(self.twitter_token)


settings = Settings()

# Configure logging (stderr, so the MCP stdio transport stays clean)
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Warn about missing credentials
if not settings.has_github_token:
    logger.warning("GITHUB_TOKEN is not set: GitHub API calls are unauthenticated")
if not settings.has_twitter_token:
    logger.warning("TWITTER_TOKEN is not set: tweets will not be fetched")
