from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Platform(str, Enum):
    GITHUB = "github"
    TWITTER = "twitter"
    SPEAKERDECK = "speakerdeck"
    BLOG = "blog"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Platform.GITHUB: "GitHub",
    Platform.TWITTER: "Twitter/X",
    Platform.SPEAKERDECK: "SpeakerDeck",
    Platform.BLOG: "Blog",
}


# -- Request schemas --

class AnalysisRequest(BaseModel):
    github: str | None = None
    twitter: str | None = None
    speakerdeck: str | None = None
    blog: str | None = None

    def requested(self) -> dict[Platform, str]:
        """Return the non-empty URLs keyed by platform, in fixed platform order."""
        return {
            platform: url
            for platform in Platform
            if (url := getattr(self, platform.value))
        }

    def cache_key(self) -> str:
        """Signature of the exact request: all four fields, absent ones included.

        Fields are dumped in declaration order, so the order the URLs were
        passed in never changes the key. Any other difference, such as a
        trailing slash, is a cache miss.
        """
        return json.dumps(self.model_dump(), sort_keys=False)


# -- Analysis schemas --

class TechStack(BaseModel):
    languages: dict[str, int] = Field(default_factory=dict)
    frameworks: dict[str, int] = Field(default_factory=dict)
    tools: dict[str, int] = Field(default_factory=dict)
    topics: list[str] = Field(default_factory=list)


class Communication(BaseModel):
    style: str | None = None
    frequency: float | None = None
    topics: list[str] | None = None


class Personality(BaseModel):
    interests: list[str] = Field(default_factory=list)
    activities: list[str] = Field(default_factory=list)
    communication: Communication = Field(default_factory=Communication)
    work_style: str | None = None


class PlatformAnalysis(BaseModel):
    """One platform's analysis. ``raw_data`` is kept for diagnostics only."""

    platform: Platform
    url: str
    tech_stack: TechStack = Field(default_factory=TechStack)
    personality: Personality = Field(default_factory=Personality)
    raw_data: dict[str, Any] = Field(default_factory=dict, exclude=True)


class AnalysisResult(BaseModel):
    platforms: list[PlatformAnalysis] = Field(default_factory=list)
    tech_stack: TechStack = Field(default_factory=TechStack)
    personality: Personality = Field(default_factory=Personality)
    summary: str = ""
