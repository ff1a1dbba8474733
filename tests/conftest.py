"""Shared fixtures and factories for how-person tests."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from how_person.models.schemas import (
    Communication,
    Personality,
    Platform,
    PlatformAnalysis,
    TechStack,
)
from how_person.synthesis.matching import SubstringMatcher


def make_analysis(
    platform: Platform = Platform.GITHUB,
    url: str = "https://github.com/octocat",
    languages: dict[str, int] | None = None,
    frameworks: dict[str, int] | None = None,
    tools: dict[str, int] | None = None,
    topics: list[str] | None = None,
    interests: list[str] | None = None,
    activities: list[str] | None = None,
    style: str | None = None,
    frequency: float | None = None,
    comm_topics: list[str] | None = None,
    work_style: str | None = None,
) -> PlatformAnalysis:
    """Factory helper for creating PlatformAnalysis instances."""
    return PlatformAnalysis(
        platform=platform,
        url=url,
        tech_stack=TechStack(
            languages=languages or {},
            frameworks=frameworks or {},
            tools=tools or {},
            topics=topics or [],
        ),
        personality=Personality(
            interests=interests or [],
            activities=activities or [],
            communication=Communication(style=style, frequency=frequency, topics=comm_topics),
            work_style=work_style,
        ),
    )


Handler = Callable[[httpx.Request], httpx.Response]


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload), headers={"content-type": "application/json"})


def html_response(markup: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, text=markup, headers={"content-type": "text/html"})


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def matcher():
    return SubstringMatcher()
