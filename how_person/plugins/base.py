"""Base protocol for the platform source plugins.

A platform source knows how to check the shape of a profile URL, fetch the
platform's raw content and turn it into a ``PlatformAnalysis``.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from how_person.core.errors import InvalidInputError
from how_person.models.schemas import Platform, PlatformAnalysis
from how_person.synthesis.matching import MatchStrategy, get_matcher


class PlatformSource(ABC):
    """Protocol for platform extractors.

    Subclasses set ``platform``, ``url_pattern`` and ``example_url`` and
    implement ``analyze``. Fetch/parse/API failures inside ``analyze`` must
    surface as ``ExtractorError``.
    """

    platform: Platform
    url_pattern: re.Pattern[str] | None = None
    example_url: str = ""

    def __init__(self, matcher: MatchStrategy | None = None) -> None:
        self.matcher = matcher or get_matcher()

    @property
    def name(self) -> str:
        return self.platform.value

    def check_url(self, url: str) -> None:
        """Reject a malformed URL before any network access."""
        if self.url_pattern is not None and not self.url_pattern.match(url.strip()):
            raise InvalidInputError(
                f"Invalid {self.platform.display_name} URL: {url!r}. Example: {self.example_url}"
            )

    @abstractmethod
    async def analyze(self, url: str, **config: Any) -> PlatformAnalysis:
        """Fetch the platform's content for ``url`` and analyze it.

        Args:
            url: Profile (or blog) URL, already shape-checked.
            **config: Optional source-specific overrides.
        """
        ...
