"""Analysis pipeline: validate -> fan out to platform sources -> aggregate.

Requested platforms are analyzed concurrently. A platform that fails is
logged and left out; the rest still make it into the summary. Rendered
summaries are cached per exact request signature, so a repeated request
never touches the network.
"""

from __future__ import annotations

import asyncio
import logging

from how_person.core.cache import AnalysisCache
from how_person.core.config import settings
from how_person.core.errors import ExtractorError
from how_person.models.schemas import AnalysisRequest, AnalysisResult, Platform, PlatformAnalysis
from how_person.plugins.registry import PluginRegistry, registry
from how_person.synthesis.aggregator import aggregate
from how_person.validation import validate_request

logger = logging.getLogger(__name__)


def default_cache() -> AnalysisCache:
    return AnalysisCache(
        max_entries=settings.cache_max_entries,
        ttl_seconds=settings.cache_ttl_seconds,
    )


class PersonAnalyzer:
    """Owns the source registry and the summary cache for one server process."""

    def __init__(
        self,
        sources: PluginRegistry | None = None,
        cache: AnalysisCache | None = None,
    ) -> None:
        self.sources = sources if sources is not None else registry
        self.cache = cache if cache is not None else default_cache()

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Run every requested source and merge whatever succeeded.

        Raises ``InvalidInputError`` before any fetch if the request is
        empty or a URL is malformed. Never raises for upstream failures.
        """
        validate_request(request, self.sources)
        requested = request.requested()
        platforms = list(requested)

        logger.info("Analyzing %s", ", ".join(p.display_name for p in platforms))
        outcomes = await asyncio.gather(
            *(self.sources.get_source(p).analyze(url) for p, url in requested.items()),
            return_exceptions=True,
        )

        analyses: list[PlatformAnalysis] = []
        for platform, outcome in zip(platforms, outcomes):
            if isinstance(outcome, PlatformAnalysis):
                analyses.append(outcome)
            else:
                _log_failure(platform, outcome)

        return aggregate(analyses)

    async def summarize(self, request: AnalysisRequest) -> str:
        """Return the rendered summary, served from cache for repeated requests."""
        validate_request(request, self.sources)
        key = request.cache_key()
        cached = self.cache.get(key)
        if cached is not None:
            logger.info("Cache hit for %s", key)
            return cached

        result = await self.analyze(request)
        self.cache.set(key, result.summary)
        return result.summary


def _log_failure(platform: Platform, outcome: BaseException) -> None:
    if isinstance(outcome, ExtractorError):
        logger.error("%s analysis failed: %s", platform.display_name, outcome.message)
    elif isinstance(outcome, Exception):
        logger.error("%s analysis failed unexpectedly", platform.display_name, exc_info=outcome)
    else:
        raise outcome
