"""Request validation, run before any network access."""

from __future__ import annotations

from how_person.core.errors import InvalidInputError
from how_person.models.schemas import AnalysisRequest
from how_person.plugins.registry import PluginRegistry, registry


def validate_request(request: AnalysisRequest, sources: PluginRegistry | None = None) -> None:
    """Raise ``InvalidInputError`` for an empty request or a malformed URL.

    Each URL is shape-checked by its platform's source plugin.
    """
    sources = sources if sources is not None else registry
    requested = request.requested()
    if not requested:
        raise InvalidInputError(
            "At least one URL is required (github, twitter, speakerdeck or blog)"
        )
    for platform, url in requested.items():
        try:
            source = sources.get_source(platform)
        except KeyError:
            raise InvalidInputError(f"No source registered for {platform.display_name}") from None
        source.check_url(url)
