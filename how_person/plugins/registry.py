"""Plugin registry: the central place to register and look up platform sources."""

from __future__ import annotations

import logging

from how_person.models.schemas import Platform
from how_person.plugins.base import PlatformSource

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Registry for platform source plugins."""

    def __init__(self) -> None:
        self._sources: dict[str, PlatformSource] = {}

    def register_source(self, source: PlatformSource) -> None:
        """Register a platform source plugin."""
        if source.name in self._sources:
            logger.warning("Overwriting source plugin: %s", source.name)
        self._sources[source.name] = source
        logger.debug("Registered platform source: %s", source.name)

    def get_source(self, name: str | Platform) -> PlatformSource:
        """Get a registered source by name. Raises KeyError if not found."""
        key = name.value if isinstance(name, Platform) else name
        return self._sources[key]

    def list_sources(self) -> list[str]:
        """Return names of all registered platform sources."""
        return list(self._sources.keys())

    def clear(self) -> None:
        self._sources.clear()


# Singleton registry instance
registry = PluginRegistry()
