"""Plugin system for how-person: one source plugin per analyzed platform."""

from how_person.plugins.base import PlatformSource
from how_person.plugins.registry import PluginRegistry, registry

__all__ = [
    "PlatformSource",
    "PluginRegistry",
    "registry",
]
