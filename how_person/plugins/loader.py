"""Plugin loader: registers the built-in platform sources at startup."""

from __future__ import annotations

from how_person.plugins.registry import PluginRegistry, registry
from how_person.plugins.sources.blog import BlogSource
from how_person.plugins.sources.github import GitHubSource
from how_person.plugins.sources.speakerdeck import SpeakerDeckSource
from how_person.plugins.sources.twitter import TwitterSource


def load_plugins(target: PluginRegistry | None = None) -> PluginRegistry:
    """Register all built-in sources with ``target`` (the global registry by default)."""
    target = target if target is not None else registry
    target.register_source(GitHubSource())
    target.register_source(TwitterSource())
    target.register_source(SpeakerDeckSource())
    target.register_source(BlogSource())
    return target
