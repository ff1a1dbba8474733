"""Tests for how_person/validation.py and the per-source URL checks."""

from __future__ import annotations

import pytest

from how_person.core.errors import InvalidInputError
from how_person.models.schemas import AnalysisRequest, Platform
from how_person.plugins.loader import load_plugins
from how_person.plugins.registry import PluginRegistry
from how_person.validation import validate_request


@pytest.fixture
def sources():
    return load_plugins(PluginRegistry())


class TestValidateRequest:
    def test_requires_a_url(self, sources):
        with pytest.raises(InvalidInputError, match="At least one URL"):
            validate_request(AnalysisRequest(), sources)

    def test_empty_strings_count_as_absent(self, sources):
        with pytest.raises(InvalidInputError):
            validate_request(AnalysisRequest(github="", blog=""), sources)

    @pytest.mark.parametrize(
        "field, url",
        [
            ("github", "https://github.com/octocat"),
            ("github", "http://www.github.com/octocat/"),
            ("twitter", "https://twitter.com/jack"),
            ("twitter", "https://x.com/jack"),
            ("speakerdeck", "https://speakerdeck.com/someone"),
            ("blog", "https://example.com/blog/"),
            ("blog", "http://localhost:8000"),
        ],
    )
    def test_accepts_valid_urls(self, sources, field, url):
        validate_request(AnalysisRequest(**{field: url}), sources)

    @pytest.mark.parametrize(
        "field, url",
        [
            ("github", "https://github.com/octocat/hello-world"),
            ("github", "https://gitlab.com/octocat"),
            ("twitter", "https://mastodon.social/@jack"),
            ("speakerdeck", "https://speakerdeck.com/someone/a-talk"),
            ("blog", "example.com"),
            ("blog", "ftp://example.com"),
        ],
    )
    def test_rejects_malformed_urls(self, sources, field, url):
        with pytest.raises(InvalidInputError):
            validate_request(AnalysisRequest(**{field: url}), sources)

    def test_message_names_platform_and_example(self, sources):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_request(AnalysisRequest(github="https://github.com/a/b"), sources)
        assert "GitHub" in exc_info.value.message
        assert "https://github.com/username" in exc_info.value.message

    def test_unregistered_platform(self):
        with pytest.raises(InvalidInputError, match="No source registered"):
            validate_request(AnalysisRequest(github="https://github.com/octocat"), PluginRegistry())


class TestLoader:
    def test_registers_all_platforms(self, sources):
        assert sources.list_sources() == [p.value for p in Platform]
