"""Tests for how_person/plugins/sources/github.py."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from how_person.core.errors import ExtractorError, InvalidInputError
from how_person.ingestion.github import GitHubClient
from how_person.plugins.sources.github import GitHubSource, extract_username
from tests.conftest import RecordingTransport, json_response

USER = {"login": "octocat", "bio": "Builds tools", "company": "GitHub", "public_repos": 3}

REPOS = [
    {
        "name": "cli",
        "full_name": "octocat/cli",
        "description": "A command line tool",
        "fork": False,
        "stargazers_count": 5,
        "topics": ["react-app", "docker", "cli"],
        "contributors_url": "https://api.github.com/repos/octocat/cli/contributors",
    },
    {"name": "fork-of-something", "fork": True, "topics": ["vue"]},
    {"name": "broken", "fork": False, "topics": []},
]


def github_handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == "/users/octocat":
        return json_response(USER)
    if path == "/users/octocat/repos":
        return json_response(REPOS)
    if path == "/repos/octocat/cli/languages":
        return json_response({"Python": 1200, "Go": 300})
    if path == "/repos/octocat/broken/languages":
        return httpx.Response(500)
    return httpx.Response(404, json={"message": "Not Found"})


def make_source(handler=github_handler) -> tuple[GitHubSource, RecordingTransport]:
    transport = RecordingTransport(handler)
    source = GitHubSource(client_factory=lambda: GitHubClient(token="", transport=transport))
    return source, transport


# ── URL handling ─────────────────────────────────────────────────────


class TestExtractUsername:
    def test_basic(self):
        assert extract_username("https://github.com/octocat") == "octocat"

    def test_invalid(self):
        with pytest.raises(InvalidInputError):
            extract_username("https://example.com/octocat")

    def test_check_url_rejects_repo_url(self):
        source, _ = make_source()
        with pytest.raises(InvalidInputError):
            source.check_url("https://github.com/octocat/cli")


# ── analyze ──────────────────────────────────────────────────────────


class TestGitHubAnalyze:
    def test_languages_summed_from_non_fork_repos(self):
        source, transport = make_source()
        analysis = asyncio.run(source.analyze("https://github.com/octocat"))
        assert analysis.tech_stack.languages == {"Python": 1200, "Go": 300}
        paths = [r.url.path for r in transport.requests]
        assert "/repos/octocat/fork-of-something/languages" not in paths

    def test_failed_language_fetch_is_skipped(self):
        source, transport = make_source()
        asyncio.run(source.analyze("https://github.com/octocat"))
        assert "/repos/octocat/broken/languages" in [r.url.path for r in transport.requests]

    def test_topics_classified_by_full_tag(self):
        source, _ = make_source()
        analysis = asyncio.run(source.analyze("https://github.com/octocat"))
        assert analysis.tech_stack.topics == ["react-app", "docker", "cli"]
        assert analysis.tech_stack.frameworks == {"react-app": 1}
        assert analysis.tech_stack.tools == {"docker": 1}

    def test_personality(self):
        source, _ = make_source()
        analysis = asyncio.run(source.analyze("https://github.com/octocat"))
        personality = analysis.personality
        assert personality.interests == ["react-app", "docker", "cli"]
        assert personality.activities == [
            "Builds tools",
            "Owns 3 repositories",
            "Affiliated with GitHub",
        ]
        assert personality.communication.style == "collaborative"

    def test_repos_request_parameters(self):
        source, transport = make_source()
        asyncio.run(source.analyze("https://github.com/octocat"))
        repos_request = next(r for r in transport.requests if r.url.path == "/users/octocat/repos")
        assert repos_request.url.params["per_page"] == "100"
        assert repos_request.url.params["sort"] == "updated"

    def test_raw_data_not_serialized(self):
        source, _ = make_source()
        analysis = asyncio.run(source.analyze("https://github.com/octocat"))
        assert analysis.raw_data["user"]["login"] == "octocat"
        assert "raw_data" not in analysis.model_dump()

    def test_missing_user_raises_extractor_error(self):
        source, _ = make_source()
        with pytest.raises(ExtractorError) as exc_info:
            asyncio.run(source.analyze("https://github.com/ghost"))
        assert exc_info.value.platform == "github"

    def test_malformed_repo_payload(self):
        def handler(request):
            if request.url.path == "/users/octocat":
                return json_response(USER)
            return json_response({"unexpected": "shape"})

        source, _ = make_source(handler)
        with pytest.raises(ExtractorError):
            asyncio.run(source.analyze("https://github.com/octocat"))
