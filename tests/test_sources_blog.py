"""Tests for how_person/plugins/sources/blog.py."""

from __future__ import annotations

import asyncio
from datetime import datetime

import httpx
import pytest

from how_person.core.errors import ExtractorError, InvalidInputError
from how_person.ingestion.web import PageFetcher, parse_html
from how_person.plugins.sources.blog import (
    BlogSource,
    extract_domain,
    find_articles,
    find_tags,
    parse_date,
)
from tests.conftest import RecordingTransport, html_response

BLOG_PAGE = """
<html>
<head>
  <title>Jane's notes</title>
  <meta name="description" content="Notes on building software">
</head>
<body>
  <article>
    <h2><a href="/posts/django-tips">Django tips</a></h2>
    <time datetime="2024-01-15">January 15</time>
    <p>How we use django views</p>
    <pre><code>def view(request):
    return render(request)</code></pre>
  </article>
  <article>
    <h2><a href="/posts/compose">Docker compose notes</a></h2>
    <span class="date">2024-03-10</span>
    <p>Compose files for local work</p>
  </article>
  <div class="tags"><a href="/t/devops">DevOps</a><a href="/t/x">x</a></div>
</body>
</html>
"""

LINK_ONLY_PAGE = """
<html><body>
  <a href="/2024/01/a-long-post-title">A long post title about testing</a>
  <a href="/about">About</a>
  <a href="https://elsewhere.example/post">An external link with long text</a>
</body></html>
"""


def make_source(markup: str = BLOG_PAGE, handler=None):
    transport = RecordingTransport(handler or (lambda request: html_response(markup)))
    return BlogSource(fetcher=PageFetcher(transport=transport)), transport


# ── URL handling ─────────────────────────────────────────────────────


class TestExtractDomain:
    def test_valid(self):
        assert extract_domain("https://blog.example.com/posts") == "blog.example.com"

    @pytest.mark.parametrize("url", ["blog.example.com", "ftp://example.com", "https://"])
    def test_invalid(self, url):
        with pytest.raises(InvalidInputError):
            extract_domain(url)


# ── page parsing ─────────────────────────────────────────────────────


class TestFindArticles:
    def test_article_containers(self):
        articles = find_articles(parse_html(BLOG_PAGE), "https://example.com/")
        assert [a.title for a in articles] == ["Django tips", "Docker compose notes"]
        assert articles[0].url == "https://example.com/posts/django-tips"
        assert articles[0].date == "2024-01-15"
        assert articles[1].date == "2024-03-10"
        assert "django views" in articles[0].content

    def test_first_matching_selector_wins(self):
        markup = """
        <div class="post"><h2>Only in post</h2><p>body</p></div>
        <div class="entry"><h2>Only in entry</h2><p>body</p></div>
        """
        articles = find_articles(parse_html(markup), "https://example.com/")
        assert [a.title for a in articles] == ["Only in post"]

    def test_containers_without_title_are_skipped(self):
        markup = "<article><p>no heading</p></article><div class='entry'><h3>Entry</h3></div>"
        articles = find_articles(parse_html(markup), "https://example.com/")
        assert [a.title for a in articles] == ["Entry"]

    def test_link_fallback(self):
        articles = find_articles(parse_html(LINK_ONLY_PAGE), "https://example.com/blog/")
        assert len(articles) == 1
        assert articles[0].title == "A long post title about testing"
        assert articles[0].content == articles[0].title
        assert articles[0].url == "https://example.com/2024/01/a-long-post-title"


class TestFindTags:
    def test_lowercased_and_short_tags_dropped(self):
        assert find_tags(parse_html(BLOG_PAGE)) == ["devops"]

    def test_rel_tag(self):
        assert find_tags(parse_html('<a rel="tag" href="/t/go">Go</a>')) == ["go"]


class TestParseDate:
    def test_iso_date(self):
        assert parse_date("2024-01-15") == datetime(2024, 1, 15)

    def test_offset_is_dropped(self):
        assert parse_date("2024-01-15T10:00:00+09:00") == datetime(2024, 1, 15, 10, 0)

    def test_rfc_2822(self):
        assert parse_date("Mon, 15 Jan 2024 10:00:00 +0000") == datetime(2024, 1, 15, 10, 0)

    def test_human_readable(self):
        assert parse_date("January 15, 2024") == datetime(2024, 1, 15)

    def test_fractional_seconds_and_z_suffix(self):
        assert parse_date("2024-01-15T10:00:00.000Z") == datetime(2024, 1, 15, 10, 0)

    def test_leading_date_with_trailing_text(self):
        assert parse_date("2024-01-15 (updated)") == datetime(2024, 1, 15)

    def test_unparseable(self):
        assert parse_date("last week") is None
        assert parse_date("") is None


# ── analyze ──────────────────────────────────────────────────────────


class TestBlogAnalyze:
    def test_topics_start_with_tags(self):
        source, _ = make_source()
        analysis = asyncio.run(source.analyze("https://example.com/"))
        topics = analysis.tech_stack.topics
        assert topics[0] == "devops"
        assert "docker" in topics

    def test_code_blocks_feed_languages(self):
        source, _ = make_source()
        analysis = asyncio.run(source.analyze("https://example.com/"))
        assert analysis.tech_stack.languages.get("python", 0) >= 2

    def test_personality(self):
        source, _ = make_source()
        analysis = asyncio.run(source.analyze("https://example.com/"))
        personality = analysis.personality
        assert personality.activities == ["Notes on building software", "Analyzed 2 articles"]
        assert personality.communication.style == "technical-explanation focused"
        # Two dated posts two calendar months apart
        assert personality.communication.frequency == pytest.approx(1.0)
        assert personality.work_style is not None

    def test_link_fallback_page(self):
        source, _ = make_source(LINK_ONLY_PAGE)
        analysis = asyncio.run(source.analyze("https://example.com/blog/"))
        assert len(analysis.raw_data["articles"]) == 1
        assert analysis.personality.activities == ["Analyzed 1 articles"]
        assert "testing" in analysis.tech_stack.topics
        # No dates: count / 12
        assert analysis.personality.communication.frequency == pytest.approx(1 / 12)

    def test_empty_page(self):
        source, _ = make_source("<html><head><title>t</title></head></html>")
        analysis = asyncio.run(source.analyze("https://example.com/"))
        assert analysis.personality.communication.style == "insufficient information"
        assert analysis.personality.work_style == "insufficient information"
        assert analysis.personality.communication.frequency == 0

    def test_og_description_fallback(self):
        markup = '<html><head><meta property="og:description" content="OG text"></head></html>'
        source, _ = make_source(markup)
        analysis = asyncio.run(source.analyze("https://example.com/"))
        assert analysis.raw_data["description"] == "OG text"

    def test_frequency_from_iso_timestamps(self):
        markup = """
        <article><h2>First</h2><time datetime="2024-01-15T10:00:00.000Z">Jan</time><p>one</p></article>
        <article><h2>Second</h2><time datetime="2024-03-15T10:00:00.000Z">Mar</time><p>two</p></article>
        """
        source, _ = make_source(markup)
        analysis = asyncio.run(source.analyze("https://example.com/"))
        assert analysis.personality.communication.frequency == pytest.approx(1.0)

    def test_http_error_raises_extractor_error(self):
        source, _ = make_source(handler=lambda request: httpx.Response(503))
        with pytest.raises(ExtractorError):
            asyncio.run(source.analyze("https://example.com/"))
