"""Blog source plugin: heuristic article discovery on an arbitrary blog page.

Blogs have no common markup, so articles are found by trying a list of
well-known container selectors in order; the first selector yielding any
article wins. Pages without recognisable containers fall back to long
same-site links, each treated as a title-only article.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any
from urllib.parse import urljoin, urlparse

import httpx

from how_person.core.errors import ExtractorError, InvalidInputError
from how_person.ingestion.web import PageFetcher, parse_html, select_attr, select_text
from how_person.models.schemas import (
    Communication,
    Personality,
    Platform,
    PlatformAnalysis,
)
from how_person.plugins.base import PlatformSource
from how_person.synthesis.extraction import BLOG_PROFILE, Extraction, detect_code_languages, extract
from how_person.synthesis.matching import MatchStrategy
from how_person.synthesis.style import (
    BLOG_WORK_KEYWORDS,
    blog_communication_style,
    posts_per_month,
    work_style,
)

logger = logging.getLogger(__name__)

ARTICLE_SELECTORS = (
    "article",
    ".post",
    ".entry",
    ".blog-post",
    ".blog-entry",
    ".post-content",
    ".entry-content",
    ".article-content",
)

TAG_SELECTORS = (
    ".tags a",
    ".categories a",
    ".category a",
    ".tag a",
    'a[rel="tag"]',
    ".post-tags a",
    ".entry-tags a",
    ".post-categories a",
    ".entry-categories a",
)

_DATE_SELECTOR = ".date, .time, .published, .post-date"
_CODE_SELECTOR = "pre, code"

# Anchor text shorter than this is navigation, not an article title
_MIN_LINK_TITLE = 20

_MAX_INTERESTS = 10
_MAX_COMM_TOPICS = 5


@dataclass
class Article:
    title: str
    url: str
    content: str
    date: str = ""

    @property
    def text(self) -> str:
        return f"{self.title} {self.content}"


def extract_domain(url: str) -> str:
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidInputError(f"Invalid blog URL: {url!r}. Example: https://example.com/blog")
    return parsed.netloc


def find_articles(doc, base_url: str) -> list[Article]:
    for selector in ARTICLE_SELECTORS:
        articles = []
        for element in doc.select(selector):
            title = select_text(element, "h1, h2, h3")
            content = element.get_text().strip()
            if not (title and content):
                continue
            href = select_attr(element, "a[href]", "href")
            date = select_attr(element, "time[datetime]", "datetime") or select_text(element, _DATE_SELECTOR)
            articles.append(Article(title=title, url=urljoin(base_url, href), content=content, date=date))
        if articles:
            logger.debug("Found %d articles with selector %r", len(articles), selector)
            return articles
    return _articles_from_links(doc, base_url)


def _articles_from_links(doc, base_url: str) -> list[Article]:
    articles = []
    for anchor in doc.select("a[href]"):
        href = anchor.get("href", "")
        text = anchor.get_text().strip()
        if "/" in href and not href.startswith("http") and len(text) > _MIN_LINK_TITLE:
            articles.append(Article(title=text, url=urljoin(base_url, href), content=text))
    return articles


def find_tags(doc) -> list[str]:
    """Tag/category link texts, lower-cased, in document order."""
    tags: dict[str, None] = {}
    for selector in TAG_SELECTORS:
        for element in doc.select(selector):
            tag = element.get_text().strip().lower()
            if len(tag) > 1:
                tags.setdefault(tag, None)
    return list(tags)


def parse_date(date_str: str) -> datetime | None:
    """Parse the common blog date formats into a naive datetime, else None."""
    if not date_str:
        return None
    value = date_str.strip()

    try:
        return datetime.fromisoformat(value).replace(tzinfo=None)
    except ValueError:
        pass

    for fmt in (
        "%Y-%m-%dT%H:%M:%S%z",
        "%Y-%m-%dT%H:%M:%SZ",
        "%Y-%m-%dT%H:%M:%S",
        "%Y-%m-%d",
        "%Y/%m/%d",
        "%B %d, %Y",
        "%b %d, %Y",
    ):
        try:
            return datetime.strptime(value, fmt).replace(tzinfo=None)
        except ValueError:
            continue

    # RFC 2822
    try:
        return parsedate_to_datetime(value).replace(tzinfo=None)
    except (ValueError, TypeError):
        pass

    # Best effort: a leading YYYY-MM-DD
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d")
    except ValueError:
        return None


class BlogSource(PlatformSource):
    """Analyzes any blog front page reachable over HTTP(S)."""

    platform = Platform.BLOG
    example_url = "https://example.com/blog"

    def __init__(
        self,
        fetcher: PageFetcher | None = None,
        matcher: MatchStrategy | None = None,
    ) -> None:
        super().__init__(matcher)
        self.fetcher = fetcher or PageFetcher()

    def check_url(self, url: str) -> None:
        extract_domain(url)

    async def analyze(self, url: str, **config: Any) -> PlatformAnalysis:
        domain = extract_domain(url)
        try:
            markup = await self.fetcher.fetch_text(url)
        except httpx.HTTPError as exc:
            raise ExtractorError(self.name, f"could not fetch {url}: {exc}") from exc

        doc = parse_html(markup)
        title = select_text(doc, "title")
        description = (
            select_attr(doc, 'meta[name="description"]', "content")
            or select_attr(doc, 'meta[property="og:description"]', "content")
        )
        articles = find_articles(doc, url)

        code_blocks = [block.get_text().strip() for block in doc.select(_CODE_SELECTOR)]
        image_count = len(doc.select("img"))

        corpus = [article.text for article in articles]
        seed = Extraction(languages=detect_code_languages(code_blocks, BLOG_PROFILE.languages))
        extraction = extract(corpus, BLOG_PROFILE, self.matcher, authoritative_topics=find_tags(doc), seed=seed)
        topics = extraction.topic_list()

        dates = [d for d in (parse_date(a.date) for a in articles) if d is not None]
        activities = [description, f"Analyzed {len(articles)} articles"]
        personality = Personality(
            interests=topics[:_MAX_INTERESTS],
            activities=[a for a in activities if a.strip()],
            communication=Communication(
                style=blog_communication_style(
                    [a.title for a in articles],
                    [a.content for a in articles],
                    code_block_count=len(code_blocks),
                    image_count=image_count,
                ),
                frequency=posts_per_month(len(articles), dates),
                topics=topics[:_MAX_COMM_TOPICS],
            ),
            work_style=work_style(corpus, BLOG_WORK_KEYWORDS, self.matcher),
        )

        logger.info("Analyzed blog %s: %d articles, %d topics", domain, len(articles), len(topics))
        return PlatformAnalysis(
            platform=self.platform,
            url=url,
            tech_stack=extraction.tech_stack(),
            personality=personality,
            raw_data={
                "title": title,
                "description": description,
                "domain": domain,
                "articles": [asdict(a) for a in articles],
            },
        )
