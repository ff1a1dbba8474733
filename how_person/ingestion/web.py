"""Plain HTTP page fetching and HTML parsing for the scraped platforms."""

from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup

from how_person.core.config import settings

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches raw page markup over HTTP.

    ``transport`` lets tests plug in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.transport = transport

    async def fetch_text(self, url: str) -> str:
        """GET ``url`` and return the body text. Raises ``httpx.HTTPError`` on failure."""
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": settings.user_agent},
            transport=self.transport,
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
            return resp.text


def parse_html(markup: str) -> BeautifulSoup:
    """Parse markup into a document queryable with CSS selectors."""
    return BeautifulSoup(markup, "html.parser")


def select_text(node, selector: str) -> str:
    """Stripped text of the first element matching ``selector``, or ``""``."""
    found = node.select_one(selector)
    return found.get_text().strip() if found is not None else ""


def select_attr(node, selector: str, attr: str) -> str:
    """Attribute value of the first element matching ``selector``, or ``""``."""
    found = node.select_one(selector)
    if found is None:
        return ""
    value = found.get(attr)
    return value.strip() if isinstance(value, str) else ""
