"""Keyword matching strategies.

Every vocabulary test in the extractors goes through a ``MatchStrategy`` so
the precision of keyword detection can be changed in one place.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Protocol


class MatchStrategy(Protocol):
    name: str

    def matches(self, text: str, term: str) -> bool:
        """True if ``term`` occurs in ``text``. Both are expected lower-cased."""
        ...


class SubstringMatcher:
    """Plain substring containment.

    Short terms match inside unrelated words ("go" in "django", "r" in
    nearly everything). This is the default.
    """

    name = "substring"

    def matches(self, text: str, term: str) -> bool:
        return term in text


@lru_cache(maxsize=1024)
def _boundary_pattern(term: str) -> re.Pattern[str]:
    # \b does not work around symbols such as "c#" or "c++", so use look-arounds
    return re.compile(rf"(?<![\w]){re.escape(term)}(?![\w])")


class TokenBoundaryMatcher:
    """Matches a term only when it is not embedded in a longer word."""

    name = "token"

    def matches(self, text: str, term: str) -> bool:
        return _boundary_pattern(term).search(text) is not None


_STRATEGIES: dict[str, type] = {
    SubstringMatcher.name: SubstringMatcher,
    TokenBoundaryMatcher.name: TokenBoundaryMatcher,
}


def get_matcher(name: str | None = None) -> MatchStrategy:
    """Return the strategy named ``name`` (or the configured default)."""
    if name is None:
        from how_person.core.config import settings

        name = settings.match_strategy
    try:
        return _STRATEGIES[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown match strategy '{name}'. Available: {', '.join(_STRATEGIES)}"
        ) from None


def contains_any(text: str, terms, matcher: MatchStrategy) -> bool:
    return any(matcher.matches(text, term) for term in terms)


def first_match(text: str, terms, matcher: MatchStrategy) -> str | None:
    for term in terms:
        if matcher.matches(text, term):
            return term
    return None
