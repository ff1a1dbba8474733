"""Shared topic and tech-stack extraction.

All four extractors run the same routine over a corpus of short text items
(post text, slide title + description, article title + content):

1. every lower-cased item is tested against the topic vocabulary; each hit
   joins the topic set
2. the item is tested against the language / framework / tool lists; each
   hit adds 1 to that entry's tally
3. a second pass folds the collected topics back in: a topic adds 1 to the
   *first* language it contains, otherwise the first framework, otherwise
   the first tool

Platforms differ only in which steps apply, which vocabulary is used and
what auxiliary signals (tags, hashtags, code blocks, byte counts) are mixed
in, so they configure an ``ExtractionProfile`` instead of re-implementing it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from how_person.models.schemas import TechStack
from how_person.synthesis import taxonomy
from how_person.synthesis.matching import MatchStrategy, contains_any, first_match


@dataclass(frozen=True)
class ExtractionProfile:
    """Per-platform configuration of the shared extraction routine."""

    topic_vocabulary: tuple[str, ...] = taxonomy.TECH_TOPICS
    languages: tuple[str, ...] = taxonomy.LANGUAGES
    frameworks: tuple[str, ...] = taxonomy.FRAMEWORKS
    tools: tuple[str, ...] = taxonomy.TOOLS
    tally_corpus: bool = True  # step 2
    fold_topics: bool = True  # step 3


SLIDE_PROFILE = ExtractionProfile()
BLOG_PROFILE = ExtractionProfile()
MICROBLOG_PROFILE = ExtractionProfile(
    topic_vocabulary=taxonomy.MICROBLOG_TOPICS, tally_corpus=False, fold_topics=False
)


@dataclass
class Extraction:
    """Topics (insertion-ordered set) plus the three tallies."""

    topics: dict[str, None] = field(default_factory=dict)
    languages: dict[str, int] = field(default_factory=dict)
    frameworks: dict[str, int] = field(default_factory=dict)
    tools: dict[str, int] = field(default_factory=dict)

    def add_topic(self, topic: str) -> None:
        self.topics.setdefault(topic, None)

    def topic_list(self) -> list[str]:
        return list(self.topics)

    def tech_stack(self) -> TechStack:
        return TechStack(
            languages=dict(self.languages),
            frameworks=dict(self.frameworks),
            tools=dict(self.tools),
            topics=self.topic_list(),
        )


def bump(tally: dict[str, int], key: str, amount: int = 1) -> None:
    """Accumulate evidence. Tallies only ever grow."""
    if amount < 0:
        raise ValueError(f"Negative evidence for '{key}': {amount}")
    tally[key] = tally.get(key, 0) + amount


def detect_topics(
    texts: Iterable[str],
    vocabulary: Iterable[str],
    matcher: MatchStrategy,
    into: Extraction | None = None,
) -> Extraction:
    """Add every vocabulary entry found in any text item to the topic set."""
    result = into if into is not None else Extraction()
    vocabulary = tuple(vocabulary)
    for text in texts:
        lowered = text.lower()
        for keyword in vocabulary:
            if matcher.matches(lowered, keyword):
                result.add_topic(keyword)
    return result


def tally_terms(
    texts: Iterable[str],
    vocabulary: Iterable[str],
    matcher: MatchStrategy,
    tally: dict[str, int] | None = None,
) -> dict[str, int]:
    """Count, per vocabulary entry, the text items that contain it."""
    result = tally if tally is not None else {}
    vocabulary = tuple(vocabulary)
    for text in texts:
        lowered = text.lower()
        for term in vocabulary:
            if matcher.matches(lowered, term):
                bump(result, term)
    return result


def fold_topics(extraction: Extraction, profile: ExtractionProfile, matcher: MatchStrategy) -> None:
    """Fold collected topics into the tallies: at most one hit per topic."""
    for topic in extraction.topic_list():
        lowered = topic.lower()
        if lang := first_match(lowered, profile.languages, matcher):
            bump(extraction.languages, lang)
        elif fw := first_match(lowered, profile.frameworks, matcher):
            bump(extraction.frameworks, fw)
        elif tool := first_match(lowered, profile.tools, matcher):
            bump(extraction.tools, tool)


def classify_tag(tag: str, matcher: MatchStrategy, profile: ExtractionProfile | None = None) -> str | None:
    """Return "frameworks" or "tools" for a repository topic tag, or None.

    Only the framework and tool lists are consulted; tags are never
    classified as languages.
    """
    profile = profile or ExtractionProfile()
    lowered = tag.lower()
    if contains_any(lowered, profile.frameworks, matcher):
        return "frameworks"
    if contains_any(lowered, profile.tools, matcher):
        return "tools"
    return None


def extract(
    texts: Iterable[str],
    profile: ExtractionProfile,
    matcher: MatchStrategy,
    *,
    authoritative_topics: Iterable[str] = (),
    seed: Extraction | None = None,
) -> Extraction:
    """Run the shared routine over ``texts``.

    ``authoritative_topics`` (tags/categories from markup) are added first,
    verbatim and lower-cased. ``seed`` carries tallies collected from
    auxiliary signals (e.g. code blocks) before the corpus pass.
    """
    texts = list(texts)
    result = seed if seed is not None else Extraction()

    for topic in authoritative_topics:
        result.add_topic(topic.lower())
    detect_topics(texts, profile.topic_vocabulary, matcher, into=result)

    if profile.tally_corpus:
        tally_terms(texts, profile.languages, matcher, result.languages)
        tally_terms(texts, profile.frameworks, matcher, result.frameworks)
        tally_terms(texts, profile.tools, matcher, result.tools)
    if profile.fold_topics:
        fold_topics(result, profile, matcher)
    return result


def detect_code_languages(
    blocks: Iterable[str],
    languages: Iterable[str] = taxonomy.LANGUAGES,
) -> dict[str, int]:
    """Coarse language guess for code blocks.

    A block counts for a language only if it has a generic code marker and
    that language's signature. One block may count for several languages.
    Markers are syntax fragments, so this is always raw substring search.
    """
    tally: dict[str, int] = {}
    languages = tuple(languages)
    for block in blocks:
        code = block.strip().lower()
        if not any(marker in code for marker in taxonomy.CODE_MARKERS):
            continue
        for lang in languages:
            signature = taxonomy.CODE_SIGNATURES.get(lang)
            if signature and any(all(part in code for part in group) for group in signature):
                bump(tally, lang)
    return tally
