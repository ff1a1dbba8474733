"""Rule-based style classifiers.

Each classifier is a fixed first-match-wins decision tree over aggregate
statistics (counts, ratios, average lengths) or keyword presence, returning
one human-readable label. No scoring, no randomness.
"""

from __future__ import annotations

import datetime
from collections.abc import Sequence
from dataclasses import dataclass

from how_person.synthesis import taxonomy
from how_person.synthesis.matching import MatchStrategy, contains_any

INSUFFICIENT = "insufficient information"

_SECONDS_PER_DAY = 60 * 60 * 24


# ── Communication style: GitHub ──────────────────────────────────────


@dataclass
class RepoStats:
    repo_count: int
    max_stars: int = 0
    max_description_length: int = 0
    max_contributor_refs: int = 0


def github_communication_style(stats: RepoStats) -> str:
    if stats.max_stars > 50 and stats.max_description_length > 100:
        return "open, documentation-focused"
    if stats.max_contributor_refs > 1:
        return "collaborative"
    if stats.repo_count > 20:
        return "prolific/exploratory"
    return "focused on personal development"


# ── Communication style: Twitter/X ───────────────────────────────────


@dataclass
class PostStats:
    post_count: int
    followers: int = 0
    repost_count: int = 0
    reply_count: int = 0
    total_length: int = 0


def twitter_communication_style(stats: PostStats | None) -> str:
    if stats is None or stats.post_count == 0:
        return INSUFFICIENT
    repost_ratio = stats.repost_count / stats.post_count
    reply_ratio = stats.reply_count / stats.post_count
    avg_length = stats.total_length / stats.post_count

    if stats.followers > 5000:
        return "influential voice"
    if repost_ratio > 0.7:
        return "information-sharing type"
    if reply_ratio > 0.5:
        return "dialogue-focused type"
    if avg_length > 200:
        return "prefers detailed explanation"
    if avg_length < 100:
        return "prefers concise output"
    return "balanced communication style"


# ── Communication style: SpeakerDeck ─────────────────────────────────


def speakerdeck_communication_style(
    titles: Sequence[str],
    descriptions: Sequence[str],
    matcher: MatchStrategy,
) -> str:
    count = len(titles)
    if count == 0:
        return INSUFFICIENT
    avg_title = sum(len(t) for t in titles) / count
    avg_description = sum(len(d) for d in descriptions) / count
    technical = sum(
        1
        for title, description in zip(titles, descriptions)
        if contains_any(f"{title} {description}".lower(), taxonomy.TECHNICAL_CONTENT_KEYWORDS, matcher)
    )

    if count > 20:
        return "actively shares knowledge"
    if avg_description > 200:
        return "favors detailed explanation"
    if avg_title > 50:
        return "uses specific, descriptive titles"
    if technical / count > 0.7:
        return "specializes in technical content"
    return "balanced topic coverage"


# ── Communication style: blog ────────────────────────────────────────


def blog_communication_style(
    titles: Sequence[str],
    contents: Sequence[str],
    code_block_count: int,
    image_count: int,
) -> str:
    count = len(titles)
    if count == 0:
        return INSUFFICIENT
    avg_title = sum(len(t) for t in titles) / count
    avg_content = sum(len(c) for c in contents) / count

    if code_block_count > count * 0.7:
        return "technical-explanation focused"
    if image_count > count * 2:
        return "visual-focused"
    if avg_content > 3000:
        return "detailed"
    if avg_content < 1000:
        return "concise"
    if avg_title > 50:
        return "specific-titles"
    return "balanced"


# ── Work style ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class WorkStyleKeywords:
    team: tuple[str, ...]
    individual: tuple[str, ...]
    leadership: tuple[str, ...]
    technical: tuple[str, ...]
    educational: tuple[str, ...] | None = None


SLIDE_WORK_KEYWORDS = WorkStyleKeywords(
    team=taxonomy.TEAM_KEYWORDS,
    individual=taxonomy.INDIVIDUAL_KEYWORDS,
    leadership=taxonomy.LEADERSHIP_KEYWORDS,
    technical=taxonomy.TECHNICAL_KEYWORDS,
)

BLOG_WORK_KEYWORDS = WorkStyleKeywords(
    team=taxonomy.BLOG_TEAM_KEYWORDS,
    individual=taxonomy.BLOG_INDIVIDUAL_KEYWORDS,
    leadership=taxonomy.BLOG_LEADERSHIP_KEYWORDS,
    technical=taxonomy.BLOG_TECHNICAL_KEYWORDS,
    educational=taxonomy.BLOG_EDUCATIONAL_KEYWORDS,
)


def work_style(corpus: Sequence[str], keywords: WorkStyleKeywords, matcher: MatchStrategy) -> str:
    """Classify work style from keyword presence over the whole corpus.

    With an educational keyword set, educational + technical outranks every
    other combination.
    """
    if not corpus:
        return INSUFFICIENT
    text = " ".join(corpus).lower()

    team = contains_any(text, keywords.team, matcher)
    individual = contains_any(text, keywords.individual, matcher)
    leadership = contains_any(text, keywords.leadership, matcher)
    technical = contains_any(text, keywords.technical, matcher)
    educational = keywords.educational is not None and contains_any(text, keywords.educational, matcher)

    if educational and technical:
        return "educational, knowledge-sharing oriented"
    if leadership and team:
        return "team-leadership oriented"
    if team:
        return "collaboration oriented"
    if individual and technical:
        return "solo deep-technical worker"
    if technical:
        return "detail-oriented technically"
    if leadership:
        return "vision/strategy oriented"
    if educational:
        return "teaching/knowledge-sharing oriented"
    return "balanced work style"


# ── Frequency ────────────────────────────────────────────────────────


def posts_per_day(post_count: int, dates: Sequence[datetime.datetime]) -> float:
    """Posts per day over the span between the oldest and newest post.

    With fewer than two timestamps this is just the post count.
    """
    if post_count == 0:
        return 0
    ordered = sorted(dates)
    if len(ordered) < 2:
        return post_count
    days = (ordered[-1] - ordered[0]).total_seconds() / _SECONDS_PER_DAY
    return post_count / days if days > 0 else post_count


def posts_per_month(post_count: int, dates: Sequence[datetime.datetime]) -> float:
    """Posts per calendar month between the oldest and newest dated post.

    Falls back to count / 12 when fewer than two posts are dated.
    """
    ordered = sorted(dates)
    if len(ordered) < 2:
        return post_count / 12
    oldest, newest = ordered[0], ordered[-1]
    months = (newest.year - oldest.year) * 12 + (newest.month - oldest.month)
    return post_count / months if months > 0 else post_count


def decks_per_month(deck_count: int) -> float:
    """Deck count spread over an assumed one-year window."""
    return deck_count / 12 if deck_count > 0 else 0
