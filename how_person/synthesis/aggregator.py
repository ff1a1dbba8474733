"""Cross-platform merge of per-platform analyses and summary rendering."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from how_person.models.schemas import (
    AnalysisResult,
    Communication,
    Personality,
    PlatformAnalysis,
    TechStack,
)
from how_person.synthesis.style import INSUFFICIENT

logger = logging.getLogger(__name__)

TOP_STACK = 3
TOP_INTERESTS = 5
TOP_ACTIVITIES = 3

# Keyword categories used to condense several platform style labels into one
_STYLE_CATEGORIES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(p, re.IGNORECASE), label)
    for p, label in [
        (r"technical|detail|explanation|code|implementation|document", "technical"),
        (r"educat|shar|tutorial|learn|teach", "educational"),
        (r"leader|manag|strategy|vision", "leadership"),
        (r"team|collaborat|cooperat", "team-oriented"),
        (r"individual|personal|solo", "individual"),
        (r"concise|simple", "concise"),
        (r"detail|thorough|deep|document", "detailed"),
        (r"balanced", "balanced"),
        (r"influen|voice", "influential"),
    ]
]


def _unique(items: Iterable[str]) -> list[str]:
    """Order-preserving de-duplication."""
    return list(dict.fromkeys(items))


def _sorted_by_score(tally: dict[str, int]) -> dict[str, int]:
    # sorted() is stable: equal scores keep first-encountered order
    return dict(sorted(tally.items(), key=lambda item: item[1], reverse=True))


def merge_tech_stacks(analyses: Sequence[PlatformAnalysis]) -> TechStack:
    """Sum tallies key by key and union topics across platforms."""
    languages: dict[str, int] = {}
    frameworks: dict[str, int] = {}
    tools: dict[str, int] = {}
    topics: list[str] = []

    for analysis in analyses:
        stack = analysis.tech_stack
        for merged, tally in (
            (languages, stack.languages),
            (frameworks, stack.frameworks),
            (tools, stack.tools),
        ):
            for name, score in tally.items():
                merged[name] = merged.get(name, 0) + score
        topics.extend(stack.topics)

    return TechStack(
        languages=_sorted_by_score(languages),
        frameworks=_sorted_by_score(frameworks),
        tools=_sorted_by_score(tools),
        topics=_unique(topics),
    )


def summarize_communication_style(styles: Sequence[str]) -> str:
    """Condense per-platform style labels into one label.

    Counts, per keyword category, how many platform labels mention it and
    names the top one or two categories. Falls back to the first label
    when no category matches.
    """
    if not styles:
        return INSUFFICIENT
    if len(styles) == 1:
        return styles[0]

    counts: dict[str, int] = {}
    for style in styles:
        for pattern, category in _STYLE_CATEGORIES:
            if pattern.search(style):
                counts[category] = counts.get(category, 0) + 1

    ranked = [category for category, _ in sorted(counts.items(), key=lambda item: item[1], reverse=True)]
    if not ranked:
        return styles[0]
    if len(ranked) >= 2:
        return f"{ranked[0]} and {ranked[1]} communication style"
    return f"{ranked[0]} communication style"


def dominant_work_style(styles: Sequence[str]) -> str | None:
    """Plurality vote; ties go to the label seen first."""
    counts: dict[str, int] = {}
    for style in styles:
        if style:
            counts[style] = counts.get(style, 0) + 1
    if not counts:
        return None
    return max(counts, key=lambda style: counts[style])


def merge_personalities(analyses: Sequence[PlatformAnalysis]) -> Personality:
    interests: list[str] = []
    activities: list[str] = []
    comm_topics: list[str] = []
    comm_styles: list[str] = []
    work_styles: list[str] = []
    frequency_total = 0.0

    for analysis in analyses:
        personality = analysis.personality
        interests.extend(personality.interests)
        activities.extend(a for a in personality.activities if a and a.strip())
        comm = personality.communication
        if comm.style:
            comm_styles.append(comm.style)
        if comm.frequency:
            frequency_total += comm.frequency
        if comm.topics:
            comm_topics.extend(comm.topics)
        if personality.work_style:
            work_styles.append(personality.work_style)

    # Divide by every analyzed platform, not just the ones reporting a frequency
    frequency = frequency_total / len(analyses) if analyses else 0

    return Personality(
        interests=_unique(interests),
        activities=_unique(activities),
        communication=Communication(
            style=summarize_communication_style(comm_styles),
            frequency=frequency,
            topics=_unique(comm_topics),
        ),
        work_style=dominant_work_style(work_styles),
    )


def render_summary(
    analyses: Sequence[PlatformAnalysis],
    tech_stack: TechStack,
    personality: Personality,
) -> str:
    """Fixed-template text report. Deterministic for the same merged data."""
    if not analyses:
        return (
            "No data could be collected from the requested platforms.\n"
            "Check that the URLs are public and reachable, then try again.\n"
        )

    platforms = ", ".join(a.platform.display_name for a in analyses)
    top_languages = list(tech_stack.languages)[:TOP_STACK]
    top_frameworks = list(tech_stack.frameworks)[:TOP_STACK]
    top_tools = list(tech_stack.tools)[:TOP_STACK]
    top_interests = personality.interests[:TOP_INTERESTS]

    lines = [f"Summary based on analysis of {platforms}:", "", "[Tech stack]"]
    if top_languages:
        lines.append(f"- Main languages: {', '.join(top_languages)}")
    if top_frameworks:
        lines.append(f"- Main frameworks: {', '.join(top_frameworks)}")
    if top_tools:
        lines.append(f"- Main tools: {', '.join(top_tools)}")

    lines.extend(["", "[Personality]"])
    if top_interests:
        lines.append(f"- Interests: {', '.join(top_interests)}")
    if personality.communication.style:
        lines.append(f"- Communication style: {personality.communication.style}")
    if personality.work_style:
        lines.append(f"- Work style: {personality.work_style}")

    activities = [a for a in personality.activities[:TOP_ACTIVITIES] if a.strip()]
    if activities:
        lines.extend(["", "[Activities]"])
        lines.extend(f"- {activity}" for activity in activities)

    return "\n".join(lines) + "\n"


def aggregate(analyses: Sequence[PlatformAnalysis]) -> AnalysisResult:
    """Merge zero or more platform analyses into one result."""
    tech_stack = merge_tech_stacks(analyses)
    personality = merge_personalities(analyses)
    summary = render_summary(analyses, tech_stack, personality)
    logger.info(
        "Aggregated %d platform(s): %d languages, %d frameworks, %d tools, %d topics",
        len(analyses),
        len(tech_stack.languages),
        len(tech_stack.frameworks),
        len(tech_stack.tools),
        len(tech_stack.topics),
    )
    return AnalysisResult(
        platforms=list(analyses),
        tech_stack=tech_stack,
        personality=personality,
        summary=summary,
    )
