"""how-person MCP server: summarize a person's tech stack and personality.

Exposes a single tool over stdio. Logs go to stderr.
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from how_person.core.errors import InvalidInputError
from how_person.models.schemas import AnalysisRequest
from how_person.plugins.loader import load_plugins
from how_person.synthesis.pipeline import PersonAnalyzer

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "how-person",
    instructions=(
        "Analyze a person's public GitHub, Twitter/X, SpeakerDeck and blog "
        "activity and summarize their tech stack and personality"
    ),
)

analyzer = PersonAnalyzer(load_plugins())


@mcp.tool(name="how-person")
async def how_person(
    github: str | None = None,
    twitter: str | None = None,
    speakerdeck: str | None = None,
    blog: str | None = None,
) -> str:
    """Summarize a person's tech stack and personality from their public profiles.

    Provide at least one URL. Platforms that cannot be fetched are left out
    of the summary.

    Args:
        github: GitHub profile URL, e.g. https://github.com/username
        twitter: Twitter/X profile URL, e.g. https://x.com/username
        speakerdeck: SpeakerDeck profile URL, e.g. https://speakerdeck.com/username
        blog: Blog URL, e.g. https://example.com/blog
    """
    request = AnalysisRequest(github=github, twitter=twitter, speakerdeck=speakerdeck, blog=blog)
    try:
        return await analyzer.summarize(request)
    except InvalidInputError as exc:
        raise ToolError(exc.message) from exc
    except Exception as exc:
        logger.exception("Analysis failed")
        raise ToolError(f"Analysis failed: {exc}") from exc


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
