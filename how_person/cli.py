"""how-person CLI: run an analysis from the terminal or start the MCP server."""

import asyncio

import typer
from rich.console import Console
from rich.json import JSON
from rich.table import Table

from how_person.core.config import settings
from how_person.core.errors import InvalidInputError
from how_person.models.schemas import AnalysisRequest, Platform
from how_person.plugins.loader import load_plugins
from how_person.plugins.registry import PluginRegistry
from how_person.synthesis.pipeline import PersonAnalyzer

app = typer.Typer(help="how-person: summarize a person's tech stack and personality.")

console = Console()


@app.command()
def analyze(
    github: str = typer.Option(None, "--github", help="GitHub profile URL"),
    twitter: str = typer.Option(None, "--twitter", help="Twitter/X profile URL"),
    speakerdeck: str = typer.Option(None, "--speakerdeck", help="SpeakerDeck profile URL"),
    blog: str = typer.Option(None, "--blog", help="Blog URL"),
    as_json: bool = typer.Option(False, "--json", help="Print the full analysis as JSON"),
):
    """Analyze the given profiles and print the summary."""
    request = AnalysisRequest(github=github, twitter=twitter, speakerdeck=speakerdeck, blog=blog)
    analyzer = PersonAnalyzer(load_plugins(PluginRegistry()))
    try:
        with console.status("Analyzing..."):
            result = asyncio.run(analyzer.analyze(request))
    except InvalidInputError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)

    if as_json:
        console.print(JSON(result.model_dump_json()))
        return
    # The summary uses [brackets] for headings, so markup must stay off
    console.print(result.summary, markup=False, highlight=False)
    if not result.platforms:
        raise typer.Exit(1)


@app.command("sources")
def list_sources():
    """List the supported platforms."""
    sources = load_plugins(PluginRegistry())
    table = Table(title="Platform sources")
    table.add_column("Name", style="cyan bold")
    table.add_column("Platform")
    table.add_column("Example URL", style="dim")
    for name in sources.list_sources():
        source = sources.get_source(name)
        table.add_row(name, source.platform.display_name, source.example_url)
    console.print(table)

    if not settings.has_twitter_token:
        console.print(f"[yellow]TWITTER_TOKEN not set: {Platform.TWITTER.display_name} tweets are not fetched[/yellow]")


@app.command()
def serve():
    """Start the MCP server on stdio."""
    from how_person.mcp_server import main

    main()


if __name__ == "__main__":
    app()
