"""CLI commands for X News Search."""

import asyncio
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ..client.x_client import XClient
from ..config import Settings
from ..models.params import MAX_DAYS, MAX_RESULTS, MIN_DAYS, MIN_RESULTS, SearchParams
from ..models.search_output import SearchOutput
from ..output.formatter import format_output
from ..search.orchestrator import search_news
from ..storage.json_writer import JsonWriter
from ..utils.logging import setup_logging

DEFAULT_DAYS = 1
DEFAULT_MAX = 10

SEARCH_HELP = """Search news on X using the official X API.

Every call costs X API credits, charged per post or story returned. Pass
all terms in ONE invocation with repeated --search flags: they are merged
with OR into a single API call.

The X News API is queried first for curated stories. If none are found
(or --posts is set), recent posts are searched with noise filters
(no retweets, replies or promoted posts; links required; language
filter) and ranked locally by engagement.

Example: x-news-search search -s 'bitcoin' -s 'ethereum' --max 20
"""

app = typer.Typer(
    name="x-news-search",
    help="Search X news stories and posts with a single combined query",
    add_completion=False,
)
console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def clamp(value: int, low: int, high: int, default: int) -> int:
    """Clamp ``value`` to ``[low, high]``, using ``default`` when it is zero."""
    return min(high, max(low, value or default))


@app.command(help=SEARCH_HELP)
def search(
    queries: Annotated[
        Optional[list[str]],
        typer.Option(
            "--search",
            "-s",
            help="Search query (repeatable, all terms are combined with OR into one API call)",
        ),
    ] = None,
    days: Annotated[
        int,
        typer.Option("--days", "-d", help="Number of days to look back (1-7)"),
    ] = DEFAULT_DAYS,
    max_results: Annotated[
        int,
        typer.Option("--max", "-m", help="Maximum results, you pay per result (1-100)"),
    ] = DEFAULT_MAX,
    lang: Annotated[
        str,
        typer.Option("--lang", "-l", help="Language filter for post search (BCP-47 code)"),
    ] = "en",
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Disable noise filters on post search"),
    ] = False,
    posts: Annotated[
        bool,
        typer.Option("--posts", help="Also search recent posts in addition to news stories"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Output JSON for piping to other tools"),
    ] = False,
    output_path: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Also save the JSON result to this file or directory"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging on stderr"),
    ] = False,
) -> None:
    """Search X news, falling back to post search."""
    try:
        current = Settings()
    except ValidationError as e:
        err_console.print(f"[red]Error: invalid configuration: {escape(_describe_invalid(e))}[/red]")
        raise typer.Exit(code=1)

    setup_logging(
        "DEBUG" if verbose else current.log_level,
        json_output=current.log_json,
    )

    if not current.api_key:
        err_console.print(
            "[red]Error: X_API_KEY not found.[/red]\n"
            "Set it in a .env file or as an environment variable."
        )
        raise typer.Exit(code=1)

    if not queries:
        err_console.print("[red]Error: At least one --search query is required.[/red]")
        raise typer.Exit(code=1)

    try:
        params = SearchParams(
            queries=queries,
            days=clamp(days, MIN_DAYS, MAX_DAYS, DEFAULT_DAYS),
            max=clamp(max_results, MIN_RESULTS, MAX_RESULTS, DEFAULT_MAX),
            lang=lang,
            raw=raw,
            posts=posts,
        )
    except ValidationError as e:
        err_console.print(f"[red]Error: invalid search options: {escape(_describe_invalid(e))}[/red]")
        raise typer.Exit(code=1)

    try:
        result = asyncio.run(_search_async(current, params))
    except Exception as e:
        err_console.print(f"[red]Fatal error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(format_output(result, as_json=True))
    else:
        console.print(format_output(result), soft_wrap=True)

    if output_path:
        try:
            filepath = asyncio.run(JsonWriter().write_search_output(result, output_path))
        except OSError as e:
            err_console.print(f"[red]Error: could not save results: {escape(str(e))}[/red]")
        else:
            err_console.print(f"[green]Saved:[/green] {filepath}")

    if result.errors and not result.has_results:
        raise typer.Exit(code=1)


def _describe_invalid(error: ValidationError) -> str:
    """Summarize a validation error as ``field: message`` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'value'}: {err['msg']}"
        for err in error.errors()
    )


async def _search_async(current: Settings, params: SearchParams) -> SearchOutput:
    """Run the search against the live API."""
    async with XClient(
        current.api_key,
        base_url=current.api_base_url,
        timeout=current.request_timeout,
    ) as client:
        return await search_news(client, params)


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__

    console.print(f"X News Search v{__version__}")


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
