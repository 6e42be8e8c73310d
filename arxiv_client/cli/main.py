"""arXiv client CLI.

Usage:
    arxiv-client search "graph neural networks" --category cs.LG --limit 20
    arxiv-client search --author Hinton --sort-by submittedDate --json
    arxiv-client get 2301.12345

Exit codes: 0=success, 1=error, 2=rate_limit (retries exhausted)
"""

# Load .env file before any other imports
from dotenv import load_dotenv

load_dotenv()

import json
import logging
from dataclasses import replace
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..client import ArxivClient
from ..config.options import ClientOptions
from ..config.settings import get_settings
from ..core.errors import ArxivError, RateLimitError
from ..core.types import Paper
from ..observability.logger import setup_logging as configure_logging
from ..query.enums import SortBy, SortOrder

# Create CLI app
app = typer.Typer(
    name="arxiv-client",
    help="Search the arXiv export API",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def setup_logging(quiet: bool = False, verbose: bool = False) -> None:
    """Configure logging with rich handler."""
    level = logging.WARNING if quiet else (logging.DEBUG if verbose else logging.INFO)
    configure_logging(
        level=level,
        quiet=quiet,
        force=True,
        handler=RichHandler(console=err_console, show_path=False),
    )


def _build_client(page_size: int | None = None, interval: float | None = None) -> ArxivClient:
    options = ClientOptions.from_settings(get_settings())
    overrides = {}
    if page_size:
        overrides["page_size"] = page_size
    if interval is not None:
        # 0 on the command line means "no throttling"
        overrides["min_request_interval"] = interval if interval > 0 else -1.0
    if overrides:
        options = replace(options, **overrides)
    return ArxivClient(options)


def _exit_code(error: ArxivError) -> int:
    return 2 if isinstance(error, RateLimitError) else 1


def _fail(error: ArxivError) -> None:
    err_console.print(f"[red]Error ({error.kind}): {error}[/red]")
    if isinstance(error, RateLimitError):
        err_console.print("[yellow]arXiv is throttling requests; try again later.[/yellow]")
    raise typer.Exit(code=_exit_code(error))


def _print_table(papers: list[Paper], total: int | None) -> None:
    table = Table(title=f"{len(papers)} of {total if total is not None else '?'} papers")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Published", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Title")
    table.add_column("Authors", style="dim")

    for paper in papers:
        authors = ", ".join(paper.author_names[:3])
        if len(paper.authors) > 3:
            authors += " et al."
        table.add_row(
            paper.id,
            paper.published_at.strftime("%Y-%m-%d"),
            paper.primary_category or "",
            paper.title,
            authors,
        )

    console.print(table)


@app.command()
def search(
    terms: Annotated[list[str] | None, typer.Argument(help="Search terms")] = None,
    category: Annotated[list[str] | None, typer.Option("--category", "-c", help="Category filter (repeatable)")] = None,
    author: Annotated[list[str] | None, typer.Option("--author", "-a", help="Author filter (repeatable)")] = None,
    title: Annotated[str | None, typer.Option("--title", help="Title filter")] = None,
    limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum papers to fetch (0 = all)")] = 10,
    page_size: Annotated[int | None, typer.Option("--page-size", help="Results per request")] = None,
    sort_by: Annotated[SortBy, typer.Option("--sort-by", help="Sort criterion")] = SortBy.RELEVANCE,
    sort_order: Annotated[SortOrder, typer.Option("--sort-order", help="Sort order")] = SortOrder.DESCENDING,
    interval: Annotated[float | None, typer.Option("--interval", help="Seconds between requests")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print one JSON object per paper")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Minimal output")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output")] = False,
) -> None:
    """Search papers and print the results.

    Examples:
        arxiv-client search "diffusion models" -c cs.CV -n 25
        arxiv-client search -a Bengio --sort-by submittedDate --json
    """
    setup_logging(quiet=quiet, verbose=verbose)

    try:
        client = _build_client(page_size=page_size, interval=interval)
    except ArxivError as e:
        _fail(e)
        return

    with client:
        builder = client.new_query().sort_by(sort_by, sort_order).limit(limit)
        if terms:
            builder.search_query(" ".join(terms))
        if category:
            builder.categories(*category)
        if author:
            builder.authors(*author)
        if title:
            builder.title(title)
        if page_size:
            builder.max_results(page_size)

        iterator = builder.iterator()
        try:
            if as_json:
                iterator.for_each(
                    lambda paper: console.print_json(json.dumps(paper.to_dict()))
                )
            else:
                papers = iterator.collect()
                _print_table(papers, iterator.total_available)
        except ArxivError as e:
            _fail(e)

        if verbose and not quiet:
            err_console.print(client.metrics.to_summary())


@app.command()
def get(
    paper_id: Annotated[str, typer.Argument(help="arXiv identifier, e.g. 2301.12345")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the paper as JSON")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Minimal output")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output")] = False,
) -> None:
    """Fetch a single paper by id."""
    setup_logging(quiet=quiet, verbose=verbose)

    with _build_client() as client:
        try:
            paper = client.get_by_id(paper_id)
        except ArxivError as e:
            _fail(e)
            return

    if as_json:
        console.print_json(json.dumps(paper.to_dict()))
        return

    console.print(f"[bold]{paper.title}[/bold]")
    console.print(f"[cyan]{paper.id}[/cyan]  {', '.join(paper.categories)}")
    console.print(", ".join(paper.author_names))
    console.print(f"Published: {paper.published_at:%Y-%m-%d}  Updated: {paper.updated_at:%Y-%m-%d}")
    if paper.doi:
        console.print(f"DOI: {paper.doi}")
    if paper.pdf_url:
        console.print(f"PDF: {paper.pdf_url}")
    console.print()
    console.print(paper.abstract)


if __name__ == "__main__":
    app()
