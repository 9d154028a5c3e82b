"""Typer-based CLI for filesearch."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import FileSearchConfig
from .models import SearchQuery
from .ranking import highlight_query, rank_with_tuples
from .render import to_html, to_markdown, to_rich_text
from .search import search_files

app = typer.Typer(
    name="filesearch",
    help="Find files by name, ranked by relevance, with matches highlighted",
    add_completion=False,
)

console = Console()


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def search(
    query: str = typer.Argument(..., help="Partial file name (or regex with --regex)"),
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        help="Directory to search (default: FILESEARCH_ROOT env or current directory)",
    ),
    case_sensitive: Optional[bool] = typer.Option(
        None,
        "--case-sensitive/--ignore-case",
        "-c",
        help="Match case",
    ),
    use_regex: Optional[bool] = typer.Option(
        None,
        "--regex/--no-regex",
        "-x",
        help="Treat the query as a regular expression",
    ),
    include: Optional[str] = typer.Option(
        None,
        "--include",
        "-i",
        help="Files to include, as comma-separated suffixes (e.g. .ts,.js,.json)",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Maximum number of results to show",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Search file names under a directory and print them in relevance order."""
    _configure_logging(debug)

    try:
        config = FileSearchConfig.from_env(cli_root=root)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    q = SearchQuery(
        text=query,
        case_sensitive=config.case_sensitive if case_sensitive is None else case_sensitive,
        use_regex=config.use_regex if use_regex is None else use_regex,
    )
    if q.is_empty:
        console.print("[dim]No query[/dim]")
        return

    try:
        hits = search_files(
            config.root,
            q,
            exclude_globs=config.exclude_globs,
            include=config.include if include is None else include,
            limit=config.max_results if limit is None else limit,
        )
    except FileNotFoundError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if not hits:
        console.print("[dim]No matching files[/dim]")
        return

    table = Table(title=f"{len(hits)} file(s) matching {escape(repr(query))}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", no_wrap=True)
    table.add_column("Path", style="cyan")

    for i, hit in enumerate(hits, 1):
        table.add_row(str(i), to_rich_text(hit.spans), escape(hit.description))

    console.print(table)


@app.command()
def explain(
    query: str = typer.Argument(..., help="Query text"),
    names: list[str] = typer.Argument(..., help="File names to rank"),
    case_sensitive: bool = typer.Option(False, "--case-sensitive", "-c", help="Match case"),
):
    """Show the relevance tuple of each name, in ranked order."""
    if not query:
        console.print("[dim]No query[/dim]")
        return

    table = Table(title=f"Ranking for {escape(repr(query))}")
    table.add_column("Name", no_wrap=True)
    table.add_column("Tier", justify="right", style="magenta")
    table.add_column("Edit dist", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Position", justify="right")

    for name, r in rank_with_tuples(names, SearchQuery(text=query, case_sensitive=case_sensitive)):
        position = "-" if r.match_position is None else str(r.match_position)
        table.add_row(escape(name), str(r.tier), str(r.edit_distance), str(r.name_length), position)

    console.print(table)


@app.command()
def highlight(
    query: str = typer.Argument(..., help="Query text"),
    name: str = typer.Argument(..., help="File name to annotate"),
    case_sensitive: bool = typer.Option(False, "--case-sensitive", "-c", help="Match case"),
    use_regex: bool = typer.Option(False, "--regex", "-x", help="Treat the query as a regular expression"),
    fmt: str = typer.Option("markdown", "--format", "-f", help="markdown, html or rich"),
):
    """Print a file name with the matched parts marked up."""
    spans = highlight_query(name, SearchQuery(text=query, case_sensitive=case_sensitive, use_regex=use_regex))

    if fmt == "markdown":
        typer.echo(to_markdown(spans))
    elif fmt == "html":
        typer.echo(to_html(spans))
    elif fmt == "rich":
        console.print(to_rich_text(spans))
    else:
        console.print(f"[red]Error: unknown format {escape(repr(fmt))}[/red]")
        console.print("[dim]Use one of: markdown, html, rich[/dim]")
        raise typer.Exit(code=1)


@app.command()
def version():
    """Show filesearch version."""
    from . import __version__
    console.print(f"filesearch v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
