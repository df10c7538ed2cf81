"""CLI interface for the content gallery.

Usage:
    python -m gallery.pipeline.cli build --output site/index.html
    python -m gallery.pipeline.cli search "launch"
    python -m gallery.pipeline.cli suggest
    python -m gallery.pipeline.cli --source https://example.com/content.json suggest "ai"
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from gallery.pipeline.app import DEFAULT_CONFIG_PATH, GalleryApp, load_config
from gallery.render.timeago import get_time_ago
from gallery.search.controller import FocusEvent, InputEvent

console = Console()

DEFAULT_OUTPUT_PATH = "site/index.html"


def run_async(coro):
    """Run an async function to completion."""
    return asyncio.run(coro)


def start_app(ctx) -> GalleryApp:
    """Build the app from the CLI context and load the document, or exit 1."""
    app = GalleryApp(ctx.obj["config"])
    with console.status("[bold green]Loading content..."):
        loaded = run_async(app.start(ctx.obj["source"]))
    if not loaded:
        source = ctx.obj["source"] or app.loader.source
        console.print(f"[red]Error:[/red] could not load content from {source}")
        sys.exit(1)
    return app


@click.group()
@click.option("--config", default=DEFAULT_CONFIG_PATH, help="Config file path")
@click.option("--source", default=None, help="Content JSON path or URL (overrides config)")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx, config: str, source: Optional[str], verbose: bool):
    """Searchable content gallery CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["config"] = load_config(config)
    ctx.obj["source"] = source


@cli.command()
@click.option("--output", "-o", default=None, help="Output HTML path")
@click.pass_context
def build(ctx, output: Optional[str]):
    """Render the loaded gallery page to a static HTML file."""
    app = start_app(ctx)
    build_cfg = ctx.obj["config"].get("build", {}) or {}
    out_path = Path(output or build_cfg.get("output") or DEFAULT_OUTPUT_PATH)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(app.page.to_html(), encoding="utf-8")
    console.print(
        f"[green]Wrote {out_path}[/green] ({len(app.state.items)} items, "
        f"site: {app.state.document.site_name})"
    )


@cli.command()
@click.argument("query")
@click.option("--limit", "-n", default=20, help="Max results")
@click.pass_context
def search(ctx, query: str, limit: int):
    """Filter gallery items by title or description."""
    app = start_app(ctx)
    filtered = app.search.on_input(InputEvent(query))
    if not filtered:
        console.print(f"[yellow]No results for:[/yellow] {query}")
        return

    console.print(f"\n[bold]Search results for:[/bold] {query} ({len(filtered)} total)\n")
    table = Table(show_header=True)
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", max_width=40)
    table.add_column("Description", max_width=60)
    table.add_column("Size", style="cyan", width=8)
    table.add_column("Published", width=16)

    for i, item in enumerate(filtered[:limit], 1):
        age = get_time_ago(item.publish_date)
        table.add_row(
            str(i),
            item.title,
            item.description,
            item.size,
            f"[green]{age.text}" if age.is_new else age.text,
        )
    console.print(table)


@cli.command()
@click.argument("query", required=False, default="")
@click.pass_context
def suggest(ctx, query: str):
    """Show the suggestion dropdown for QUERY (or for a focused, empty field)."""
    app = start_app(ctx)
    if query:
        app.search.on_input(InputEvent(query))
    else:
        app.search.on_focus(FocusEvent())

    if not app.search.dropdown_open:
        console.print(f"[yellow]No suggestions for:[/yellow] {query}")
        return

    table = Table(title="Suggestions")
    table.add_column("Title", style="cyan", max_width=40)
    table.add_column("Description", max_width=60)
    table.add_column("Age", width=16)
    for row in app.page.select(".suggestion-item"):
        table.add_row(
            row.get("data-title", ""),
            row.select_one(".suggestion-description").get_text(),
            row.select_one(".suggestion-time").get_text(),
        )
    console.print(table)


def main():
    cli()


if __name__ == "__main__":
    main()
