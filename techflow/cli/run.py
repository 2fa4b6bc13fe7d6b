"""Run command implementation."""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import Config
from ..ingestion import print_feed_summary
from ..models.item import FeedCategory, FeedItem
from ..pipeline import build_service

console = Console()


def print_items(items: List[FeedItem], title: str = "Feed") -> None:
    """Print items as a table."""
    table = Table(title=title)
    table.add_column("Published", style="dim")
    table.add_column("Category", style="magenta")
    table.add_column("Title", style="cyan")
    table.add_column("Source", style="blue")
    table.add_column("Score", style="green", justify="right")
    table.add_column("Tags", style="yellow")

    for item in items:
        table.add_row(
            item.published_at.strftime("%Y-%m-%d %H:%M"),
            item.category.value,
            escape(item.title),
            item.source,
            f"{item.score:.2f}",
            ", ".join(item.tags),
        )

    console.print(table)


def run_command(
    refresh: bool = typer.Option(
        False,
        "--refresh",
        "-r",
        help="Bypass the cache and fetch every source",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the JSON payload instead of a table",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        help="Show at most this many items",
        min=1,
    ),
    category: Optional[FeedCategory] = typer.Option(
        None,
        "--category",
        "-c",
        help="Only show items in this category",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config.yaml",
    ),
) -> None:
    """Fetch, classify and score all sources, then print the merged feed."""
    try:
        config = Config(config_path)
        service = build_service(config.config)
        snapshot = asyncio.run(service.run(force=refresh))
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    items = snapshot.items
    if category is not None:
        items = [item for item in items if item.category == category]
    if limit is not None:
        items = items[:limit]

    if as_json:
        payload = snapshot.model_copy(update={"items": items}).to_payload()
        typer.echo(json.dumps(payload, indent=2))
        return

    print_items(items, title=f"TechFlow ({len(items)} of {len(snapshot.items)} items)")
    print_feed_summary(service.last_results)
