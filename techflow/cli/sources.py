"""Sources commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import DEFAULT_SOURCES, TRENDING_SOURCE_NAME, Config

console = Console()
sources_app = typer.Typer(help="Inspect feed sources")


@sources_app.command("list")
def sources_list(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config.yaml",
    ),
) -> None:
    """List all configured sources."""
    try:
        trending = Config(config_path).config.trending
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title="Configured Sources")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Weight", style="green")
    table.add_column("URL", style="blue")

    for source in DEFAULT_SOURCES:
        table.add_row(
            source.id,
            source.name,
            source.category.value,
            f"{source.weight:.2f}",
            source.url,
        )

    if trending.enabled:
        table.add_row(
            "github-trending",
            TRENDING_SOURCE_NAME,
            "Open Source",
            f"{trending.weight:.2f}",
            trending.url,
        )

    console.print(table)
