"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, default_config_path, save_config

console = Console()


def init_command(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Where to write config.yaml",
    ),
    ttl_hours: float = typer.Option(4.0, "--ttl-hours", help="Cache freshness window", min=0.1),
    timeout: float = typer.Option(10.0, "--timeout", help="Per-source fetch timeout (seconds)", min=1.0),
    trending: bool = typer.Option(
        True,
        "--trending/--no-trending",
        help="Include the GitHub trending page",
    ),
    overwrite: bool = typer.Option(False, "--force", help="Overwrite an existing config"),
) -> None:
    """Write a default TechFlow configuration."""
    if config_path is None:
        config_path = default_config_path()

    if config_path.exists() and not overwrite:
        console.print(f"[yellow]Config already exists: {config_path} (use --force)[/yellow]")
        raise typer.Exit(1)

    config = ConfigModel(
        fetch={"timeout": timeout},
        trending={"enabled": trending},
        cache={"ttl_hours": ttl_hours},
    )
    save_config(config, config_path)

    console.print(
        Panel(
            f"[green]✅ Created config: {config_path}[/green]\n\n"
            f"Next steps:\n"
            f"1. Review sources: [bold]techflow sources list[/bold]\n"
            f"2. Run: [bold]techflow run[/bold]",
            style="green",
        )
    )
