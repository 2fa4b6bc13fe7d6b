"""Watch command implementation."""

import asyncio
from pathlib import Path
from typing import Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape

from ..config import Config
from ..pipeline import FeedService, build_service

console = Console()


async def watch_feed(service: FeedService, interval: float, cycles: int) -> None:
    """Request a snapshot every interval seconds; cycles=0 runs until interrupted."""
    count = 0
    while cycles == 0 or count < cycles:
        snapshot = await service.run()
        stamp = pendulum.instance(snapshot.fetched_at).to_datetime_string()
        if snapshot.cached:
            console.print(f"[dim]{len(snapshot.items)} items (cached since {stamp})[/dim]")
        else:
            failed = [r.source_name for r in service.last_results if not r.success]
            console.print(f"[green]{len(snapshot.items)} items refreshed at {stamp}[/green]")
            if failed:
                console.print(f"[yellow]  Failed sources: {', '.join(failed)}[/yellow]")
        count += 1
        if cycles == 0 or count < cycles:
            await asyncio.sleep(interval)


def watch_command(
    interval: float = typer.Option(
        60.0,
        "--interval",
        "-i",
        help="Seconds between cache checks",
        min=1.0,
    ),
    cycles: int = typer.Option(
        0,
        "--cycles",
        help="Stop after this many checks (0 = run until interrupted)",
        min=0,
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config.yaml",
    ),
) -> None:
    """Keep the feed warm, refreshing only when the cache expires."""
    try:
        config = Config(config_path)
        service = build_service(config.config)
        asyncio.run(watch_feed(service, interval, cycles))
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopped[/yellow]")
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
