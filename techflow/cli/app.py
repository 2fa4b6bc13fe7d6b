"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .init import init_command
from .run import run_command
from .sources import sources_app
from .watch import watch_command

app = typer.Typer(
    name="techflow",
    help="TechFlow - technical news feed aggregator",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("run")(run_command)
app.command("watch")(watch_command)
app.add_typer(sources_app, name="sources", help="Inspect feed sources")


if __name__ == "__main__":
    app()
