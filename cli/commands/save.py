"""Replace a user's picked dates."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import SummaryRenderer, console
from planner.exceptions import StorageWriteError, ValidationError

logger = logging.getLogger(__name__)


def save_command(
    name: Annotated[
        str,
        typer.Argument(help="Your name"),
    ],
    dates: Annotated[
        list[str] | None,
        typer.Argument(help="Dates you are available (YYYY-MM-DD)"),
    ] = None,
    clear: Annotated[
        bool,
        typer.Option("--clear", help="Remove all of your picked dates"),
    ] = False,
) -> None:
    """Save the dates NAME is available, replacing any earlier picks.

    Examples:
        team-planner save Alice 2024-01-10 2024-01-12
        team-planner save Alice --clear
    """
    ctx = get_context()
    renderer = SummaryRenderer()
    dates = dates or []

    if not dates and not clear:
        console.print("[red]No dates given. Use --clear to remove all picks.[/red]")
        raise typer.Exit(1)
    if dates and clear:
        console.print("[red]Use either dates or --clear, not both.[/red]")
        raise typer.Exit(1)

    try:
        ctx.repository.save_user_availability(name, dates)
    except ValidationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except StorageWriteError as e:
        logger.error(f"Save failed: {e}")
        renderer.render_save_error()
        raise typer.Exit(1)

    renderer.render_saved(name, len(set(dates)), ctx.config.data_file)
