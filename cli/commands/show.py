"""Show the dates a user has picked."""

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import SummaryRenderer


def show_command(
    name: Annotated[
        str,
        typer.Argument(help="Your name"),
    ],
) -> None:
    """Show the dates NAME has picked."""
    ctx = get_context()
    dates = ctx.repository.get_user_availability(name)
    SummaryRenderer().render_user_dates(name, dates)
