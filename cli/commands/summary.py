"""Show the best dates across the team."""

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import SummaryRenderer


def summary_command(
    me: Annotated[
        str | None,
        typer.Option("--me", help="Your name, to count teammates besides you"),
    ] = None,
) -> None:
    """Show every picked date, best dates first."""
    ctx = get_context()
    SummaryRenderer().render_summary(ctx.repository.get_summary(), me=me)
