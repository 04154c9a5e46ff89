"""Display a weekday month grid of availability."""

from datetime import date, datetime

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import MonthRenderer


def _parse_month(month_str: str) -> date:
    """Parse a month string in YYYY-MM format.

    Args:
        month_str: Month string to parse.

    Returns:
        First day of the month.

    Raises:
        typer.BadParameter: If the month format is invalid.
    """
    try:
        return datetime.strptime(month_str, "%Y-%m").date()
    except ValueError:
        raise typer.BadParameter(f"Invalid month format: {month_str}. Use YYYY-MM.")


def month_command(
    month: Annotated[
        str | None,
        typer.Argument(help="Month to show (YYYY-MM), defaults to this month"),
    ] = None,
    me: Annotated[
        str | None,
        typer.Option("--me", help="Your name, to mark your own picks"),
    ] = None,
) -> None:
    """Display Monday to Friday of a month with how many people picked each day.

    Examples:
        team-planner month
        team-planner month 2024-01 --me Alice
    """
    ctx = get_context()
    repository = ctx.repository

    today = date.today()
    first_day = _parse_month(month) if month else today.replace(day=1)
    my_dates = set(repository.get_user_availability(me)) if me else set()

    MonthRenderer().render_month(
        first_day, repository.get_summary(), my_dates=my_dates, today=today
    )
