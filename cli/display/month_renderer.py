"""Month grid renderer for weekday availability."""

import calendar
from dataclasses import dataclass
from datetime import date

from rich.table import Table

from cli.display.console import console
from planner.models.availability import Summary

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri"]


@dataclass
class DayCell:
    """One weekday in the month grid."""

    iso: str
    day: int
    count: int
    is_best: bool
    is_mine: bool
    is_today: bool


def build_month_grid(
    first_day: date,
    summary: Summary,
    my_dates: set[str] | None = None,
    today: date | None = None,
) -> list[list[DayCell | None]]:
    """Lay out the weekdays of a month in Monday-to-Friday rows.

    Weekends are skipped. The first row is padded with ``None`` up to the
    first weekday, unless the month starts on a weekend.

    Args:
        first_day: Any date in the month to render.
        summary: Summary providing counts and best dates.
        my_dates: Dates picked by the viewing user.
        today: Date to mark as today.

    Returns:
        Rows of five cells each (the last row may be shorter).
    """
    my_dates = my_dates or set()
    today_iso = today.isoformat() if today else None
    best_dates = set(summary.best_dates)

    year, month = first_day.year, first_day.month
    start_weekday = date(year, month, 1).weekday()
    cells: list[DayCell | None] = [None] * (start_weekday if start_weekday < 5 else 0)

    days_in_month = calendar.monthrange(year, month)[1]
    for day in range(1, days_in_month + 1):
        current = date(year, month, day)
        if current.weekday() >= 5:
            continue
        iso = current.isoformat()
        entry = summary.entry_for(iso)
        count = entry.count if entry else 0
        cells.append(
            DayCell(
                iso=iso,
                day=day,
                count=count,
                is_best=iso in best_dates and count > 0,
                is_mine=iso in my_dates,
                is_today=iso == today_iso,
            )
        )

    return [cells[i : i + 5] for i in range(0, len(cells), 5)]


class MonthRenderer:
    """Render a weekday month grid with counts, best days and own picks."""

    def render_month(
        self,
        first_day: date,
        summary: Summary,
        my_dates: set[str] | None = None,
        today: date | None = None,
    ) -> None:
        """Render the grid for the month containing ``first_day``."""
        rows = build_month_grid(first_day, summary, my_dates, today)

        console.print()
        console.print(f"[bold]{first_day:%B %Y}[/bold]")

        table = Table(show_header=True, header_style="bold", show_lines=True)
        for label in WEEKDAY_LABELS:
            table.add_column(label, justify="center", width=6)

        for row in rows:
            cells = [self._format_cell(cell) for cell in row]
            cells += [""] * (5 - len(cells))
            table.add_row(*cells)

        console.print(table)
        console.print(
            "[bold green]green[/bold green] best day · "
            "[reverse]inverted[/reverse] your pick · "
            "[underline]underlined[/underline] today"
        )

    def _format_cell(self, cell: DayCell | None) -> str:
        if cell is None:
            return ""
        text = str(cell.day)
        if cell.count:
            text += f"\n{cell.count}"

        styles = []
        if cell.is_best:
            styles.append("bold green")
        if cell.is_mine:
            styles.append("reverse")
        if cell.is_today:
            styles.append("underline")
        if styles:
            style = " ".join(styles)
            return f"[{style}]{text}[/]"
        return text
