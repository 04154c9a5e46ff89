"""Summary renderer for availability output."""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from cli.display.console import console
from cli.display.formatters import format_count, format_path, format_pretty_date
from planner.models.availability import Summary

EMPTY_SUMMARY_HINT = (
    "No availability saved yet. Ask your teammates to pick their dates "
    "with 'team-planner save'."
)


class SummaryRenderer:
    """Render availability summaries and per-user picks.

    Used by the show, save, summary and users commands to display:
    - Best-first date summaries with best rows highlighted
    - A user's picked dates
    - Save results
    - The list of everyone who has picked dates
    """

    def render_header(self, title: str) -> None:
        """Render a styled header for a command.

        Args:
            title: Header text.
        """
        console.print()
        console.print("━" * 40)
        console.print(f"[bold]  {escape(title)}[/bold]")
        console.print("━" * 40)

    def render_summary(self, summary: Summary, me: str | None = None) -> None:
        """Render the summary table, best dates first.

        Args:
            summary: Summary to render.
            me: Optional user name; adds the "teammates already picked" line.
        """
        self.render_header("Best dates")

        if me:
            others = len(summary.others(me))
            console.print(
                f"\n{format_count(others, 'teammate', 'teammates')} already picked dates"
            )

        if not summary.entries:
            console.print(f"\n[dim]{EMPTY_SUMMARY_HINT}[/dim]")
            return

        console.print()
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("DATE")
        table.add_column("COUNT", justify="right")
        table.add_column("WHO")

        best_count = summary.best_count
        for entry in summary.entries:
            count_text = format_count(entry.count, "person", "people")
            if entry.count >= 3:
                count_text = f"[bold]{count_text}[/bold]"
            users_text = ", ".join(
                f"[cyan]{escape(name)}[/cyan]" if name == me else escape(name)
                for name in entry.users
            )
            style = "green" if entry.count == best_count else None
            date_text = escape(format_pretty_date(entry.date))
            table.add_row(date_text, count_text, users_text, style=style)

        console.print(table)

        best = summary.best_dates
        console.print(
            f"\nBest: {escape(', '.join(format_pretty_date(d) for d in best))} "
            f"({format_count(best_count, 'person', 'people')})"
        )

    def render_user_dates(self, user: str, dates: list[str]) -> None:
        """Render the dates a user has picked.

        Args:
            user: User name.
            dates: ISO dates picked by the user.
        """
        self.render_header(f"Availability: {user}")
        console.print(f"\n{format_count(len(dates), 'date', 'dates')} selected")
        for iso in sorted(dates):
            pretty = escape(format_pretty_date(iso))
            console.print(f"  {pretty}  [dim]{escape(iso)}[/dim]")

    def render_users(self, users: list[str]) -> None:
        """Render everyone who has picked at least one date."""
        if not users:
            console.print("No one has picked dates yet")
            return
        for name in users:
            console.print(f"  {escape(name)}")

    def render_saved(self, user: str, count: int, path: Path | None = None) -> None:
        """Render a successful save.

        Args:
            user: User whose selection was saved.
            count: Number of dates saved.
            path: Optional data file path to display below the message.
        """
        console.print(
            f"\n[bold green]✓[/bold green] Saved to shared calendar: "
            f"{escape(user)}, {format_count(count, 'date', 'dates')}"
        )
        if path:
            console.print(f"  {format_path(path)}")

    def render_save_error(self) -> None:
        """Render a failed save."""
        console.print(
            "\n[bold red]✗[/bold red] Error while saving. Check folder permissions."
        )
