"""Display module for rendering planner output.

This module provides renderers for the CLI:
- SummaryRenderer: best-first date summary, user picks and save results
- MonthRenderer: weekday month grid with counts and best days

It also provides:
- console: Shared Rich console instance
- Formatting functions for dates and counts
"""

from cli.display.console import console
from cli.display.formatters import (
    format_count,
    format_path,
    format_pretty_date,
    pluralize,
)
from cli.display.month_renderer import MonthRenderer
from cli.display.summary_renderer import SummaryRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "MonthRenderer",
    "SummaryRenderer",
    # Formatters
    "format_count",
    "format_path",
    "format_pretty_date",
    "pluralize",
]
