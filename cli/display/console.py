"""Shared Rich console instance for consistent terminal output."""

from rich.console import Console

# Shared by all renderers; auto-highlighting off so dates and counts keep
# the styles the renderers give them
console = Console(highlight=False)
