"""List everyone who has picked dates."""

from cli.context import get_context
from cli.display import SummaryRenderer


def users_command() -> None:
    """List everyone who has picked at least one date."""
    ctx = get_context()
    SummaryRenderer().render_users(ctx.repository.get_all_users())
