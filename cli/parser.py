"""CLI command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import (
    month_command,
    save_command,
    serve_command,
    show_command,
    summary_command,
    users_command,
)
from cli.context import CLIContext, set_context

app = typer.Typer(
    name="team-planner",
    help="Pick the dates you are available and see when the team can meet.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Pick the dates you are available and see when the team can meet."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(ctx)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)


app.command("show")(show_command)
app.command("save")(save_command)
app.command("summary")(summary_command)
app.command("users")(users_command)
app.command("month")(month_command)
app.command("serve")(serve_command)
