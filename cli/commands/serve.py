"""Run the availability JSON API."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from planner import create_app

logger = logging.getLogger(__name__)


def serve_command(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Interface to bind (default: from config)"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on (default: from config)"),
    ] = None,
) -> None:
    """Serve the availability operations as a JSON API."""
    ctx = get_context()
    config = ctx.config

    app = create_app(ctx.repository)
    host = host or config.api_host
    port = port or config.api_port
    logger.info(f"Serving {config.data_file} on http://{host}:{port}")
    app.run(host=host, port=port)
