"""Run the HTTP API."""

import logging

import typer
from typing_extensions import Annotated

from app import create_app
from app.exceptions import RemoteStoreError
from cli.context import get_context
from cli.utils import require_remote

logger = logging.getLogger(__name__)


def serve(
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to listen on (default: BACKEND_PORT)"),
    ] = None,
    host: Annotated[
        str,
        typer.Option("--host", help="Interface to bind"),
    ] = "127.0.0.1",
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable Flask debug mode"),
    ] = False,
) -> None:
    """Run the HTTP API.

    The Notion connection is checked before the server starts. With
    LOCAL_ONLY set the API serves the local files only and sync
    endpoints return an error.
    """
    ctx = get_context()
    config = ctx.config

    remote_store = None
    if not config.local_only:
        remote_store = require_remote(ctx)
        try:
            # Resolves the data source, failing fast on bad credentials
            remote_store.data_source_id
        except RemoteStoreError as e:
            logger.error(f"Could not connect to Notion: {e}")
            raise typer.Exit(1)

    app = create_app(config, remote_store=remote_store)
    app.run(host=host, port=port or config.backend_port, debug=debug)
