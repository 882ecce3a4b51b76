"""Show the Notion database properties used by the sync."""

import logging

import typer

from app.exceptions import RemoteStoreError
from cli.context import get_context
from cli.display.console import console
from cli.display.table_renderer import TableRenderer
from cli.utils import require_remote

logger = logging.getLogger(__name__)


def fields() -> None:
    """Show the Notion database properties used by the sync.

    Lists every property of the booklist data source with its type and
    flags configured properties that are missing.
    """
    ctx = get_context()
    remote_store = require_remote(ctx)
    properties = ctx.config.notion_properties

    try:
        property_types = remote_store.property_types()
    except RemoteStoreError as e:
        logger.error(f"Could not read Notion schema: {e}")
        raise typer.Exit(1)

    expected = {
        properties.title: "bookName",
        properties.date: "date",
        properties.leader: "leaderName",
        properties.host: "hostName",
    }

    console.print(f"Properties of '{ctx.config.notion_database_name}':")
    console.print()
    TableRenderer().render_property_types(property_types, expected)

    if any(name not in property_types for name in expected):
        raise typer.Exit(1)
