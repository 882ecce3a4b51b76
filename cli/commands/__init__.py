"""CLI commands package."""

from cli.commands.diff import diff
from cli.commands.fetch import fetch
from cli.commands.fields import fields
from cli.commands.push import push
from cli.commands.schedule import schedule_app
from cli.commands.serve import serve
from cli.commands.stats import stats
from cli.commands.validate import validate

__all__ = [
    "diff",
    "fetch",
    "fields",
    "push",
    "schedule_app",
    "serve",
    "stats",
    "validate",
]
