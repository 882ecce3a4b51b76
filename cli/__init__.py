"""CLI package for bookclub sync tool."""

import logging
import sys

from app.config import ClubConfig

# HTTP client loggers that log every Notion request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "notion_client")


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: ClubConfig | None = None
) -> None:
    """Send DEBUG and above to the log file, and warnings (or more) to stderr.

    Args:
        verbose: Show INFO messages on the console
        quiet: Show only errors on the console
        config: Supplies log_dir and log_filename (loaded from env if None)
    """
    config = config or ClubConfig.from_env()
    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_path = config.log_dir / config.log_filename

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(_console_level(verbose, quiet))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    # Replace handlers from a previous call
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging to {log_path}")


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
