"""Shared CLI context with lazy-initialized dependencies."""

from app.config import ClubConfig
from app.processing.synchronizer import Synchronizer
from app.remote.base import RemoteScheduleStore
from app.remote.notion_store import NotionScheduleStore
from app.storage.leader_store import LeaderStore
from app.storage.schedule_store import LocalScheduleStore


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    The config is loaded once and every store is built from it, so
    commands never read the environment themselves.

    Usage:
        ctx = CLIContext()
        entries = ctx.local_store.entries()
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: ClubConfig | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            config: Pre-built config (loaded from the environment if None)
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: ClubConfig | None = config
        self._local_store: LocalScheduleStore | None = None
        self._leader_store: LeaderStore | None = None
        self._remote_store: RemoteScheduleStore | None = None
        self._synchronizer: Synchronizer | None = None

    @property
    def config(self) -> ClubConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = ClubConfig.from_env()
        return self._config

    @property
    def local_store(self) -> LocalScheduleStore:
        """Get local schedule store (lazy-loaded)."""
        if self._local_store is None:
            self._local_store = LocalScheduleStore(self.config.schedule_path)
        return self._local_store

    @property
    def leader_store(self) -> LeaderStore:
        """Get leader roster store (lazy-loaded)."""
        if self._leader_store is None:
            self._leader_store = LeaderStore(self.config.leaders_path)
        return self._leader_store

    @property
    def remote_store(self) -> RemoteScheduleStore:
        """Get Notion store (lazy-loaded).

        Raises:
            ConfigurationError: If Notion is not configured
        """
        if self._remote_store is None:
            self._remote_store = NotionScheduleStore.from_config(self.config)
        return self._remote_store

    @property
    def synchronizer(self) -> Synchronizer:
        """Get synchronizer over the local and remote stores (lazy-loaded)."""
        if self._synchronizer is None:
            self._synchronizer = Synchronizer(self.local_store, self.remote_store)
        return self._synchronizer


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
