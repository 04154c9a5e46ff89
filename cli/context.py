"""Shared CLI context with lazy-initialized dependencies."""

from planner.config import PlannerConfig
from planner.storage import AvailabilityRepository, JSONFileStorage


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        summary = ctx.repository.get_summary()
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: PlannerConfig | None = None
        self._storage: JSONFileStorage | None = None
        self._repository: AvailabilityRepository | None = None

    @property
    def config(self) -> PlannerConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = PlannerConfig.from_env()
        return self._config

    @property
    def storage(self) -> JSONFileStorage:
        """Get the shared availability file storage (lazy-loaded)."""
        if self._storage is None:
            self._storage = JSONFileStorage(self.config.data_file)
        return self._storage

    @property
    def repository(self) -> AvailabilityRepository:
        """Get availability repository (lazy-loaded)."""
        if self._repository is None:
            self._repository = AvailabilityRepository(self.storage)
        return self._repository


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
