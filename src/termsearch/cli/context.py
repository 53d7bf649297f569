"""CLI context state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from termsearch.infrastructure.config import SearchConfig
    from termsearch.infrastructure.paths import PathResolver

__all__ = ["CLIContext"]


@dataclass
class CLIContext:
    """Global CLI context for output mode and configuration.

    Single shared instance per process; assumes a single-threaded CLI.
    """

    quiet: bool = False
    config: SearchConfig | None = None
    resolver: PathResolver | None = None

    _instance: ClassVar[CLIContext | None] = None

    @classmethod
    def get(cls) -> CLIContext:
        """Get the shared CLI context instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def get_config(self) -> SearchConfig:
        """Get config, loading and caching it on first access."""
        if self.config is None:
            from termsearch.infrastructure.config import load_config

            self.config = load_config(self.resolver)

        return self.config

    @classmethod
    def reset(cls) -> None:
        """Reset the shared instance (used by tests)."""
        cls._instance = None
