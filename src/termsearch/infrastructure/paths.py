"""Path resolution for termsearch storage."""

from __future__ import annotations

from pathlib import Path


class PathResolver:
    """Resolves paths for termsearch storage.

    Storage layout:
        ~/.termsearch/
        └── config.json
    """

    def __init__(self, base: Path | None = None) -> None:
        """Initialize path resolver.

        Args:
            base: Base directory for storage. Defaults to ~/.termsearch.
        """
        self.base = base or Path.home() / ".termsearch"

    def ensure_base(self) -> Path:
        """Ensure base directory exists and return it."""
        self.base.mkdir(parents=True, exist_ok=True)
        return self.base

    def global_config(self) -> Path:
        """Path to global configuration file."""
        return self.base / "config.json"


# Default resolver instance
default_resolver = PathResolver()
