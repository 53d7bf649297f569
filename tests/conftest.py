"""Shared test fixtures for termsearch tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from termsearch.cli.context import CLIContext
from termsearch.infrastructure.paths import PathResolver

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def resolver(temp_dir: Path) -> PathResolver:
    """Path resolver rooted in a temporary directory."""
    return PathResolver(base=temp_dir / ".termsearch")


@pytest.fixture(autouse=True)
def clean_cli_context() -> Generator[None]:
    """Give every test a fresh CLI context."""
    CLIContext.reset()
    yield
    CLIContext.reset()


@pytest.fixture
def cli_context(resolver: PathResolver) -> CLIContext:
    """CLI context whose config is stored under a temporary directory."""
    ctx = CLIContext.get()
    ctx.resolver = resolver
    return ctx
