"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, codec, paths and loader")
    config.addinivalue_line("markers", "storage: Filesystem adapter")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard)",
    )


class MemoryFileSystem:
    """In-memory FileSystemPort keyed by absolute path."""

    def __init__(self, files: dict[Path, str] | None = None) -> None:
        self.files: dict[Path, str] = dict(files or {})
        self.checked: list[Path] = []

    def is_file(self, path: Path) -> bool:
        self.checked.append(path)
        return path in self.files

    def read_text(self, path: Path) -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(f"No such file: '{path}'") from None

    def write_text(self, path: Path, text: str) -> None:
        self.files[path] = text


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Empty in-memory file system for loader tests without disk I/O."""
    return MemoryFileSystem()

