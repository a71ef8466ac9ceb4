"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The loader depends
only on these protocols, so tests can swap the local disk for an
in-memory double.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class FileSystemPort(Protocol):
    """Whole-file text access used to find, read and write magma.json."""

    def is_file(self, path: Path) -> bool:
        """Return True if path exists and is a regular file."""
        ...

    def read_text(self, path: Path) -> str:
        """Read a whole file as UTF-8 text.

        Raises:
            OSError: If the file is missing or unreadable.
            UnicodeDecodeError: If the contents are not valid UTF-8.
        """
        ...

    def write_text(self, path: Path, text: str) -> None:
        """Overwrite a file with UTF-8 text (no byte-order mark).

        Raises:
            OSError: If the file cannot be written.
        """
        ...
