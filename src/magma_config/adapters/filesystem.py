"""Filesystem adapter for local file operations."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class LocalFileSystem:
    """FileSystemPort backed by the local disk.

    Text is read and written as UTF-8 with "\\n" line endings on every
    host. Read and write errors propagate unchanged.
    """

    def is_file(self, path: Path) -> bool:
        """Return True if path is an existing regular file.

        Locations that cannot be inspected (e.g. permission denied on a
        parent directory) count as absent.
        """
        try:
            return path.is_file()
        except OSError:
            return False

    def read_text(self, path: Path) -> str:
        """Read a whole file as UTF-8 text.

        A leading byte-order mark is tolerated and stripped.
        """
        return path.read_text(encoding="utf-8-sig")

    def write_text(self, path: Path, text: str) -> None:
        """Overwrite path with text encoded as UTF-8 without a BOM.

        The text is encoded before the file is opened, so an encoding error
        leaves the existing file intact.
        """
        path.write_bytes(text.encode("utf-8"))
