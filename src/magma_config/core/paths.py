"""Path resolution for config-relative locations.

Paths in magma.json are written relative to the project root and may use
either separator style. Resolution is lexical: nothing here touches the
filesystem.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath


StrPath = str | os.PathLike[str]


def canonicalize(path: StrPath) -> Path:
    """Make a path absolute and collapse "." and ".." segments.

    Symlinks are not followed and the path need not exist.
    """
    return Path(os.path.abspath(path))


def get_absolute_path(base_dir: StrPath, relative_or_absolute: str) -> Path:
    """Resolve a config path against a base directory.

    Backslashes are normalized to forward slashes first, so "a\\b" and "a/b"
    resolve identically on every host. Rooted paths ignore base_dir.

    Args:
        base_dir: Directory that relative paths are joined onto.
        relative_or_absolute: Path as written in the config file.

    Returns:
        Canonical absolute path. An empty or blank input yields base_dir.

    Example:
        >>> get_absolute_path("/proj", "out/../dist")
        PosixPath('/proj/dist')
    """
    if not relative_or_absolute or relative_or_absolute.isspace():
        return canonicalize(base_dir)

    normalized = relative_or_absolute.replace("\\", "/")
    if PurePath(normalized).anchor:
        return canonicalize(normalized)
    return canonicalize(os.path.join(base_dir, normalized))
