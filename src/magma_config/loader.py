"""Locating, loading and saving magma.json.

The try_* functions never raise for missing or broken config files; they
report failure as data so the caller decides whether it is fatal. load()
and save() are the fail-fast variants.

Every function accepts an optional ``fs`` (a FileSystemPort) and defaults
to the local disk.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

from magma_config.adapters.filesystem import LocalFileSystem
from magma_config.constants import CONFIG_FILE_NAME, MAX_SEARCH_DEPTH
from magma_config.core.exceptions import ConfigNotFoundError, InvalidConfigurationError
from magma_config.core.paths import canonicalize
from magma_config.core.serialization import from_json, to_json
from magma_config.project import ResolvedProject


if TYPE_CHECKING:
    from magma_config.core.models import MagmaConfig
    from magma_config.core.paths import StrPath
    from magma_config.core.ports import FileSystemPort


logger = logging.getLogger(__name__)


class LoadResult(NamedTuple):
    """Outcome of try_load().

    Attributes:
        config: The parsed config, or None on failure.
        ok: True if config was loaded.
        error: Description of the failure, or None on success.
    """

    config: MagmaConfig | None
    ok: bool
    error: str | None


def try_find(
    start_directory: StrPath, *, fs: FileSystemPort | None = None
) -> Path | None:
    """Find the nearest magma.json at or above a directory.

    The start directory is checked first, then each parent in turn. At most
    MAX_SEARCH_DEPTH directories are examined, and the walk stops at the
    filesystem root.

    Args:
        start_directory: Directory to start from (relative paths use the cwd).
        fs: File system to search. Defaults to the local disk.

    Returns:
        Absolute path of the closest magma.json, or None if there is none.

    Example:
        >>> path = try_find(".")
        >>> project_root = path.parent if path else None
    """
    fs = fs if fs is not None else LocalFileSystem()
    current = canonicalize(start_directory)

    for _ in range(MAX_SEARCH_DEPTH):
        candidate = current / CONFIG_FILE_NAME
        if fs.is_file(candidate):
            logger.debug("Found %s", candidate)
            return candidate

        parent = current.parent
        # Path casing is compared loosely for case-insensitive hosts
        if not str(parent) or str(parent).casefold() == str(current).casefold():
            break
        current = parent

    logger.debug("No %s found from %s", CONFIG_FILE_NAME, start_directory)
    return None


def try_load(path: StrPath, *, fs: FileSystemPort | None = None) -> LoadResult:
    """Read and parse a magma.json without raising.

    Args:
        path: Config file to read.
        fs: File system to read from. Defaults to the local disk.

    Returns:
        LoadResult(config, True, None) on success, otherwise
        LoadResult(None, False, message) for read errors, invalid UTF-8,
        malformed or too deeply nested JSON, schema mismatches or a JSON
        null document.
    """
    fs = fs if fs is not None else LocalFileSystem()
    config_path = Path(path)

    try:
        config = from_json(fs.read_text(config_path))
    except (OSError, ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and ConfigSchemaError.
        # RecursionError comes from documents nested too deeply to decode.
        logger.debug("Failed to load %s: %s", config_path, e)
        return LoadResult(None, False, str(e) or type(e).__name__)

    if config is None:
        logger.debug("%s holds a null document", config_path)
        return LoadResult(None, False, f"Failed to deserialize {CONFIG_FILE_NAME}")

    logger.debug("Loaded %s", config_path)
    return LoadResult(config, True, None)


def load(path: StrPath, *, fs: FileSystemPort | None = None) -> MagmaConfig:
    """Read and parse a magma.json, raising on failure.

    Raises:
        InvalidConfigurationError: If the file cannot be read or parsed. The
            message is the one try_load() reported.
    """
    config, ok, error = try_load(path, fs=fs)
    if not ok or config is None:
        raise InvalidConfigurationError(
            error or f"Invalid {CONFIG_FILE_NAME}", path=Path(path)
        )
    return config


def save(
    config: MagmaConfig, path: StrPath, *, fs: FileSystemPort | None = None
) -> None:
    """Write a config as indented JSON, replacing any existing file.

    Raises:
        OSError: If the file cannot be written.
        UnicodeEncodeError: If the config holds text with no UTF-8 form
            (e.g. a lone surrogate). The existing file is left untouched.
    """
    fs = fs if fs is not None else LocalFileSystem()
    config_path = Path(path)
    fs.write_text(config_path, to_json(config))
    logger.debug("Saved %s", config_path)


def find_project_root(
    start: StrPath | None = None, *, fs: FileSystemPort | None = None
) -> Path | None:
    """Find the directory holding the nearest magma.json.

    Args:
        start: Directory to start searching from. If None, uses the cwd.
        fs: File system to search. Defaults to the local disk.

    Returns:
        The project root, or None if no magma.json was found.
    """
    config_path = try_find(start if start is not None else Path.cwd(), fs=fs)
    return config_path.parent if config_path is not None else None


def open_project(
    start: StrPath | None = None, *, fs: FileSystemPort | None = None
) -> ResolvedProject:
    """Find, load and resolve the nearest project in one step.

    Args:
        start: Directory to start searching from. If None, uses the cwd.
        fs: File system to use. Defaults to the local disk.

    Returns:
        The resolved project.

    Raises:
        ConfigNotFoundError: If no magma.json exists at or above start.
        InvalidConfigurationError: If the file found cannot be loaded.
    """
    start_dir = canonicalize(start if start is not None else Path.cwd())
    config_path = try_find(start_dir, fs=fs)
    if config_path is None:
        raise ConfigNotFoundError(start_dir)
    return ResolvedProject.from_config(load(config_path, fs=fs), config_path)
