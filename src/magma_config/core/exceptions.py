"""Domain exceptions for magma-config.

All library errors inherit from MagmaConfigError, allowing callers to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

Plain I/O failures are not wrapped: they surface as OSError from save()
and load(), and as the error text of try_load().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from magma_config.constants import CONFIG_FILE_NAME


if TYPE_CHECKING:
    from pathlib import Path


class MagmaConfigError(Exception):
    """Base class for all magma-config exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigNotFoundError(MagmaConfigError):
    """Raised when no magma.json exists in a directory or its ancestors.

    Only the fail-fast helpers raise this; try_find() returns None instead.

    Attributes:
        start: The directory the search started from.
    """

    def __init__(self, start: Path) -> None:
        self.start = start
        super().__init__(f"No {CONFIG_FILE_NAME} found in {start} or its parents")

    @property
    def recovery_hint(self) -> str:
        """Suggest creating a config file."""
        return f"Run 'magma-config init' to create a {CONFIG_FILE_NAME}"


class ConfigSchemaError(MagmaConfigError, ValueError):
    """Raised when well-formed JSON does not fit the magma.json schema.

    Attributes:
        key: Dotted path of the offending key (e.g. "esbuild.minify"), if known.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)

    @property
    def recovery_hint(self) -> str | None:
        """Point at the offending key."""
        if self.key:
            return f"Check the value of '{self.key}' in {CONFIG_FILE_NAME}"
        return None


class InvalidConfigurationError(MagmaConfigError):
    """Raised by load() when a config file cannot be read or parsed.

    Attributes:
        path: The config file that failed to load, if known.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the file."""
        if self.path is not None:
            return f"Check {self.path} for JSON syntax or schema errors"
        return f"Check {CONFIG_FILE_NAME} for JSON syntax or schema errors"
