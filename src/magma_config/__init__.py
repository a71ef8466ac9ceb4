"""magma-config - project configuration for the Magma build toolchain.

This library locates the nearest magma.json, loads it into typed models,
and resolves the compiler selection and output directories a build
pipeline needs.

Example:
    >>> from magma_config import open_project
    >>> project = open_project()  # searches the cwd and its parents
    >>> kind, options = project.compiler
    >>> project.generated_root
    PosixPath('/work/game/.magma/obj/generated')
"""

from magma_config.adapters import LocalFileSystem
from magma_config.constants import CONFIG_FILE_NAME, MAX_SEARCH_DEPTH
from magma_config.core.exceptions import (
    ConfigNotFoundError,
    ConfigSchemaError,
    InvalidConfigurationError,
    MagmaConfigError,
)
from magma_config.core.models import (
    CodegenOptions,
    CompilerKind,
    CompilerOptions,
    EsbuildOptions,
    MagmaConfig,
    SwcOptions,
)
from magma_config.core.paths import get_absolute_path
from magma_config.core.ports import FileSystemPort
from magma_config.core.selection import CompilerSelection, resolve_compiler
from magma_config.core.serialization import from_json, to_json
from magma_config.loader import (
    LoadResult,
    find_project_root,
    load,
    open_project,
    save,
    try_find,
    try_load,
)
from magma_config.project import ResolvedProject


__version__ = "0.1.0"

__all__ = [
    "CONFIG_FILE_NAME",
    "MAX_SEARCH_DEPTH",
    "CodegenOptions",
    "CompilerKind",
    "CompilerOptions",
    "CompilerSelection",
    "ConfigNotFoundError",
    "ConfigSchemaError",
    "EsbuildOptions",
    "FileSystemPort",
    "InvalidConfigurationError",
    "LoadResult",
    "LocalFileSystem",
    "MagmaConfig",
    "MagmaConfigError",
    "ResolvedProject",
    "SwcOptions",
    "__version__",
    "find_project_root",
    "from_json",
    "get_absolute_path",
    "load",
    "open_project",
    "resolve_compiler",
    "save",
    "to_json",
    "try_find",
    "try_load",
]
