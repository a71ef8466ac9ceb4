"""Core domain module for magma-config.

This module contains the configuration model, its JSON codec, path
resolution and port definitions. Apart from the codec it has no I/O and
can be tested in isolation.
"""

from magma_config.core.models import (
    CodegenOptions,
    CompilerKind,
    CompilerOptions,
    EsbuildOptions,
    MagmaConfig,
    SwcOptions,
)
from magma_config.core.ports import FileSystemPort
from magma_config.core.selection import CompilerSelection, resolve_compiler


__all__ = [
    "CodegenOptions",
    "CompilerKind",
    "CompilerOptions",
    "CompilerSelection",
    "EsbuildOptions",
    "FileSystemPort",
    "MagmaConfig",
    "SwcOptions",
    "resolve_compiler",
]
