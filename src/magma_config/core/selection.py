"""Active compiler selection."""

from __future__ import annotations

from typing import NamedTuple

from magma_config.core.models import CompilerKind, CompilerOptions, MagmaConfig


class CompilerSelection(NamedTuple):
    """The selected compiler backend and its options block.

    Attributes:
        kind: The compiler named by the config.
        options: Its options block, or None if the config does not define one.
    """

    kind: CompilerKind
    options: CompilerOptions | None


def resolve_compiler(config: MagmaConfig) -> CompilerSelection:
    """Pair the configured compiler with its options block.

    A compiler selected without a matching options block is not an error:
    options is None and the caller decides how to proceed.

    Example:
        >>> kind, options = resolve_compiler(MagmaConfig())
        >>> kind, options
        (<CompilerKind.ESBUILD: 'esbuild'>, None)
    """
    return CompilerSelection(config.compiler, config.get_active_compiler_options())
