"""Core domain models for magma-config.

These models are plain dataclasses mirroring the magma.json schema. They
carry their schema defaults, so a freshly constructed MagmaConfig is the
same as one parsed from "{}". Conversion to and from JSON lives in
magma_config.core.serialization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from magma_config.constants import (
    DEFAULT_BUNDLE,
    DEFAULT_MINIFY,
    DEFAULT_MODULE_COMMONJS,
    DEFAULT_NODE_MODULES_DIR,
    DEFAULT_OUT_DIR,
    DEFAULT_OUTPUT_FOLDER,
    DEFAULT_SOURCE_MAP,
    DEFAULT_TARGET,
    DEFAULT_TYPESCRIPT_OUTPUT,
)
from magma_config.core.paths import get_absolute_path


if TYPE_CHECKING:
    from pathlib import Path

    from magma_config.core.paths import StrPath


def _or_default(value: str | None, default: str) -> str:
    # Only an unset (None) value falls back; "" resolves to the base itself
    return default if value is None else value


class CompilerKind(StrEnum):
    """Compiler backends a project can select."""

    ESBUILD = "esbuild"
    SWC = "swc"


class _CompilerOptionsBase:
    """Behaviour shared by every compiler options variant."""

    __slots__ = ()

    kind: ClassVar[CompilerKind]
    entry_points: list[str]
    out_dir: str | None

    def get_out_dir(self, project_root: StrPath) -> Path:
        """Resolve the compiler output directory against the project root."""
        return get_absolute_path(
            project_root, _or_default(self.out_dir, DEFAULT_OUT_DIR)
        )


@dataclass(slots=True)
class EsbuildOptions(_CompilerOptionsBase):
    """Options for the esbuild backend.

    Attributes:
        entry_points: Files to bundle, in order.
        out_dir: Output directory for bundles (JSON key "outdir").
        bundle: Whether to bundle dependencies.
        minify: Whether to minify output.
        target: ECMAScript target (e.g., "es2022").
        source_map: Whether to emit source maps (JSON key "sourcemap").
    """

    kind: ClassVar[CompilerKind] = CompilerKind.ESBUILD

    entry_points: list[str] = field(default_factory=list)
    out_dir: str | None = DEFAULT_OUT_DIR
    bundle: bool | None = DEFAULT_BUNDLE
    minify: bool | None = DEFAULT_MINIFY
    target: str | None = DEFAULT_TARGET
    source_map: bool | None = DEFAULT_SOURCE_MAP


@dataclass(slots=True)
class SwcOptions(_CompilerOptionsBase):
    """Options for the SWC backend.

    Attributes:
        entry_points: Files to transpile, in order.
        out_dir: Output directory for transpiled scripts (JSON key "outdir").
        jsc_target: SWC jsc target (e.g., "es2022").
        minify: Whether to minify output.
        source_maps: Whether to emit source maps.
        module_commonjs: Emit CommonJS modules instead of ESM.
    """

    kind: ClassVar[CompilerKind] = CompilerKind.SWC

    entry_points: list[str] = field(default_factory=list)
    out_dir: str | None = DEFAULT_OUT_DIR
    jsc_target: str | None = DEFAULT_TARGET
    minify: bool | None = DEFAULT_MINIFY
    source_maps: bool | None = DEFAULT_SOURCE_MAP
    module_commonjs: bool | None = DEFAULT_MODULE_COMMONJS


CompilerOptions: TypeAlias = EsbuildOptions | SwcOptions


@dataclass(slots=True)
class CodegenOptions:
    """Output locations for code generation.

    Attributes:
        output_folder: Root folder for generated code.
        typescript_output: Root folder for generated TypeScript.
        other_outputs: Additional named outputs, logical name -> relative path.
    """

    output_folder: str | None = DEFAULT_OUTPUT_FOLDER
    typescript_output: str | None = DEFAULT_TYPESCRIPT_OUTPUT
    other_outputs: dict[str, str] | None = None


@dataclass(slots=True)
class MagmaConfig:
    """Root configuration of a Magma project.

    Only the options block matching ``compiler`` is in effect. The other
    block may still be present and is kept as-is.

    Attributes:
        name: Optional project name.
        version: Optional free-form project version.
        codegen: Code generation output locations.
        compiler: The active compiler backend.
        esbuild: esbuild options, used when compiler is esbuild.
        swc: SWC options, used when compiler is swc.
        node_modules_dir: Relative path to the node_modules directory.

    Example:
        >>> config = MagmaConfig(name="game", compiler=CompilerKind.SWC)
        >>> config.get_active_compiler_options() is None
        True
    """

    name: str | None = None
    version: str | None = None
    codegen: CodegenOptions = field(default_factory=CodegenOptions)
    compiler: CompilerKind = CompilerKind.ESBUILD
    esbuild: EsbuildOptions | None = None
    swc: SwcOptions | None = None
    node_modules_dir: str | None = DEFAULT_NODE_MODULES_DIR

    def get_active_compiler_options(self) -> CompilerOptions | None:
        """Return the options block for the selected compiler.

        Returns:
            The esbuild or swc block, or None if the selected block is unset.
        """
        if self.compiler == CompilerKind.ESBUILD:
            return self.esbuild
        if self.compiler == CompilerKind.SWC:
            return self.swc
        return None

    def get_generated_root(self, project_root: StrPath) -> Path:
        """Resolve the absolute directory for generated code."""
        return get_absolute_path(
            project_root,
            _or_default(self.codegen.output_folder, DEFAULT_OUTPUT_FOLDER),
        )

    def get_typescript_output_root(self, project_root: StrPath) -> Path:
        """Resolve the absolute directory for generated TypeScript."""
        return get_absolute_path(
            project_root,
            _or_default(self.codegen.typescript_output, DEFAULT_TYPESCRIPT_OUTPUT),
        )

    def get_other_output_roots(self, project_root: StrPath) -> dict[str, Path]:
        """Resolve every named extra output against the project root.

        Returns:
            Dict mapping logical output names to absolute paths. Empty when
            no other outputs are configured.
        """
        outputs = self.codegen.other_outputs or {}
        return {
            name: get_absolute_path(project_root, relative)
            for name, relative in outputs.items()
        }

    def get_node_modules_dir(self, project_root: StrPath) -> Path:
        """Resolve the absolute node_modules directory."""
        return get_absolute_path(
            project_root, _or_default(self.node_modules_dir, DEFAULT_NODE_MODULES_DIR)
        )
