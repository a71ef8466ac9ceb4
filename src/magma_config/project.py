"""Resolved project context handed to a build pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from magma_config.core.paths import canonicalize
from magma_config.core.selection import CompilerSelection, resolve_compiler


if TYPE_CHECKING:
    from pathlib import Path

    from magma_config.core.models import MagmaConfig
    from magma_config.core.paths import StrPath


@dataclass(frozen=True, slots=True)
class ResolvedProject:
    """A loaded config together with every location derived from it.

    All paths are absolute. Relative config paths are resolved against
    project_root, the directory containing magma.json.

    Attributes:
        config_path: Absolute path of the magma.json that was loaded.
        project_root: Directory containing config_path.
        config: The loaded configuration.
        generated_root: Where generated (non-TypeScript) code is written.
        typescript_output_root: Where generated TypeScript is written.
        node_modules_dir: The node_modules directory used by the toolchain.
        compiler: The active compiler and its options block (may be None).
        other_output_roots: Extra named outputs, logical name -> path.
    """

    config_path: Path
    project_root: Path
    config: MagmaConfig
    generated_root: Path
    typescript_output_root: Path
    node_modules_dir: Path
    compiler: CompilerSelection
    other_output_roots: dict[str, Path] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: MagmaConfig, config_path: StrPath) -> Self:
        """Resolve a config against the directory of its file.

        Args:
            config: The configuration to resolve.
            config_path: Location of the magma.json it was read from.

        Returns:
            A ResolvedProject with absolute paths.
        """
        path = canonicalize(config_path)
        root = path.parent
        return cls(
            config_path=path,
            project_root=root,
            config=config,
            generated_root=config.get_generated_root(root),
            typescript_output_root=config.get_typescript_output_root(root),
            node_modules_dir=config.get_node_modules_dir(root),
            compiler=resolve_compiler(config),
            other_output_roots=config.get_other_output_roots(root),
        )

    @property
    def compiler_out_dir(self) -> Path | None:
        """Absolute output directory of the active compiler, if configured."""
        options = self.compiler.options
        if options is None:
            return None
        return options.get_out_dir(self.project_root)
