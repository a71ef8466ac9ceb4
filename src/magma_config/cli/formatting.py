"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text


if TYPE_CHECKING:
    from magma_config.project import ResolvedProject


def _format_optional(value: object) -> Text:
    """Render None as a dimmed placeholder."""
    if value is None:
        return Text("(not set)", style="dim")
    return Text(str(value))


def build_project_table(project: ResolvedProject) -> Table:
    """Build a two-column table describing a resolved project.

    Args:
        project: The project to describe.

    Returns:
        Rich Table with one row per setting.
    """
    config = project.config
    kind, options = project.compiler

    table = Table(title=str(project.config_path))
    table.add_column("Setting")
    table.add_column("Value")

    table.add_row("Name", _format_optional(config.name))
    table.add_row("Version", _format_optional(config.version))
    table.add_row("Project root", str(project.project_root))
    table.add_row("Compiler", kind.value)

    if options is None:
        missing = Text(f"no '{kind.value}' block", style="yellow")
        table.add_row("Compiler options", missing)
    else:
        entry_points = ", ".join(options.entry_points) or "(none)"
        table.add_row("Entry points", entry_points)
        table.add_row("Compiler output", str(project.compiler_out_dir))

    table.add_row("Generated root", str(project.generated_root))
    table.add_row("TypeScript output", str(project.typescript_output_root))
    table.add_row("node_modules", str(project.node_modules_dir))

    for name, path in sorted(project.other_output_roots.items()):
        table.add_row(f"Output '{name}'", str(path))

    return table
