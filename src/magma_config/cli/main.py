"""CLI commands for magma-config."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from magma_config.cli.formatting import build_project_table
from magma_config.constants import CONFIG_FILE_NAME
from magma_config.core.exceptions import ConfigNotFoundError, MagmaConfigError
from magma_config.core.models import (
    CompilerKind,
    EsbuildOptions,
    MagmaConfig,
    SwcOptions,
)
from magma_config.loader import load, open_project, save, try_find


app = typer.Typer(
    name="magma-config",
    help="Find, inspect and create magma.json project configuration.",
    no_args_is_help=True,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _exit_with_error(error: MagmaConfigError) -> NoReturn:
    """Report a library error on stderr and exit with status 1."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    raise typer.Exit(1)


def _start_directory(directory: str | None) -> Path:
    return Path(directory) if directory else Path.cwd()


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log search and load steps.",
    ),
) -> None:
    """Find, inspect and create magma.json project configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
    )


@app.command()
def init(
    directory: str | None = typer.Argument(
        None,
        help="Project directory. Defaults to current directory.",
    ),
    name: str | None = typer.Option(
        None,
        "--name",
        help="Project name. Defaults to the directory name.",
    ),
    version: str | None = typer.Option(
        None,
        "--version",
        help="Project version.",
    ),
    compiler: CompilerKind = typer.Option(
        CompilerKind.ESBUILD,
        "--compiler",
        "-c",
        help="Compiler backend to select.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help=f"Overwrite an existing {CONFIG_FILE_NAME}.",
    ),
) -> None:
    """Create a magma.json with default settings."""
    target = _start_directory(directory).resolve()
    config_path = target / CONFIG_FILE_NAME

    if config_path.exists() and not force:
        typer.echo(f"Error: {config_path} already exists.", err=True)
        typer.echo("Hint: Pass --force to overwrite it.", err=True)
        raise typer.Exit(1)

    config = MagmaConfig(
        name=name or target.name,
        version=version,
        compiler=compiler,
        esbuild=EsbuildOptions() if compiler is CompilerKind.ESBUILD else None,
        swc=SwcOptions() if compiler is CompilerKind.SWC else None,
    )

    try:
        target.mkdir(parents=True, exist_ok=True)
        save(config, config_path)
    except OSError as e:
        typer.echo(f"Error: Could not write {config_path}: {e}", err=True)
        typer.echo("Hint: Check that the directory is writable.", err=True)
        raise typer.Exit(1) from None

    typer.echo(f"Created {config_path}")


@app.command()
def where(
    directory: str | None = typer.Option(
        None,
        "--directory",
        "-C",
        help="Directory to search from. Defaults to current directory.",
    ),
) -> None:
    """Print the path of the nearest magma.json."""
    start = _start_directory(directory)
    config_path = try_find(start)
    if config_path is None:
        _exit_with_error(ConfigNotFoundError(start.resolve()))
    typer.echo(str(config_path))


@app.command()
def show(
    directory: str | None = typer.Option(
        None,
        "--directory",
        "-C",
        help="Directory to search from. Defaults to current directory.",
    ),
) -> None:
    """Show the resolved settings of the nearest project."""
    try:
        project = open_project(_start_directory(directory))
    except MagmaConfigError as e:
        _exit_with_error(e)

    # Force terminal output to ensure tables render correctly in all environments
    console = Console(force_terminal=True)
    console.print(build_project_table(project))


@app.command()
def check(
    directory: str | None = typer.Option(
        None,
        "--directory",
        "-C",
        help="Directory to search from. Defaults to current directory.",
    ),
) -> None:
    """Check that the nearest magma.json loads cleanly."""
    start = _start_directory(directory)
    config_path = try_find(start)
    if config_path is None:
        _exit_with_error(ConfigNotFoundError(start.resolve()))

    try:
        load(config_path)
    except MagmaConfigError as e:
        _exit_with_error(e)

    typer.echo(f"OK: {config_path}")


def main() -> None:
    """Entry point for the CLI."""
    app()
