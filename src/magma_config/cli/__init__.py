"""CLI for magma-config."""

from magma_config.cli.main import app, main


__all__ = ["app", "main"]
