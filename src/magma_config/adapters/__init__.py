"""Adapters implementing the core ports."""

from magma_config.adapters.filesystem import LocalFileSystem


__all__ = ["LocalFileSystem"]
