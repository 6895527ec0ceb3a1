"""Adapters that satisfy path feature ports."""

from .local_filesystem import LocalFilesystemAdapter, native_open_mode

__all__ = ["LocalFilesystemAdapter", "native_open_mode"]
