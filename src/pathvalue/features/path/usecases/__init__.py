"""Use case ports for the path feature."""

from .ports import FilesystemPort

__all__ = ["FilesystemPort"]
