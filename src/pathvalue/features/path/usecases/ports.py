"""
Summary: Filesystem port consumed by path values for their pass-through operations.
Why: Keep path values independent from concrete OS calls so tests can substitute collaborators.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable

from pathvalue.shared.file_info import FileInfo


@runtime_checkable
class FilesystemPort(Protocol):
    """Filesystem operations a path value delegates to, with OS-native semantics."""

    def is_file(self, path: str) -> bool:
        """Return True when ``path`` names an existing regular file."""
        ...

    def is_dir(self, path: str) -> bool:
        """Return True when ``path`` names an existing directory."""
        ...

    def is_symlink(self, path: str) -> bool:
        """Return True when ``path`` names a symbolic link, dangling or not."""
        ...

    def stat(self, path: str) -> FileInfo:
        """Return size, permissions and type for ``path``, following symlinks."""
        ...

    def chmod(self, path: str, mode: int) -> None:
        """Replace the permission bits of ``path`` with ``mode``."""
        ...

    def move(self, source: str, target: str) -> None:
        """Atomically rename ``source`` to ``target``, overwriting an existing file."""
        ...

    def remove_tree(self, path: str) -> None:
        """Remove the directory ``path`` and everything beneath it."""
        ...

    def make_dirs(self, path: str) -> None:
        """Create ``path`` and any missing parents."""
        ...

    def resolve(self, path: str) -> str:
        """Return the absolute form of ``path`` with symlinks and ``..`` expanded."""
        ...

    def open(self, path: str, mode: str = "r", buffering: int = -1) -> BinaryIO:
        """Open ``path`` as a byte stream using ``r``/``w``/``a``/``r+``/``w+`` modes."""
        ...


__all__ = ["FilesystemPort"]
