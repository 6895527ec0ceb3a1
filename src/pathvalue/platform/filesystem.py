"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import shutil
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def remove_tree(directory: Path) -> None:
    """Recursively remove ``directory``; a missing directory is not an error."""

    if not directory.exists() and not directory.is_symlink():
        return
    shutil.rmtree(directory)


__all__ = ["ensure_directory", "ensure_parent_directory", "remove_tree"]
