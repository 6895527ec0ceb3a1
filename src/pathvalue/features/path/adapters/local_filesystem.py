"""src/pathvalue/features/path/adapters/local_filesystem.py
What: Adapter implementing FilesystemPort on top of os, shutil and platform helpers.
Why: Keep filesystem I/O in adapters while path values target abstractions."""

from __future__ import annotations

import logging
import os
from pathlib import Path as _NativePath
from typing import BinaryIO, Final, cast

from pathvalue.features.path.domain.errors import PathPreconditionError
from pathvalue.features.path.usecases.ports import FilesystemPort
from pathvalue.platform.filesystem import ensure_directory, remove_tree
from pathvalue.platform.logging import logger
from pathvalue.shared.file_info import FileInfo

# read, write, append, read-write-existing, read-write-truncate
_OPEN_MODES: Final[dict[str, str]] = {
    "r": "rb",
    "w": "wb",
    "a": "ab",
    "r+": "r+b",
    "w+": "w+b",
}


def native_open_mode(mode: str) -> str:
    """Map a ``r``/``w``/``a``/``r+``/``w+`` mode (``b`` optional) to a binary ``open`` mode.

    Raises:
        PathPreconditionError: If ``mode`` is not one of the supported spellings.
    """

    base = mode.replace("b", "", 1) if mode.count("b") == 1 else mode
    native = _OPEN_MODES.get(base)
    if native is None:
        raise PathPreconditionError("open", mode, f"unsupported mode {mode!r}")
    return native


class LocalFilesystemAdapter(FilesystemPort):
    """Adapter delegating to the host operating system."""

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_symlink(self, path: str) -> bool:
        return os.path.islink(path)

    def stat(self, path: str) -> FileInfo:
        return FileInfo.from_stat_result(os.stat(path))

    def chmod(self, path: str, mode: int) -> None:
        logger.debug(
            "Changing mode [path=%s, mode=%o]",
            path,
            mode,
            extra={"filesystem_event": "filesystem.chmod", "source_path": path, "mode": mode},
        )
        os.chmod(path, mode)

    def move(self, source: str, target: str) -> None:
        logger.debug(
            "Moving [src=%s, dest=%s]",
            source,
            target,
            extra={"filesystem_event": "filesystem.move", "source_path": source, "target_path": target},
        )
        os.replace(source, target)

    def remove_tree(self, path: str) -> None:
        logger.debug(
            "Removing directory tree [path=%s]",
            path,
            extra={"filesystem_event": "filesystem.rmdir", "source_path": path},
        )
        remove_tree(_NativePath(path))

    def make_dirs(self, path: str) -> None:
        if logger.isEnabledFor(logging.DEBUG) and not os.path.isdir(path):
            logger.debug(
                "Creating directory [path=%s]",
                path,
                extra={"filesystem_event": "filesystem.mkdir", "source_path": path},
            )
        _ = ensure_directory(_NativePath(path))

    def resolve(self, path: str) -> str:
        return os.path.realpath(path)

    def open(self, path: str, mode: str = "r", buffering: int = -1) -> BinaryIO:
        return cast(BinaryIO, open(path, native_open_mode(mode), buffering))


__all__ = ["LocalFilesystemAdapter", "native_open_mode"]
