"""Where: src/pathvalue/shared/file_info.py
What: File metadata value objects returned by filesystem pass-throughs.
Why: Keep ``os.stat_result`` decoding out of adapters and path values.
"""

from __future__ import annotations

import stat as stat_module
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from os import stat_result


class FileKind(Enum):
    """Type of filesystem entry a path points at.

    ``SYMLINK`` only comes from ``lstat`` modes; ``Path.stat`` follows links
    and reports the kind of the target.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> FileKind:
        if stat_module.S_ISLNK(mode):
            return cls.SYMLINK
        if stat_module.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat_module.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


class FilePermission(Enum):
    """Single permission bit, named after who it applies to."""

    USER_READ = stat_module.S_IRUSR
    USER_WRITE = stat_module.S_IWUSR
    USER_EXEC = stat_module.S_IXUSR
    GROUP_READ = stat_module.S_IRGRP
    GROUP_WRITE = stat_module.S_IWGRP
    GROUP_EXEC = stat_module.S_IXGRP
    OTHERS_READ = stat_module.S_IROTH
    OTHERS_WRITE = stat_module.S_IWOTH
    OTHERS_EXEC = stat_module.S_IXOTH

    @classmethod
    def from_mode(cls, mode: int) -> frozenset[FilePermission]:
        """Decode the permission bits present in ``mode``."""

        return frozenset(permission for permission in cls if mode & permission.value)

    @staticmethod
    def to_mode(permissions: Iterable[FilePermission]) -> int:
        """Encode permissions back into an ``os.chmod`` mode."""

        mode = 0
        for permission in permissions:
            mode |= permission.value
        return mode


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Size, permissions and type of a filesystem entry."""

    size: int
    permissions: frozenset[FilePermission]
    kind: FileKind
    link_count: int
    last_write_time: datetime

    @classmethod
    def from_stat_result(cls, result: stat_result) -> FileInfo:
        return cls(
            size=result.st_size,
            permissions=FilePermission.from_mode(result.st_mode),
            kind=FileKind.from_mode(result.st_mode),
            link_count=result.st_nlink,
            last_write_time=datetime.fromtimestamp(result.st_mtime, tz=timezone.utc),
        )


__all__ = ["FileInfo", "FileKind", "FilePermission"]
