"""pathvalue: string-backed filesystem path values.

A path is its raw text. Drive, root, parts, name, stem and suffixes are
derived on demand; join, parent, with_name, with_suffix and relative_to
build new values; filesystem calls delegate to a pluggable port.
"""

from pathvalue.features.path import (
    Flavor,
    FilesystemPort,
    LocalFilesystemAdapter,
    Path,
    PathPreconditionError,
    PosixPath,
    PurePath,
    PurePosixPath,
    PureWindowsPath,
    WindowsPath,
    joinpath,
)
from pathvalue.shared import FileInfo, FileKind, FilePermission, PathComponents

__version__ = "0.1.0"

__all__ = [
    "FileInfo",
    "FileKind",
    "FilePermission",
    "FilesystemPort",
    "Flavor",
    "LocalFilesystemAdapter",
    "Path",
    "PathComponents",
    "PathPreconditionError",
    "PosixPath",
    "PurePath",
    "PurePosixPath",
    "PureWindowsPath",
    "WindowsPath",
    "joinpath",
]
