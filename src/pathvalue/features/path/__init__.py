"""
Summary: Export path feature domain, port and adapter symbols.
Why: Provide a stable import surface for the package root, the CLI and tests.
"""

from .adapters import LocalFilesystemAdapter
from .domain import (
    HOST_FLAVOR,
    POSIX,
    WINDOWS,
    Flavor,
    PathPreconditionError,
    UnknownFlavorError,
    decompose,
    flavor_from_name,
)
from .path_value import (
    Path,
    PosixPath,
    PurePath,
    PurePosixPath,
    PureWindowsPath,
    WindowsPath,
    joinpath,
)
from .usecases import FilesystemPort

__all__ = [
    "Flavor",
    "FilesystemPort",
    "HOST_FLAVOR",
    "LocalFilesystemAdapter",
    "POSIX",
    "Path",
    "PathPreconditionError",
    "PosixPath",
    "PurePath",
    "PurePosixPath",
    "PureWindowsPath",
    "UnknownFlavorError",
    "WINDOWS",
    "WindowsPath",
    "decompose",
    "flavor_from_name",
    "joinpath",
]
