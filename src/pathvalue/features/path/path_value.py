"""
Summary: Immutable string-backed path value with derived views and filesystem pass-throughs.
Why: Expose parser and algebra rules through one object while delegating I/O to a port.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import BinaryIO, ClassVar, Final, TypeAlias

from pathvalue.shared.file_info import FileInfo, FilePermission
from pathvalue.shared.path_components import PathComponents

from .adapters.local_filesystem import LocalFilesystemAdapter
from .usecases.ports import FilesystemPort
from .domain import algebra, parser
from .domain.errors import PathPreconditionError
from .domain.flavor import HOST_FLAVOR, Flavor

PathInput: TypeAlias = "str | Path | os.PathLike[str]"

_DEFAULT_FILESYSTEM: Final[FilesystemPort] = LocalFilesystemAdapter()


def _coerce_text(value: PathInput) -> str:
    if isinstance(value, Path):
        return value._text
    text = os.fspath(value)
    if not isinstance(text, str):
        raise TypeError(
            "argument should be a str or an os.PathLike object "
            f"where __fspath__ returns a str, not {type(text).__name__!r}"
        )
    return text


class Path:
    """A filesystem path, fully determined by its raw text.

    Derived views (``name``, ``suffix``, ``parents``...) are recomputed from
    the text on every access. Equality compares the raw text, so ``a/b`` and
    ``a//b`` are different values. Operations that move the entry on disk
    return a new value for the new location.
    """

    __slots__ = ("_text", "_filesystem")

    flavor: ClassVar[Flavor] = HOST_FLAVOR

    _text: str
    _filesystem: FilesystemPort

    def __init__(self, text: PathInput, *, filesystem: FilesystemPort | None = None) -> None:
        if filesystem is None:
            filesystem = text._filesystem if isinstance(text, Path) else _DEFAULT_FILESYSTEM
        object.__setattr__(self, "_text", _coerce_text(text))
        object.__setattr__(self, "_filesystem", filesystem)

    def _derive(self, text: str) -> Path:
        return Path(text, filesystem=self._filesystem)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Path is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Path is immutable: cannot delete '{name}'")

    # String conversion and comparison -------------------------------------

    def __str__(self) -> str:
        return self._text

    def __fspath__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Path({self._text!r})"

    def __eq__(self, other: object) -> bool:
        """Compare raw text with another ``Path``; a plain ``str`` never compares equal."""

        if isinstance(other, Path):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    # Derived views ---------------------------------------------------------

    @property
    def drive(self) -> str:
        return parser.split_drive(self._text)

    @property
    def root(self) -> str:
        return parser.detect_root(self._text, self.flavor)

    @property
    def anchor(self) -> str:
        return parser.split_anchor(self._text, self.flavor)[0]

    @property
    def parts(self) -> tuple[str, ...]:
        """Anchor, directory names, then the final stem and suffix as separate items."""

        return tuple(parser.split_parts(self._text, self.flavor))

    @property
    def parents(self) -> tuple[Path, ...]:
        """Each ancestor segment, anchor first, excluding the final component."""

        return tuple(self._derive(segment) for segment in parser.parent_segments(self._text, self.flavor))

    @property
    def parent(self) -> Path:
        return self._derive(parser.parent_text(self._text, self.flavor))

    @property
    def name(self) -> str:
        return parser.final_component(self._text, self.flavor)

    @property
    def stem(self) -> str:
        return parser.split_suffix(self.name)[0]

    @property
    def suffix(self) -> str:
        return parser.split_suffix(self.name)[1]

    @property
    def suffixes(self) -> list[str]:
        return parser.split_suffixes(self.name)

    def components(self) -> PathComponents:
        """Return a snapshot of every derived view."""

        return parser.decompose(self._text, self.flavor)

    def is_absolute(self) -> bool:
        return parser.is_absolute(self._text, self.flavor)

    def is_reserved(self) -> bool:
        return algebra.is_reserved(self._text)

    # Derivations -----------------------------------------------------------

    def join(self, other: PathInput) -> Path:
        """Append ``other`` after stripping separators trailing this path."""

        return self._derive(algebra.join(self._text, _coerce_text(other), self.flavor))

    def __truediv__(self, other: PathInput) -> Path:
        return self.join(other)

    def __rtruediv__(self, other: str) -> Path:
        return self._derive(algebra.join(_coerce_text(other), self._text, self.flavor))

    def joinpath(self, *others: PathInput) -> Path:
        """Fold ``others`` onto this path, collapsing redundant separators."""

        texts = [self._text, *(_coerce_text(other) for other in others)]
        return self._derive(algebra.joinpath(texts, self.flavor))

    def with_name(self, new_name: str) -> Path:
        return self._derive(algebra.with_name(self._text, new_name, self.flavor))

    def with_suffix(self, new_suffix: str) -> Path:
        return self._derive(algebra.with_suffix(self._text, new_suffix, self.flavor))

    def relative_to(self, other: PathInput) -> Path:
        return self._derive(algebra.relative_to(self._text, _coerce_text(other), self.flavor))

    def as_posix(self) -> str:
        return algebra.as_posix(self._text, self.flavor)

    def as_uri(self) -> str:
        return algebra.as_uri(self._text, self.flavor)

    # Filesystem pass-throughs ---------------------------------------------

    def exists(self) -> bool:
        return self._filesystem.is_file(self._text) or self._filesystem.is_dir(self._text)

    def is_file(self) -> bool:
        return self._filesystem.is_file(self._text)

    def is_dir(self) -> bool:
        return self._filesystem.is_dir(self._text)

    def is_symlink(self) -> bool:
        return self._filesystem.is_symlink(self._text)

    def stat(self) -> FileInfo:
        """Return metadata of the entry, following symlinks to their target."""

        return self._filesystem.stat(self._text)

    def chmod(self, mode: int | Iterable[FilePermission]) -> None:
        """Replace the permission bits; ``mode`` is an int or a set of :class:`FilePermission`."""

        if not isinstance(mode, int):
            mode = FilePermission.to_mode(mode)
        self._filesystem.chmod(self._text, mode)

    def open(self, mode: str = "r", buffering: int = -1) -> BinaryIO:
        """Open the file as a byte stream (``r``, ``w``, ``a``, ``r+``, ``w+``; ``b`` optional)."""

        return self._filesystem.open(self._text, mode, buffering)

    def rename(self, target: PathInput) -> Path:
        """Move the entry to ``target`` and return the path of its new location."""

        target_text = _coerce_text(target)
        self._filesystem.move(self._text, target_text)
        return self._derive(target_text)

    def replace(self, target: PathInput) -> Path:
        """Like :meth:`rename`, but an existing directory at ``target`` is removed first."""

        target_text = _coerce_text(target)
        if self._filesystem.is_dir(target_text) and not self._filesystem.is_symlink(target_text):
            self._filesystem.remove_tree(target_text)
        return self.rename(target_text)

    def mkdir(self) -> None:
        """Create the directory along with any missing parents."""

        self._filesystem.make_dirs(self._text)

    def rmdir(self) -> None:
        """Remove the directory and its contents."""

        self._filesystem.remove_tree(self._text)

    def resolve(self) -> Path:
        return self._derive(self._filesystem.resolve(self._text))


def joinpath(*paths: PathInput) -> Path:
    """Fold every operand into one path, collapsing redundant separators.

    Raises:
        PathPreconditionError: If called with no paths.
    """

    if not paths:
        raise PathPreconditionError("joinpath", "", "at least one path is required")
    first = paths[0]
    head = first if isinstance(first, Path) else Path(first)
    return head.joinpath(*paths[1:])


# Flavor-specific constructors are aliases: every path uses the host flavor.
PosixPath = Path
WindowsPath = Path
PurePath = Path
PurePosixPath = Path
PureWindowsPath = Path


__all__ = [
    "Path",
    "PathInput",
    "PosixPath",
    "PurePath",
    "PurePosixPath",
    "PureWindowsPath",
    "WindowsPath",
    "joinpath",
]
