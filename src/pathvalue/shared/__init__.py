# Where: pathvalue.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of value objects across features.

"""Shared cross-cutting value objects exposed at the package level."""

from .file_info import FileInfo, FileKind, FilePermission
from .path_components import PathComponents

__all__ = ["FileInfo", "FileKind", "FilePermission", "PathComponents"]
