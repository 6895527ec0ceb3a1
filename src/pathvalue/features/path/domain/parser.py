"""
Summary: Decompose raw path strings into drive, root, parts, name and suffixes.
Why: Keep every derived view a pure function of the text so values never cache state.
"""

from __future__ import annotations

import re
from typing import Final

from pathvalue.shared.path_components import PathComponents

from .flavor import HOST_FLAVOR, Flavor

# Drive and root markers are recognised under every flavor.
_ANY_SEPARATOR: Final[str] = "/\\"
_UNC_PREFIXES: Final[tuple[str, ...]] = ("\\\\", "//")
_DRIVE_ROOT_MARKERS: Final[tuple[str, ...]] = (":/", ":\\")
_EXTENSION_SEPARATOR: Final[str] = "."
_DOT_NAMES: Final[frozenset[str]] = frozenset({".", ".."})


def split_drive(text: str) -> str:
    """Return the drive letter (``C:``) or UNC share (``\\\\host\\share``) prefixing ``text``.

    UNC shares are always reported with backslashes, whichever separator the
    text used. An empty string means the path has no drive.
    """

    if len(text) < 2:
        return ""
    if text[1] == ":":
        return text[:2]
    if text[:2] in _UNC_PREFIXES:
        separator = text[0]
        pieces = text[2:].split(separator, 2)
        if len(pieces) >= 2:
            return "\\\\" + "\\".join(pieces[:2])
    return ""


def detect_root(text: str, flavor: Flavor = HOST_FLAVOR) -> str:
    """Return the flavor's separator when ``text`` is rooted, otherwise an empty string."""

    if text[1:3] in _DRIVE_ROOT_MARKERS:
        return flavor.sep
    if text[:1] and text[0] in _ANY_SEPARATOR:
        return flavor.sep
    return ""


def split_anchor(text: str, flavor: Flavor = HOST_FLAVOR) -> tuple[str, str]:
    """Split ``text`` into its anchor (drive plus root, as spelled) and the remainder."""

    length = len(split_drive(text))
    next_char = text[length : length + 1]
    if detect_root(text, flavor) and next_char and next_char in _ANY_SEPARATOR:
        length += 1
    return text[:length], text[length:]


def _last_separator(body: str, flavor: Flavor) -> int:
    return max(body.rfind(separator) for separator in flavor.separators)


def split_segments(body: str, flavor: Flavor = HOST_FLAVOR) -> list[str]:
    """Split an anchor-free ``body`` on every separator, dropping empty segments."""

    pattern = "[" + re.escape(flavor.separators) + "]"
    return [segment for segment in re.split(pattern, body) if segment]


def split_path(text: str, flavor: Flavor = HOST_FLAVOR) -> tuple[str, str]:
    """Split ``text`` into its directory portion and its final component.

    The directory keeps the anchor and drops separators that trail it. A
    trailing separator on ``text`` yields an empty final component.
    """

    anchor, body = split_anchor(text, flavor)
    index = _last_separator(body, flavor)
    if index == -1:
        return anchor, body
    directory = body[:index].rstrip(flavor.separators)
    return anchor + directory, body[index + 1 :]


def split_suffix(name: str) -> tuple[str, str]:
    """Split one dot-extension off ``name``, returning ``(stem, suffix)``.

    A leading dot counts as an extension, so ``.gitignore`` splits into an
    empty stem and the whole name as suffix. A trailing dot does not.
    """

    if name in _DOT_NAMES:
        return name, ""
    index = name.rfind(_EXTENSION_SEPARATOR)
    if index == -1 or index == len(name) - 1:
        return name, ""
    return name[:index], name[index:]


def split_suffixes(name: str) -> list[str]:
    """Return every dot-extension of ``name``, outermost first."""

    found: list[str] = []
    stem, suffix = split_suffix(name)
    while suffix:
        found.append(suffix)
        stem, suffix = split_suffix(stem)
    found.reverse()
    return found


def final_component(text: str, flavor: Flavor = HOST_FLAVOR) -> str:
    """Return the last component of ``text``; empty for anchors and trailing separators."""

    return split_path(text, flavor)[1]


def parent_segments(text: str, flavor: Flavor = HOST_FLAVOR) -> list[str]:
    """Return the anchor (if any) followed by each directory name above the final component."""

    anchor, body = split_anchor(text, flavor)
    index = _last_separator(body, flavor)
    directories = split_segments(body[:index], flavor) if index != -1 else []
    return ([anchor] if anchor else []) + directories


def split_parts(text: str, flavor: Flavor = HOST_FLAVOR) -> list[str]:
    """Return the anchor, directory names, then the final stem and suffix as separate items."""

    stem, suffix = split_suffix(final_component(text, flavor))
    parts = parent_segments(text, flavor)
    if stem:
        parts.append(stem)
    if suffix:
        parts.append(suffix)
    return parts


def parent_text(text: str, flavor: Flavor = HOST_FLAVOR) -> str:
    """Return the directory portion of ``text``.

    Anchors, ``.``, ``..`` and the empty path are their own parent. A bare
    relative name has ``.`` as parent.
    """

    anchor, _ = split_anchor(text, flavor)
    if text in _DOT_NAMES or not text or text == anchor:
        return text
    directory, _ = split_path(text, flavor)
    return directory or "."


def is_absolute(text: str, flavor: Flavor = HOST_FLAVOR) -> bool:
    """Return whether ``text`` is absolute under ``flavor``'s own rules."""

    if flavor.is_posix:
        return text.startswith(flavor.sep)
    return bool(detect_root(text, flavor))


def decompose(text: str, flavor: Flavor = HOST_FLAVOR) -> PathComponents:
    """Compute every derived view of ``text`` at once."""

    anchor, _ = split_anchor(text, flavor)
    name = final_component(text, flavor)
    stem, suffix = split_suffix(name)
    return PathComponents(
        text=text,
        drive=split_drive(text),
        root=detect_root(text, flavor),
        anchor=anchor,
        parts=tuple(split_parts(text, flavor)),
        parents=tuple(parent_segments(text, flavor)),
        parent=parent_text(text, flavor),
        name=name,
        stem=stem,
        suffix=suffix,
        suffixes=tuple(split_suffixes(name)),
        is_absolute=is_absolute(text, flavor),
    )


__all__ = [
    "decompose",
    "detect_root",
    "final_component",
    "is_absolute",
    "parent_segments",
    "parent_text",
    "split_anchor",
    "split_drive",
    "split_parts",
    "split_path",
    "split_segments",
    "split_suffix",
    "split_suffixes",
]
