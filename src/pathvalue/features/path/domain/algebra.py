"""
Summary: Derive new path strings from existing ones without touching the filesystem.
Why: Concentrate join, rename-in-text and relativisation rules in pure, testable functions.
"""

from __future__ import annotations

from .errors import PathPreconditionError
from .flavor import HOST_FLAVOR, Flavor
from .parser import (
    final_component,
    is_absolute,
    parent_segments,
    split_anchor,
    split_segments,
    split_suffix,
)

URI_SCHEME_PREFIX = "file://"


def join(left: str, right: str, flavor: Flavor = HOST_FLAVOR) -> str:
    """Join ``right`` onto ``left`` after stripping the separators trailing ``left``.

    ``right`` is appended as written; an absolute ``right`` does not reset the
    result. An empty ``left`` yields ``right`` unchanged.
    """

    if not left:
        return right
    return left.rstrip(flavor.separators) + flavor.sep + right


def native_join(head: str, tail: str, flavor: Flavor = HOST_FLAVOR) -> str:
    """Join two strings collapsing redundant separators at the seam."""

    if not head:
        return tail
    if not tail:
        return head
    stripped_head = head.rstrip(flavor.separators)
    stripped_tail = tail.lstrip(flavor.separators)
    if not stripped_head:
        # ``head`` was nothing but a root
        return head[0] + stripped_tail
    return stripped_head + flavor.sep + stripped_tail


def joinpath(texts: list[str], flavor: Flavor = HOST_FLAVOR) -> str:
    """Fold ``texts`` left to right with :func:`native_join`.

    Raises:
        PathPreconditionError: If ``texts`` is empty.
    """

    if not texts:
        raise PathPreconditionError("joinpath", "", "at least one path is required")
    result = texts[0]
    for text in texts[1:]:
        result = native_join(result, text, flavor)
    return result


def _directory_prefix(text: str, name: str) -> str:
    return text[: len(text) - len(name)]


def with_name(text: str, new_name: str, flavor: Flavor = HOST_FLAVOR) -> str:
    """Replace the final component of ``text`` with ``new_name``.

    Raises:
        PathPreconditionError: If ``text`` has no final component or ``new_name`` is empty.
    """

    name = final_component(text, flavor)
    if not name:
        raise PathPreconditionError("with_name", text, "no name to change")
    if not new_name:
        raise PathPreconditionError("with_name", text, "new name must not be empty")
    return _directory_prefix(text, name) + new_name


def with_suffix(text: str, new_suffix: str, flavor: Flavor = HOST_FLAVOR) -> str:
    """Replace the last dot-extension of ``text``; an empty ``new_suffix`` removes it.

    Raises:
        PathPreconditionError: If ``text`` has no final component.
    """

    name = final_component(text, flavor)
    if not name:
        raise PathPreconditionError("with_suffix", text, "no name")
    stem, _ = split_suffix(name)
    return _directory_prefix(text, name) + stem + new_suffix


def _ancestor_segments(other: str, flavor: Flavor) -> list[str]:
    """Segments of ``other`` in the same shape as :func:`parent_segments`."""

    anchor, body = split_anchor(other, flavor)
    return ([anchor] if anchor else []) + split_segments(body, flavor)


def relative_to(text: str, other: str, flavor: Flavor = HOST_FLAVOR) -> str:
    """Express ``text`` relative to the ancestor ``other``.

    ``other`` matches the first contiguous run of ancestor segments equal to
    its own segments: ``"nim"``, ``"adam/nim"`` and ``"/home/adam"`` are all
    ancestors of ``/home/adam/nim/code.nim``. The segments after the match and
    the final component are joined with the flavor separator.

    Raises:
        PathPreconditionError: If ``other`` is not an ancestor of ``text``.
    """

    ancestors = parent_segments(text, flavor)
    wanted = _ancestor_segments(other, flavor)
    width = len(wanted)
    if width:
        for index in range(len(ancestors) - width + 1):
            if ancestors[index : index + width] == wanted:
                remaining = ancestors[index + width :] + [final_component(text, flavor)]
                return flavor.sep.join(remaining) or "."
    raise PathPreconditionError("relative_to", text, f"{other!r} is not an ancestor")


def as_posix(text: str, flavor: Flavor = HOST_FLAVOR) -> str:
    """Return ``text`` with forward slashes; unchanged under the POSIX flavor."""

    if flavor.is_posix:
        return text
    return text.replace("\\", "/")


def as_uri(text: str, flavor: Flavor = HOST_FLAVOR) -> str:
    """Prefix ``file://`` to an absolute ``text``.

    Raises:
        PathPreconditionError: If ``text`` is not absolute.
    """

    if not is_absolute(text, flavor):
        raise PathPreconditionError("as_uri", text, "path must be absolute")
    return URI_SCHEME_PREFIX + text


def is_reserved(text: str) -> bool:
    """Windows reserved names (``CON``, ``NUL``...) are not checked; always ``False``."""

    del text
    return False


__all__ = [
    "URI_SCHEME_PREFIX",
    "as_posix",
    "as_uri",
    "is_reserved",
    "join",
    "joinpath",
    "native_join",
    "relative_to",
    "with_name",
    "with_suffix",
]
