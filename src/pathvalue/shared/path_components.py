"""Shared path component value objects (domain <-> UI).

This module centralizes the PathComponents snapshot so the parser and the
CLI display rely on a single definition of what a decomposed path exposes.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathComponents:
    """Every derived view of a single raw path string."""

    text: str
    drive: str
    root: str
    anchor: str
    parts: tuple[str, ...]
    parents: tuple[str, ...]
    parent: str
    name: str
    stem: str
    suffix: str
    suffixes: tuple[str, ...]
    is_absolute: bool

    def as_rows(self) -> list[tuple[str, str]]:
        """Return ``(label, rendered value)`` pairs in display order."""

        return [
            ("text", self.text),
            ("drive", self.drive),
            ("root", self.root),
            ("anchor", self.anchor),
            ("parts", ", ".join(self.parts)),
            ("parents", ", ".join(self.parents)),
            ("parent", self.parent),
            ("name", self.name),
            ("stem", self.stem),
            ("suffix", self.suffix),
            ("suffixes", ", ".join(self.suffixes)),
            ("absolute", "yes" if self.is_absolute else "no"),
        ]
