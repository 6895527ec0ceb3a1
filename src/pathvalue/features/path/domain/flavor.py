"""
Summary: Separator rules for POSIX and Windows paths carried as data.
Why: Let the parser and algebra honour either convention without branching on the host.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Flavor:
    """Separator conventions for one family of operating systems."""

    name: str
    sep: str
    altsep: str | None = None

    @property
    def separators(self) -> str:
        """All characters that split components under this flavor."""

        return self.sep + (self.altsep or "")

    @property
    def is_posix(self) -> bool:
        return self.name == "posix"


POSIX: Final[Flavor] = Flavor(name="posix", sep="/")
WINDOWS: Final[Flavor] = Flavor(name="windows", sep="\\", altsep="/")
HOST_FLAVOR: Final[Flavor] = WINDOWS if os.name == "nt" else POSIX

_FLAVORS_BY_NAME: Final[dict[str, Flavor]] = {
    "posix": POSIX,
    "windows": WINDOWS,
    "host": HOST_FLAVOR,
}


class UnknownFlavorError(ValueError):
    """Raised when a flavor name does not match a known convention."""

    def __init__(self, flavor_name: str) -> None:
        super().__init__(f"Unknown path flavor: {flavor_name}")
        self.flavor_name: str = flavor_name


def flavor_from_name(flavor_name: str) -> Flavor:
    """Return the flavor registered under ``flavor_name`` (case-insensitive).

    Raises:
        UnknownFlavorError: If the name is not ``posix``, ``windows`` or ``host``.
    """

    flavor = _FLAVORS_BY_NAME.get(flavor_name.strip().lower())
    if flavor is None:
        raise UnknownFlavorError(flavor_name)
    return flavor


__all__ = [
    "Flavor",
    "HOST_FLAVOR",
    "POSIX",
    "UnknownFlavorError",
    "WINDOWS",
    "flavor_from_name",
]
