"""
Summary: Pure path parsing, derivation rules, flavors and precondition errors.
Why: Group side-effect-free logic so it can be reasoned about without a filesystem.
"""

from .errors import PathPreconditionError
from .flavor import HOST_FLAVOR, POSIX, WINDOWS, Flavor, UnknownFlavorError, flavor_from_name
from .parser import decompose

__all__ = [
    "Flavor",
    "HOST_FLAVOR",
    "POSIX",
    "PathPreconditionError",
    "UnknownFlavorError",
    "WINDOWS",
    "decompose",
    "flavor_from_name",
]
