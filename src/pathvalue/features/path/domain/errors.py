"""
Summary: Exception raised when a path operation's precondition does not hold.
Why: Give callers one catchable type while filesystem errors pass through untouched.
"""

from __future__ import annotations


class PathPreconditionError(ValueError):
    """Raised when a path operation is called on an input it cannot handle."""

    def __init__(self, operation: str, path: str, reason: str) -> None:
        super().__init__(f"{operation}(): {reason} [path={path!r}]")
        self.operation: str = operation
        self.path: str = path
        self.reason: str = reason


__all__ = ["PathPreconditionError"]
