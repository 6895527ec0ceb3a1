"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from pathvalue.features.path.domain.flavor import Flavor

DeriveOperation = Literal[
    "parent",
    "with_name",
    "with_suffix",
    "relative_to",
    "as_posix",
    "as_uri",
]


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for the ``inspect`` subcommand."""

    command: Literal["inspect"]
    path: str
    flavor: Flavor
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class JoinArgs:
    """Command line arguments for the ``join`` subcommand."""

    command: Literal["join"]
    base: str
    parts: list[str]
    native: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class DeriveArgs:
    """Command line arguments for the ``derive`` subcommand."""

    command: Literal["derive"]
    path: str
    operation: DeriveOperation
    argument: str | None
    verbose: bool
    quiet: bool


CLIArgs = InspectArgs | JoinArgs | DeriveArgs
