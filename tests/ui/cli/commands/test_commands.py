"""
Summary: CLI command executors print and return derived path values.
Why: Keep command wiring between parsed arguments, path values and the display stable.
"""

from __future__ import annotations

import os

import pytest
from pytest_mock import MockerFixture
from rich.console import Console
from rich.table import Table
from rich.text import Text

from pathvalue.features.path.domain.errors import PathPreconditionError
from pathvalue.features.path.domain.flavor import POSIX, WINDOWS
from pathvalue.ui.cli.args.options import DeriveArgs, DeriveOperation, InspectArgs, JoinArgs
from pathvalue.ui.cli.commands import DeriveCommand, InspectCommand, JoinCommand

posix_host = pytest.mark.skipif(os.name == "nt", reason="derivations use the POSIX host flavor")


def _derive(operation: DeriveOperation, argument: str | None = None, path: str = "/srv/data/a.txt") -> DeriveArgs:
    return DeriveArgs(
        command="derive",
        path=path,
        operation=operation,
        argument=argument,
        verbose=False,
        quiet=False,
    )


def test_inspect_prints_component_table(mocker: MockerFixture) -> None:
    console = mocker.create_autospec(Console, instance=True)
    args = InspectArgs(command="inspect", path="C:\\Users\\adam\\notes.txt", flavor=WINDOWS, verbose=False, quiet=False)

    result = InspectCommand(args, console=console).execute()

    assert result == "C:\\Users\\adam\\notes.txt"
    printed = console.print.call_args.args[0]
    assert isinstance(printed, Table)
    assert printed.title == "Path Components (windows)"


def test_inspect_table_marks_empty_views() -> None:
    from io import StringIO

    buffer = StringIO()
    console = Console(file=buffer, width=120)
    args = InspectArgs(command="inspect", path="notes", flavor=POSIX, verbose=False, quiet=False)

    _ = InspectCommand(args, console=console).execute()

    assert "(empty)" in buffer.getvalue()


@posix_host
@pytest.mark.parametrize(("native", "expected"), [(False, "/srv//data/logs"), (True, "/srv/data/logs")])
def test_join(mocker: MockerFixture, native: bool, expected: str) -> None:
    console = mocker.create_autospec(Console, instance=True)
    args = JoinArgs(command="join", base="/srv/", parts=["/data", "logs"], native=native, verbose=False, quiet=False)

    result = JoinCommand(args, console=console).execute()

    assert result == expected
    printed = console.print.call_args.args[0]
    assert isinstance(printed, Text)
    assert printed.plain == expected


@posix_host
@pytest.mark.parametrize(
    ("operation", "argument", "expected"),
    [
        ("parent", None, "/srv/data"),
        ("with_name", "b.md", "/srv/data/b.md"),
        ("with_suffix", "", "/srv/data/a"),
        ("with_suffix", None, "/srv/data/a"),
        ("relative_to", "data", "a.txt"),
        ("as_posix", None, "/srv/data/a.txt"),
        ("as_uri", None, "file:///srv/data/a.txt"),
    ],
)
def test_derive(mocker: MockerFixture, operation: DeriveOperation, argument: str | None, expected: str) -> None:
    console = mocker.create_autospec(Console, instance=True)

    result = DeriveCommand(_derive(operation, argument), console=console).execute()

    assert result == expected
    console.print.assert_called_once()


def test_derive_propagates_precondition_errors(mocker: MockerFixture) -> None:
    console = mocker.create_autospec(Console, instance=True)

    with pytest.raises(PathPreconditionError):
        _ = DeriveCommand(_derive("as_uri", path="relative.txt"), console=console).execute()

    console.print.assert_not_called()
