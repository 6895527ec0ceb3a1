"""src/pathvalue/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from rich.console import Console

from pathvalue.ui.cli.args.options import CLIArgs
from pathvalue.ui.cli.display.components import ComponentsDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    display: ComponentsDisplay

    def __init__(self, args: ArgsT, *, console: Console | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            console: Console to print to; standard output by default.
        """
        self.args = args
        self.display = ComponentsDisplay(console)

    @abstractmethod
    def execute(self) -> str:
        """Execute the command.

        Returns:
            The primary value the command printed.
        """
        pass
