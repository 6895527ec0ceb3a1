"""Command execution package for CLI."""

from pathvalue.ui.cli.commands.derive import DeriveCommand
from pathvalue.ui.cli.commands.executor import CommandExecutor
from pathvalue.ui.cli.commands.inspect import InspectCommand
from pathvalue.ui.cli.commands.join import JoinCommand

__all__ = [
    "CommandExecutor",
    "DeriveCommand",
    "InspectCommand",
    "JoinCommand",
]
