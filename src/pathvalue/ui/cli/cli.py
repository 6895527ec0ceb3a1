"""Command line interface for pathvalue."""

import sys
from typing import Any, final

from pathvalue.features.path.domain.errors import PathPreconditionError
from pathvalue.platform.logging import logger
from pathvalue.ui.cli.args import ArgumentParser
from pathvalue.ui.cli.args.options import CLIArgs, DeriveArgs, InspectArgs
from pathvalue.ui.cli.commands import (
    CommandExecutor,
    DeriveCommand,
    InspectCommand,
    JoinCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            _ = CommandProcessor.build_command(args).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except PathPreconditionError as e:
            logger.error("%s", e)
            sys.exit(1)
        except OSError as e:
            logger.error("Filesystem error: %s", e)
            sys.exit(1)

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor[Any]:
        """Select the executor for the parsed arguments."""

        if isinstance(args, InspectArgs):
            return InspectCommand(args)
        if isinstance(args, DeriveArgs):
            return DeriveCommand(args)
        return JoinCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures call ``sys.exit(...)``
        from the processor, so this return is only reached on success.
    """
    CommandProcessor.process_command()
    return 0
