"""Derive command implementation."""

from typing import final

from typing_extensions import override

from pathvalue.features.path.path_value import Path
from pathvalue.platform.logging import logger
from pathvalue.ui.cli.args.options import DeriveArgs
from pathvalue.ui.cli.commands.executor import CommandExecutor


@final
class DeriveCommand(CommandExecutor[DeriveArgs]):
    """Apply one derivation to a path and print the result.

    Precondition failures (for example ``--as-uri`` on a relative path)
    propagate as :class:`PathPreconditionError` to the command processor.
    """

    @override
    def execute(self) -> str:
        path = Path(self.args.path)
        argument = self.args.argument or ""
        operation = self.args.operation
        logger.debug("Deriving %s from %r", operation, self.args.path)

        if operation == "parent":
            result = str(path.parent)
        elif operation == "with_name":
            result = str(path.with_name(argument))
        elif operation == "with_suffix":
            result = str(path.with_suffix(argument))
        elif operation == "relative_to":
            result = str(path.relative_to(argument))
        elif operation == "as_posix":
            result = path.as_posix()
        else:
            result = path.as_uri()

        self.display.show_value(result)
        return result
