"""Join command implementation."""

from functools import reduce
from typing import final

from typing_extensions import override

from pathvalue.features.path.path_value import Path, joinpath
from pathvalue.ui.cli.args.options import JoinArgs
from pathvalue.ui.cli.commands.executor import CommandExecutor


@final
class JoinCommand(CommandExecutor[JoinArgs]):
    """Join segments onto a base path and print the result."""

    @override
    def execute(self) -> str:
        if self.args.native:
            result = joinpath(self.args.base, *self.args.parts)
        else:
            result = reduce(lambda path, part: path / part, self.args.parts, Path(self.args.base))
        self.display.show_value(str(result))
        return str(result)
