"""Inspect command implementation."""

from typing import final

from typing_extensions import override

from pathvalue.features.path.domain.parser import decompose
from pathvalue.platform.logging import logger
from pathvalue.ui.cli.args.options import InspectArgs
from pathvalue.ui.cli.commands.executor import CommandExecutor


@final
class InspectCommand(CommandExecutor[InspectArgs]):
    """Print every derived view of a single path."""

    @override
    def execute(self) -> str:
        flavor = self.args.flavor
        logger.debug("Decomposing %r with the %s flavor", self.args.path, flavor.name)
        components = decompose(self.args.path, flavor)
        self.display.show_components(components, flavor_name=flavor.name)
        return components.text
