"""src/pathvalue/ui/cli/display/components.py
What: Render decomposed paths and derived values for the CLI.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from pathvalue.shared.path_components import PathComponents


@final
class ComponentsDisplay:
    """Handles path decomposition display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_components(self, components: PathComponents, *, flavor_name: str) -> None:
        """Print every derived view of a path as a table.

        Args:
            components: Snapshot produced by the parser.
            flavor_name: Separator convention used for the decomposition.
        """
        self.console.print(self.build_table(components, flavor_name=flavor_name))

    @staticmethod
    def build_table(components: PathComponents, *, flavor_name: str) -> Table:
        table = Table(
            title=f"Path Components ({flavor_name})",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("View", style="bold")
        table.add_column("Value")

        for label, value in components.as_rows():
            cell = Text(value) if value else Text("(empty)", style="dim")
            table.add_row(label, cell)

        return table

    def show_value(self, value: str) -> None:
        """Print a single derived value without markup interpretation."""

        self.console.print(Text(value))
