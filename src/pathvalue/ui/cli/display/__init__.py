"""Console display helpers for the CLI."""

from pathvalue.ui.cli.display.components import ComponentsDisplay

__all__ = ["ComponentsDisplay"]
