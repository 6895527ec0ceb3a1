"""Command line argument parsing package."""

from pathvalue.ui.cli.args.options import CLIArgs, DeriveArgs, InspectArgs, JoinArgs
from pathvalue.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "DeriveArgs", "InspectArgs", "JoinArgs"]
