"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from pathvalue.config.config import Config
from pathvalue.features.path.domain.flavor import Flavor, UnknownFlavorError, flavor_from_name
from pathvalue.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from pathvalue.ui.cli.args.options import (
    CLIArgs,
    DeriveArgs,
    DeriveOperation,
    InspectArgs,
    JoinArgs,
)

# Argparse dests match the operation names.
_DERIVE_OPERATIONS: tuple[DeriveOperation, ...] = (
    "parent",
    "with_name",
    "with_suffix",
    "relative_to",
    "as_posix",
    "as_uri",
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="pathvalue",
            description="pathvalue - Inspect and derive filesystem path strings.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="Show drive, root, parts, name and suffixes of a path",
        )
        _ = inspect_parser.add_argument("path", type=str, help="Path to decompose", metavar="PATH")
        _ = inspect_parser.add_argument(
            "--flavor",
            type=str,
            choices=("host", "posix", "windows"),
            help="Separator convention (defaults to the configured flavor)",
        )
        ArgumentParser._add_verbosity_flags(inspect_parser)

        join_parser = subparsers.add_parser(
            "join",
            help="Join path segments onto a base path",
        )
        _ = join_parser.add_argument("base", type=str, help="Base path", metavar="BASE")
        _ = join_parser.add_argument(
            "parts",
            type=str,
            nargs="+",
            help="Segments appended in order",
            metavar="PART",
        )
        _ = join_parser.add_argument(
            "--native",
            action="store_true",
            help="Collapse redundant separators at each seam",
        )
        ArgumentParser._add_verbosity_flags(join_parser)

        derive_parser = subparsers.add_parser(
            "derive",
            help="Derive a new path from an existing one",
        )
        _ = derive_parser.add_argument("path", type=str, help="Source path", metavar="PATH")
        operation_group = derive_parser.add_mutually_exclusive_group(required=True)
        _ = operation_group.add_argument(
            "--parent",
            action="store_true",
            help="Print the immediate parent directory",
        )
        _ = operation_group.add_argument(
            "--with-name",
            type=str,
            metavar="NAME",
            help="Replace the final component",
        )
        _ = operation_group.add_argument(
            "--with-suffix",
            type=str,
            metavar="SUFFIX",
            help="Replace the last extension (empty string removes it)",
        )
        _ = operation_group.add_argument(
            "--relative-to",
            type=str,
            metavar="OTHER",
            help="Express the path relative to an ancestor",
        )
        _ = operation_group.add_argument(
            "--as-posix",
            action="store_true",
            help="Print the path with forward slashes",
        )
        _ = operation_group.add_argument(
            "--as-uri",
            action="store_true",
            help="Print the path as a file:// URI",
        )
        ArgumentParser._add_verbosity_flags(derive_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the configured flavor is unknown.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        configuration = Config.load()

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = configuration.console_level_value()

        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "inspect":
            return ArgumentParser._process_inspect(parsed_args, configuration)

        if command == "join":
            return JoinArgs(
                command="join",
                base=parsed_args.base,
                parts=list(parsed_args.parts),
                native=parsed_args.native,
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "derive":
            return ArgumentParser._process_derive(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_inspect(parsed_args: argparse.Namespace, configuration: Config) -> InspectArgs:
        try:
            flavor: Flavor = (
                flavor_from_name(parsed_args.flavor)
                if parsed_args.flavor
                else configuration.flavor_object()
            )
        except UnknownFlavorError as exc:
            logger.error("%s", exc)
            sys.exit(1)

        return InspectArgs(
            command="inspect",
            path=parsed_args.path,
            flavor=flavor,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_derive(parsed_args: argparse.Namespace) -> DeriveArgs:
        operation: DeriveOperation = "parent"
        argument: str | None = None
        for candidate in _DERIVE_OPERATIONS:
            value = getattr(parsed_args, candidate)
            if value is None or value is False:
                continue
            operation = candidate
            argument = value if isinstance(value, str) else None
            break

        return DeriveArgs(
            command="derive",
            path=parsed_args.path,
            operation=operation,
            argument=argument,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
