"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from nsorder.config.config import Config
from nsorder.platform.logging import logger, setup_logger
from nsorder.ui.cli.args.options import CheckArgs, ClassifyArgs, CLIArgs, SortArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        common = argparse.ArgumentParser(add_help=False)
        _ = common.add_argument(
            "--config",
            type=str,
            metavar="CONFIG_FILE",
            help="Configuration file to read instead of the default location",
        )
        verbosity = common.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        parser = argparse.ArgumentParser(
            description="nsorder - group and sort import directives by a custom order.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        check_parser = subparsers.add_parser(
            "check",
            parents=[common],
            help="Validate a custom order and show its pattern table",
        )
        _ = check_parser.add_argument(
            "order",
            nargs="?",
            type=str,
            metavar="ORDER",
            help="Custom order text; defaults to the configured value",
        )

        classify_parser = subparsers.add_parser(
            "classify",
            parents=[common],
            help="Show which group each dotted path falls into",
        )
        _ = classify_parser.add_argument(
            "paths",
            nargs="+",
            metavar="PATH",
            help="Dotted namespace paths such as System.Collections.Generic",
        )
        ArgumentParser._add_order_option(classify_parser)

        sort_parser = subparsers.add_parser(
            "sort",
            parents=[common],
            help="Group and sort dotted paths read one per line",
        )
        _ = sort_parser.add_argument(
            "input",
            nargs="?",
            default="-",
            metavar="FILE",
            help="File with one dotted path per line ('-' for stdin)",
        )
        ArgumentParser._add_order_option(sort_parser)
        system_first = sort_parser.add_mutually_exclusive_group()
        _ = system_first.add_argument(
            "--system-first",
            dest="system_first",
            action="store_true",
            default=None,
            help="Place System, Microsoft, Windows and Xamarin roots first",
        )
        _ = system_first.add_argument(
            "--no-system-first",
            dest="system_first",
            action="store_false",
            help="Sort privileged roots alphabetically with the rest",
        )

        return parser

    @staticmethod
    def _add_order_option(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--order",
            type=str,
            metavar="ORDER",
            help="Custom order text; defaults to the configured value",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments with configured
            defaults filled in.

        Raises:
            SystemExit: If argument parsing fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_path = Path(parsed_args.config).expanduser() if parsed_args.config else None
        configuration = Config.load(config_path)
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "check":
            return CheckArgs(
                command="check",
                order_text=parsed_args.order
                if parsed_args.order is not None
                else configuration.import_directives_custom_order,
            )

        order_text: str | None = (
            parsed_args.order
            if parsed_args.order is not None
            else configuration.import_directives_custom_order
        )

        if command == "classify":
            return ClassifyArgs(
                command="classify",
                paths=list(parsed_args.paths),
                order_text=order_text,
            )

        if command == "sort":
            input_path = None if parsed_args.input == "-" else Path(parsed_args.input)
            system_first: bool = (
                parsed_args.system_first
                if parsed_args.system_first is not None
                else configuration.place_system_directives_first
            )
            return SortArgs(
                command="sort",
                input_path=input_path,
                order_text=order_text,
                system_first=system_first,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
