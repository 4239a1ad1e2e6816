"""Command line interface for nsorder."""

from typing import final

from nsorder.config.config import ConfigError
from nsorder.platform.logging import logger
from nsorder.ui.cli.args import ArgumentParser
from nsorder.ui.cli.args.options import CheckArgs, ClassifyArgs, CLIArgs, SortArgs
from nsorder.ui.cli.commands import CheckCommand, ClassifyCommand, SortCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, CheckArgs):
                return CheckCommand(args).execute()
            if isinstance(args, ClassifyArgs):
                return ClassifyCommand(args).execute()

            assert isinstance(args, SortArgs)
            return SortCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return 130
        except (ConfigError, OSError, UnicodeDecodeError) as e:
            logger.error("%s", e)
            return 1


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return CommandProcessor.process_command()
