"""Command line interface for filepeek."""

import sys
from typing import final

from filepeek.platform.logging import logger
from filepeek.ui.cli.args import ArgumentParser
from filepeek.ui.cli.commands import BrowseCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and run a browsing session.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            result = BrowseCommand(args).execute()
            logger.debug(
                "Session over (config %s): %s, %d action(s)",
                args.config_path,
                "menu shown" if result.entered_loop else "no files to offer",
                result.actions,
            )
        except (KeyboardInterrupt, EOFError):
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
