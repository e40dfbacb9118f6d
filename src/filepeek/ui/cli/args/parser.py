"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from filepeek import __version__
from filepeek.config.config import Config
from filepeek.config.paths import default_app_log_file, default_config_path
from filepeek.config.settings import ACTION_LOG_FILE_NAME, BrowserSettings
from filepeek.core.errors import ConfigError
from filepeek.platform.logging import console_level_for, logger, setup_logger
from filepeek.ui.cli.args.options import BrowseArgs


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
            prog="filepeek",
            description="filepeek - pick a file from a numbered menu and print it with line numbers.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--target-dir",
            type=str,
            help="Directory whose files are offered in the menu",
            metavar="DIR",
        )
        _ = parser.add_argument(
            "--exclude",
            action="append",
            metavar="NAME",
            help="File name to hide from the menu (repeatable; replaces the configured set)",
        )
        _ = parser.add_argument(
            "--log-dir",
            type=str,
            help=f"Directory receiving {ACTION_LOG_FILE_NAME} (defaults to <target-dir>/logs)",
            metavar="DIR",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Path to a TOML configuration file",
            metavar="FILE",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show diagnostic events while browsing",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all diagnostics except errors",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> BrowseArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            BrowseArgs: Processed command line arguments.

        Raises:
            SystemExit: If the configuration file is malformed.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        log_level = console_level_for(verbose=parsed_args.verbose, quiet=parsed_args.quiet)

        config_path = (
            Path(parsed_args.config).expanduser()
            if parsed_args.config
            else default_config_path()
        )
        try:
            configuration = Config.load(config_path)
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(1)

        log_file_path = configuration.app_log_file or default_app_log_file()
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        settings = BrowserSettings.resolve(
            config=configuration,
            target_dir=Path(parsed_args.target_dir) if parsed_args.target_dir else None,
            excluded_names=parsed_args.exclude,
            log_dir=Path(parsed_args.log_dir) if parsed_args.log_dir else None,
        )
        logger.debug(
            "Browsing %s (excluding %s); action log in %s",
            settings.target_dir,
            ", ".join(sorted(settings.excluded_names)) or "nothing",
            settings.action_log_dir,
        )

        return BrowseArgs(settings=settings, config_path=config_path)
