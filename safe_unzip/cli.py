"""
Command Line Interface for safe-unzip.

Extracts one archive per invocation and prints the extracted entry names.
"""

import argparse
import sys
from typing import List, Optional

from .cli_helpers import exit_with_error, map_exception_to_exit_code
from .config import ExtractSettings
from .constants import ExitCodes
from .extractor import Extractor
from .logging_config import configure_logging, get_logger


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='safe-unzip',
        description='Extract a ZIP archive, rejecting unsafe entry paths'
    )
    parser.add_argument('archive', help='Path of the .zip file')
    parser.add_argument('target', help='Directory to extract into')
    parser.add_argument('--continue-on-error', action='store_true',
                        help='Skip entries with invalid paths instead of aborting')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (default: $SAFE_UNZIP_LOG_LEVEL or WARNING)')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Do not print extracted entry names')
    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    parsed_args = parser.parse_args(args)
    settings = ExtractSettings.from_env().merged(
        continue_on_error=parsed_args.continue_on_error,
        log_level=parsed_args.log_level,
    )
    configure_logging(settings.log_level)
    logger = get_logger(__name__)
    logger.debug("Settings: %s", settings)

    try:
        filenames = Extractor().extract(
            parsed_args.archive,
            parsed_args.target,
            continue_on_error=settings.continue_on_error,
        )
    except Exception as exc:
        exit_code = map_exception_to_exit_code(exc)
        if exit_code is None:
            logger.debug("Unexpected failure", exc_info=True)
            exit_with_error(f"Extraction failed: {exc}", ExitCodes.UNEXPECTED_ERROR)
        else:
            exit_with_error(str(exc), exit_code)
        return

    if not parsed_args.quiet:
        for filename in filenames:
            print(filename)
    sys.exit(ExitCodes.OK)


if __name__ == '__main__':
    main()
