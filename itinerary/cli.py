"""Command-line interface.

    python -m itinerary input.txt output.txt airport-lookup.csv
    python -m itinerary -o [input.txt [airport-lookup.csv]]

The first form writes the plain-text result to a file. The second prints
the styled result to standard output, using the configured default
paths for any file not given.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import AppConfig, ObservabilityConfig, get_config
from .domain.errors import (
    InputNotFoundError,
    OutputWriteError,
    ReferenceTableError,
)
from .pipeline import prettify_file

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2

DESCRIPTION = '''
    Turn an itinerary with airport codes and ISO date/time placeholders
    into a customer-friendly document.
'''
USAGE = "%(prog)s [-s SETTINGS] input.txt output.txt airport-lookup.csv | -o [input.txt [airport-lookup.csv]]"
STDOUT_MODE_HELP = '''
    print the styled result to standard output instead of writing a file
'''
SETTINGS_HELP = '''
    style settings file (default: configured settings file)
'''
PATHS_HELP = '''
    input document, output document and airport lookup CSV
'''

logger = logging.getLogger(__name__)


def configure_logging(config: ObservabilityConfig) -> None:
    """Install the root handler once; does nothing if one already exists."""
    options = {"filename": config.file, "filemode": "a"} if config.file else {}
    logging.basicConfig(level=config.level.upper(), format=config.format, **options)


def build_argument_parser() -> argparse.ArgumentParser:
    argument_parser = argparse.ArgumentParser(
        prog="itinerary", description=DESCRIPTION, usage=USAGE
    )
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-o', '--stdout',
        dest='stdout_mode_enabled',
        action='store_true',
        help=STDOUT_MODE_HELP,
    )
    argument_parser.add_argument(
        '-s', '--settings',
        dest='settings_path',
        default=None,
        help=SETTINGS_HELP,
    )
    argument_parser.add_argument(
        'paths',
        default=[],
        help=PATHS_HELP,
        metavar='path',
        nargs='*',
    )
    return argument_parser


def main(argv: Optional[Sequence[str]] = None, config: Optional[AppConfig] = None) -> int:
    argument_parser = build_argument_parser()
    parsed_arguments = argument_parser.parse_args(argv)
    paths = parsed_arguments.paths
    stdout_mode_enabled = parsed_arguments.stdout_mode_enabled

    if stdout_mode_enabled and len(paths) > 2:
        argument_parser.error('option -o (or --stdout) takes at most input and lookup paths')
    if not stdout_mode_enabled and len(paths) != 3:
        argument_parser.print_usage(sys.stderr)
        return COMMAND_LINE_ERROR_EXIT_CODE

    config = config or get_config()
    configure_logging(config.observability)

    if stdout_mode_enabled:
        input_path = paths[0] if len(paths) > 0 else config.data.input_path
        lookup_path = paths[1] if len(paths) > 1 else config.data.lookup_path
        output_path = None
    else:
        input_path, output_path, lookup_path = paths

    try:
        result = prettify_file(
            input_path,
            output_path,
            lookup_path=lookup_path,
            settings_path=parsed_arguments.settings_path,
            styled=stdout_mode_enabled or config.output.styled,
            config=config,
        )
    except InputNotFoundError as error:
        logger.error(str(error), extra={"path": error.file_path})
        print(error.message, file=sys.stderr)
        return GENERIC_ERROR_EXIT_CODE
    except ReferenceTableError as error:
        logger.error(str(error), extra={"path": error.file_path})
        print(f'Airport lookup malformed: {error}', file=sys.stderr)
        return GENERIC_ERROR_EXIT_CODE
    except OutputWriteError as error:
        logger.error(str(error), extra={"path": error.file_path})
        print(f'Error writing to output file: `{error.file_path}`', file=sys.stderr)
        return GENERIC_ERROR_EXIT_CODE

    if output_path is None:
        print(result.text)
    else:
        print('Processing complete.')
    return 0


if __name__ == '__main__':
    sys.exit(main())
