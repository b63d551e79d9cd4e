"""
Entry point for the word reader.

Reads the remaining command-line arguments as configuration words, following
include directives, and prints one word per line.

Usage:
    python -m wordreader @app.pro -verbose
    python -m wordreader --locations @app.pro
    python -m wordreader --help
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .logging import get_logger, setup_logging_from_args
from .words import ParseError, WordLoader


logger = get_logger("main")


def dump_words(arguments: list[str], locations: bool = False) -> int:
    """Print the words of the given arguments and their includes."""
    loader = WordLoader()

    try:
        with loader.open_args(arguments, base_dir=Path.cwd()) as reader:
            for word in reader:
                if locations:
                    print(f"{reader.line_location_description()}: {word}")
                else:
                    print(word)
    except ParseError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except OSError as e:
        logger.error(f"Can't read configuration: {e}")
        return 1

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="wordreader",
        description="Print the words of a configuration, following includes",
    )

    parser.add_argument(
        "--locations",
        action="store_true",
        help="Prefix each word with the location it was read from",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "words",
        nargs=argparse.REMAINDER,
        help="Configuration words, e.g. '@app.pro'",
    )

    args = parser.parse_args(argv)

    setup_logging_from_args(
        verbose=args.verbose,
        debug=args.debug,
        quiet=args.quiet,
        log_file=args.log_file,
        colors=not args.no_color,
    )

    return dump_words(args.words, locations=args.locations)


if __name__ == "__main__":
    sys.exit(main())
