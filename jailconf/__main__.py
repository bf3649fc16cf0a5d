"""
Entry point for jailconf.

Usage:
    python -m jailconf /etc/jail.conf
    cat /etc/jail.conf | python -m jailconf
    python -m jailconf --help
"""

import argparse
import sys

from . import __version__
from .const import APP_NAME, MAX_NESTING_DEPTH
from .formatter import format_document
from .loader import ConfigError, ConfigLoader
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Parse a FreeBSD jail.conf file and print its structure",
    )

    parser.add_argument(
        "config",
        nargs="?",
        default="-",
        help="Path to jail.conf (default: read standard input)",
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
        "--max-depth",
        type=int,
        default=MAX_NESTING_DEPTH,
        metavar="N",
        help=f"Maximum block nesting depth (default: {MAX_NESTING_DEPTH})",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"
    else:
        log_config.console_level = "warning"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.file_path = args.log_file

    setup_logging(log_config)

    if args.max_depth < 0:
        print(f"Invalid --max-depth: {args.max_depth}", file=sys.stderr)
        return 1

    loader = ConfigLoader(max_depth=args.max_depth)

    try:
        if args.config == "-":
            document = loader.load_stream(sys.stdin)
        else:
            document = loader.load_file(args.config)
    except ConfigError as e:
        logger.debug(f"Parse failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Loaded {len(document)} top-level entries")

    output = format_document(document)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
