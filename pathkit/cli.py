#!/usr/bin/env python3
"""
pathkit command-line tool

Runs the path operations on strings given on the command line:

    pathkit normalize a/b/c/../../b2
    pathkit relative /var/wwwroot/js/script.js /var/wwwroot/
    pathkit is-in assets/js/script.js assets/ --cwd /wwwroot/

Exit status is 0 on success, 1 when ``is-in`` answers no and 2 when an
argument is rejected.

Author: YSNRFD
Version: 1.0.0
"""

import argparse
import sys
from typing import List, Optional

from pathkit import __version__
from pathkit.core.config_loader import ConfigLoader
from pathkit.core.schemes import SchemeRegistry
from pathkit.exceptions import ConfigValidationError, InvalidArgumentError
from pathkit.logger import Logger, LogLevel, get_logger
from pathkit.path import Path

EXIT_OK = 0
EXIT_FALSE = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathkit",
        description="Slash-delimited path arithmetic without filesystem access"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON configuration file"
    )
    parser.add_argument(
        "--scheme",
        action="append",
        default=[],
        metavar="NAME",
        help="Register an additional scheme name (repeatable)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    normalize = commands.add_parser("normalize", help="Collapse . and .. segments")
    normalize.add_argument("path")

    resolve = commands.add_parser("resolve", help="Join ADDITION onto BASE")
    resolve.add_argument("base")
    resolve.add_argument("addition")

    absolute = commands.add_parser("abs", help="Make PATH absolute against CWD")
    absolute.add_argument("path")
    absolute.add_argument("cwd")

    relative = commands.add_parser("relative", help="Path of PATH relative to DIRECTORY")
    relative.add_argument("path")
    relative.add_argument("directory")
    relative.add_argument("--cwd", default=None)

    is_in = commands.add_parser("is-in", help="Test whether PATH lies within DIRECTORY")
    is_in.add_argument("path")
    is_in.add_argument("directory")
    is_in.add_argument("--cwd", default=None)

    info = commands.add_parser("info", help="Show the components of PATH")
    info.add_argument("path")

    return parser


def _setup(args: argparse.Namespace) -> SchemeRegistry:
    """Load configuration, start logging and build the scheme registry."""
    loader = ConfigLoader()
    if args.config:
        loader.load(args.config)
    config = loader.config

    level_name = args.log_level or config.logging.level
    Logger.initialize(
        level=LogLevel.from_name(level_name),
        log_file=config.logging.log_file,
        use_colors=config.logging.use_colors,
        console_output=config.logging.console_output,
        buffer_size=config.logging.buffer_size,
    )

    return SchemeRegistry(list(config.schemes.known_schemes) + list(args.scheme))


def _info_lines(path: Path) -> List[str]:
    return [
        f"path: {path.get()}",
        f"segments: {list(path.segments)!r}",
        f"absolute: {str(path.is_absolute()).lower()}",
        f"empty: {str(path.is_empty()).lower()}",
        f"stream_wrapped: {str(path.is_stream_wrapped()).lower()}",
        f"normalized: {path.normalize().get()}",
        f"dirname: {path.dirname()}",
        f"filename: {path.filename()}",
        f"basename: {path.basename()}",
        f"extension: {path.extension()}",
    ]


def run(args: argparse.Namespace, schemes: SchemeRegistry) -> int:
    """Run the selected command, printing its result."""
    path = Path(args.path if args.command != "resolve" else args.base, schemes)

    if args.command == "normalize":
        print(path.normalize())
    elif args.command == "resolve":
        print(path.resolve(args.addition))
    elif args.command == "abs":
        print(path.abs(args.cwd))
    elif args.command == "relative":
        print(path.relative_to(args.directory, args.cwd))
    elif args.command == "is-in":
        inside = path.is_in(args.directory, args.cwd)
        print(str(inside).lower())
        return EXIT_OK if inside else EXIT_FALSE
    elif args.command == "info":
        print("\n".join(_info_lines(path)))

    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        schemes = _setup(args)
    except (ConfigValidationError, ValueError) as e:
        print(f"pathkit: {e}", file=sys.stderr)
        return EXIT_INVALID

    logger = get_logger('cli')
    logger.debug(f"Running {args.command}", context={'argv': argv or sys.argv[1:]})

    try:
        return run(args, schemes)
    except InvalidArgumentError as e:
        logger.debug(f"Command {args.command} failed", context=e.context)
        print(f"pathkit: {e.message}", file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
