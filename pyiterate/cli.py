"""Command-line interface for PyIterate.
Provides three commands:
1. Environment probe: pyiterate env
2. Resolve and drain a Python literal: pyiterate iterate "'a\\ud83dX'"
3. Write a default configuration file: pyiterate init
"""
from __future__ import annotations
import argparse
import ast
import sys
from pathlib import Path
from pyiterate.api import inspect_iteration
from pyiterate.config import init_config, load_config
from pyiterate.environment import detect_environment
from pyiterate.logging import LogLevel, configure_logging
from pyiterate.reporting.formatters import get_formatter
from pyiterate.resolver import VARIANTS, Resolver
EXIT_OK = 0
EXIT_NOT_ITERABLE = 1
EXIT_USAGE = 2
VERBOSITY_LEVELS = (LogLevel.NORMAL, LogLevel.VERBOSE, LogLevel.TRACE)
def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="pyiterate",
        description="PyIterate - resolve iterators for arbitrary Python values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show what the running interpreter supports
  pyiterate env
  # Iterate a string with a surrogate pair
  pyiterate iterate "'a\\ud83d\\udca9z'"
  # Iterate a mapping, as JSON
  pyiterate iterate "{1: 'a', 2: 'b'}" --format json
  # Trace how the value is resolved
  pyiterate -vv iterate "[1, 2]"
        """,
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a pyiterate.toml (default: search upwards from cwd)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log configuration details (-vv also traces each resolution)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    env_parser = subparsers.add_parser(
        "env",
        help="Show environment capability probes",
    )
    env_parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default=None,
        help="Output format (default: text)",
    )
    iterate_parser = subparsers.add_parser(
        "iterate",
        help="Resolve an iterator for a Python literal and drain it",
    )
    iterate_parser.add_argument(
        "expression",
        type=str,
        help="Python literal, evaluated with ast.literal_eval",
    )
    iterate_parser.add_argument(
        "--variant",
        type=str,
        choices=list(VARIANTS),
        default=None,
        help="Resolver variant (default: from config, else standard)",
    )
    iterate_parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default=None,
        help="Output format (default: text)",
    )
    iterate_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Stop after this many elements",
    )
    init_parser = subparsers.add_parser(
        "init",
        help="Write a default pyiterate.toml",
    )
    init_parser.add_argument(
        "directory",
        type=str,
        nargs="?",
        default=None,
        help="Target directory (default: current directory)",
    )
    return parser
def cmd_env(args: argparse.Namespace, output_format: str) -> int:
    formatter = get_formatter(output_format)
    print(formatter.format_environment(detect_environment()))
    return EXIT_OK
def cmd_iterate(args: argparse.Namespace, config, output_format: str, logger) -> int:
    try:
        value = ast.literal_eval(args.expression)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as e:
        logger.error(f"Not a Python literal: {args.expression!r} ({type(e).__name__})")
        return EXIT_USAGE
    if args.variant:
        config.resolver.variant = args.variant
    try:
        resolver = Resolver.from_config(config)
    except ValueError as e:
        logger.error(str(e))
        return EXIT_USAGE
    limit = args.limit if args.limit is not None else config.output.limit
    report = inspect_iteration(value, limit=limit, resolver=resolver)
    print(get_formatter(output_format).format(report))
    return EXIT_OK if report.iterable else EXIT_NOT_ITERABLE
def cmd_init(args: argparse.Namespace, logger) -> int:
    directory = Path(args.directory) if args.directory else None
    try:
        path = init_config(directory)
    except FileExistsError as e:
        logger.error(str(e))
        return EXIT_USAGE
    print(f"Created {path}")
    return EXIT_OK
def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return EXIT_USAGE
    logger = configure_logging(
        level=VERBOSITY_LEVELS[min(args.verbose, len(VERBOSITY_LEVELS) - 1)],
        color=not args.no_color,
    )
    config = load_config(Path(args.config) if args.config else None)
    if config.output.verbose and not args.verbose:
        logger.set_level(LogLevel.VERBOSE)
    if config.config_file is not None:
        logger.verbose(f"using configuration {config.config_file}", category="config")
    output_format = getattr(args, "format", None) or config.output.format
    if args.command == "env":
        return cmd_env(args, output_format)
    if args.command == "iterate":
        return cmd_iterate(args, config, output_format, logger)
    if args.command == "init":
        return cmd_init(args, logger)
    parser.print_help()
    return EXIT_USAGE
if __name__ == "__main__":
    sys.exit(main())
