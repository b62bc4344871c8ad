"""apiref command line entry point."""

from __future__ import annotations

import sys

from loguru import logger

from apiref.api.cli.parsers import create_main_parser
from apiref.core.config.logging_config import LoggingConfig


def setup_logging(verbose: bool = False, config: LoggingConfig | None = None) -> None:
    """Configure loguru sinks for the CLI.

    Args:
        verbose: Show DEBUG output on the console
        config: Logging settings built from the CLI, or None for console only
    """
    logger.remove()

    config = config or LoggingConfig()
    file_config = config.file

    if verbose:
        console_level = "DEBUG"
    elif file_config.enabled:
        # File gets the detail; keep the console to problems only
        console_level = "WARNING"
    else:
        console_level = config.console_level

    logger.add(
        sys.stderr,
        level=console_level,
        format="<level>{level: <8}</level> | {message}",
    )

    if file_config.enabled:
        logger.add(
            file_config.path,
            level=file_config.level,
            rotation=file_config.rotation,
            retention=file_config.retention,
            format=file_config.format,
        )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, configure logging and run the selected command."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    setup_logging(verbose=args.verbose, config=LoggingConfig.from_args(args))

    if args.command == "render":
        from apiref.api.cli.commands.render import render_command

        sys.exit(render_command(args))

    parser.error(f"Unknown command: {args.command}")
