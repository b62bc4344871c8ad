"""Top-level argument parser for the apiref CLI."""

import argparse
from typing import Any

from apiref import __version__

from .render_parser import add_render_subparser


def create_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="apiref",
        description="Render extracted API symbol records into a static reference site.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"apiref {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    setup_subparsers(subparsers)
    return parser


def setup_subparsers(subparsers: Any) -> None:
    """Register every subcommand parser."""
    add_render_subparser(subparsers)
