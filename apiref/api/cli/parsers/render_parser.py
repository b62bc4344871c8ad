"""Render command argument parser."""

import argparse
from pathlib import Path
from typing import Any, cast

from apiref.core.config.site_config import SiteConfig

from .common_arguments import add_common_arguments


def add_render_subparser(subparsers: Any) -> argparse.ArgumentParser:
    """Add the render subparser to the main parser."""
    render_parser = subparsers.add_parser(
        "render",
        help="Render symbol records into reference pages",
        description=(
            "Read extracted symbol records (deno doc --json style) and write one "
            "reference page per symbol, plus a package index and nav.json."
        ),
    )

    render_parser.add_argument(
        "records",
        metavar="records",
        type=Path,
        help="JSON file holding the extracted symbol records.",
    )

    render_parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first invalid symbol record instead of skipping it.",
    )

    SiteConfig.add_cli_arguments(render_parser)
    add_common_arguments(render_parser)

    return cast(argparse.ArgumentParser, render_parser)


__all__: list[str] = ["add_render_subparser"]
