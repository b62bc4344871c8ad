"""Argument parser utilities for apiref CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .render_parser import add_render_subparser

__all__ = [
    "add_render_subparser",
    "create_main_parser",
    "setup_subparsers",
]
