"""Rich-based output formatting utilities for apiref CLI commands."""

import os
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


class MessagePrefixes:
    """Constants for consistent message prefixes in fallback mode."""

    INFO = "[INFO]"
    SUCCESS = "[SUCCESS]"
    WARN = "[WARN]"
    ERROR = "[ERROR]"
    DEBUG = "[DEBUG]"


class RichOutputFormatter:
    """Terminal UI formatter using the Rich library."""

    def __init__(self, verbose: bool = False):
        """Initialize Rich output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose
        self._terminal_compatible = self._check_terminal_compatibility()
        self.console = Console() if self._terminal_compatible else None

    def _check_terminal_compatibility(self) -> bool:
        """Check if terminal supports Rich formatting."""
        if os.environ.get("APIREF_NO_RICH"):
            return False

        try:
            if not sys.stdout.isatty():
                return False
        except (AttributeError, ValueError):
            return False

        term = os.environ.get("TERM", "")
        return term not in ["dumb", "unknown"]

    def _safe_print(self, message: str, fallback_prefix: str = "", plain: str = "") -> None:
        """Print with Rich when available, otherwise fall back to plain text."""
        if self._terminal_compatible and self.console is not None:
            self.console.print(message)
            return

        text = plain or message
        if fallback_prefix:
            print(f"{fallback_prefix} {text}")
        else:
            print(text)

    def info(self, message: str) -> None:
        """Print an info message."""
        self._safe_print(f"[blue][INFO][/blue] {escape(message)}", MessagePrefixes.INFO, message)

    def success(self, message: str) -> None:
        """Print a success message."""
        self._safe_print(
            f"[green][SUCCESS][/green] {escape(message)}", MessagePrefixes.SUCCESS, message
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._safe_print(
            f"[yellow][WARN][/yellow] {escape(message)}", MessagePrefixes.WARN, message
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._safe_print(f"[red][ERROR][/red] {escape(message)}", MessagePrefixes.ERROR, message)

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled."""
        if self.verbose:
            self._safe_print(
                f"[cyan][DEBUG][/cyan] {escape(message)}", MessagePrefixes.DEBUG, message
            )

    def completion_summary(self, stats: dict[str, Any], processing_time: float) -> None:
        """Display the render summary in a styled panel."""
        if self.console is None:
            print("Rendering Complete")
            print(f"Symbols: {stats.get('symbols', 0)}")
            print(f"Pages: {stats.get('pages', 0)}")
            print(f"Failed: {stats.get('failed', 0)}")
            print(f"Collisions: {stats.get('collisions', 0)}")
            print(f"Time: {processing_time:.2f}s")
            return

        summary_table = Table.grid(padding=(0, 2))
        summary_table.add_column(style="cyan")
        summary_table.add_column()
        summary_table.add_row("Symbols:", f"[green]{stats.get('symbols', 0)}[/green]")
        summary_table.add_row("Pages:", f"[blue]{stats.get('pages', 0)}[/blue]")
        summary_table.add_row("Failed:", f"[red]{stats.get('failed', 0)}[/red]")
        if stats.get("collisions", 0) > 0:
            summary_table.add_row(
                "URL collisions:", f"[yellow]{stats['collisions']}[/yellow]"
            )
        summary_table.add_row("Time:", f"[cyan]{processing_time:.2f}s[/cyan]")

        panel = Panel(
            summary_table,
            title="[bold green]Rendering Complete[/bold green]",
            border_style="green",
            padding=(1, 2),
        )
        self.console.print(panel)
