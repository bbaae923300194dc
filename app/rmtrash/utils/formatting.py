"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich. Paths are
always escaped before printing: a file may well be called "[bold]".
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape

from rmtrash.core.paths import APP_NAME
from rmtrash.core.theme import ThemeColors, build_theme

if TYPE_CHECKING:
    from rmtrash.core.errors import RemovalError


def _detect_color_system(stream: TextIO) -> str | None:
    """Detect the best color system for a terminal stream.

    Returns "truecolor" when the stream is interactive to enable full hex color
    support, None otherwise to let Rich auto-detect.
    """
    if stream.isatty():
        return "truecolor"
    return None


# Shared console instances, default colours until apply_colors() runs
console = Console(theme=build_theme(ThemeColors()), color_system=_detect_color_system(sys.stdout))
err_console = Console(
    theme=build_theme(ThemeColors()),
    stderr=True,
    color_system=_detect_color_system(sys.stderr),
)


def apply_colors(colors: ThemeColors) -> None:
    """Use the given colours on both consoles."""
    theme = build_theme(colors)
    console.push_theme(theme)
    err_console.push_theme(theme)


def print_removal_error(error: RemovalError) -> None:
    """Print a path-scoped removal error.

    Format: "rmtrash: cannot remove '<path>': <reason>".
    """
    err_console.print(
        f"{APP_NAME}: cannot remove [path]'{escape(error.path)}'[/]: "
        f"[error]{escape(error.reason)}[/]",
        soft_wrap=True,
        highlight=False,
    )


def print_removed(path: str) -> None:
    """Print a verbose removal notice."""
    console.print(f"removed [path]'{escape(path)}'[/]", soft_wrap=True, highlight=False)


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"{APP_NAME}: [warning]warning:[/] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"{APP_NAME}: [error]{escape(message)}[/]", soft_wrap=True)
