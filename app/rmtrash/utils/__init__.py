"""Utility modules for rmtrash.

This module exports commonly used utility functions.
"""

from rmtrash.utils.formatting import (
    apply_colors,
    console,
    err_console,
    print_error,
    print_removal_error,
    print_removed,
    print_warning,
)

__all__ = [
    "apply_colors",
    "console",
    "err_console",
    "print_error",
    "print_removal_error",
    "print_removed",
    "print_warning",
]
