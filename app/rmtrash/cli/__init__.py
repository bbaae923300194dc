"""CLI package for rmtrash.

This package contains the Typer application.
"""

from rmtrash.cli.main import app

__all__ = ["app"]
