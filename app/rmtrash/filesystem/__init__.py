"""Filesystem providers.

This module provides the abstract FileSystem capability consumed by the
removal engine and its implementation for the local machine.
"""

from rmtrash.filesystem.base import FileSystem
from rmtrash.filesystem.local import LocalFileSystem

__all__ = [
    "FileSystem",
    "LocalFileSystem",
]
