"""Core decision logic for rmtrash.

This package contains the permission checker, the batch confirmation
policy, the removal engine and their supporting settings.
"""

from rmtrash.core.batch import BATCH_FILE_THRESHOLD, confirm_batch
from rmtrash.core.checker import check_permission
from rmtrash.core.engine import TrashEngine
from rmtrash.core.errors import (
    CrossDeviceError,
    DirectoryNotEmptyError,
    IsDirectoryError,
    NoSuchPathError,
    PreserveRootError,
    RemovalError,
    TrashFailedError,
)
from rmtrash.core.prompter import Prompter, TerminalPrompter

__all__ = [
    "BATCH_FILE_THRESHOLD",
    "CrossDeviceError",
    "DirectoryNotEmptyError",
    "IsDirectoryError",
    "NoSuchPathError",
    "PreserveRootError",
    "Prompter",
    "RemovalError",
    "TerminalPrompter",
    "TrashEngine",
    "TrashFailedError",
    "check_permission",
    "confirm_batch",
]
