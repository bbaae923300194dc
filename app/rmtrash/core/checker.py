"""Permission checks for a single removal.

check_permission() decides, without side effects, whether a path may be
moved to the trash under a given configuration. The checks run in a
fixed order and the first failing one wins:

1. existence (skipped under --force)
2. mount point (--one-file-system)
3. root directory (--preserve-root)
4. directory policy (--recursive / --dir)
"""

import logging

from rmtrash.core.errors import (
    CrossDeviceError,
    DirectoryNotEmptyError,
    IsDirectoryError,
    NoSuchPathError,
    PreserveRootError,
    RemovalError,
)
from rmtrash.filesystem.base import FileSystem
from rmtrash.models.check import Cleared, PermissionCheckResult, Skip
from rmtrash.models.config import TrashConfig

logger = logging.getLogger(__name__)


def check_permission(path: str, config: TrashConfig, fs: FileSystem) -> PermissionCheckResult:
    """Decide whether a path may be removed.

    Args:
        path: Path requested for removal.
        config: Removal policy in effect.
        fs: Filesystem provider to query.

    Returns:
        Skip if the path is missing and force is set, otherwise Cleared
        with the path's directory-ness.

    Raises:
        NoSuchPathError: Path does not exist and force is not set.
        CrossDeviceError: Path is on another mount and one_file_system is set.
        PreserveRootError: Path is the root and preserve_root is set.
        DirectoryNotEmptyError: Non-empty directory with only empty_dirs set.
        IsDirectoryError: Directory with neither recursive nor empty_dirs set.
        RemovalError: Metadata for the path could not be read.
    """
    if not fs.exists(path):
        if config.force:
            logger.debug("Skipping nonexistent path %s", path)
            return Skip(path)
        raise NoSuchPathError(path)

    try:
        is_directory = fs.is_directory(path)
        if config.one_file_system and fs.is_cross_mount_point(path):
            raise CrossDeviceError(path)
    except OSError as e:
        raise RemovalError(path, e.strerror or str(e)) from e

    if is_directory:
        if config.preserve_root and fs.is_root_dir(path):
            raise PreserveRootError(path)
        if not config.recursive:
            if not config.empty_dirs:
                raise IsDirectoryError(path)
            if not fs.is_empty_directory(path):
                raise DirectoryNotEmptyError(path)

    logger.debug("Cleared %s (directory=%s)", path, is_directory)
    return Cleared(path, is_directory)
