"""Filesystem provider backed by the operating system.

Metadata comes from os.lstat so that symbolic links are handled as
links, never as their targets. Removal is delegated to send2trash, which
implements the platform trash (freedesktop.org trash on Linux, the Finder
trash on macOS, the Recycle Bin on Windows).
"""

import logging
import os
import stat

from send2trash import send2trash

from rmtrash.filesystem.base import FileSystem

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystem):
    """FileSystem implementation for the local machine."""

    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    def is_directory(self, path: str) -> bool:
        return stat.S_ISDIR(os.lstat(path).st_mode)

    def is_empty_directory(self, path: str) -> bool:
        try:
            with os.scandir(path) as entries:
                return next(entries, None) is None
        except OSError as e:
            logger.debug("Treating unreadable directory %s as empty: %s", path, e)
            return True

    def is_root_dir(self, path: str) -> bool:
        # Compare identities: "//" and "/.//" name the root too
        try:
            st = os.stat(path)
            root = os.stat(os.sep)
        except OSError as e:
            logger.debug("Cannot stat %s for the root check: %s", path, e)
            return False
        return (st.st_dev, st.st_ino) == (root.st_dev, root.st_ino)

    def is_cross_mount_point(self, path: str) -> bool:
        return os.lstat(path).st_dev != os.stat(os.getcwd()).st_dev

    def list_children(self, path: str) -> list[str]:
        """List the direct children of a directory, sorted by name.

        Args:
            path: Directory path to list.

        Returns:
            Child paths joined with path.

        Raises:
            OSError: If the directory cannot be listed.
        """
        return [os.path.join(path, name) for name in sorted(os.listdir(path))]

    def move_to_trash(self, path: str) -> None:
        """Move a path to the platform trash.

        Args:
            path: Path to move.

        Raises:
            OSError: If send2trash fails (permission denied, no trash
                available on the device, ...).
        """
        logger.debug("send2trash %s", path)
        send2trash(path)
