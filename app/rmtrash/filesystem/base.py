"""Abstract filesystem capability used by the removal engine.

This module defines the FileSystem interface that the permission checker
and the removal engine depend on. Keeping it abstract lets the engine run
against the real OS or against an in-memory tree.
"""

from abc import ABC, abstractmethod


class FileSystem(ABC):
    """Abstract base class for filesystem providers.

    Providers answer metadata questions about paths and perform the final
    move to the trash. Implementations must not cache answers: directory
    contents may change between two calls.

    Example:
        >>> fs = LocalFileSystem()
        >>> if fs.exists("notes.txt") and not fs.is_directory("notes.txt"):
        ...     fs.move_to_trash("notes.txt")
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a path exists.

        A dangling symbolic link exists: it can be removed.

        Args:
            path: Path to check.

        Returns:
            True if there is a filesystem entry at path.
        """

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Check if a path is a directory (symbolic links are not).

        Args:
            path: Existing path to check.

        Returns:
            True if path is a real directory.

        Raises:
            OSError: If the metadata cannot be read.
        """

    @abstractmethod
    def is_empty_directory(self, path: str) -> bool:
        """Check if a directory currently has no entries.

        Args:
            path: Directory path to check.

        Returns:
            True if the directory is empty, unreadable or absent.
        """

    @abstractmethod
    def is_root_dir(self, path: str) -> bool:
        """Check if a path names the filesystem root.

        Args:
            path: Path to check.

        Returns:
            True if path resolves to the root directory.
        """

    @abstractmethod
    def is_cross_mount_point(self, path: str) -> bool:
        """Check if a path lives on another mount than the working directory.

        Args:
            path: Existing path to check.

        Returns:
            True if path is on a different device.

        Raises:
            OSError: If the device information cannot be read.
        """

    @abstractmethod
    def list_children(self, path: str) -> list[str]:
        """List the direct children of a directory.

        The listing is not recursive. Returned entries are full paths
        (path joined with the child name).

        Args:
            path: Directory path to list.

        Returns:
            Child paths in provider order.

        Raises:
            OSError: If the directory cannot be listed.
        """

    @abstractmethod
    def move_to_trash(self, path: str) -> None:
        """Move a file or directory (with its contents) to the trash.

        Args:
            path: Path to move.

        Raises:
            OSError: If the underlying operation fails.
        """
