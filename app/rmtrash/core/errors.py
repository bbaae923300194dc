"""Exceptions raised while deciding on or performing a removal.

Every RemovalError is scoped to a single path. The engine catches them
per path, reports them and moves on to the next one.
"""


class RemovalError(Exception):
    """Base exception for a path that cannot be removed.

    Attributes:
        path: The path that was refused.
        reason: Human-readable reason, as printed after the path.
    """

    reason: str = "Operation not permitted"

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        if reason is not None:
            self.reason = reason
        super().__init__(f"cannot remove '{path}': {self.reason}")


class NoSuchPathError(RemovalError):
    """Raised when the path does not exist."""

    reason = "No such file or directory"


class IsDirectoryError(RemovalError):
    """Raised for a directory when neither recursive nor empty_dirs is set."""

    reason = "Is a directory"


class DirectoryNotEmptyError(RemovalError):
    """Raised for a non-empty directory when only empty_dirs is set."""

    reason = "Directory not empty"


class PreserveRootError(RemovalError):
    """Raised when the filesystem root is protected by preserve_root."""

    reason = "Preserve root"


class CrossDeviceError(RemovalError):
    """Raised when one_file_system forbids crossing a mount point."""

    reason = "Cross-device link"


class TrashFailedError(RemovalError):
    """Raised when moving the path to the trash failed at the OS level."""


class SettingsError(Exception):
    """Base exception for settings file errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""
