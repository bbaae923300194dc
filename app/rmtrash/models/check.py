"""Permission check outcomes.

A permission check either skips a path (nonexistent under --force) or
clears it for removal. Denials are raised as RemovalError instead.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Skip:
    """Path does not exist and --force tolerates that.

    Attributes:
        path: The requested path.
    """

    path: str


@dataclass(frozen=True, slots=True)
class Cleared:
    """Path passed every check and may be moved to the trash.

    Attributes:
        path: The requested path.
        is_directory: Whether the path is a directory (symlinks are not).
    """

    path: str
    is_directory: bool

    def __post_init__(self) -> None:
        """Validate result data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)


PermissionCheckResult = Skip | Cleared
