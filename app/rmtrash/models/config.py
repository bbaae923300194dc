"""Removal policy configuration.

This module defines the immutable configuration that drives a single
rmtrash invocation: the confirmation policy and the rules governing
which directories may be removed.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum


class InteractiveMode(str, Enum):
    """When to ask the user for confirmation.

    Attributes:
        NEVER: Never prompt.
        ONCE: Prompt once for the whole invocation (rm -I).
        ALWAYS: Prompt before every removal (rm -i).
    """

    NEVER = "never"
    ONCE = "once"
    ALWAYS = "always"


@dataclass(frozen=True, slots=True)
class TrashConfig:
    """Policy for one removal invocation.

    Instances are immutable. Use derive() to obtain a copy with some
    fields overridden.

    Attributes:
        interactive_mode: Confirmation policy.
        force: Ignore nonexistent paths and never prompt.
        recursive: Allow removal of non-empty directories.
        empty_dirs: Allow removal of empty directories without recursive.
        preserve_root: Refuse to remove the filesystem root.
        one_file_system: Refuse paths on a different mount than the working directory.
        verbose: Trace decisions and echo every removed path.
    """

    interactive_mode: InteractiveMode = InteractiveMode.NEVER
    force: bool = False
    recursive: bool = False
    empty_dirs: bool = False
    preserve_root: bool = True
    one_file_system: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        """Normalize the interactive mode: force never prompts."""
        mode = InteractiveMode(self.interactive_mode)
        if self.force:
            mode = InteractiveMode.NEVER
        object.__setattr__(self, "interactive_mode", mode)

    @property
    def is_interactive(self) -> bool:
        """Check if every removal needs confirmation."""
        return self.interactive_mode == InteractiveMode.ALWAYS

    def derive(self, **overrides: object) -> "TrashConfig":
        """Return an independent copy with the given fields overridden.

        Args:
            **overrides: Field names and their new values.

        Returns:
            New TrashConfig; this instance is left untouched.
        """
        return dataclasses.replace(self, **overrides)  # type: ignore[arg-type]
