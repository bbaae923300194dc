"""Removal engine.

TrashEngine walks the requested paths, asks the permission checker about
each one, applies the confirmation policy and finally moves cleared
paths to the trash through the filesystem provider.

Failures are isolated per path: a refused or failed path is reported and
counted, and the engine moves on to the next path.
"""

import logging
from collections.abc import Callable

from rmtrash.core.batch import confirm_batch
from rmtrash.core.checker import check_permission
from rmtrash.core.errors import (
    DirectoryNotEmptyError,
    NoSuchPathError,
    RemovalError,
    TrashFailedError,
)
from rmtrash.core.prompter import Prompter
from rmtrash.filesystem.base import FileSystem
from rmtrash.models.check import Skip
from rmtrash.models.config import InteractiveMode, TrashConfig
from rmtrash.utils.formatting import print_removal_error, print_removed

logger = logging.getLogger(__name__)

ErrorReporter = Callable[[RemovalError], None]
RemovedReporter = Callable[[str], None]


class TrashEngine:
    """Decides on and performs the removal of a list of paths.

    Attributes:
        config: Removal policy for this engine.
    """

    def __init__(
        self,
        config: TrashConfig,
        fs: FileSystem,
        prompter: Prompter,
        *,
        report_error: ErrorReporter = print_removal_error,
        report_removed: RemovedReporter = print_removed,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Removal policy.
            fs: Filesystem provider used for checks and trash moves.
            prompter: Prompter used for confirmations.
            report_error: Called once for every reported path error.
            report_removed: Called for every trashed path when verbose.
        """
        self.config = config
        self._fs = fs
        self._prompter = prompter
        self._report_error = report_error
        self._report_removed = report_removed

    def derive(self, **overrides: object) -> "TrashEngine":
        """Create an engine sharing collaborators but with a derived config.

        Args:
            **overrides: TrashConfig fields to override.

        Returns:
            New TrashEngine; this engine is left untouched.
        """
        return TrashEngine(
            self.config.derive(**overrides),
            self._fs,
            self._prompter,
            report_error=self._report_error,
            report_removed=self._report_removed,
        )

    def remove_multiple(self, paths: list[str]) -> bool:
        """Remove every requested path.

        Under InteractiveMode.ONCE a single aggregate confirmation runs
        first; declining it removes nothing and is not a failure.

        Args:
            paths: Paths to remove, processed in order.

        Returns:
            True if every path succeeded (or was intentionally skipped).
        """
        if not paths:
            return True

        if self.config.interactive_mode == InteractiveMode.ONCE:
            if not confirm_batch(paths, self._fs, self._prompter):
                logger.info("Batch declined, nothing removed")
                return True

        success = True
        for path in paths:
            success = self.remove_one(path) and success
        return success

    def remove_one(self, path: str) -> bool:
        """Remove a single path.

        Args:
            path: Path to remove.

        Returns:
            True on success, on skip, or when the user declined.
        """
        try:
            result = check_permission(path, self.config, self._fs)
        except RemovalError as e:
            return self._fail(e)

        if isinstance(result, Skip):
            return True

        if self.config.is_interactive:
            if result.is_directory:
                return self._remove_directory(path)
            if not self._prompter.ask(f"remove file '{path}'?"):
                logger.debug("Kept %s", path)
                return True

        return self._trash(path)

    def _remove_directory(self, path: str) -> bool:
        """Interactively dismantle a directory, children first.

        The directory itself is only offered for removal after all of its
        children were processed, and is then removed by a derived engine
        that only accepts it if it is empty.
        """
        success = True

        if not self._fs.is_empty_directory(path):
            if not self._prompter.ask(f"descend into directory '{path}'?"):
                logger.debug("Not descending into %s", path)
                return True

            try:
                children = self._fs.list_children(path)
            except OSError as e:
                return self._fail(RemovalError(path, e.strerror or str(e)))

            for child in children:
                success = self.remove_one(child) and success

        if not self._prompter.ask(f"remove directory '{path}'?"):
            logger.debug("Kept directory %s", path)
            return success

        finisher = self.derive(
            recursive=False,
            empty_dirs=True,
            interactive_mode=InteractiveMode.NEVER,
        )
        return finisher._remove_approved_directory(path) and success

    def _remove_approved_directory(self, path: str) -> bool:
        """Trash a directory the user already approved, if it is empty now."""
        try:
            result = check_permission(path, self.config, self._fs)
        except DirectoryNotEmptyError:
            logger.info("Leaving %s in place: directory not empty", path)
            return True
        except RemovalError as e:
            return self._fail(e)

        if isinstance(result, Skip):
            return True
        return self._trash(path)

    def _trash(self, path: str) -> bool:
        try:
            self._fs.move_to_trash(path)
        except OSError as e:
            return self._fail(TrashFailedError(path, e.strerror or str(e)))

        logger.info("Moved to trash: %s", path)
        if self.config.verbose:
            self._report_removed(path)
        return True

    def _fail(self, error: RemovalError) -> bool:
        """Report a path error and return the failed status."""
        if self.config.force and isinstance(error, NoSuchPathError):
            logger.debug("Suppressed: %s", error)
        else:
            self._report_error(error)
        return False
