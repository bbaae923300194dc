"""Aggregate confirmation for --interactive=once (rm -I).

Instead of asking per path, the user is asked at most once for the whole
invocation, and only when the request looks dangerous: any directory, or
more than a handful of files.
"""

import logging

from rmtrash.core.prompter import Prompter
from rmtrash.filesystem.base import FileSystem

logger = logging.getLogger(__name__)

# Up to this many plain files are removed under "once" without asking.
BATCH_FILE_THRESHOLD = 3


def count_kinds(paths: list[str], fs: FileSystem) -> tuple[int, int]:
    """Count directories and files among the requested paths.

    Paths whose metadata cannot be read are left out of both counts.

    Args:
        paths: Requested paths.
        fs: Filesystem provider to query.

    Returns:
        Tuple of (directory count, file count).
    """
    dir_count = 0
    file_count = 0
    for path in paths:
        try:
            if fs.is_directory(path):
                dir_count += 1
            else:
                file_count += 1
        except OSError as e:
            logger.debug("Not counting %s: %s", path, e)
    return dir_count, file_count


def batch_question(dir_count: int, file_count: int) -> str | None:
    """Build the aggregate confirmation question.

    Args:
        dir_count: Number of directories requested.
        file_count: Number of plain files requested.

    Returns:
        Question to ask, or None if no confirmation is needed.
    """
    if dir_count and file_count:
        return f"recursively remove {dir_count} dir(s) and {file_count} file(s)?"
    if dir_count:
        return f"recursively remove {dir_count} dir(s)?"
    if file_count > BATCH_FILE_THRESHOLD:
        return f"remove {file_count} file(s)?"
    return None


def confirm_batch(paths: list[str], fs: FileSystem, prompter: Prompter) -> bool:
    """Ask once whether a whole invocation should proceed.

    Args:
        paths: Requested paths.
        fs: Filesystem provider to query.
        prompter: Prompter used for the single question.

    Returns:
        True if removal should go ahead.
    """
    question = batch_question(*count_kinds(paths, fs))
    if question is None:
        return True
    return prompter.ask(question)
