"""Pytest configuration and shared fixtures.

This module contains an in-memory filesystem, a scripted prompter and an
engine factory used across the test modules.
"""

import copy
import errno
import posixpath
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest
from rmtrash.core.engine import TrashEngine
from rmtrash.core.errors import RemovalError
from rmtrash.core.prompter import Prompter
from rmtrash.filesystem.base import FileSystem
from rmtrash.models.config import TrashConfig

# A tree maps names to either None (a file) or another tree (a directory).
Tree = dict[str, Any]


class FakeFileSystem(FileSystem):
    """In-memory FileSystem rooted at "/".

    Attributes:
        other_mounts: Paths whose subtree lives on another device.
        fail_trash: Paths whose move to the trash raises PermissionError.
        trashed: Paths moved to the trash, in call order.
    """

    def __init__(self, tree: Tree | None = None) -> None:
        self._root: Tree = copy.deepcopy(tree or {})
        self.other_mounts: set[str] = set()
        self.fail_trash: set[str] = set()
        self.trashed: list[str] = []
        self.listed: list[str] = []

    def _parts(self, path: str) -> list[str]:
        return [part for part in posixpath.normpath(path).split("/") if part]

    def _lookup(self, path: str) -> Tree | None:
        node: Any = self._root
        for part in self._parts(path):
            if not isinstance(node, dict) or part not in node:
                raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
            node = node[part]
        return node

    def exists(self, path: str) -> bool:
        try:
            self._lookup(path)
        except FileNotFoundError:
            return False
        return True

    def is_directory(self, path: str) -> bool:
        return isinstance(self._lookup(path), dict)

    def is_empty_directory(self, path: str) -> bool:
        try:
            node = self._lookup(path)
        except FileNotFoundError:
            return True
        return isinstance(node, dict) and not node

    def is_root_dir(self, path: str) -> bool:
        return posixpath.normpath(path) == "/"

    def is_cross_mount_point(self, path: str) -> bool:
        self._lookup(path)
        normalized = posixpath.normpath(path)
        return any(normalized == m or normalized.startswith(m + "/") for m in self.other_mounts)

    def list_children(self, path: str) -> list[str]:
        node = self._lookup(path)
        if not isinstance(node, dict):
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
        self.listed.append(path)
        return [posixpath.join(path, name) for name in node]

    def move_to_trash(self, path: str) -> None:
        if path in self.fail_trash:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        parts = self._parts(path)
        if not parts:
            self._root.clear()
        else:
            parent = self._lookup("/" + "/".join(parts[:-1]))
            if not isinstance(parent, dict) or parts[-1] not in parent:
                raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
            del parent[parts[-1]]
        self.trashed.append(path)

    def tree(self) -> Tree:
        """Return a copy of the current tree."""
        return copy.deepcopy(self._root)


class ScriptedPrompter(Prompter):
    """Prompter answering from a script, recording every question.

    Attributes:
        questions: Questions asked so far.
    """

    def __init__(self, answers: list[bool] | None = None, default: bool = False) -> None:
        self._answers = list(answers or [])
        self._default = default
        self.questions: list[str] = []

    def ask(self, message: str) -> bool:
        self.questions.append(message)
        if self._answers:
            return self._answers.pop(0)
        return self._default


@dataclass
class EngineHarness:
    """A TrashEngine with its collaborators and captured reports."""

    engine: TrashEngine
    fs: FakeFileSystem
    prompter: ScriptedPrompter
    errors: list[RemovalError] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)

    @property
    def error_lines(self) -> list[str]:
        return [str(e) for e in self.errors]


@pytest.fixture
def make_fs() -> Callable[..., FakeFileSystem]:
    """Factory for in-memory filesystems."""
    return FakeFileSystem


@pytest.fixture
def make_prompter() -> Callable[..., ScriptedPrompter]:
    """Factory for scripted prompters."""
    return ScriptedPrompter


@pytest.fixture
def make_engine() -> Callable[..., EngineHarness]:
    """Factory building a TrashEngine over a FakeFileSystem.

    Keyword arguments other than fs and prompter are TrashConfig fields.
    """

    def _make(
        fs: FakeFileSystem,
        prompter: ScriptedPrompter | None = None,
        **config: Any,
    ) -> EngineHarness:
        prompter = prompter or ScriptedPrompter()
        errors: list[RemovalError] = []
        removed: list[str] = []
        engine = TrashEngine(
            TrashConfig(**config),
            fs,
            prompter,
            report_error=errors.append,
            report_removed=removed.append,
        )
        return EngineHarness(engine, fs, prompter, errors, removed)

    return _make


@pytest.fixture
def sample_tree() -> Tree:
    """Two files and a nested directory."""
    return {
        "test1.txt": None,
        "test2.txt": None,
        "dir1": {
            "file1.txt": None,
            "file2.txt": None,
            "subdir": {"deep.txt": None},
        },
    }
