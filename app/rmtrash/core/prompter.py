"""Yes/no confirmation prompts.

The engine never reads from the terminal itself: it asks a Prompter,
which makes interactive behaviour scriptable.
"""

from abc import ABC, abstractmethod

import typer


class Prompter(ABC):
    """Abstract base class for confirmation prompters."""

    @abstractmethod
    def ask(self, message: str) -> bool:
        """Ask a yes/no question.

        Args:
            message: Question to ask, without the answer hint.

        Returns:
            True if the answer is yes.
        """


class TerminalPrompter(Prompter):
    """Prompter that asks on the terminal, defaulting to "no".

    The question is written to stderr so that stdout stays clean for
    verbose output.
    """

    def __init__(self, program: str = "rmtrash") -> None:
        self._program = program

    def ask(self, message: str) -> bool:
        return typer.confirm(f"{self._program}: {message}", default=False, err=True)
