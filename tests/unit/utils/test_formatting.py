"""Unit tests for console output helpers."""

# pyright: reportPrivateUsage=false

import io

import pytest
from rich.style import Style
from rmtrash.core.errors import DirectoryNotEmptyError, TrashFailedError
from rmtrash.core.theme import ThemeColors
from rmtrash.utils import formatting
from rmtrash.utils.formatting import (
    _detect_color_system,
    apply_colors,
    print_error,
    print_removal_error,
    print_removed,
    print_warning,
)


class _Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestColorSystem:
    """Tests for terminal colour detection."""

    def test_terminal_gets_truecolor(self) -> None:
        assert _detect_color_system(_Terminal()) == "truecolor"

    def test_pipe_left_to_rich(self) -> None:
        assert _detect_color_system(io.StringIO()) is None


class TestApplyColors:
    """Tests for apply_colors."""

    def test_both_consoles_use_new_colors(self) -> None:
        apply_colors(ThemeColors(error="#123456"))
        try:
            expected = Style.parse("bold #123456")
            assert formatting.console.get_style("error") == expected
            assert formatting.err_console.get_style("error") == expected
        finally:
            formatting.console.pop_theme()
            formatting.err_console.pop_theme()


class TestPrintRemovalError:
    """Tests for print_removal_error."""

    def test_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_removal_error(DirectoryNotEmptyError("/tmp/dir"))

        captured = capsys.readouterr()
        assert captured.err == "rmtrash: cannot remove '/tmp/dir': Directory not empty\n"
        assert captured.out == ""

    def test_markup_in_path_is_escaped(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_removal_error(TrashFailedError("[bold]x[/bold]", "Permission denied"))

        assert capsys.readouterr().err == (
            "rmtrash: cannot remove '[bold]x[/bold]': Permission denied\n"
        )

    def test_long_path_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        path = "/" + "a" * 200
        print_removal_error(DirectoryNotEmptyError(path))

        assert capsys.readouterr().err.count("\n") == 1


class TestMessages:
    """Tests for the other message helpers."""

    def test_print_removed(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_removed("/tmp/a.txt")

        assert capsys.readouterr().out == "removed '/tmp/a.txt'\n"

    def test_print_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_error("missing operand")

        assert capsys.readouterr().err == "rmtrash: missing operand\n"

    def test_print_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_warning("bad config")

        assert "warning:" in capsys.readouterr().err
