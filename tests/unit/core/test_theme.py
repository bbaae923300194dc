"""Unit tests for output colours."""

import pytest
from pydantic import ValidationError
from rich.style import Style
from rmtrash.core.theme import ThemeColors, build_theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        colors = ThemeColors()

        assert colors.error == "#f53263"
        assert colors.warning == "#f5b332"

    def test_short_hex_accepted(self) -> None:
        assert ThemeColors(path="#abc").path == "#abc"

    @pytest.mark.parametrize("value", ["ffffff", "#gggggg", "#abcd", "red"])
    def test_invalid_colors_rejected(self, value: str) -> None:
        with pytest.raises(ValidationError):
            ThemeColors(error=value)

    def test_unused_style_names_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ThemeColors(muted="#ffffff")  # type: ignore[call-arg]


class TestBuildTheme:
    """Tests for build_theme."""

    def test_defines_printed_styles(self) -> None:
        theme = build_theme(ThemeColors())

        assert set(theme.styles) >= {"path", "warning", "error"}

    def test_uses_configured_colors(self) -> None:
        theme = build_theme(ThemeColors(error="#123456"))

        assert theme.styles["error"] == Style.parse("bold #123456")
