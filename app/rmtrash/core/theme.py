"""Output colours for rmtrash.

rmtrash prints three kinds of highlighted text: paths, warnings and
errors. Their colours can be changed in the [colors] table of the
settings file:

    [colors]
    path = "#ffffff"
    error = "#f53263"
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from rich.theme import Theme

HexColor = Annotated[str, Field(pattern=r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")]


class ThemeColors(BaseModel):
    """Colours for the styles rmtrash prints with (#RGB or #RRGGBB)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: HexColor = "#ffffff"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"


def build_theme(colors: ThemeColors) -> Theme:
    """Convert ThemeColors to the Rich styles used in console markup.

    Args:
        colors: Validated colour configuration.

    Returns:
        Rich Theme defining the "path", "warning" and "error" styles.
    """
    return Theme(
        {
            "path": f"bold {colors.path}",
            "warning": colors.warning,
            "error": f"bold {colors.error}",
        }
    )
