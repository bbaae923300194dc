"""User defaults for rmtrash.

Defaults that are not worth a flag on every invocation live in
~/.config/rmtrash/config.toml:

    interactive = "once"
    preserve_root = true
    one_file_system = false

    [colors]
    error = "#ff0000"

Command-line flags always take precedence over these values.
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rmtrash.core.errors import SettingsError, SettingsParseError
from rmtrash.core.paths import get_settings_path
from rmtrash.core.theme import ThemeColors
from rmtrash.models.config import InteractiveMode


class Settings(BaseModel):
    """Default removal policy read from the settings file.

    Attributes:
        interactive: Confirmation policy when no flag selects one.
        preserve_root: Default for --preserve-root / --no-preserve-root.
        one_file_system: Default for --one-file-system.
        colors: Output colours.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    interactive: Annotated[
        InteractiveMode,
        Field(description="Confirmation policy (never, once, always)"),
    ] = InteractiveMode.NEVER
    preserve_root: Annotated[
        bool,
        Field(description="Refuse to remove the filesystem root"),
    ] = True
    one_file_system: Annotated[
        bool,
        Field(description="Refuse paths on another mount"),
    ] = False
    colors: Annotated[
        ThemeColors,
        Field(description="Colours for paths, warnings and errors"),
    ] = ThemeColors()


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing file is not an error: the defaults apply.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or the content doesn't
            match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read {settings_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e
