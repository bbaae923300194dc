"""Main CLI application entry point.

Defines the rmtrash command: rm-compatible flags mapped onto a
TrashConfig, with defaults taken from the settings file.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from rmtrash import __version__
from rmtrash.core.engine import TrashEngine
from rmtrash.core.errors import SettingsError
from rmtrash.core.prompter import TerminalPrompter
from rmtrash.core.settings import Settings, load_settings
from rmtrash.filesystem.local import LocalFileSystem
from rmtrash.models.config import InteractiveMode, TrashConfig
from rmtrash.utils.formatting import apply_colors, err_console, print_error, print_warning

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="rmtrash",
    help="Move files and directories to the trash, with rm-compatible options.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rmtrash version {__version__}")
        raise typer.Exit()


def resolve_interactive_mode(
    *,
    force: bool,
    interactive: InteractiveMode | None,
    prompt_always: bool,
    prompt_once: bool,
    default: InteractiveMode,
) -> InteractiveMode:
    """Pick the confirmation policy from the flags.

    Precedence: --force, --interactive, -i, -I, then the default (taken
    from RMTRASH_INTERACTIVE or the settings file).

    Returns:
        The effective InteractiveMode.
    """
    if force:
        return InteractiveMode.NEVER
    if interactive is not None:
        return interactive
    if prompt_always:
        return InteractiveMode.ALWAYS
    if prompt_once:
        return InteractiveMode.ONCE
    return default


def _from_environment(ctx: typer.Context, name: str) -> bool:
    source = ctx.get_parameter_source(name)
    return source is not None and source.name == "ENVIRONMENT"


def _resolve_preserve_root(preserve_root: bool, no_preserve_root: bool, settings: Settings) -> bool:
    # --preserve-root wins over --no-preserve-root
    if preserve_root:
        return True
    if no_preserve_root:
        return False
    return settings.preserve_root


def _configure_logging(verbose: bool) -> None:
    """Route rmtrash log records to stderr through Rich."""
    package_logger = logging.getLogger("rmtrash")
    package_logger.handlers.clear()
    package_logger.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def _load_settings() -> Settings:
    try:
        return load_settings()
    except SettingsError as e:
        print_warning(f"{e}; using defaults")
        return Settings()


@app.command()
def main(
    ctx: typer.Context,
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Files or directories to move to the trash.", show_default=False),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Ignore nonexistent files, never prompt."),
    ] = False,
    prompt_always: Annotated[
        bool,
        typer.Option("-i", help="Prompt before every removal."),
    ] = False,
    prompt_once: Annotated[
        bool,
        typer.Option(
            "-I",
            help="Prompt once before removing more than three files, or when removing recursively.",
        ),
    ] = False,
    interactive: Annotated[
        InteractiveMode | None,
        typer.Option(
            "--interactive",
            help="Prompt according to WHEN: never, once (-I) or always (-i).",
            metavar="WHEN",
            case_sensitive=False,
            envvar="RMTRASH_INTERACTIVE",
            show_default=False,
        ),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", "-R", help="Remove directories and their contents."),
    ] = False,
    empty_dirs: Annotated[
        bool,
        typer.Option("--dir", "-d", help="Remove empty directories."),
    ] = False,
    preserve_root: Annotated[
        bool,
        typer.Option("--preserve-root", help="Do not remove '/' (default)."),
    ] = False,
    no_preserve_root: Annotated[
        bool,
        typer.Option("--no-preserve-root", help="Do not treat '/' specially."),
    ] = False,
    one_file_system: Annotated[
        bool,
        typer.Option(
            "--one-file-system",
            help="Skip paths on a different file system than the working directory.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Explain what is being done."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Move PATHS to the trash.

    Directories need [bold]-r[/bold] (or [bold]-d[/bold] when empty).
    """
    _configure_logging(verbose)

    if not paths:
        if force:
            return
        print_error("missing operand")
        err_console.print("Try 'rmtrash --help' for more information.", highlight=False)
        raise typer.Exit(code=1)

    settings = _load_settings()
    apply_colors(settings.colors)

    # RMTRASH_INTERACTIVE is a default, it must not outrank -i or -I
    default_mode = settings.interactive
    if interactive is not None and _from_environment(ctx, "interactive"):
        default_mode, interactive = interactive, None

    config = TrashConfig(
        interactive_mode=resolve_interactive_mode(
            force=force,
            interactive=interactive,
            prompt_always=prompt_always,
            prompt_once=prompt_once,
            default=default_mode,
        ),
        force=force,
        recursive=recursive,
        empty_dirs=empty_dirs,
        preserve_root=_resolve_preserve_root(preserve_root, no_preserve_root, settings),
        one_file_system=one_file_system or settings.one_file_system,
        verbose=verbose,
    )
    logger.debug("Configuration: %s", config)

    engine = TrashEngine(config, LocalFileSystem(), TerminalPrompter())
    if not engine.remove_multiple(paths):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
