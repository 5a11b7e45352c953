"""CLI application entry point for fontpad.

This module provides the main CLI interface using Typer. Each command loads
the last used pad, applies one edit through an EditSession and saves the pad
again.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from fontpad import __version__
from fontpad.cli.output import (
    console,
    print_error,
    print_header,
    print_ok,
    print_pad,
)
from fontpad.config import FontpadSettings, LoggingConfig, StorageConfig
from fontpad.core import EditSession
from fontpad.exceptions import (
    ClipboardUnavailableError,
    FontpadError,
    SettingsLoadError,
    SettingsSaveError,
)
from fontpad.io import Clipboard, PadStore
from fontpad.utils import EditLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="fontpad",
    help="Design bitmap font glyphs on a small grid of dots.",
    add_completion=False,
    no_args_is_help=True,
)


class Axis(str, Enum):
    """Pad dimension to resize."""

    WIDTH = "width"
    HEIGHT = "height"


class Step(str, Enum):
    """Resize direction."""

    GROW = "grow"
    SHRINK = "shrink"


class FlipAxis(str, Enum):
    """Mirror direction."""

    H = "h"
    V = "v"


class LogLevel(str, Enum):
    """Console logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Direction(str, Enum):
    """Scroll direction."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class AppContext:
    """State shared between the app callback and commands."""

    settings: FontpadSettings
    store: PadStore
    logger: EditLogger


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Font Pad[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    state: Annotated[
        Path | None,
        typer.Option(
            "--state",
            "-s",
            help="Pad state file (default: ~/.fontpad/pad.json)",
            envvar="FONTPAD_STATE",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Design bitmap font glyphs on a small grid of dots."""
    storage = StorageConfig(state_path=state) if state is not None else StorageConfig()
    settings = FontpadSettings(
        storage=storage,
        logging=LoggingConfig(log_file=log_file, log_level=log_level.value),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = AppContext(
        settings=settings,
        store=PadStore(settings.storage.state_path),
        logger=EditLogger(logger),
    )


def _open_session(ctx: typer.Context) -> EditSession:
    """Load the last used pad into a new session."""
    app_ctx: AppContext = ctx.obj
    try:
        state = app_ctx.store.load()
    except SettingsLoadError as e:
        print_error(f"Could not load pad: {e.reason}", details=e.path)
        raise typer.Exit(code=1) from e
    return EditSession.from_state(state, settings=app_ctx.settings, logger=app_ctx.logger)


def _save_session(ctx: typer.Context, session: EditSession) -> None:
    """Persist the session's pad and history."""
    app_ctx: AppContext = ctx.obj
    try:
        app_ctx.store.save(session.to_state())
    except SettingsSaveError as e:
        print_error(f"Could not save pad: {e.reason}", details=e.path)
        raise typer.Exit(code=1) from e


def _finish(ctx: typer.Context, session: EditSession, quiet: bool = False) -> None:
    _save_session(ctx, session)
    if not quiet:
        print_pad(session.grid)


def _parse_point(value: str) -> tuple[int, int]:
    try:
        x, y = (int(part) for part in value.split(","))
    except ValueError:
        raise typer.BadParameter(f"Expected X,Y but got '{value}'") from None
    return x, y


QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Do not draw the pad afterwards"),
]


@app.command()
def show(
    ctx: typer.Context,
    history: Annotated[
        bool,
        typer.Option("--history", "-H", help="Also draw the history strip"),
    ] = False,
) -> None:
    """Draw the current pad."""
    session = _open_session(ctx)
    print_header(__version__)
    print_pad(session.grid, list(session.history) if history else None)


@app.command()
def toggle(
    ctx: typer.Context,
    x: Annotated[int, typer.Argument(help="Column, from 0 at the left")],
    y: Annotated[int, typer.Argument(help="Row, from 0 at the top")],
    quiet: QuietOption = False,
) -> None:
    """Flip the dot at column X, row Y."""
    session = _open_session(ctx)
    if not session.toggle_at(x, y):
        print_error(
            f"No dot at {x},{y}",
            details=f"The pad is {session.grid.width}x{session.grid.height}",
        )
        raise typer.Exit(code=1)
    _finish(ctx, session, quiet)


@app.command()
def click(
    ctx: typer.Context,
    px: Annotated[int, typer.Argument(help="Pointer x in pixels")],
    py: Annotated[int, typer.Argument(help="Pointer y in pixels")],
    quiet: QuietOption = False,
) -> None:
    """Flip the dot under a pointer position on the drawn pad."""
    session = _open_session(ctx)
    index = session.pointer_drag(px, py)
    session.pointer_release()
    if index is None:
        print_error(f"Pointer {px},{py} is not over the pad")
        raise typer.Exit(code=1)
    _finish(ctx, session, quiet)


@app.command()
def drag(
    ctx: typer.Context,
    points: Annotated[
        list[str],
        typer.Argument(help="Pointer positions as X,Y in pixels"),
    ],
    step: Annotated[
        float,
        typer.Option("--step", help="Seconds between pointer positions", min=0.0),
    ] = 0.05,
    quiet: QuietOption = False,
) -> None:
    """Drag the pointer across the drawn pad, flipping dots under it."""
    positions = [_parse_point(p) for p in points]
    session = _open_session(ctx)
    toggled = 0
    for i, (px, py) in enumerate(positions):
        if session.pointer_drag(px, py, now=i * step) is not None:
            toggled += 1
    session.pointer_release()
    _finish(ctx, session, quiet)
    if not quiet:
        print_ok(f"{toggled} dots flipped")


@app.command()
def resize(
    ctx: typer.Context,
    axis: Annotated[Axis, typer.Argument(help="Dimension to change")],
    step: Annotated[Step, typer.Argument(help="Add or remove one dot")],
    quiet: QuietOption = False,
) -> None:
    """Add or remove a column or row. The pad is cleared."""
    session = _open_session(ctx)
    session.resize(axis.value, 1 if step is Step.GROW else -1)
    _finish(ctx, session, quiet)


@app.command()
def clear(ctx: typer.Context, quiet: QuietOption = False) -> None:
    """Turn every dot off."""
    session = _open_session(ctx)
    session.clear()
    _finish(ctx, session, quiet)


@app.command()
def fill(ctx: typer.Context, quiet: QuietOption = False) -> None:
    """Turn every dot on."""
    session = _open_session(ctx)
    session.fill()
    _finish(ctx, session, quiet)


@app.command()
def flip(
    ctx: typer.Context,
    axis: Annotated[FlipAxis, typer.Argument(help="h to mirror left/right, v for top/bottom")],
    quiet: QuietOption = False,
) -> None:
    """Mirror the pad."""
    session = _open_session(ctx)
    if axis is FlipAxis.H:
        session.flip_horizontal()
    else:
        session.flip_vertical()
    _finish(ctx, session, quiet)


@app.command()
def shift(
    ctx: typer.Context,
    direction: Annotated[Direction, typer.Argument(help="Scroll direction")],
    quiet: QuietOption = False,
) -> None:
    """Scroll the pad, wrapping dots around the edge."""
    session = _open_session(ctx)
    session.transform(direction.value)
    _finish(ctx, session, quiet)


@app.command()
def copy(ctx: typer.Context) -> None:
    """Copy the pad's text form to the clipboard and save it to history."""
    session = _open_session(ctx)
    text = session.export_text()
    try:
        Clipboard().copy(text)
    except ClipboardUnavailableError as e:
        session.log.log_error("copy", e)
        print_error("Could not copy pad", details=e.reason)
        raise typer.Exit(code=1) from e
    _save_session(ctx, session)
    print_ok(f"Copied {session.grid.width}x{session.grid.height} pad")


@app.command()
def paste(ctx: typer.Context, quiet: QuietOption = False) -> None:
    """Replace the pad with text from the clipboard."""
    session = _open_session(ctx)
    try:
        text = Clipboard().paste()
    except ClipboardUnavailableError as e:
        session.log.log_error("paste", e)
        print_error("Could not paste pad", details=e.reason)
        raise typer.Exit(code=1) from e
    _import(ctx, session, text, quiet)


@app.command()
def export(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to file instead of stdout"),
    ] = None,
) -> None:
    """Write the pad's text form and save it to history."""
    session = _open_session(ctx)
    text = session.export_text()
    if output is None:
        typer.echo(text)
    else:
        try:
            output.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            print_error(f"Could not write {output}", details=str(e))
            raise typer.Exit(code=1) from e
    _save_session(ctx, session)


@app.command(name="import")
def import_(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="File holding a pad's text form")],
    quiet: QuietOption = False,
) -> None:
    """Replace the pad with text from a file."""
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print_error(f"Could not read {source}", details=str(e))
        raise typer.Exit(code=1) from e
    session = _open_session(ctx)
    _import(ctx, session, text, quiet)


def _import(ctx: typer.Context, session: EditSession, text: str, quiet: bool) -> None:
    if not session.import_text(text):
        print_error("Pasted text rejected", details=session.last_paste_error)
        raise typer.Exit(code=1)
    _finish(ctx, session, quiet)


def cli() -> None:
    """Entry point for the CLI application."""
    try:
        app()
    except FontpadError as e:
        print_error(str(e))
        raise SystemExit(1) from e


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
