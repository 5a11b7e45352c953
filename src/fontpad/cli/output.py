"""Rich console output helpers for the CLI.

This module draws the pad, its small previews and the history strip in the
terminal and prints status and error messages.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from fontpad.domain.grid import Grid, GridSnapshot

console = Console()
err_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

DOT_ON = "██"
DOT_OFF = "· "

# Half-block glyphs indexed by (top, bottom)
_HALF_BLOCKS = {
    (False, False): " ",
    (True, False): "▀",
    (False, True): "▄",
    (True, True): "█",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Font Pad[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_ok(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{SYM_OK}[/green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message to stderr.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        err_console.print(f"  {details}")


def render_pad(grid: Grid | GridSnapshot) -> Text:
    """Draw the pad with two characters per dot."""
    text = Text()
    width = grid.width
    for y in range(grid.height):
        for x in range(width):
            if grid.cells[x + y * width]:
                text.append(DOT_ON, style="bold white")
            else:
                text.append(DOT_OFF, style="grey50")
        text.append("\n")
    text.rstrip()
    return text


def render_preview_lines(grid: Grid | GridSnapshot, scale: int = 1) -> list[str]:
    """Draw the pad two rows per line using half blocks.

    Args:
        grid: Pad to draw
        scale: Nearest-neighbour scale factor, each dot becomes scale x scale

    Returns:
        Lines of the drawing, top to bottom
    """
    width = grid.width * scale
    height = grid.height * scale

    def dot(x: int, y: int) -> bool:
        if y >= height:
            return False
        return grid.cells[x // scale + (y // scale) * grid.width]

    lines = []
    for y in range(0, height, 2):
        line = [_HALF_BLOCKS[(dot(x, y), dot(x, y + 1))] for x in range(width)]
        lines.append("".join(line))
    return lines


def render_strip(entries: Sequence[GridSnapshot], gap: int = 1) -> Text:
    """Draw history entries side by side, oldest first."""
    if not entries:
        return Text("(empty)", style="dim")
    previews = [render_preview_lines(entry) for entry in entries]
    text = Text()
    for row in range(max(len(p) for p in previews)):
        text.append((" " * gap).join(p[row] for p in previews))
        text.append("\n")
    text.rstrip()
    return text


def print_pad(grid: Grid, history: Sequence[GridSnapshot] | None = None) -> None:
    """Print the pad, its preview and optionally the history strip.

    Args:
        grid: Pad to draw
        history: History entries to draw below the pad, if any
    """
    console.print(f"  {grid.width}x{grid.height} {SYM_DOT} {sum(grid.cells)} dots on")
    console.print(render_pad(grid))
    print_step("Preview 1x")
    console.print("\n".join(render_preview_lines(grid)))
    print_step("Preview 2x")
    console.print("\n".join(render_preview_lines(grid, scale=2)))
    if history is not None:
        print_step(f"History ({len(history)})")
        console.print(render_strip(history))
