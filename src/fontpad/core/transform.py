"""Dot grid transformations.

This module provides the pad's rearranging operations:
- Horizontal and vertical mirroring
- Wrap-around scrolling by one row (up/down)
- Per-row rotation by a fixed offset (left/right)

All functions are pure: they read ``width``, ``height`` and ``cells`` from a
Grid or GridSnapshot and return a new list of dots of the same length.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

# Rows are rotated by this many cells when shifting sideways
SIDE_SHIFT_OFFSET = 3


class GridLike(Protocol):
    """Anything with a size and a row-major dot sequence."""

    width: int
    height: int

    @property
    def cells(self) -> Sequence[bool]: ...


def _rows(grid: GridLike) -> list[list[bool]]:
    width = grid.width
    return [list(grid.cells[y * width:(y + 1) * width]) for y in range(grid.height)]


def flip_horizontal(grid: GridLike) -> list[bool]:
    """Mirror every row left to right.

    The middle column of an odd-width grid stays where it is.

    Examples:
        >>> from fontpad.domain import Grid
        >>> g = Grid(4, 4, [True, False, False, False] * 4)
        >>> flip_horizontal(g)[:4]
        [False, False, False, True]
    """
    width = grid.width
    return [
        grid.cells[(width - 1 - x) + y * width]
        for y in range(grid.height)
        for x in range(width)
    ]


def flip_vertical(grid: GridLike) -> list[bool]:
    """Mirror the row order top to bottom.

    The middle row of an odd-height grid stays where it is.
    """
    output: list[bool] = []
    for row in reversed(_rows(grid)):
        output.extend(row)
    return output


def shift_up(grid: GridLike) -> list[bool]:
    """Scroll up by one row, wrapping the top row to the bottom."""
    cells = list(grid.cells)
    return cells[grid.width:] + cells[:grid.width]


def shift_down(grid: GridLike) -> list[bool]:
    """Scroll down by one row, wrapping the bottom row to the top."""
    cells = list(grid.cells)
    return cells[-grid.width:] + cells[:-grid.width]


def shift_left(grid: GridLike) -> list[bool]:
    """Move the first dot of each row SIDE_SHIFT_OFFSET places right.

    A row ``[a, b, c, d, e]`` becomes ``[b, c, d, a, e]``.
    """
    output: list[bool] = []
    for row in _rows(grid):
        value = row.pop(0)
        row.insert(SIDE_SHIFT_OFFSET, value)
        output.extend(row)
    return output


def shift_right(grid: GridLike) -> list[bool]:
    """Move the dot SIDE_SHIFT_OFFSET places into each row to the row start.

    A row ``[a, b, c, d, e]`` becomes ``[d, a, b, c, e]``. This undoes
    shift_left.
    """
    output: list[bool] = []
    for row in _rows(grid):
        value = row.pop(SIDE_SHIFT_OFFSET)
        row.insert(0, value)
        output.extend(row)
    return output


TRANSFORMS: dict[str, Callable[[GridLike], list[bool]]] = {
    "flip-h": flip_horizontal,
    "flip-v": flip_vertical,
    "up": shift_up,
    "down": shift_down,
    "left": shift_left,
    "right": shift_right,
}
