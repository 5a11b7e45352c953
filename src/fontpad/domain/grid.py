"""Dot grid representation.

This module defines the pad a glyph is drawn on: a row-major sequence of
boolean dots together with the grid's width and height. A dot at column x
and row y lives at index ``x + y * width``.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from fontpad.exceptions import GridError, OutOfRangeError

MIN_SIZE = 4
MAX_SIZE = 24
DEFAULT_SIZE = 5


def _check_size(name: str, value: int) -> None:
    if not MIN_SIZE <= value <= MAX_SIZE:
        raise GridError(f"Grid {name} {value} outside {MIN_SIZE}..{MAX_SIZE}")


@dataclass(frozen=True, slots=True)
class GridSnapshot:
    """Immutable copy of a grid's dots.

    Two snapshots are equal when they have the same size and the same dots
    in the same order.

    Attributes:
        width: Grid width when captured
        height: Grid height when captured
        cells: Dot values in row-major order
    """

    width: int
    height: int
    cells: tuple[bool, ...]

    @property
    def size(self) -> tuple[int, int]:
        """Get (width, height) of the captured grid."""
        return (self.width, self.height)


@dataclass
class Grid:
    """The editable pad of dots.

    The cell buffer always holds exactly ``width * height`` values. Changing
    either dimension reallocates the buffer and clears every dot.

    Attributes:
        width: Number of columns (MIN_SIZE..MAX_SIZE)
        height: Number of rows (MIN_SIZE..MAX_SIZE)
        cells: Dot values in row-major order
    """

    width: int = DEFAULT_SIZE
    height: int = DEFAULT_SIZE
    cells: list[bool] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_size("width", self.width)
        _check_size("height", self.height)
        if not self.cells:
            self.cells = [False] * (self.width * self.height)
        elif len(self.cells) != self.width * self.height:
            raise GridError(
                f"Grid {self.width}x{self.height} needs {self.width * self.height} "
                f"cells, got {len(self.cells)}"
            )
        else:
            self.cells = [bool(v) for v in self.cells]

    @classmethod
    def blank(cls, width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE) -> "Grid":
        """Create a grid with every dot off."""
        return cls(width=width, height=height, cells=[False] * (width * height))

    @property
    def size(self) -> tuple[int, int]:
        """Get (width, height) of the grid."""
        return (self.width, self.height)

    def __len__(self) -> int:
        return len(self.cells)

    def resize_width(self, delta: int) -> None:
        """Grow or shrink the grid by one column.

        The width only changes while it stays inside the size bounds, but the
        dots are cleared in every case.

        Args:
            delta: -1 to remove a column, +1 to add one
        """
        if delta < 0 and self.width > MIN_SIZE:
            self.width -= 1
        if delta > 0 and self.width < MAX_SIZE:
            self.width += 1
        self.cells = [False] * (self.width * self.height)

    def resize_height(self, delta: int) -> None:
        """Grow or shrink the grid by one row.

        Args:
            delta: -1 to remove a row, +1 to add one
        """
        if delta < 0 and self.height > MIN_SIZE:
            self.height -= 1
        if delta > 0 and self.height < MAX_SIZE:
            self.height += 1
        self.cells = [False] * (self.width * self.height)

    def index_of(self, x: int, y: int) -> int:
        """Get the cell index for column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfRangeError(x + y * self.width, len(self.cells))
        return x + y * self.width

    def toggle(self, index: int) -> None:
        """Flip the dot at index.

        Raises:
            OutOfRangeError: If index is outside the cell buffer
        """
        if not 0 <= index < len(self.cells):
            raise OutOfRangeError(index, len(self.cells))
        self.cells[index] = not self.cells[index]

    def clear(self) -> None:
        """Turn every dot off."""
        self.cells = [False] * len(self.cells)

    def fill(self) -> None:
        """Turn every dot on."""
        self.cells = [True] * len(self.cells)

    def replace_cells(self, cells: Sequence[bool]) -> None:
        """Install a new dot sequence of the same size.

        Raises:
            GridError: If the sequence length does not match the grid
        """
        if len(cells) != len(self.cells):
            raise GridError(
                f"Expected {len(self.cells)} cells, got {len(cells)}"
            )
        self.cells = [bool(v) for v in cells]

    def snapshot(self) -> GridSnapshot:
        """Capture the current dots as an immutable snapshot."""
        return GridSnapshot(width=self.width, height=self.height, cells=tuple(self.cells))
