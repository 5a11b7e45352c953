"""Pointer to cell mapping.

The pad is drawn inside a square screen region. Cells are square and sized
so the whole grid fits a fixed share of the region's smaller side, capped at
a maximum pixel size, and the drawn grid is centered in the region. This
module maps pointer positions back to cell indices and rate limits repeated
toggles while the pointer is dragged.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Region:
    """Axis-aligned rectangle in screen pixels.

    Attributes:
        left: X of the left edge
        top: Y of the top edge
        width: Width in pixels
        height: Height in pixels
    """

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def center(self) -> tuple[int, int]:
        return (self.left + self.width // 2, self.top + self.height // 2)

    def contains(self, x: int, y: int) -> bool:
        """Check if a pixel lies inside the region (right/bottom edges excluded)."""
        return self.left <= x < self.right and self.top <= y < self.bottom


class CellAddresser:
    """Maps pointer positions inside a region to grid cell indices.

    Example:
        addresser = CellAddresser(Region(60, 4, 240, 240))
        index = addresser.cell_at(180, 124, 5, 5)
    """

    def __init__(
        self,
        region: Region,
        max_cell_size: int = 20,
        fit_ratio: float = 0.98,
    ) -> None:
        self.region = region
        self.max_cell_size = max_cell_size
        self.fit_ratio = fit_ratio

    def cell_size(self, grid_width: int, grid_height: int) -> int:
        """Pixel size of one square cell for a grid of the given size."""
        available = round(min(self.region.width, self.region.height) * self.fit_ratio)
        return min(available // max(grid_width, grid_height), self.max_cell_size)

    def drawing_area(self, grid_width: int, grid_height: int) -> Region:
        """Region covered by the drawn grid, centered in the pad region."""
        size = self.cell_size(grid_width, grid_height)
        width = size * grid_width
        height = size * grid_height
        center_x, center_y = self.region.center
        return Region(center_x - width // 2, center_y - height // 2, width, height)

    def cell_at(self, x: int, y: int, grid_width: int, grid_height: int) -> int | None:
        """Find the cell under a pointer position.

        Args:
            x: Pointer x in pixels
            y: Pointer y in pixels
            grid_width: Grid width in cells
            grid_height: Grid height in cells

        Returns:
            Row-major cell index, or None when the pointer is off the grid
        """
        size = self.cell_size(grid_width, grid_height)
        if size <= 0:
            return None
        area = self.drawing_area(grid_width, grid_height)
        if not area.contains(x, y):
            return None
        cell_x = (x - area.left) // size
        cell_y = (y - area.top) // size
        return cell_x + cell_y * grid_width


class PointerDebouncer:
    """Rate limits toggles while the pointer is held down.

    Moving onto a different cell toggles at once. Staying on the same cell
    toggles again only after ``interval`` seconds. ``reset`` is called when
    the pointer is released.
    """

    def __init__(
        self,
        interval: float = 0.2,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.interval = interval
        self._clock = clock
        self._last_index: int | None = None
        self._last_time: float = 0.0

    @property
    def last_index(self) -> int | None:
        return self._last_index

    def should_toggle(self, index: int, now: float | None = None) -> bool:
        """Decide whether the cell under the pointer should toggle now.

        Records the toggle when the answer is True.
        """
        if now is None:
            now = self._clock()
        if index == self._last_index and now - self._last_time < self.interval:
            return False
        self._last_index = index
        self._last_time = now
        return True

    def reset(self) -> None:
        """Forget the last toggled cell."""
        self._last_index = None
        self._last_time = 0.0
