"""Editing session.

An EditSession owns the pad being edited together with everything that
follows it: the history strip, pointer addressing and drag debounce, and the
edit log. Front ends call the session's plain methods in response to input
events; every edit re-syncs the history track with the grid.
"""

import time
from collections.abc import Callable

from fontpad.config import FontpadSettings, get_default_settings
from fontpad.core import codec
from fontpad.core.addressing import CellAddresser, PointerDebouncer, Region
from fontpad.core.history import HistoryTrack
from fontpad.core.transform import TRANSFORMS
from fontpad.domain.grid import Grid, GridSnapshot
from fontpad.exceptions import CodecError, OutOfRangeError
from fontpad.io.store import PadState
from fontpad.utils.logging import EditLogger


class EditSession:
    """A single pad being edited.

    Example:
        session = EditSession.from_state(store.load())
        session.toggle(12)
        text = session.export_text()
        store.save(session.to_state())
    """

    def __init__(
        self,
        grid: Grid | None = None,
        settings: FontpadSettings | None = None,
        logger: EditLogger | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            grid: Pad to edit (a blank default pad if None)
            settings: Application settings (defaults if None)
            logger: Edit logger (a fresh one if None)
            clock: Time source for the drag debounce
        """
        self.settings = settings if settings is not None else get_default_settings()
        self.grid = grid if grid is not None else Grid.blank(
            self.settings.grid.default_width,
            self.settings.grid.default_height,
        )
        self.history = HistoryTrack(self.settings.history.width_budget, self.grid)

        pointer = self.settings.pointer
        self.addresser = CellAddresser(
            Region(pointer.region_left, pointer.region_top, pointer.region_size, pointer.region_size),
            max_cell_size=pointer.max_cell_size,
            fit_ratio=pointer.fit_ratio,
        )
        self.debouncer = PointerDebouncer(pointer.debounce_seconds, clock=clock or time.monotonic)
        self.log = logger if logger is not None else EditLogger()

    @classmethod
    def from_state(
        cls,
        state: PadState,
        settings: FontpadSettings | None = None,
        logger: EditLogger | None = None,
        clock: Callable[[], float] | None = None,
    ) -> "EditSession":
        """Start a session from persisted state, restoring its history."""
        grid = Grid(width=state.width, height=state.height, cells=list(state.dots))
        session = cls(grid=grid, settings=settings, logger=logger, clock=clock)
        session.history.restore(
            GridSnapshot(state.width, state.height, tuple(dots))
            for dots in state.history
            if len(dots) == state.width * state.height
        )
        return session

    def to_state(self) -> PadState:
        """Capture the pad and history for saving."""
        return PadState(
            width=self.grid.width,
            height=self.grid.height,
            dots=list(self.grid.cells),
            history=[list(entry.cells) for entry in self.history],
        )

    def _changed(self) -> None:
        self.history.observe(self.grid)

    def resize(self, axis: str, delta: int) -> None:
        """Grow or shrink the pad by one dot along an axis.

        Args:
            axis: "width" or "height"
            delta: -1 or +1

        Raises:
            ValueError: If axis is not width or height
        """
        if axis == "width":
            self.grid.resize_width(delta)
        elif axis == "height":
            self.grid.resize_height(delta)
        else:
            raise ValueError(f"Unknown axis: {axis}")
        self.log.log_resize(self.grid.width, self.grid.height)
        self._changed()

    def toggle(self, index: int) -> bool:
        """Flip one dot.

        Returns:
            True if the dot was flipped, False if index was out of range
        """
        try:
            self.grid.toggle(index)
        except OutOfRangeError as e:
            self.log.log_error("toggle", e)
            return False
        self.log.log_toggle(index, self.grid.cells[index])
        self._changed()
        return True

    def toggle_at(self, x: int, y: int) -> bool:
        """Flip the dot at column x, row y."""
        try:
            index = self.grid.index_of(x, y)
        except OutOfRangeError as e:
            self.log.log_error("toggle", e)
            return False
        return self.toggle(index)

    def clear(self) -> None:
        self.grid.clear()
        self.log.log_transform("clear")
        self._changed()

    def fill(self) -> None:
        self.grid.fill()
        self.log.log_transform("fill")
        self._changed()

    def transform(self, name: str) -> None:
        """Apply a named flip or shift (see TRANSFORMS).

        Raises:
            ValueError: If name is not a known transform
        """
        try:
            func = TRANSFORMS[name]
        except KeyError:
            raise ValueError(f"Unknown transform: {name}") from None
        self.grid.replace_cells(func(self.grid))
        self.log.log_transform(name)
        self._changed()

    def flip_horizontal(self) -> None:
        self.transform("flip-h")

    def flip_vertical(self) -> None:
        self.transform("flip-v")

    def shift_up(self) -> None:
        self.transform("up")

    def shift_down(self) -> None:
        self.transform("down")

    def shift_left(self) -> None:
        self.transform("left")

    def shift_right(self) -> None:
        self.transform("right")

    def cell_at(self, x: int, y: int) -> int | None:
        """Find the cell under a pointer position."""
        return self.addresser.cell_at(x, y, self.grid.width, self.grid.height)

    def pointer_drag(self, x: int, y: int, now: float | None = None) -> int | None:
        """Handle the pointer held down at a position.

        Args:
            x: Pointer x in pixels
            y: Pointer y in pixels
            now: Event time in seconds (read from the session clock if None)

        Returns:
            Index of the toggled cell, or None if nothing was toggled
        """
        index = self.cell_at(x, y)
        if index is None or not self.debouncer.should_toggle(index, now):
            return None
        return index if self.toggle(index) else None

    def pointer_release(self) -> None:
        """Handle the pointer being released."""
        self.debouncer.reset()

    def export_text(self) -> str:
        """Encode the pad for the clipboard and commit it to the history."""
        text = codec.encode(self.grid)
        self._changed()
        self.history.commit()
        self.log.log_copy(self.grid.width, self.grid.height, len(self.history))
        return text

    def import_text(self, text: str) -> bool:
        """Replace the dots with pasted text.

        Returns:
            True if the text was applied, False if it was rejected (the pad
            is left unchanged)
        """
        try:
            codec.apply_text(self.grid, text)
        except CodecError as e:
            self.log.log_paste_error(e)
            return False
        self.log.log_paste(self.grid.width, self.grid.height)
        self._changed()
        return True

    @property
    def last_paste_error(self) -> str | None:
        """Message of the most recent rejected paste."""
        for operation, message in reversed(self.log.stats.errors):
            if operation == "paste":
                return message
        return None
