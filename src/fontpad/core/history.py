"""History strip of committed pads.

The history track keeps the pads that were committed (copied out) since the
pad last changed size, drawn side by side as an onion-skin strip. Entries are
all the same size, so the strip is ``width * len(entries)`` dots wide and the
oldest entries are dropped once that exceeds the width budget.
"""

from collections.abc import Iterable, Iterator

from fontpad.domain.grid import Grid, GridSnapshot


class HistoryTrack:
    """Bounded, ordered sequence of committed grid snapshots.

    Example:
        history = HistoryTrack(width_budget=50, grid=grid)
        grid.toggle(12)
        history.observe(grid)
        history.commit()
    """

    def __init__(self, width_budget: int, grid: Grid | None = None) -> None:
        """Initialize the history track.

        Args:
            width_budget: Dots available for drawing entries side by side
            grid: Grid to start tracking, if any
        """
        self.width_budget = width_budget
        self.entries: list[GridSnapshot] = []
        self._current: GridSnapshot | None = grid.snapshot() if grid is not None else None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[GridSnapshot]:
        return iter(self.entries)

    @property
    def size(self) -> tuple[int, int] | None:
        """Size of the tracked grid, or None before anything was observed."""
        if self._current is None:
            return None
        return self._current.size

    @property
    def last(self) -> GridSnapshot | None:
        """Most recent entry."""
        return self.entries[-1] if self.entries else None

    @property
    def rendered_width(self) -> int:
        """Width in dots of the strip holding every entry."""
        if self._current is None:
            return 0
        return self._current.width * len(self.entries)

    def observe(self, grid: Grid) -> None:
        """Sync with the grid after an edit.

        A change of grid size invalidates every entry. Nothing is pushed.
        """
        snapshot = grid.snapshot()
        if self._current is not None and self._current.size != snapshot.size:
            self.entries.clear()
        self._current = snapshot

    def commit(self) -> bool:
        """Push the tracked grid onto the strip.

        Returns:
            True if an entry was added, False if it matched the last entry
            or nothing has been observed yet
        """
        if self._current is None or self._current == self.last:
            return False
        self.entries.append(self._current)
        self._evict()
        return True

    def clear(self) -> None:
        """Drop every entry."""
        self.entries.clear()

    def restore(self, entries: Iterable[GridSnapshot]) -> None:
        """Replace the entries, keeping only those the size of the tracked grid.

        Consecutive duplicates are collapsed and the width budget applied.
        """
        self.entries.clear()
        for entry in entries:
            if self._current is not None and entry.size != self._current.size:
                continue
            if entry != self.last:
                self.entries.append(entry)
        self._evict()

    def _evict(self) -> None:
        while self.entries and self.rendered_width > self.width_budget:
            self.entries.pop(0)
