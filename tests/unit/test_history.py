"""Unit tests for the history track."""

from fontpad.core.history import HistoryTrack
from fontpad.domain import Grid


def committed(history: HistoryTrack, grid: Grid) -> bool:
    history.observe(grid)
    return history.commit()


class TestHistoryTrack:
    """Tests for HistoryTrack class."""

    def test_starts_empty(self) -> None:
        """Test a new track has no entries."""
        history = HistoryTrack(50, Grid())
        assert len(history) == 0
        assert history.last is None
        assert history.rendered_width == 0
        assert history.size == (5, 5)

    def test_commit_pushes_snapshot(self) -> None:
        """Test committing records the observed grid."""
        grid = Grid()
        history = HistoryTrack(50, grid)
        grid.toggle(12)
        assert committed(history, grid)
        assert history.last == grid.snapshot()

    def test_commit_dedups_unchanged_grid(self) -> None:
        """Test repeated commits of the same grid push one entry."""
        grid = Grid()
        history = HistoryTrack(50, grid)
        for _ in range(5):
            committed(history, grid)
        assert len(history) == 1

    def test_commit_allows_non_consecutive_duplicates(self) -> None:
        """Test only consecutive duplicates are collapsed."""
        grid = Grid()
        history = HistoryTrack(50, grid)
        committed(history, grid)
        grid.toggle(0)
        committed(history, grid)
        grid.toggle(0)
        committed(history, grid)
        assert len(history) == 3

    def test_commit_before_observe(self) -> None:
        """Test committing with nothing observed does nothing."""
        history = HistoryTrack(50)
        assert not history.commit()
        assert history.size is None

    def test_observe_does_not_push(self) -> None:
        """Test observing edits never adds entries."""
        grid = Grid()
        history = HistoryTrack(50, grid)
        grid.toggle(1)
        history.observe(grid)
        assert len(history) == 0

    def test_size_change_clears(self) -> None:
        """Test resizing the grid invalidates all entries."""
        grid = Grid()
        history = HistoryTrack(50, grid)
        committed(history, grid)
        grid.toggle(2)
        committed(history, grid)
        assert len(history) == 2

        grid.resize_height(1)
        history.observe(grid)
        assert len(history) == 0
        assert history.size == (5, 6)

    def test_same_size_observe_keeps_entries(self) -> None:
        """Test edits that keep the size keep the entries."""
        grid = Grid()
        history = HistoryTrack(50, grid)
        committed(history, grid)
        grid.fill()
        history.observe(grid)
        assert len(history) == 1

    def test_evicts_oldest_over_budget(self) -> None:
        """Test the oldest entries are dropped past the width budget."""
        grid = Grid()
        history = HistoryTrack(50, grid)
        for i in range(11):
            grid.toggle(i)
            committed(history, grid)
        # 50 dots of budget fit ten 5-wide entries
        assert len(history) == 10
        assert history.rendered_width == 50
        assert history.entries[0].cells[:2] == (True, True)

    def test_entry_wider_than_budget(self) -> None:
        """Test nothing is kept when one entry exceeds the budget."""
        grid = Grid()
        history = HistoryTrack(4, grid)
        assert committed(history, grid)
        assert len(history) == 0

    def test_restore_filters_and_dedups(self) -> None:
        """Test restoring drops wrong-size and repeated entries."""
        grid = Grid()
        history = HistoryTrack(50, grid)
        blank = Grid().snapshot()
        wide = Grid(6, 5).snapshot()
        history.restore([blank, blank, wide, grid.snapshot()])
        assert list(history) == [blank]
