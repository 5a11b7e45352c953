"""Unit tests for EditSession."""

import pytest

from fontpad.config import FontpadSettings, HistoryConfig
from fontpad.core.codec import encode
from fontpad.core.session import EditSession
from fontpad.domain import Grid
from fontpad.io.store import PadState


@pytest.fixture
def session() -> EditSession:
    """Session on a blank 5x5 pad."""
    return EditSession()


class TestEditing:
    """Tests for editing operations."""

    def test_defaults(self, session: EditSession) -> None:
        """Test a new session edits a blank default pad."""
        assert session.grid.size == (5, 5)
        assert len(session.history) == 0

    def test_toggle(self, session: EditSession) -> None:
        """Test toggling a dot."""
        assert session.toggle(12)
        assert session.grid.cells[12]
        assert session.log.stats.toggle_count == 1

    def test_toggle_out_of_range(self, session: EditSession) -> None:
        """Test out of range toggles are reported, not raised."""
        assert not session.toggle(25)
        assert not any(session.grid.cells)
        assert session.log.stats.errors[0][0] == "toggle"

    def test_toggle_at(self, session: EditSession) -> None:
        """Test toggling by column and row."""
        assert session.toggle_at(4, 1)
        assert session.grid.cells[9]
        assert not session.toggle_at(5, 1)
        assert session.log.stats.errors[-1][0] == "toggle"
        assert sum(session.grid.cells) == 1

    def test_resize(self, session: EditSession) -> None:
        """Test resizing either axis."""
        session.fill()
        session.resize("width", 1)
        session.resize("height", -1)
        assert session.grid.size == (6, 4)
        assert not any(session.grid.cells)

    def test_resize_unknown_axis(self, session: EditSession) -> None:
        """Test an unknown axis is rejected."""
        with pytest.raises(ValueError, match="Unknown axis"):
            session.resize("depth", 1)

    def test_named_transforms(self, session: EditSession) -> None:
        """Test flips and shifts by method and by name."""
        session.toggle(0)
        session.flip_horizontal()
        assert session.grid.cells[4]
        session.flip_vertical()
        assert session.grid.cells[24]
        session.shift_up()
        assert session.grid.cells[19]
        session.shift_down()
        assert session.grid.cells[24]
        session.transform("right")
        session.transform("left")
        assert session.grid.cells[24]
        assert sum(session.grid.cells) == 1

    def test_unknown_transform(self, session: EditSession) -> None:
        """Test an unknown transform name is rejected."""
        with pytest.raises(ValueError, match="Unknown transform"):
            session.transform("spin")


class TestPointer:
    """Tests for pointer handling."""

    def test_click_center(self, session: EditSession) -> None:
        """Test the pad center toggles the middle dot."""
        assert session.pointer_drag(180, 124, now=0.0) == 12
        assert session.grid.cells[12]

    def test_off_pad(self, session: EditSession) -> None:
        """Test positions off the pad toggle nothing."""
        assert session.pointer_drag(0, 0, now=0.0) is None
        assert not any(session.grid.cells)

    def test_held_pointer_debounced(self, session: EditSession) -> None:
        """Test holding on one cell toggles once per interval."""
        assert session.pointer_drag(180, 124, now=0.0) == 12
        assert session.pointer_drag(181, 125, now=0.1) is None
        assert session.grid.cells[12]
        assert session.pointer_drag(180, 124, now=0.3) == 12
        assert not session.grid.cells[12]

    def test_release_resets(self, session: EditSession) -> None:
        """Test releasing allows an immediate retoggle."""
        session.pointer_drag(180, 124, now=0.0)
        session.pointer_release()
        assert session.pointer_drag(180, 124, now=0.01) == 12
        assert not session.grid.cells[12]

    def test_drag_across_cells(self, session: EditSession) -> None:
        """Test dragging over a row toggles each cell once."""
        for i, x in enumerate(range(135, 235, 10)):
            session.pointer_drag(x, 80, now=i * 0.01)
        assert session.grid.cells[:5] == [True] * 5


class TestClipboardText:
    """Tests for export_text and import_text."""

    def test_export_commits_history(self, session: EditSession) -> None:
        """Test exporting encodes the pad and records it once."""
        session.toggle(12)
        text = session.export_text()
        assert text == encode(session.grid)
        session.export_text()
        assert len(session.history) == 1
        assert session.log.stats.copy_count == 2

    def test_resize_clears_history(self, session: EditSession) -> None:
        """Test a size change drops the history."""
        session.export_text()
        session.toggle(0)
        session.export_text()
        assert len(session.history) == 2
        session.resize("width", 1)
        assert len(session.history) == 0

    def test_import_valid(self, session: EditSession) -> None:
        """Test importing valid text."""
        source = Grid()
        source.toggle(7)
        assert session.import_text(encode(source))
        assert session.grid.cells == source.cells

    def test_import_invalid_keeps_pad(self, session: EditSession) -> None:
        """Test rejected text leaves the pad and reports why."""
        session.toggle(3)
        assert not session.import_text("true," * 24)
        assert session.grid.cells[3]
        assert sum(session.grid.cells) == 1
        assert session.log.stats.failed_paste_count == 1
        assert "expected 25 found 24" in session.last_paste_error

    def test_no_paste_error(self, session: EditSession) -> None:
        """Test no error is reported before a failed paste."""
        assert session.last_paste_error is None


class TestState:
    """Tests for state conversion."""

    def test_round_trip(self) -> None:
        """Test a session survives conversion to and from state."""
        session = EditSession()
        session.toggle(2)
        session.export_text()
        session.toggle(3)

        restored = EditSession.from_state(session.to_state())
        assert restored.grid == session.grid
        assert list(restored.history) == list(session.history)

    def test_from_state_drops_bad_history(self) -> None:
        """Test history entries of the wrong size are ignored."""
        state = PadState(width=4, height=4, dots=[False] * 16, history=[[True] * 25, [True] * 16])
        session = EditSession.from_state(state)
        assert len(session.history) == 1
        assert session.grid.size == (4, 4)

    def test_history_budget_from_settings(self) -> None:
        """Test the width budget comes from settings."""
        settings = FontpadSettings(history=HistoryConfig(width_budget=10))
        session = EditSession(settings=settings)
        for i in range(4):
            session.toggle(i)
            session.export_text()
        assert len(session.history) == 2
