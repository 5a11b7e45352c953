"""Unit tests for the pad text codec."""

import pytest

from fontpad.core.codec import apply_text, decode, encode
from fontpad.domain import Grid
from fontpad.exceptions import InvalidTokenError, LengthMismatchError


class TestEncode:
    """Tests for encode function."""

    def test_center_dot(self) -> None:
        """Test a 5x5 pad with only the center dot set."""
        grid = Grid()
        grid.toggle(12)
        lines = encode(grid).split("\n")

        assert len(lines) == 5
        for line in lines:
            assert line.endswith(",")
            assert len(line.rstrip(",").split(",")) == 5
        assert lines[2] == "false,false,true,false,false,"
        assert encode(grid).count("true") == 1

    def test_rows_follow_width(self) -> None:
        """Test line breaks follow the grid width, not the height."""
        grid = Grid.blank(7, 4)
        grid.fill()
        lines = encode(grid).split("\n")
        assert len(lines) == 4
        assert lines[0] == "true," * 7

    def test_no_trailing_newline(self) -> None:
        """Test surrounding whitespace is trimmed."""
        text = encode(Grid())
        assert text == text.strip()


class TestDecode:
    """Tests for decode function."""

    def test_round_trip(self) -> None:
        """Test decoding an encoded grid gives back its dots."""
        grid = Grid.blank(6, 9)
        for i in (0, 5, 13, 40, 53):
            grid.toggle(i)
        assert decode(encode(grid), len(grid)) == grid.cells

    def test_single_line(self) -> None:
        """Test values do not need to be split into rows."""
        text = ",".join(["true"] + ["false"] * 15)
        result = decode(text, 16)
        assert result[0] is True
        assert not any(result[1:])

    def test_whitespace_and_trailing_commas(self) -> None:
        """Test surrounding whitespace and trailing commas are ignored."""
        text = "  true , false,\n" + "false," * 14 + ",,\n\n"
        assert decode(text, 16)[:2] == [True, False]

    def test_length_mismatch(self) -> None:
        """Test a short input reports expected and found counts."""
        with pytest.raises(LengthMismatchError) as exc_info:
            decode("false," * 24, 25)
        assert exc_info.value.expected == 25
        assert exc_info.value.found == 24
        assert "expected 25 found 24" in str(exc_info.value)

    def test_empty_text(self) -> None:
        """Test empty input is a single empty value."""
        with pytest.raises(LengthMismatchError) as exc_info:
            decode("", 16)
        assert exc_info.value.found == 1

    @pytest.mark.parametrize("token", ["TRU", "True", "1", "", "yes"])
    def test_invalid_token(self, token: str) -> None:
        """Test values other than exactly true/false are rejected."""
        values = ["false"] * 16
        values[5] = token
        with pytest.raises(InvalidTokenError) as exc_info:
            decode(",".join(values), 16)
        assert exc_info.value.position == 5
        assert exc_info.value.token == token


class TestApplyText:
    """Tests for apply_text function."""

    def test_applies_valid_text(self) -> None:
        """Test valid text replaces the dots."""
        source = Grid()
        source.toggle(12)
        target = Grid()
        apply_text(target, encode(source))
        assert target.cells == source.cells

    def test_length_mismatch_leaves_grid(self) -> None:
        """Test a wrong count leaves the grid untouched."""
        grid = Grid()
        grid.toggle(3)
        before = list(grid.cells)
        with pytest.raises(LengthMismatchError):
            apply_text(grid, "true," * 24)
        assert grid.cells == before

    def test_invalid_token_leaves_grid(self) -> None:
        """Test a bad value late in the text leaves the grid untouched."""
        grid = Grid()
        text = "true," * 24 + "TRU"
        with pytest.raises(InvalidTokenError):
            apply_text(grid, text)
        assert not any(grid.cells)
