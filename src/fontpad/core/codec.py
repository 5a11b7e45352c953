"""Text form of a pad.

A pad is exchanged as comma separated ``true``/``false`` values in row-major
order, one grid row per line::

    false,false,false,false,false,
    false,false,true,false,false,

Decoding checks the value count and every value before anything is changed,
so bad input never leaves a pad half pasted.
"""

from fontpad.domain.grid import Grid, GridSnapshot
from fontpad.exceptions import InvalidTokenError, LengthMismatchError

TRUE_TOKEN = "true"
FALSE_TOKEN = "false"


def encode(grid: Grid | GridSnapshot) -> str:
    """Convert a grid to its text form.

    Every value is followed by a comma and each row ends with a newline;
    surrounding whitespace is trimmed, so the last row keeps its comma.

    Args:
        grid: Grid or snapshot to encode

    Returns:
        Text form of the grid
    """
    output = []
    for i, value in enumerate(grid.cells, start=1):
        output.append(TRUE_TOKEN if value else FALSE_TOKEN)
        output.append(",")
        if i % grid.width == 0:
            output.append("\n")
    return "".join(output).strip()


def decode(text: str, expected: int) -> list[bool]:
    """Parse the text form of a grid.

    Args:
        text: Pasted text
        expected: Number of cells in the target grid

    Returns:
        Dot values in row-major order

    Raises:
        LengthMismatchError: If the number of values differs from expected
        InvalidTokenError: If a value is not exactly true or false
    """
    parts = text.strip().rstrip(",").split(",")
    if len(parts) != expected:
        raise LengthMismatchError(expected=expected, found=len(parts))

    tokens = [part.strip() for part in parts]
    for position, token in enumerate(tokens):
        if token not in (TRUE_TOKEN, FALSE_TOKEN):
            raise InvalidTokenError(token=token, position=position)

    return [token == TRUE_TOKEN for token in tokens]


def apply_text(grid: Grid, text: str) -> None:
    """Decode text and install it in the grid.

    The grid is only changed once the whole text has been validated.

    Raises:
        LengthMismatchError: If the number of values differs from the grid
        InvalidTokenError: If a value is not exactly true or false
    """
    grid.replace_cells(decode(text, len(grid.cells)))
