"""Exception hierarchy for Font Pad."""


class FontpadError(Exception):
    """Base exception for all Font Pad errors."""

    pass


class GridError(FontpadError):
    """Errors related to the dot grid."""

    pass


class OutOfRangeError(GridError):
    """Cell index outside the grid's cell buffer."""

    def __init__(self, index: int, cell_count: int) -> None:
        self.index = index
        self.cell_count = cell_count
        super().__init__(f"Cell {index} is out of range (grid has {cell_count} cells)")


class CodecError(FontpadError):
    """Errors decoding pad text."""

    pass


class LengthMismatchError(CodecError):
    """Pasted text holds the wrong number of values."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Invalid length, expected {expected} found {found}")


class InvalidTokenError(CodecError):
    """Pasted text holds a value other than true or false."""

    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(
            f"Invalid value '{token}' at position {position}, expected 'true' or 'false'"
        )


class ClipboardUnavailableError(FontpadError):
    """The system clipboard could not be read or written."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Clipboard unavailable: {reason}")


class SettingsError(FontpadError):
    """Errors related to the persisted pad state."""

    pass


class SettingsLoadError(SettingsError):
    """Error loading the pad state file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load pad state '{path}': {reason}")


class SettingsSaveError(SettingsError):
    """Error saving the pad state file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save pad state '{path}': {reason}")
