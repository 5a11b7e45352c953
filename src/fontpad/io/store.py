"""Persisted pad state.

This module provides the PadState model that records the last used pad and
the PadStore class that keeps it in a JSON file between sessions.
"""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from fontpad.domain.grid import DEFAULT_SIZE, MAX_SIZE, MIN_SIZE
from fontpad.exceptions import SettingsLoadError, SettingsSaveError


class PadState(BaseModel):
    """Last used pad.

    Attributes:
        width: Pad width in dots
        height: Pad height in dots
        dots: Dot values in row-major order
        history: Dot values of each history entry, oldest first
    """

    width: int = Field(default=DEFAULT_SIZE, ge=MIN_SIZE, le=MAX_SIZE)
    height: int = Field(default=DEFAULT_SIZE, ge=MIN_SIZE, le=MAX_SIZE)
    dots: list[bool] = Field(default_factory=lambda: [False] * (DEFAULT_SIZE * DEFAULT_SIZE))
    history: list[list[bool]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_dot_count(self) -> "PadState":
        expected = self.width * self.height
        if len(self.dots) != expected:
            raise ValueError(
                f"dots holds {len(self.dots)} values, expected {expected} "
                f"for a {self.width}x{self.height} pad"
            )
        return self


class PadStore:
    """Loads and saves the pad state file.

    Example:
        store = PadStore(Path("~/.fontpad/pad.json").expanduser())
        state = store.load()
        store.save(state)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: Path to the JSON state file
        """
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        """Check if a state file has been written."""
        return self._path.is_file()

    def load(self) -> PadState:
        """Read the pad state.

        Returns:
            Stored state, or the default 5x5 blank pad if no file exists

        Raises:
            SettingsLoadError: If the file exists but is unreadable or invalid
        """
        if not self._path.exists():
            return PadState()

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SettingsLoadError(str(self._path), str(e)) from e

        try:
            return PadState.model_validate_json(text)
        except ValidationError as e:
            raise SettingsLoadError(
                str(self._path), f"{e.error_count()} invalid field(s)"
            ) from e

    def save(self, state: PadState) -> None:
        """Write the pad state, creating parent directories as needed.

        Raises:
            SettingsSaveError: If the file cannot be written
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise SettingsSaveError(str(self._path), str(e)) from e
