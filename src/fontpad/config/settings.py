"""Configuration settings for Font Pad."""

from pathlib import Path

from pydantic import BaseModel, Field

from fontpad.domain.grid import DEFAULT_SIZE, MAX_SIZE, MIN_SIZE


def default_state_path() -> Path:
    """Location of the pad state file when none is given."""
    return Path.home() / ".fontpad" / "pad.json"


class GridConfig(BaseModel):
    """Configuration for a fresh pad."""

    default_width: int = Field(
        default=DEFAULT_SIZE,
        ge=MIN_SIZE,
        le=MAX_SIZE,
        description="Width of a new pad in dots",
    )
    default_height: int = Field(
        default=DEFAULT_SIZE,
        ge=MIN_SIZE,
        le=MAX_SIZE,
        description="Height of a new pad in dots",
    )


class PointerConfig(BaseModel):
    """Configuration for mapping pointer positions onto the pad.

    The pad is drawn inside a square region; the whole grid is scaled to fit
    `fit_ratio` of the region's smaller side with square cells no larger than
    `max_cell_size` pixels.
    """

    region_left: int = Field(default=60, description="Left edge of the pad region in pixels")
    region_top: int = Field(default=4, description="Top edge of the pad region in pixels")
    region_size: int = Field(
        default=240,
        ge=1,
        description="Side length of the square pad region in pixels",
    )
    max_cell_size: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Largest cell size in pixels",
    )
    fit_ratio: float = Field(
        default=0.98,
        gt=0.0,
        le=1.0,
        description="Share of the region's smaller side used by the grid",
    )
    debounce_seconds: float = Field(
        default=0.2,
        ge=0.0,
        le=5.0,
        description="Minimum time between toggles of the same cell while dragging",
    )


class HistoryConfig(BaseModel):
    """Configuration for the history strip."""

    width_budget: int = Field(
        default=50,
        ge=0,
        description="Dots available for drawing history entries side by side",
    )


class StorageConfig(BaseModel):
    """Where the last used pad is kept."""

    state_path: Path = Field(
        default_factory=default_state_path,
        description="Path to the pad state file",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FontpadSettings(BaseModel):
    """Main application settings."""

    grid: GridConfig = Field(default_factory=GridConfig)
    pointer: PointerConfig = Field(default_factory=PointerConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FontpadSettings:
    """Get default application settings."""
    return FontpadSettings()
