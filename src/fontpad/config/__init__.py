"""Configuration management for fontpad.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GridConfig: Pad size bounds and defaults
- PointerConfig: Pointer addressing and drag debounce settings
- HistoryConfig: History strip settings
- StorageConfig: Pad state file location
- LoggingConfig: Logging settings
- FontpadSettings: Main application settings
"""

from fontpad.config.settings import (
    FontpadSettings,
    GridConfig,
    HistoryConfig,
    LoggingConfig,
    PointerConfig,
    StorageConfig,
    get_default_settings,
)

__all__ = [
    "FontpadSettings",
    "GridConfig",
    "HistoryConfig",
    "LoggingConfig",
    "PointerConfig",
    "StorageConfig",
    "get_default_settings",
]
