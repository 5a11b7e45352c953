"""Domain models for fontpad.

This module contains the dot grid that a glyph is drawn on and the
immutable snapshots kept by the history strip.

Key classes:
- Grid: Mutable pad of on/off dots with its size
- GridSnapshot: Frozen copy of a grid's dots at one point in time
"""

from fontpad.domain.grid import (
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    Grid,
    GridSnapshot,
)

__all__: list[str] = [
    # Size bounds
    "DEFAULT_SIZE",
    "MAX_SIZE",
    "MIN_SIZE",
    # Core types
    "Grid",
    "GridSnapshot",
]
