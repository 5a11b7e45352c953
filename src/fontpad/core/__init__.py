"""Core editing algorithms for fontpad.

This module contains the core algorithms for:

- Grid transforms (mirroring, wrap-around scrolling)
- Pointer addressing (screen position to cell index, drag debounce)
- Text encoding and validated decoding of pads
- History tracking (bounded strip of committed pads)

Transforms and the codec are pure functions; HistoryTrack and EditSession
hold the only mutable editing state.

Key functions:
- flip_horizontal / flip_vertical: Mirror the pad
- shift_up / shift_down / shift_left / shift_right: Scroll the pad
- encode / decode / apply_text: Pad text form

Key classes:
- CellAddresser: Maps pointer positions to cells
- PointerDebouncer: Rate limits toggles while dragging
- HistoryTrack: Bounded history strip
- EditSession: A pad being edited
"""

from fontpad.core.addressing import CellAddresser, PointerDebouncer, Region
from fontpad.core.codec import apply_text, decode, encode
from fontpad.core.history import HistoryTrack
from fontpad.core.session import EditSession
from fontpad.core.transform import (
    TRANSFORMS,
    flip_horizontal,
    flip_vertical,
    shift_down,
    shift_left,
    shift_right,
    shift_up,
)

__all__ = [
    # Addressing classes
    "CellAddresser",
    "PointerDebouncer",
    "Region",
    # Session classes
    "EditSession",
    "HistoryTrack",
    # Transform functions
    "TRANSFORMS",
    "apply_text",
    "decode",
    "encode",
    "flip_horizontal",
    "flip_vertical",
    "shift_down",
    "shift_left",
    "shift_right",
    "shift_up",
]
