"""Pad state and clipboard I/O for fontpad.

This module handles everything that leaves the process:

- Loading and saving the last used pad (PadStore)
- Exchanging pad text with the system clipboard (Clipboard)

Key classes:
- PadState: Persisted pad size, dots and history
- PadStore: Reads and writes PadState as JSON
- Clipboard: Thin wrapper over the system clipboard
"""

from fontpad.io.clipboard import Clipboard
from fontpad.io.store import PadState, PadStore

__all__ = [
    "Clipboard",
    "PadState",
    "PadStore",
]
