"""Command-line interface for fontpad.

This module provides the CLI using Typer with rich output for
drawing the pad in the terminal.

Key features:
- Pad, preview and history strip rendering
- Dot toggling by cell or by pointer position
- Flips, shifts, resizing, clear and fill
- Clipboard and file copy/paste of the pad text form
"""

from fontpad.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
