"""System clipboard access."""

import pyperclip

from fontpad.exceptions import ClipboardUnavailableError


class Clipboard:
    """Reads and writes plain text on the system clipboard."""

    def copy(self, text: str) -> None:
        """Put text on the clipboard.

        Raises:
            ClipboardUnavailableError: If no clipboard mechanism is available
        """
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(str(e)) from e

    def paste(self) -> str:
        """Get the clipboard's text.

        Raises:
            ClipboardUnavailableError: If no clipboard mechanism is available
        """
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailableError(str(e)) from e
