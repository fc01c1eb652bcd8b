"""Clipboard access through a Tk widget."""

import tkinter as tk

from dayscounter.exceptions import ClipboardError


class TkClipboard:
    """Clipboard adapter backed by the clipboard of a Tk widget."""

    def __init__(self, widget: tk.Misc):
        self.widget = widget

    def get_text(self) -> str | None:
        try:
            return self.widget.clipboard_get()
        except tk.TclError:
            # Tk raises when the clipboard is empty or holds no text
            return None

    def set_text(self, text: str) -> None:
        try:
            self.widget.clipboard_clear()
            self.widget.clipboard_append(text)
            # Keep the selection after the window closes
            self.widget.update()
        except tk.TclError as e:
            raise ClipboardError(f"Could not write to clipboard: {e}") from e
