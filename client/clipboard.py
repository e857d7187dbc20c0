"""
Clipboard access.
"""

import logging
from typing import Protocol

import pyperclip

from client.errors import ClipboardUnavailable


class Clipboard(Protocol):
    def copy(self, text: str) -> None:
        ...


class SystemClipboard:
    """Platform clipboard through pyperclip."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logging.error(f"Clipboard write failed: {e}")
            raise ClipboardUnavailable("Clipboard is not available on this system") from e
