from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

import pyperclip


class ClipboardError(RuntimeError):
    pass


class Clipboard(ABC):
    @abstractmethod
    def write(self, text: str) -> None:
        raise NotImplementedError


class SystemClipboard(Clipboard):
    """System clipboard through pyperclip (xclip/xsel/wl-copy, pbcopy or the Windows API)."""

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Could not write to clipboard: {exc}") from exc


class MemoryClipboard(Clipboard):
    """Keeps copied text in memory; used by --no-clipboard and in tests."""

    def __init__(self) -> None:
        self.history: List[str] = []

    @property
    def text(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def write(self, text: str) -> None:
        self.history.append(text)
