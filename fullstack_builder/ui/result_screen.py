from __future__ import annotations

import asyncio
from enum import Enum
from typing import Callable, Optional

from fullstack_builder.project_state.models import GeneratedProject, ProjectFile
from fullstack_builder.ui.clipboard import Clipboard, ClipboardError
from fullstack_builder.utils.logger import get_logger

COPY_FEEDBACK_SECONDS = 2.0


class Tab(str, Enum):
    CODE = "code"
    GUIDE = "guide"


class ResultScreen:
    """
    File browser + guide view over one GeneratedProject.

    Picking a file always switches to the code tab; switching tabs never
    touches the file selection.
    """

    def __init__(
        self,
        project: GeneratedProject,
        clipboard: Clipboard,
        on_reset: Optional[Callable[[], None]] = None,
        copy_feedback_seconds: float = COPY_FEEDBACK_SECONDS,
    ) -> None:
        self.project = project
        self.clipboard = clipboard
        self.on_reset = on_reset
        self.copy_feedback_seconds = copy_feedback_seconds
        self.active_file_index = 0
        self.active_tab = Tab.CODE
        self.copy_feedback = False
        self.closed = False
        self.logger = get_logger(self.__class__.__name__)

    @property
    def active_file(self) -> ProjectFile:
        return self.project.files[self.active_file_index]

    def select_file(self, index: int) -> None:
        if not 0 <= index < len(self.project.files):
            raise IndexError(f"File index {index} out of range (0..{len(self.project.files) - 1})")
        self.active_file_index = index
        self.active_tab = Tab.CODE

    def select_tab(self, tab: Tab) -> None:
        self.active_tab = Tab(tab)

    def copy(self) -> None:
        """Copy the active file's code and show "Copied" for a fixed window."""
        loop = asyncio.get_running_loop()
        try:
            self.clipboard.write(self.active_file.code)
        except ClipboardError as exc:
            self.logger.warning("Clipboard write failed: %s", exc)

        self.copy_feedback = True
        # Not cancelable: a later copy does not extend the first window.
        loop.call_later(self.copy_feedback_seconds, self._clear_copy_feedback)

    def _clear_copy_feedback(self) -> None:
        if self.closed:
            return
        self.copy_feedback = False

    def reset(self) -> None:
        self.closed = True
        if self.on_reset is not None:
            self.on_reset()
