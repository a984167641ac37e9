from __future__ import annotations

from typing import Optional

from fullstack_builder.llm.generation_client import GenerationClient
from fullstack_builder.ui.clipboard import Clipboard, MemoryClipboard
from fullstack_builder.ui.entry_screen import EntryScreen, EntryState
from fullstack_builder.ui.result_screen import COPY_FEEDBACK_SECONDS, ResultScreen


class BuilderSession:
    """
    Wires the entry screen to the result screen.

    `result` exists exactly while the entry screen holds a project.
    """

    def __init__(
        self,
        client: GenerationClient,
        clipboard: Optional[Clipboard] = None,
        copy_feedback_seconds: float = COPY_FEEDBACK_SECONDS,
    ) -> None:
        self.entry = EntryScreen(client)
        self.clipboard = clipboard or MemoryClipboard()
        self.copy_feedback_seconds = copy_feedback_seconds
        self.result: Optional[ResultScreen] = None

    @property
    def showing_result(self) -> bool:
        return self.result is not None

    async def submit(self) -> bool:
        applied = await self.entry.submit()
        if applied and self.entry.state is EntryState.HAS_RESULT and self.entry.project is not None:
            self.result = ResultScreen(
                self.entry.project,
                self.clipboard,
                on_reset=self._back_to_entry,
                copy_feedback_seconds=self.copy_feedback_seconds,
            )
        return applied

    def _back_to_entry(self) -> None:
        self.result = None
        self.entry.reset()

    def close(self) -> None:
        if self.result is not None:
            self.result.closed = True
            self.result = None
        self.entry.close()
