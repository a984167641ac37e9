from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

from fullstack_builder.llm.errors import GenerationError
from fullstack_builder.llm.generation_client import GenerationClient
from fullstack_builder.project_state.models import GeneratedProject
from fullstack_builder.utils.logger import get_logger

EXAMPLE_IDEAS: List[str] = [
    "Build a Calculator",
    "To-Do List App",
    "Weather Dashboard",
    "Currency Converter",
]

FALLBACK_ERROR = "Something went wrong while generating the project. Please try again."


class EntryState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    ERROR = "error"
    HAS_RESULT = "has_result"


class EntryScreen:
    """
    Idea input screen.

    Only one generation is in flight at a time. Every submission takes a
    generation number; reset() and close() bump it, so an answer that arrives
    for an older number is dropped instead of being applied.
    """

    def __init__(self, client: GenerationClient, presets: Sequence[str] = EXAMPLE_IDEAS) -> None:
        self.client = client
        self.presets = list(presets)
        self.idea = ""
        self.state = EntryState.IDLE
        self.error: Optional[str] = None
        self.project: Optional[GeneratedProject] = None
        self._generation = 0
        self._closed = False
        self.logger = get_logger(self.__class__.__name__)

    # ---------- derived view flags ----------

    @property
    def input_enabled(self) -> bool:
        return self.state in (EntryState.IDLE, EntryState.ERROR)

    @property
    def can_submit(self) -> bool:
        return self.input_enabled and bool(self.idea.strip())

    # ---------- transitions ----------

    def set_idea(self, text: str) -> bool:
        if not self.input_enabled:
            return False
        self.idea = text
        return True

    def select_preset(self, index: int) -> bool:
        if not 0 <= index < len(self.presets):
            raise IndexError(f"No preset idea at position {index}")
        return self.set_idea(self.presets[index])

    async def submit(self) -> bool:
        """Run one generation. Returns False when the submit was ignored."""
        if self._closed or not self.can_submit:
            return False

        self._generation += 1
        generation = self._generation
        self.state = EntryState.SUBMITTING
        self.error = None
        self.logger.debug("submit #%d: %r", generation, self.idea)

        project: Optional[GeneratedProject] = None
        error: Optional[str] = None
        try:
            project = await self.client.generate(self.idea)
        except GenerationError as exc:
            error = exc.message
        except Exception as exc:  # noqa: BLE001
            self.logger.exception("Application Error: %s", exc)
            error = str(exc) or FALLBACK_ERROR

        if self._closed or generation != self._generation:
            self.logger.info("Discarding stale result of submission #%d", generation)
            return False

        if project is not None:
            self.project = project
            self.state = EntryState.HAS_RESULT
        else:
            self.error = error or FALLBACK_ERROR
            self.state = EntryState.ERROR
        self.logger.debug("submit #%d finished in state %s", generation, self.state.value)
        return True

    def reset(self) -> None:
        self._generation += 1
        self.project = None
        self.error = None
        self.idea = ""
        self.state = EntryState.IDLE

    def close(self) -> None:
        """Tear the screen down; any in-flight answer is thrown away."""
        self._closed = True
        self._generation += 1
