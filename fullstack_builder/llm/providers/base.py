from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from fullstack_builder.llm.request_builder import GenerationRequest


class LLMProvider(ABC):
    """A hosted model that accepts a prompt plus schema and returns JSON text."""

    name = "provider"

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> Optional[str]:
        """Return the raw response text, or None/"" when the model sent nothing."""
        raise NotImplementedError
