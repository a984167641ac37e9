import asyncio
import json
from typing import List, Optional

import pytest

from fullstack_builder.config import Settings
from fullstack_builder.llm.generation_client import GenerationClient
from fullstack_builder.llm.providers.base import LLMProvider
from fullstack_builder.llm.request_builder import GenerationRequest
from fullstack_builder.ui.clipboard import MemoryClipboard


class FakeProvider(LLMProvider):
    """Stands in for Gemini: returns canned text or raises, optionally waiting on a gate."""

    name = "fake"

    def __init__(self, text: Optional[str] = None, error: Optional[BaseException] = None):
        self.text = text
        self.error = error
        self.gate: Optional[asyncio.Event] = None
        self.requests: List[GenerationRequest] = []
        self.api_keys: List[str] = []

    async def generate(self, request: GenerationRequest) -> Optional[str]:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def sample_payload() -> dict:
    return {
        "projectTitle": "Calculator",
        "domain": "Utilities",
        "techStack": "HTML/CSS/JS + Python Flask",
        "folderStructure": "calculator/\n├── frontend/\n└── backend/\n",
        "files": [
            {"fileName": "backend/app.py", "code": "from flask import Flask\napp = Flask(__name__)\n", "language": "python"},
            {"fileName": "frontend/index.html", "code": "<!doctype html>\n<html></html>\n", "language": "html"},
        ],
        "apiFlowExplanation": "POST /api/calculate\n  body: {\"a\": 1, \"b\": 2}",
        "howToRun": ["cd backend", "pip install -r requirements.txt", "python app.py"],
        "conceptExplanation": "The browser sends numbers.\nThe server adds them.",
        "vivaQuestions": [
            {"question": "What is CORS?", "answer": "Cross-origin resource sharing."},
            {"question": "Why Flask?", "answer": "It is small."},
        ],
        "futureEnhancements": ["Add history", "Add scientific mode"],
    }


@pytest.fixture
def provider(sample_payload) -> FakeProvider:
    return FakeProvider(text=json.dumps(sample_payload))


@pytest.fixture
def environ() -> dict:
    return {"API_KEY": "test-key"}


@pytest.fixture
def client(provider, environ) -> GenerationClient:
    def factory(api_key: str) -> LLMProvider:
        provider.api_keys.append(api_key)
        return provider

    return GenerationClient(settings=Settings(model="test-model"), provider_factory=factory, environ=environ)


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()
