from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from fullstack_builder.llm.providers.base import LLMProvider
from fullstack_builder.llm.request_builder import GenerationRequest


class GeminiProvider(LLMProvider):
    """
    Gemini Developer API via Google Gen AI SDK (google-genai).
    The API key is passed in by the caller; this class never reads the environment.
    """

    name = "gemini"

    def __init__(self, api_key: str):
        # This client uses the Gemini Developer API when given an API key.
        self.client = genai.Client(api_key=api_key)

    def _config(self, request: GenerationRequest) -> types.GenerateContentConfig:
        kwargs: Dict[str, Any] = {
            "system_instruction": request.system_instruction,
            "response_mime_type": request.response_mime_type,
            "response_schema": request.response_schema,
        }
        if request.temperature is not None:
            kwargs["temperature"] = request.temperature
        return types.GenerateContentConfig(**kwargs)

    async def generate(self, request: GenerationRequest) -> Optional[str]:
        resp = await self.client.aio.models.generate_content(
            model=request.model,
            contents=[
                types.Content(role="user", parts=[types.Part(text=request.prompt)]),
            ],
            config=self._config(request),
        )
        return resp.text
