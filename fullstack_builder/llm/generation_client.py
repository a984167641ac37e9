from __future__ import annotations

import json
from typing import Callable, Mapping, Optional

from pydantic import ValidationError

from fullstack_builder.config import Settings, resolve_api_key
from fullstack_builder.llm.errors import (
    ConfigurationError,
    EmptyResponseError,
    GenerationError,
    MalformedResponseError,
    classify_error,
)
from fullstack_builder.llm.providers.base import LLMProvider
from fullstack_builder.llm.request_builder import build_request
from fullstack_builder.project_state.models import GeneratedProject
from fullstack_builder.utils.logger import get_logger

ProviderFactory = Callable[[str], LLMProvider]


def _gemini_factory(api_key: str) -> LLMProvider:
    from fullstack_builder.llm.providers.gemini_api import GeminiProvider

    return GeminiProvider(api_key=api_key)


def parse_project(text: str) -> GeneratedProject:
    """
    Turn the model's JSON text into a GeneratedProject.

    Raises MalformedResponseError when the text is not JSON, or when it is
    JSON but misses required fields / has no files.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"Could not parse the AI response as JSON: {exc}") from exc

    try:
        return GeneratedProject.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in exc.errors()
        )
        raise MalformedResponseError(f"The AI response is missing project data ({problems})") from exc


class GenerationClient:
    """
    Runs one idea -> project generation end to end.

    - reads the API key at call time (never cached)
    - builds the request (system instruction + schema)
    - calls the provider once, no retries
    - maps every failure onto a GenerationError subclass
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider_factory: ProviderFactory = _gemini_factory,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.settings = settings or Settings()
        self._provider_factory = provider_factory
        self._environ = environ
        self.logger = get_logger(self.__class__.__name__)

    async def generate(self, idea: str) -> GeneratedProject:
        api_key = resolve_api_key(self.settings, self._environ)
        if not api_key:
            self.logger.error("No API key in %s / %s", self.settings.api_key_env, self.settings.fallback_api_key_env)
            raise ConfigurationError()

        request = build_request(idea, model=self.settings.model, temperature=self.settings.temperature)
        provider_name = "provider"
        try:
            provider = self._provider_factory(api_key)
            provider_name = provider.name
            self.logger.info("Requesting project from %s model=%s idea=%r", provider_name, request.model, idea)
            text = await provider.generate(request)
        except GenerationError:
            raise
        except Exception as exc:  # noqa: BLE001
            error = classify_error(exc)
            self.logger.error("%s API error: %s (reported as %s)", provider_name, exc, type(error).__name__)
            raise error from exc

        if not text or not text.strip():
            self.logger.error("Provider %s returned an empty response", provider.name)
            raise EmptyResponseError()

        try:
            project = parse_project(text)
        except GenerationError as exc:
            self.logger.error("Unusable response from %s: %s", provider.name, exc.message)
            raise

        self.logger.info("Generated '%s' with %d files", project.project_title, len(project.files))
        return project
