from __future__ import annotations

from typing import Optional


class GenerationError(Exception):
    """Base class for every failure a generation call can report to the UI."""

    default_message = "Failed to generate project."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(GenerationError):
    default_message = "API Key not found. Please check your environment configuration."


class AuthError(GenerationError):
    default_message = "Access denied. Invalid API Key."


class RateLimitError(GenerationError):
    default_message = "Too many requests. Please wait a moment."


class UpstreamError(GenerationError):
    pass


class EmptyResponseError(GenerationError):
    default_message = "The AI returned an empty response. Please try again."


class MalformedResponseError(GenerationError):
    default_message = "The AI returned a response that could not be parsed."


def _status_code(exc: BaseException) -> Optional[int]:
    # google.genai.errors.APIError carries .code; other clients use .status_code
    for attr in ("code", "status_code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    return None


def classify_error(exc: BaseException) -> GenerationError:
    """Map a provider exception onto the user-facing error taxonomy."""
    if isinstance(exc, GenerationError):
        return exc

    message = str(exc)
    code = _status_code(exc)

    if code == 403 or "403" in message:
        return AuthError()
    if code == 429 or "429" in message:
        return RateLimitError()
    if message.strip():
        return UpstreamError(message)
    return UpstreamError()
