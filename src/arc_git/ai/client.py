"""Thin synchronous wrapper around litellm.completion()."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

import litellm

from ..config import AIConfig
from ..exceptions import GenerationError
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class CompletionResponse:
    """Standardised response from a single LLM call."""

    text: str = ""
    model: str = ""
    stop_reason: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: int = 0


class GenerativeClient(ABC):
    """Abstract interface for text generation.

    Keeping this separate from any specific provider lets tests swap in a
    canned backend and keeps litellm out of the pipeline.
    """

    @abstractmethod
    def complete(self, system: str, prompt: str, model: str) -> CompletionResponse:
        """Send one system + user prompt pair and return the response.

        Raises:
            GenerationError: If the backend call fails or returns no text
        """


class LiteLLMClient(GenerativeClient):
    """GenerativeClient routed through ``litellm.completion()``.

    Usage::

        client = LiteLLMClient(config)
        resp = client.complete(
            system="You are a code archaeologist.",
            prompt="Analyze this git commit ...",
            model="claude-sonnet-4-5-20250929",
        )
    """

    def __init__(self, config: AIConfig, max_tokens: int = 1024, temperature: float = 0.2):
        self._config = config
        self.max_tokens = max_tokens
        self.temperature = temperature

    def resolve_model(self, model: str) -> str:
        """Return a litellm route such as ``openrouter/<model>``."""
        prefix = self._config.route_prefix
        if model.startswith(f"{prefix}/"):
            return model
        return f"{prefix}/{model}"

    def complete(self, system: str, prompt: str, model: str) -> CompletionResponse:
        route = self.resolve_model(model)
        logger.debug("AI request: model=%s prompt_chars=%d", route, len(prompt))

        t0 = time.monotonic()
        try:
            raw = litellm.completion(
                model=route,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                api_key=self._config.api_key,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except Exception as e:  # noqa: BLE001 - litellm raises provider-specific types
            raise GenerationError(str(e) or e.__class__.__name__, model=route) from e
        latency_ms = int((time.monotonic() - t0) * 1000)

        try:
            choice = raw.choices[0]
            text = choice.message.content or ""
        except (AttributeError, IndexError, TypeError) as e:
            raise GenerationError(f"malformed response: {e}", model=route) from e

        if not text.strip():
            raise GenerationError("empty response", model=route)

        usage = getattr(raw, "usage", None)
        response = CompletionResponse(
            text=text,
            model=route,
            stop_reason=choice.finish_reason or "",
            input_tokens=(getattr(usage, "prompt_tokens", 0) or 0) if usage else 0,
            output_tokens=(getattr(usage, "completion_tokens", 0) or 0) if usage else 0,
            latency_ms=latency_ms,
        )
        logger.debug(
            "AI response: %d chars, %d/%d tokens in %dms",
            len(response.text),
            response.input_tokens,
            response.output_tokens,
            response.latency_ms,
        )
        return response
