from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

from ..logging_config import logger

DEFAULT_BASE_URL = "http://127.0.0.1:11434"
DEFAULT_MODEL = "llama3.2"


class InferenceUnavailable(RuntimeError):
    """Raised when the inference server cannot produce a completion."""


@dataclass(frozen=True)
class OllamaConfig:
    """Where the generation endpoint lives and which model it should run."""

    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    # None leaves the request unbounded; callers wanting a deadline wrap the whole call
    timeout: Optional[float] = None

    @property
    def generate_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/api/generate"


@dataclass(frozen=True)
class InferenceSuccess:
    text: str


@dataclass(frozen=True)
class InferenceFailure:
    reason: str


InferenceResult = Union[InferenceSuccess, InferenceFailure]


def _handle_response_error(exc: httpx.HTTPStatusError) -> None:
    response = exc.response
    detail: str
    try:
        payload = response.json()
        detail = payload.get("error") or json.dumps(payload)
    except (ValueError, AttributeError):
        detail = response.text or response.reason_phrase
    raise InferenceUnavailable(f"Ollama request failed ({response.status_code}): {detail}") from exc


def _extract_completion(payload: Any) -> str:
    if not isinstance(payload, dict):
        raise InferenceUnavailable("Ollama response was not a JSON object")
    completion = payload.get("response")
    if not isinstance(completion, str):
        raise InferenceUnavailable("Ollama response missing 'response' text")
    return completion


async def request_generation(
    prompt: str,
    *,
    config: OllamaConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """Run one non-streaming generation and return the completion verbatim."""

    payload: Dict[str, object] = {
        "model": config.model,
        "prompt": prompt,
        "stream": False,
    }

    async with httpx.AsyncClient(transport=transport, timeout=config.timeout) as client:
        try:
            response = await client.post(
                config.generate_url,
                headers={"Content-Type": "application/json"},
                json=payload,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            _handle_response_error(exc)
        except httpx.HTTPError as exc:
            raise InferenceUnavailable(f"Ollama request failed: {exc}") from exc

    try:
        body = response.json()
    except ValueError as exc:
        raise InferenceUnavailable("Ollama response body was not valid JSON") from exc
    return _extract_completion(body)


class OllamaClient:
    """Inference client that reports failures as values instead of raising."""

    def __init__(
        self,
        config: OllamaConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self._transport = transport

    async def generate(self, prompt: str) -> InferenceResult:
        logger.debug(
            "ollama generation requested",
            extra={"model": self.config.model, "prompt_length": len(prompt)},
        )
        try:
            text = await request_generation(prompt, config=self.config, transport=self._transport)
        except InferenceUnavailable as exc:
            logger.warning(
                "ollama generation failed",
                extra={"model": self.config.model, "error": str(exc)},
            )
            return InferenceFailure(reason=str(exc))
        return InferenceSuccess(text=text)


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
    "InferenceFailure",
    "InferenceResult",
    "InferenceSuccess",
    "InferenceUnavailable",
    "OllamaClient",
    "OllamaConfig",
    "request_generation",
]
