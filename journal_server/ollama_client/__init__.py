from .client import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    InferenceFailure,
    InferenceResult,
    InferenceSuccess,
    InferenceUnavailable,
    OllamaClient,
    OllamaConfig,
    request_generation,
)

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
