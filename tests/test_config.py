"""Tests for settings defaults."""

import os

import pytest

from journal_server.config import Settings
from journal_server.ollama_client import DEFAULT_BASE_URL, DEFAULT_MODEL, OllamaConfig


@pytest.mark.skipif(
    bool(os.getenv("OLLAMA_BASE_URL") or os.getenv("OLLAMA_MODEL")),
    reason="inference server overridden in the environment",
)
def test_inference_defaults_match_client_defaults():
    config = Settings().ollama_config

    assert (config.base_url, config.model) == (DEFAULT_BASE_URL, DEFAULT_MODEL)
    assert (config.base_url, config.model) == (OllamaConfig().base_url, OllamaConfig().model)


def test_ollama_config_carries_overrides():
    settings = Settings(ollama_base_url="http://gpu-box:11434", ollama_model="mistral", ollama_timeout=12.5)

    assert settings.ollama_config == OllamaConfig(
        base_url="http://gpu-box:11434", model="mistral", timeout=12.5
    )
