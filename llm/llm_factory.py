"""LLM provider factory."""

from __future__ import annotations

from typing import Any

from llm.base_llm import BaseLLM
from llm.local.ollama_provider import OllamaProvider
from llm.providers.mock_provider import MockProvider


def build_llm(config: dict[str, Any]) -> BaseLLM:
    """Build an LLM provider from configuration, defaulting safely to mock."""
    models_cfg = config.get("models", {}).get("llm", {})
    active = models_cfg.get("active_provider", "mock")
    providers = models_cfg.get("providers", {})
    active_cfg = providers.get(active, {})
    provider_type = active_cfg.get("type", active)

    if provider_type == "ollama":
        return OllamaProvider(
            binary=active_cfg.get("binary", "ollama"),
            timeout_s=float(active_cfg.get("timeout_s", 120.0)),
        )
    return MockProvider()
