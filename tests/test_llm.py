"""Model registry and provider tests."""

from __future__ import annotations

import pytest

from core.errors import InvalidInput
from llm.llm_factory import build_llm
from llm.local.ollama_provider import OllamaProvider
from llm.model_registry import ModelRegistry
from llm.prompt_engine.dwight_prompt import persona_prompt, rag_prompt
from llm.providers.mock_provider import MockProvider


def test_default_registry_hides_disabled_models() -> None:
    keys = [m.key for m in ModelRegistry().available_models()]

    assert keys == ["llama3-8b", "mistral-7b", "mixtral-8x7b"]
    assert ModelRegistry().get("llama3-70b").enabled is False


def test_registry_overrides_from_config() -> None:
    config = {
        "models": {
            "llm": {
                "catalog": {
                    "llama3-70b": {"enabled": True},
                    "phi3": {"name": "Phi 3", "tag": "phi3:mini"},
                }
            }
        }
    }
    registry = ModelRegistry.from_config(config)

    assert registry.get("llama3-70b").enabled is True
    assert registry.get("phi3").tag == "phi3:mini"
    assert registry.get("phi3").model_type == "custom"
    assert len(registry.available_models()) == 5


def test_unknown_model_raises() -> None:
    with pytest.raises(InvalidInput):
        ModelRegistry().get("nope")


def test_mock_provider_reply() -> None:
    reply = MockProvider().generate("find the gunshot", "mistral:7b")

    assert reply.text.startswith("Fallback response for: find the gunshot")
    assert "mistral:7b" in reply.text
    assert reply.tokens_used == 3
    assert reply.confidence == 0.6


def test_factory_defaults_to_mock() -> None:
    assert isinstance(build_llm({}), MockProvider)


def test_factory_builds_ollama() -> None:
    config = {"models": {"llm": {"active_provider": "ollama", "providers": {"ollama": {"type": "ollama"}}}}}

    assert isinstance(build_llm(config), OllamaProvider)


def test_ollama_without_binary_falls_back() -> None:
    provider = OllamaProvider(binary="dwight-test-missing-ollama-binary")

    assert provider.is_available() is False
    reply = provider.generate("hello there", "llama3:8b")
    assert reply.text.startswith("Fallback response for: hello there")


def test_prompt_builders() -> None:
    assert "User input: hi" in persona_prompt("hi")
    assert rag_prompt("q", ["a", "b"]) == (
        "Context documents:\nDocument 1: a\nDocument 2: b\n\nQuery: q\n\n"
        "Please answer the query based on the provided context."
    )
