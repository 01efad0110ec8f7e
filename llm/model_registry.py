"""Catalogue of the language models the assistant may call."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict

from core.errors import InvalidInput

OLLAMA_ENDPOINT = "http://localhost:11434/api/generate"


class ModelConfig(BaseModel):
    """Static description of one model."""

    model_config = ConfigDict(protected_namespaces=())

    key: str
    name: str
    model_type: str
    tag: str
    api_endpoint: str | None = None
    local_path: str | None = None
    enabled: bool = True


DEFAULT_MODELS = (
    ModelConfig(key="llama3-8b", name="Llama 3 8B", model_type="llama", tag="llama3:8b",
                api_endpoint=OLLAMA_ENDPOINT),
    # Disabled by default due to resource requirements.
    ModelConfig(key="llama3-70b", name="Llama 3 70B", model_type="llama", tag="llama3:70b",
                api_endpoint=OLLAMA_ENDPOINT, enabled=False),
    ModelConfig(key="mixtral-8x7b", name="Mixtral 8x7B", model_type="mixtral", tag="mixtral:8x7b",
                api_endpoint=OLLAMA_ENDPOINT),
    ModelConfig(key="mistral-7b", name="Mistral 7B", model_type="mistral", tag="mistral:7b",
                api_endpoint=OLLAMA_ENDPOINT),
)


class ModelRegistry:
    """Lookup of configured models by key."""

    def __init__(self, models: Iterable[ModelConfig] = DEFAULT_MODELS) -> None:
        self._models = {model.key: model for model in models}

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> ModelRegistry:
        """Overlay ``models.llm.catalog`` entries from config onto the defaults."""
        merged = {model.key: model.model_dump() for model in DEFAULT_MODELS}
        catalog = config.get("models", {}).get("llm", {}).get("catalog", {}) or {}
        if not isinstance(catalog, dict):
            raise InvalidInput("models.llm.catalog must be a mapping of model key to settings")
        for key, overrides in catalog.items():
            base = merged.get(key, {"key": key, "name": key, "model_type": "custom", "tag": key})
            merged[key] = {**base, **(overrides or {}), "key": key}
        return cls(ModelConfig(**payload) for payload in merged.values())

    def get(self, key: str) -> ModelConfig:
        try:
            return self._models[key]
        except KeyError:
            raise InvalidInput(f"Unknown model '{key}'") from None

    def available_models(self) -> list[ModelConfig]:
        """Enabled models sorted by key."""
        return sorted((m for m in self._models.values() if m.enabled), key=lambda m: m.key)

    def all_models(self) -> list[ModelConfig]:
        return sorted(self._models.values(), key=lambda m: m.key)
