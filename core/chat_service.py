"""Chat turns: fetch history, reply, persist."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from audio.features import AudioFeatures, describe_features, features_prompt
from cognition.response_engine import ReplyResult, ResponseEngine
from core.errors import InvalidInput
from llm.base_llm import BaseLLM, LLMReply
from llm.model_registry import ModelRegistry
from llm.prompt_engine.dwight_prompt import persona_prompt, rag_prompt
from llm.providers.mock_provider import MockProvider
from memory.history_store import HistoryStore
from memory.types.history import HistoryEntry

logger = logging.getLogger("dwight.chat")


class ChatService:
    """Wraps the response engine with history reads and writes."""

    def __init__(
        self,
        engine: ResponseEngine,
        history: HistoryStore,
        llm: BaseLLM | None = None,
        registry: ModelRegistry | None = None,
        context_limit: int = 10,
        default_model: str = "llama3-8b",
    ) -> None:
        self.engine = engine
        self.history = history
        self.llm = llm or MockProvider()
        self.registry = registry or ModelRegistry()
        self.context_limit = context_limit
        self.default_model = default_model

    def chat(self, user_input: str) -> ReplyResult:
        """Answer ``user_input`` and store the exchange."""
        context = self.history.fetch_recent(self.context_limit)
        reply = self.engine.respond(user_input, context)
        entry_id = self.history.append(
            HistoryEntry(
                user_input=user_input,
                response=reply.message,
                context=f"User asked: {user_input}",
            )
        )
        logger.info(
            "Chat turn %s: confidence=%.2f context_used=%s",
            entry_id,
            reply.confidence,
            reply.context_used,
        )
        return reply

    def enhanced_chat(
        self,
        user_input: str,
        context_documents: Sequence[str] | None = None,
        use_advanced_model: bool = False,
    ) -> LLMReply:
        """Ask the configured model, in persona, optionally grounded on documents."""
        prompt = persona_prompt(user_input)
        if use_advanced_model and context_documents is not None:
            prompt = rag_prompt(prompt, context_documents)
        return self.query(prompt, self.default_model)

    def query(self, prompt: str, model_key: str) -> LLMReply:
        """Send ``prompt`` to a registered model, or the fallback if it is unusable."""
        try:
            model = self.registry.get(model_key)
        except InvalidInput:
            logger.warning("Model %s is not registered; using fallback reply", model_key)
            return MockProvider().generate(prompt, model_key)
        if not model.enabled:
            logger.warning("Model %s is disabled; using fallback reply", model_key)
            return MockProvider().generate(prompt, model_key)
        return self.llm.generate(prompt, model.tag)

    def rag_search(self, query: str, documents: Sequence[str], model_key: str | None = None) -> LLMReply:
        """Answer ``query`` from numbered context documents."""
        return self.query(rag_prompt(query, documents), model_key or self.default_model)

    def analyze_audio(
        self,
        features: AudioFeatures,
        metadata: dict[str, Any] | None = None,
        model_key: str = "mixtral-8x7b",
    ) -> dict[str, Any]:
        """Ask a model to interpret ``features`` and return the analysis payload."""
        reply = self.query(features_prompt(features, metadata), model_key)
        return describe_features(
            features,
            metadata=metadata,
            analysis=reply.text,
            confidence=reply.confidence,
            processing_time_ms=reply.processing_time_ms,
        )
