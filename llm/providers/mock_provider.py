"""Deterministic local fallback LLM provider for offline usage."""

from __future__ import annotations

import time

from llm.base_llm import BaseLLM, LLMReply, count_tokens

FALLBACK_CONFIDENCE = 0.6


class MockProvider(BaseLLM):
    """Answers every prompt with a canned reply naming the requested model."""

    def generate(self, prompt: str, model: str) -> LLMReply:
        started = time.perf_counter()
        text = (
            f"Fallback response for: {prompt}\n\n"
            f"This is a simulated response from {model}. In a full implementation, "
            "this would be processed by the actual AI model."
        )
        return LLMReply(
            text=text,
            tokens_used=count_tokens(prompt),
            processing_time_ms=int((time.perf_counter() - started) * 1000),
            confidence=FALLBACK_CONFIDENCE,
        )
