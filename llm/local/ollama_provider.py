"""Ollama provider adapter."""

from __future__ import annotations

import logging
import shutil
import subprocess
import time

from llm.base_llm import BaseLLM, LLMReply, count_tokens
from llm.providers.mock_provider import MockProvider

logger = logging.getLogger("dwight.llm.ollama")


class OllamaProvider(BaseLLM):
    """Runs prompts through the local ``ollama`` binary, falling back to the mock."""

    def __init__(self, binary: str = "ollama", timeout_s: float = 120.0) -> None:
        self.binary = binary
        self.timeout_s = timeout_s
        self._fallback = MockProvider()

    def is_available(self) -> bool:
        return shutil.which(self.binary) is not None

    def generate(self, prompt: str, model: str) -> LLMReply:
        if not self.is_available():
            logger.info("Ollama binary not found; using fallback reply")
            return self._fallback.generate(prompt, model)
        started = time.perf_counter()
        try:
            proc = subprocess.run(
                [self.binary, "run", model],
                input=prompt,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout_s,
            )
        except (OSError, subprocess.SubprocessError) as exc:  # pragma: no cover - external binary path
            logger.warning("Ollama call failed for %s: %s", model, exc)
            return self._fallback.generate(prompt, model)
        text = proc.stdout.strip()
        if not text:
            logger.warning("Ollama returned no text for model %s", model)
            return self._fallback.generate(prompt, model)
        return LLMReply(
            text=text,
            tokens_used=count_tokens(prompt),
            processing_time_ms=int((time.perf_counter() - started) * 1000),
            confidence=0.85,
        )
