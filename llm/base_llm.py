"""Base LLM interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class LLMReply:
    """Text returned by a model plus bookkeeping about the call."""

    text: str
    tokens_used: int
    processing_time_ms: int
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def count_tokens(prompt: str) -> int:
    """Whitespace word count used as a rough token estimate."""
    return len(prompt.split())


class BaseLLM(ABC):
    """Abstract LLM provider interface."""

    @abstractmethod
    def generate(self, prompt: str, model: str) -> LLMReply:
        """Return a completion for ``prompt`` from ``model``."""
