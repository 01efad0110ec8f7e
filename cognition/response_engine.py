"""Rule-based reply generation with conversation-history awareness."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from cognition.knowledge import DEFAULT_PERSONA, Persona
from cognition.rules import DEFAULT_RULES, KeywordRule

logger = logging.getLogger("dwight.engine")

BASE_CONFIDENCE = 0.5
CONTEXT_BOOST = 0.1
CONTEXT_SCAN_DEPTH = 3
CONFIDENT_THRESHOLD = 0.7
UNSURE_THRESHOLD = 0.3

CONFIDENT_PREFIX = "Excellent question! "
UNSURE_PREFIX = "I'm still processing that. "
CONTINUITY_SENTENCE = "Continuing our discussion about audio analysis..."
FALLBACK_TEMPLATE = (
    "Interesting input: '{utterance}'. I'm always learning and analyzing. "
    "Could you provide more context about what you'd like me to help you with "
    "regarding audio analysis or security monitoring?"
)
FALLBACK_SUGGESTIONS = (
    "Tell me more about your audio needs",
    "Explain what you're trying to accomplish",
)


@dataclass(frozen=True)
class ReplyResult:
    """Structured reply handed back to the caller."""

    message: str
    confidence: float
    context_used: bool
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "confidence": self.confidence,
            "context_used": self.context_used,
            "suggestions": list(self.suggestions),
        }


def _user_input_of(entry: Any) -> str:
    if isinstance(entry, Mapping):
        return str(entry.get("user_input", ""))
    return str(getattr(entry, "user_input", ""))


class ResponseEngine:
    """Maps an utterance plus recent history to a ReplyResult.

    The engine only reads its persona and rules, so one instance can serve
    any number of concurrent callers.
    """

    def __init__(
        self,
        persona: Persona = DEFAULT_PERSONA,
        rules: Sequence[KeywordRule] = DEFAULT_RULES,
    ) -> None:
        self._persona = persona
        self._rules = tuple(rules)

    @property
    def persona(self) -> Persona:
        return self._persona

    @property
    def rules(self) -> tuple[KeywordRule, ...]:
        return self._rules

    def respond(self, utterance: str, history: Sequence[Any] = ()) -> ReplyResult:
        """Build a reply for ``utterance``.

        ``history`` is the most-recent-first slice supplied by the caller;
        it is never modified.
        """
        lowered = utterance.lower()
        fragments: list[str] = []
        suggestions: list[str] = []
        confidence = BASE_CONFIDENCE

        for rule in self._rules:
            effect = rule.apply(lowered, self._persona.knowledge)
            if effect.confidence_boost or effect.fragments:
                logger.debug("Rule fired: %s", rule.name)
            fragments.extend(effect.fragments)
            suggestions.extend(effect.suggestions)
            confidence = round(confidence + effect.confidence_boost, 2)

        context_used = len(history) > 0
        if context_used:
            confidence = round(confidence + CONTEXT_BOOST, 2)
            recent = [_user_input_of(entry) for entry in list(history)[:CONTEXT_SCAN_DEPTH]]
            if any("audio" in text.lower() for text in recent):
                fragments.append(CONTINUITY_SENTENCE)

        if not fragments:
            fragments.append(FALLBACK_TEMPLATE.format(utterance=utterance))
            suggestions.extend(FALLBACK_SUGGESTIONS)

        message = " ".join(fragments)
        if confidence > CONFIDENT_THRESHOLD:
            message = CONFIDENT_PREFIX + message
        elif confidence < UNSURE_THRESHOLD:
            message = UNSURE_PREFIX + message

        return ReplyResult(
            message=message,
            confidence=min(1.0, confidence),
            context_used=context_used,
            suggestions=suggestions,
        )
