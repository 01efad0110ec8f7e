"""Ordered keyword rules evaluated by the response engine."""

from __future__ import annotations

from dataclasses import dataclass

from cognition.knowledge import KnowledgeBase


@dataclass(frozen=True)
class RuleEffect:
    """What one fired rule contributes to a reply."""

    fragments: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    confidence_boost: float = 0.0


NO_EFFECT = RuleEffect()


@dataclass(frozen=True)
class KeywordRule:
    """Fires when any keyword occurs in the lower-cased utterance.

    A rule either contributes fixed fragments or every statement of a
    knowledge topic. Topic rules contribute nothing (not even their
    confidence boost) when the topic is missing from the knowledge base.
    """

    name: str
    keywords: tuple[str, ...]
    confidence_boost: float
    fragments: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    knowledge_topic: str | None = None

    def matches(self, lowered: str) -> bool:
        return any(keyword in lowered for keyword in self.keywords)

    def apply(self, lowered: str, knowledge: KnowledgeBase) -> RuleEffect:
        if not self.matches(lowered):
            return NO_EFFECT
        if self.knowledge_topic is not None:
            if not knowledge.has_topic(self.knowledge_topic):
                return NO_EFFECT
            return RuleEffect(
                fragments=knowledge.statements(self.knowledge_topic),
                suggestions=self.suggestions,
                confidence_boost=self.confidence_boost,
            )
        return RuleEffect(
            fragments=self.fragments,
            suggestions=self.suggestions,
            confidence_boost=self.confidence_boost,
        )


TRIGGER_PROMPT = (
    "I can help you set up custom triggers for sounds or speech patterns. "
    "Would you like me to show you how?"
)
TRANSCRIBE_OFFER = (
    "I can transcribe audio files using advanced speech recognition. "
    "Just upload an audio file and I'll process it for you."
)
HELP_OFFER = (
    "I'm here to help you with audio analysis, transcription, and security monitoring. "
    "What would you like me to help you with today?"
)

DEFAULT_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        name="audio",
        keywords=("audio", "sound", "recording"),
        knowledge_topic="audio",
        confidence_boost=0.3,
    ),
    KeywordRule(
        name="trigger",
        keywords=("trigger", "detect", "alert"),
        fragments=(TRIGGER_PROMPT,),
        suggestions=("Set up sound trigger", "Configure speech trigger"),
        confidence_boost=0.2,
    ),
    KeywordRule(
        name="transcription",
        keywords=("transcribe", "transcript"),
        fragments=(TRANSCRIBE_OFFER,),
        suggestions=("Upload audio file",),
        confidence_boost=0.3,
    ),
    KeywordRule(
        name="learning",
        keywords=("learn", "improve", "better"),
        knowledge_topic="learning",
        confidence_boost=0.2,
    ),
    KeywordRule(
        name="help",
        keywords=("help", "assist"),
        fragments=(HELP_OFFER,),
        suggestions=(
            "Analyze audio file",
            "Set up triggers",
            "Review recordings",
            "Check system status",
        ),
        confidence_boost=0.1,
    ),
)
