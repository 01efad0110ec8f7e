"""Static knowledge base and personality used by the response engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class KnowledgeBase:
    """Read-only mapping from topic key to canned statements."""

    topics: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {key: tuple(values) for key, values in self.topics.items()}
        object.__setattr__(self, "topics", MappingProxyType(frozen))

    def statements(self, topic: str) -> tuple[str, ...]:
        """Return statements for a topic, empty when the topic is unknown."""
        return self.topics.get(topic, ())

    def has_topic(self, topic: str) -> bool:
        return topic in self.topics


@dataclass(frozen=True)
class Persona:
    """Knowledge and personality shared by every engine call."""

    knowledge: KnowledgeBase
    traits: tuple[str, ...] = ()


DEFAULT_KNOWLEDGE = KnowledgeBase(
    topics={
        "audio": (
            "I can analyze audio files for speech transcription",
            "I detect non-verbal sounds like footsteps, gunshots, car doors",
            "I can help you set up triggers for specific sounds or phrases",
            "I use advanced signal processing to identify acoustic patterns",
        ),
        "security": (
            "I'm designed for audio surveillance and forensic analysis",
            "I can help identify suspicious activities through sound patterns",
            "I maintain detailed logs of all audio events for review",
        ),
        "learning": (
            "I continuously learn from our interactions to better assist you",
            "I can analyze my own responses and improve my accuracy over time",
            "I store conversation context to provide more personalized assistance",
        ),
    }
)

DEFAULT_TRAITS = (
    "Brilliant and analytical",
    "Loyal and dedicated to the mission",
    "Technically proficient with audio analysis",
    "Vigilant and security-focused",
    "Respectful but confident in my capabilities",
)

DEFAULT_PERSONA = Persona(knowledge=DEFAULT_KNOWLEDGE, traits=DEFAULT_TRAITS)
