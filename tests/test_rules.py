"""Keyword rule tests."""

from __future__ import annotations

import pytest

from cognition.knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase
from cognition.rules import DEFAULT_RULES, NO_EFFECT, TRIGGER_PROMPT


def rule(name: str):
    return next(r for r in DEFAULT_RULES if r.name == name)


def test_trigger_rule_effect() -> None:
    effect = rule("trigger").apply("set an alert for me", DEFAULT_KNOWLEDGE)

    assert effect.fragments == (TRIGGER_PROMPT,)
    assert effect.suggestions == ("Set up sound trigger", "Configure speech trigger")
    assert effect.confidence_boost == 0.2


def test_rule_does_not_fire_without_keyword() -> None:
    assert rule("trigger").apply("nothing relevant", DEFAULT_KNOWLEDGE) is NO_EFFECT


def test_keyword_matches_as_substring() -> None:
    assert rule("audio").matches("soundscape")
    assert rule("learning").matches("unlearned")


def test_topic_rule_uses_knowledge_base() -> None:
    knowledge = KnowledgeBase(topics={"learning": ["Only one statement"]})
    effect = rule("learning").apply("help me improve", knowledge)

    assert effect.fragments == ("Only one statement",)
    assert effect.confidence_boost == 0.2


def test_topic_rule_without_topic_has_no_effect() -> None:
    assert rule("learning").apply("learn", KnowledgeBase()) is NO_EFFECT


def test_knowledge_base_is_read_only() -> None:
    assert DEFAULT_KNOWLEDGE.statements("missing") == ()
    assert len(DEFAULT_KNOWLEDGE.statements("audio")) == 4
    assert len(DEFAULT_KNOWLEDGE.statements("security")) == 3
    with pytest.raises(TypeError):
        DEFAULT_KNOWLEDGE.topics["audio"] = ()  # type: ignore[index]
