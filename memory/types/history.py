"""Conversation history models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field


class HistoryEntry(BaseModel):
    """One past exchange between the user and the assistant."""

    id: int | None = None
    user_input: str
    response: str
    context: str = ""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
