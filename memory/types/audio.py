"""Audio library models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

TriggerType = Literal["sound", "speech"]


class AudioRecord(BaseModel):
    """A stored audio clip with its optional transcript."""

    id: int | None = None
    title: str
    file_path: str
    transcript: str | None = None
    duration: float = 0.0
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    triggers: str | None = None


class SoundTrigger(BaseModel):
    """A sound or phrase the assistant should watch for."""

    id: int | None = None
    trigger_type: TriggerType
    trigger_value: str
    is_active: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
