"""SQLAlchemy schemas for conversation history and the audio library."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Return UTC datetime for default timestamps."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """Convert ``value`` to an aware UTC datetime; naive values are taken as UTC.

    SQLite keeps no offset, so rows must be written in one zone for
    ``ORDER BY created_at`` to follow wall-clock order.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)



class Base(DeclarativeBase):
    """Declarative base."""


class ConversationRecord(Base):
    """One stored chat turn."""

    __tablename__ = "dwight_memory"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    context: Mapped[str] = mapped_column(Text)
    response: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, index=True)
    user_input: Mapped[str] = mapped_column(Text)


class AudioRecordRow(Base):
    """Audio clips known to the assistant."""

    __tablename__ = "audio_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text)
    file_path: Mapped[str] = mapped_column(Text)
    transcript: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration: Mapped[float] = mapped_column(Float, default=0.0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, index=True)
    triggers: Mapped[str | None] = mapped_column(Text, nullable=True)


class SoundTriggerRecord(Base):
    """Sound or speech trigger table."""

    __tablename__ = "sound_triggers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trigger_type: Mapped[str] = mapped_column(String(16))  # sound/speech
    trigger_value: Mapped[str] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
