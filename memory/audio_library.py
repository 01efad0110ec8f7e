"""Audio records and sound/speech triggers."""

from __future__ import annotations

import logging
from typing import get_args

from core.errors import InvalidInput
from memory.schemas import AudioRecordRow, SoundTriggerRecord, as_utc
from memory.stores.sql_store import SQLStore
from memory.types.audio import AudioRecord, SoundTrigger, TriggerType

logger = logging.getLogger("dwight.library")

TRIGGER_TYPES = frozenset(get_args(TriggerType))


class AudioLibrary:
    """CRUD over the audio_records and sound_triggers tables."""

    def __init__(self, sql_store: SQLStore) -> None:
        self.sql_store = sql_store
        self.sql_store.create_all()

    def save_audio_record(
        self,
        title: str,
        file_path: str,
        duration: float,
        transcript: str | None = None,
        triggers: str | None = None,
    ) -> int:
        """Insert an audio record and return its id."""
        if duration < 0:
            raise InvalidInput(f"Duration must not be negative, got {duration}")
        row = AudioRecordRow(
            title=title,
            file_path=file_path,
            transcript=transcript,
            duration=duration,
            triggers=triggers,
        )
        with self.sql_store.session() as sess:
            sess.add(row)
            sess.flush()
            row_id = row.id
        logger.info("Saved audio record %s (%s)", row_id, title)
        return row_id

    def list_audio_records(self) -> list[AudioRecord]:
        """List audio records, newest first."""
        with self.sql_store.session() as sess:
            rows = (
                sess.query(AudioRecordRow)
                .order_by(AudioRecordRow.created_at.desc(), AudioRecordRow.id.desc())
                .all()
            )
            return [self._record_to_model(row) for row in rows]

    def save_trigger(self, trigger_type: str, trigger_value: str) -> int:
        """Insert an active trigger and return its id."""
        trigger_type = trigger_type.strip().lower()
        if trigger_type not in TRIGGER_TYPES:
            raise InvalidInput(
                f"Unknown trigger type '{trigger_type}'; expected one of {sorted(TRIGGER_TYPES)}"
            )
        if not trigger_value.strip():
            raise InvalidInput("Trigger value must not be empty")
        row = SoundTriggerRecord(trigger_type=trigger_type, trigger_value=trigger_value, is_active=True)
        with self.sql_store.session() as sess:
            sess.add(row)
            sess.flush()
            row_id = row.id
        logger.info("Saved %s trigger %s: %s", trigger_type, row_id, trigger_value)
        return row_id

    def list_active_triggers(self) -> list[SoundTrigger]:
        """List triggers that are still active."""
        with self.sql_store.session() as sess:
            rows = (
                sess.query(SoundTriggerRecord)
                .filter(SoundTriggerRecord.is_active.is_(True))
                .order_by(SoundTriggerRecord.id.asc())
                .all()
            )
            return [self._trigger_to_model(row) for row in rows]

    def deactivate_trigger(self, trigger_id: int) -> bool:
        """Mark a trigger inactive. Returns False when no such trigger exists."""
        with self.sql_store.session() as sess:
            row = sess.query(SoundTriggerRecord).filter(SoundTriggerRecord.id == trigger_id).first()
            if not row:
                return False
            row.is_active = False
            sess.flush()
        return True

    @staticmethod
    def _record_to_model(row: AudioRecordRow) -> AudioRecord:
        return AudioRecord(
            id=row.id,
            title=row.title,
            file_path=row.file_path,
            transcript=row.transcript,
            duration=row.duration,
            created_at=as_utc(row.created_at),
            triggers=row.triggers,
        )

    @staticmethod
    def _trigger_to_model(row: SoundTriggerRecord) -> SoundTrigger:
        return SoundTrigger(
            id=row.id,
            trigger_type=row.trigger_type,
            trigger_value=row.trigger_value,
            is_active=row.is_active,
            created_at=as_utc(row.created_at),
        )
