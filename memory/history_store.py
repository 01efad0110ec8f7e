"""Conversation history persisted in SQLite."""

from __future__ import annotations

import logging

from core.errors import InvalidInput
from memory.schemas import ConversationRecord, as_utc
from memory.stores.sql_store import SQLStore
from memory.types.history import HistoryEntry

logger = logging.getLogger("dwight.history")


class HistoryStore:
    """Append-only chat history read back newest first."""

    def __init__(self, sql_store: SQLStore) -> None:
        self.sql_store = sql_store
        self.sql_store.create_all()

    def append(self, entry: HistoryEntry) -> int:
        """Persist one turn and return its row id."""
        record = ConversationRecord(
            context=entry.context,
            response=entry.response,
            created_at=as_utc(entry.timestamp),
            user_input=entry.user_input,
        )
        with self.sql_store.session() as sess:
            sess.add(record)
            sess.flush()
            row_id = record.id
        logger.debug("Stored history entry %s", row_id)
        return row_id

    def fetch_recent(self, limit: int = 10) -> list[HistoryEntry]:
        """Return up to ``limit`` entries, most recent first."""
        if limit < 1:
            raise InvalidInput(f"History limit must be at least 1, got {limit}")
        with self.sql_store.session() as sess:
            rows = (
                sess.query(ConversationRecord)
                .order_by(ConversationRecord.created_at.desc(), ConversationRecord.id.desc())
                .limit(limit)
                .all()
            )
            return [self._to_entry(row) for row in rows]

    def count(self) -> int:
        with self.sql_store.session() as sess:
            return sess.query(ConversationRecord).count()

    @staticmethod
    def _to_entry(row: ConversationRecord) -> HistoryEntry:
        return HistoryEntry(
            id=row.id,
            user_input=row.user_input,
            response=row.response,
            context=row.context,
            timestamp=as_utc(row.created_at),
        )
