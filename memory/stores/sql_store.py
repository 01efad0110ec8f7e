"""SQLite store shared by the history and audio library tables."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session, sessionmaker

from memory.schemas import Base


class SQLStore:
    """One SQLite file, one engine, one short-lived session per call."""

    def __init__(self, db_path: Path, echo: bool = False, timeout_s: float = 5.0) -> None:
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.engine = create_engine(
            self.url,
            echo=echo,
            connect_args={"timeout": timeout_s},
        )
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    @classmethod
    def from_config(cls, db_path: Path, config: dict[str, Any]) -> SQLStore:
        """Build a store using the ``database`` section of the runtime config."""
        db_cfg = config.get("database", {})
        return cls(
            db_path,
            echo=bool(db_cfg.get("echo", False)),
            timeout_s=float(db_cfg.get("timeout_s", 5.0)),
        )

    @property
    def url(self) -> str:
        return f"sqlite+pysqlite:///{self.db_path}"

    def create_all(self) -> None:
        """Create history, audio record and trigger tables if missing."""
        Base.metadata.create_all(self.engine)

    def table_names(self) -> list[str]:
        return sorted(inspect(self.engine).get_table_names())

    def dispose(self) -> None:
        """Close pooled connections so the database file can be removed."""
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Context manager that commits on success and rolls back on error."""
        sess = self._session_factory()
        try:
            yield sess
            sess.commit()
        except Exception:
            sess.rollback()
            raise
        finally:
            sess.close()
