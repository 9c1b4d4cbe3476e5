"""SQLite reminder store and the store factory.

Created: 2026-10-19
Implements ReminderStoreProtocol on SQLite through SQLAlchemy.

Schema (single table, no migrations):
    reminders(
        id          TEXT PRIMARY KEY,
        title       TEXT NULL,
        description TEXT NULL,
        location    TEXT NULL,
        latitude    DOUBLE NULL,
        longitude   DOUBLE NULL,
    )

Design notes:
- One engine per open store; opened explicitly and disposed on close
- Every operation is its own session scope (commit, or rollback + re-raise)
- Reads come back in rowid order, which is insertion order
- ``save`` deletes then inserts, so a replaced row gets a new rowid and
  moves to the end, same as SQLite's INSERT OR REPLACE
- The existing table's columns are checked on open; a mismatch is fatal
"""

import contextlib
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from sqlalchemy import Double, Text, create_engine, delete, func, inspect, literal_column, select
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from locationreminders.config import Settings, get_settings
from locationreminders.file_store import FileReminderStore
from locationreminders.memory_store import InMemoryReminderStore
from locationreminders.models import ReminderRecord
from locationreminders.protocol import BaseReminderStore

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class ReminderRow(Base):
    """ORM row for the ``reminders`` table."""

    __tablename__ = "reminders"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Double, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Double, nullable=True)

    @classmethod
    def from_record(cls, record: ReminderRecord) -> "ReminderRow":
        return cls(
            id=record.id,
            title=record.title,
            description=record.description,
            location=record.location,
            latitude=record.latitude,
            longitude=record.longitude,
        )

    def to_record(self) -> ReminderRecord:
        return ReminderRecord(
            id=self.id,
            title=self.title,
            description=self.description,
            location=self.location,
            latitude=self.latitude,
            longitude=self.longitude,
        )


EXPECTED_COLUMNS = frozenset(c.name for c in ReminderRow.__table__.columns)


class SqlReminderStore(BaseReminderStore):
    """SQLite-backed reminder storage.

    Usage:
        with SqlReminderStore("sqlite:///reminders.db") as store:
            await store.save(ReminderRecord(id="1", title="Buy milk"))
    """

    def __init__(self, db_url: str):
        """Initialize the store.

        Args:
            db_url: SQLAlchemy database URL, e.g. ``sqlite:///path/reminders.db``.
                ``sqlite://`` gives a private in-memory database.
        """
        super().__init__()
        self.db_url = db_url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    def _open(self) -> None:
        url = make_url(self.db_url)
        in_memory = url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")

        if url.get_backend_name() == "sqlite" and not in_memory:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        engine_kwargs: dict[str, Any] = {}
        if url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        if in_memory:
            # One shared connection, otherwise each session sees an empty database
            engine_kwargs["poolclass"] = StaticPool

        engine = create_engine(self.db_url, **engine_kwargs)
        try:
            Base.metadata.create_all(bind=engine)
            _assert_expected_schema(engine, self.db_url)
        except Exception:
            engine.dispose()
            raise

        self._engine = engine
        self._session_factory = sessionmaker(
            bind=engine, autoflush=False, expire_on_commit=False
        )
        with self._session_scope() as session:
            count = session.scalar(select(func.count()).select_from(ReminderRow))
        logger.info(f"Reminder store opened: {self.db_url} ({count} reminders)")

    def _close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info(f"Reminder store closed: {self.db_url}")

    @contextlib.contextmanager
    def _session_scope(self) -> Iterator[Session]:
        """Session for one operation: commit on success, rollback on error."""
        if self._session_factory is None:
            raise RuntimeError("Reminder database not initialized. Call open() first.")
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # =========================================================================
    # Record Operations
    # =========================================================================

    async def list_all(self) -> list[ReminderRecord]:
        """Get every reminder in insertion order."""
        self._ensure_open()
        with self._session_scope() as session:
            rows = session.scalars(select(ReminderRow).order_by(literal_column("rowid")))
            return [row.to_record() for row in rows]

    async def get_by_id(self, reminder_id: str) -> ReminderRecord | None:
        """Get a reminder by ID."""
        self._ensure_open()
        with self._session_scope() as session:
            row = session.get(ReminderRow, reminder_id)
            return row.to_record() if row is not None else None

    async def save(self, record: ReminderRecord) -> None:
        """Insert or replace a reminder in a single transaction."""
        self._ensure_open()
        with self._session_scope() as session:
            session.execute(delete(ReminderRow).where(ReminderRow.id == record.id))
            session.add(ReminderRow.from_record(record))
        logger.debug("Saved reminder %s", record.id)

    async def delete_by_id(self, reminder_id: str) -> None:
        """Delete a reminder if it exists."""
        self._ensure_open()
        with self._session_scope() as session:
            session.execute(delete(ReminderRow).where(ReminderRow.id == reminder_id))
        logger.debug("Deleted reminder %s", reminder_id)

    async def delete_all(self) -> None:
        """Delete every reminder."""
        self._ensure_open()
        with self._session_scope() as session:
            session.execute(delete(ReminderRow))
        logger.warning(f"All reminders cleared from {self.db_url}")


def _assert_expected_schema(engine: Engine, db_url: str) -> None:
    """Check the reminders table has exactly the expected columns (no migration)."""
    columns = {c["name"] for c in inspect(engine).get_columns(ReminderRow.__tablename__)}
    if columns != EXPECTED_COLUMNS:
        raise RuntimeError(
            f"Reminder database schema mismatch in {db_url}: "
            f"found columns {sorted(columns)}, expected {sorted(EXPECTED_COLUMNS)}. "
            "Delete the database file and restart (no migration)."
        )


# =========================================================================
# Factory Function
# =========================================================================


def create_reminder_store(settings: Settings | None = None) -> BaseReminderStore:
    """Build the store configured in settings. The caller opens and closes it.

    Args:
        settings: Optional settings. Defaults to ``get_settings()``.

    Returns:
        An unopened store for the configured backend.
    """
    settings = settings or get_settings()
    if settings.store_backend == "json":
        return FileReminderStore(settings.resolved_json_path())
    if settings.store_backend == "memory":
        return InMemoryReminderStore()
    return SqlReminderStore(settings.resolved_db_url())
