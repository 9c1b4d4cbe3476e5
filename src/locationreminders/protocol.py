"""Reminder storage protocols.

Created: 2026-10-19
Defines the interfaces for reminder storage backends and for the
caller-facing reminder data source.

Protocol-first so implementations are swappable:
- SqlReminderStore: SQLite through SQLAlchemy (default)
- FileReminderStore: single JSON file
- InMemoryReminderStore: no durability, for tests and previews
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from locationreminders.models import ReminderRecord
from locationreminders.result import Result


@runtime_checkable
class ReminderStoreProtocol(Protocol):
    """Protocol defining the interface for reminder storage.

    Data operations are awaited and complete before returning. Storage
    faults propagate as exceptions; a missing record is not a fault.
    """

    # =========================================================================
    # Handle Lifecycle
    # =========================================================================

    @property
    def is_open(self) -> bool:
        """Whether the backing handle is currently acquired."""
        ...

    def open(self) -> "ReminderStoreProtocol":
        """Acquire the backing handle. Calling it twice is harmless."""
        ...

    def close(self) -> None:
        """Release the backing handle. Calling it twice is harmless."""
        ...

    # =========================================================================
    # Record Operations
    # =========================================================================

    async def list_all(self) -> list[ReminderRecord]:
        """Get every reminder in insertion order."""
        ...

    async def get_by_id(self, reminder_id: str) -> ReminderRecord | None:
        """Get a reminder by ID, or None if there is none."""
        ...

    async def save(self, record: ReminderRecord) -> None:
        """Insert the record, replacing any record with the same ID."""
        ...

    async def delete_by_id(self, reminder_id: str) -> None:
        """Delete a reminder. Does nothing if the ID is unknown."""
        ...

    async def delete_all(self) -> None:
        """Delete every reminder."""
        ...


@runtime_checkable
class ReminderDataSourceProtocol(Protocol):
    """What view-model code talks to.

    Reads come back as a ``Result``; writes return nothing.
    """

    async def get_reminders(self) -> Result[list[ReminderRecord]]: ...

    async def save_reminder(self, record: ReminderRecord) -> None: ...

    async def get_reminder(self, reminder_id: str) -> Result[ReminderRecord]: ...

    async def delete_all_reminders(self) -> None: ...

    async def delete_reminder(self, reminder_id: str) -> None: ...


class BaseReminderStore(ABC):
    """Base class for stores: open/close bookkeeping and ``with`` support.

    Subclasses acquire their handle in ``_open`` and release it in
    ``_close``. Data operations call ``_ensure_open`` first.
    """

    def __init__(self) -> None:
        self._open_flag = False

    @property
    def is_open(self) -> bool:
        return self._open_flag

    def open(self) -> "BaseReminderStore":
        if not self._open_flag:
            self._open()
            self._open_flag = True
        return self

    def close(self) -> None:
        if self._open_flag:
            self._close()
            self._open_flag = False

    def __enter__(self) -> "BaseReminderStore":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if not self._open_flag:
            raise RuntimeError(
                f"{type(self).__name__} is not open. Call open() or use it as a context manager."
            )

    @abstractmethod
    def _open(self) -> None: ...

    @abstractmethod
    def _close(self) -> None: ...

    @abstractmethod
    async def list_all(self) -> list[ReminderRecord]: ...

    @abstractmethod
    async def get_by_id(self, reminder_id: str) -> ReminderRecord | None: ...

    @abstractmethod
    async def save(self, record: ReminderRecord) -> None: ...

    @abstractmethod
    async def delete_by_id(self, reminder_id: str) -> None: ...

    @abstractmethod
    async def delete_all(self) -> None: ...
