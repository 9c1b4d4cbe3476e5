# In-memory reminder store - same contract as the durable stores, no disk.
# Created: 2026-10-19

import logging
from dataclasses import replace

from locationreminders.models import ReminderRecord
from locationreminders.protocol import BaseReminderStore

logger = logging.getLogger(__name__)


class InMemoryReminderStore(BaseReminderStore):
    """Keeps reminders in an insertion-ordered dict.

    Records are copied in and out so callers can't change stored state
    by mutating objects they hold. Contents are dropped on close.
    """

    def __init__(self, records: list[ReminderRecord] | None = None):
        super().__init__()
        self._seed = list(records or [])
        self._records: dict[str, ReminderRecord] = {}

    def _open(self) -> None:
        self._records = {}
        for record in self._seed:
            self._put(record)

    def _close(self) -> None:
        self._records.clear()

    def _put(self, record: ReminderRecord) -> None:
        # A replaced record moves to the end, like a fresh insert
        self._records.pop(record.id, None)
        self._records[record.id] = replace(record)

    async def list_all(self) -> list[ReminderRecord]:
        self._ensure_open()
        return [replace(r) for r in self._records.values()]

    async def get_by_id(self, reminder_id: str) -> ReminderRecord | None:
        self._ensure_open()
        record = self._records.get(reminder_id)
        return replace(record) if record is not None else None

    async def save(self, record: ReminderRecord) -> None:
        self._ensure_open()
        self._put(record)
        logger.debug("Saved reminder %s", record.id)

    async def delete_by_id(self, reminder_id: str) -> None:
        self._ensure_open()
        if self._records.pop(reminder_id, None) is not None:
            logger.debug("Deleted reminder %s", reminder_id)

    async def delete_all(self) -> None:
        self._ensure_open()
        self._records.clear()
        logger.warning("All in-memory reminders cleared")
