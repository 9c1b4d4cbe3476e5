"""Reminder repository.

Created: 2026-10-19

The layer view-model code calls. It forwards to a reminder store and
wraps reads in a ``Result``:
- ``get_reminders`` always succeeds with the full list
- ``get_reminder`` gives ``Error(REMINDER_NOT_FOUND)`` for an unknown id
- saves and deletes return nothing once the store has finished

Storage faults raised by the store are not caught here.
"""

from __future__ import annotations

import logging

from locationreminders.models import ReminderRecord
from locationreminders.protocol import ReminderStoreProtocol
from locationreminders.result import REMINDER_NOT_FOUND, Error, Result, Success

logger = logging.getLogger(__name__)


class ReminderRepository:
    """Stateless front for a reminder store. Implements ReminderDataSourceProtocol."""

    def __init__(self, store: ReminderStoreProtocol):
        """Initialize the repository.

        Args:
            store: An open reminder store. The repository never opens or closes it.
        """
        self._store = store

    async def get_reminders(self) -> Result[list[ReminderRecord]]:
        """Get all reminders, oldest first."""
        return Success(await self._store.list_all())

    async def save_reminder(self, record: ReminderRecord) -> None:
        """Save a reminder, replacing any reminder with the same ID."""
        await self._store.save(record)

    async def get_reminder(self, reminder_id: str) -> Result[ReminderRecord]:
        """Get a reminder by ID.

        Returns:
            ``Success(record)``, or ``Error("Reminder not found!")`` if absent.
        """
        record = await self._store.get_by_id(reminder_id)
        if record is None:
            logger.debug("Reminder %s not found", reminder_id)
            return Error(REMINDER_NOT_FOUND)
        return Success(record)

    async def delete_all_reminders(self) -> None:
        await self._store.delete_all()

    async def delete_reminder(self, reminder_id: str) -> None:
        await self._store.delete_by_id(reminder_id)
