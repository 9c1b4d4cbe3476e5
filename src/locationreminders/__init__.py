"""Location Reminders - local reminder store.

Created: 2026-10-19

Durable storage for location reminders plus a repository that reports
outcomes as ``Success``/``Error`` values instead of exceptions.

Usage:
    from locationreminders import ReminderRecord, ReminderRepository, create_reminder_store

    with create_reminder_store() as store:
        repository = ReminderRepository(store)

        await repository.save_reminder(
            ReminderRecord(id="1", title="Buy milk", location="Corner shop",
                           latitude=51.5, longitude=-0.12)
        )

        match await repository.get_reminder("1"):
            case Success(data=reminder):
                ...
            case Error(message=message):
                ...
"""

# Models
from locationreminders.models import ReminderRecord, generate_id

# Protocols
from locationreminders.protocol import (
    BaseReminderStore,
    ReminderDataSourceProtocol,
    ReminderStoreProtocol,
)

# Result
from locationreminders.result import REMINDER_NOT_FOUND, Error, Result, Success

# Stores
from locationreminders.file_store import FileReminderStore
from locationreminders.memory_store import InMemoryReminderStore
from locationreminders.store import SqlReminderStore, create_reminder_store

# Repository
from locationreminders.repository import ReminderRepository

__all__ = [
    # Models
    "ReminderRecord",
    "generate_id",
    # Protocols
    "BaseReminderStore",
    "ReminderStoreProtocol",
    "ReminderDataSourceProtocol",
    # Result
    "Result",
    "Success",
    "Error",
    "REMINDER_NOT_FOUND",
    # Stores
    "SqlReminderStore",
    "FileReminderStore",
    "InMemoryReminderStore",
    "create_reminder_store",
    # Repository
    "ReminderRepository",
]
