"""File-based reminder store.

Created: 2026-10-19
Implements ReminderStoreProtocol using a single JSON file.

Storage layout:
~/.locationreminders/
    reminders.json      # JSON array of reminder rows, oldest first

Design notes:
- In-memory index loaded on open, written through on every change
- Atomic writes using temp file + replace
- Read and write errors propagate; a corrupt file is never treated as empty
- Suitable for personal use (a few thousand reminders)
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

from locationreminders.models import ReminderRecord
from locationreminders.protocol import BaseReminderStore

logger = logging.getLogger(__name__)


class FileReminderStore(BaseReminderStore):
    """JSON-file implementation of reminder storage."""

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: JSON file to use. Its parent directory is created on open.
        """
        super().__init__()
        self.path = Path(path)
        self._records: dict[str, ReminderRecord] = {}

    # =========================================================================
    # File I/O Helpers
    # =========================================================================

    def _load_json(self) -> list[dict[str, Any]]:
        """Load the file, returning an empty list if it doesn't exist yet."""
        if not self.path.exists():
            return []
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{self.path} does not contain a JSON array of reminders")
        return data

    def _save_json(self, data: list[dict[str, Any]]) -> None:
        """Save data to the file atomically."""
        temp_path = self.path.with_suffix(".tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self.path)
        except OSError:
            if temp_path.is_file():
                temp_path.unlink()
            raise

    def _persist(self) -> None:
        """Write the index out; on failure, resync the index with the file."""
        try:
            self._save_json([r.to_dict() for r in self._records.values()])
        except OSError:
            self._load_index()
            raise

    def _load_index(self) -> None:
        self._records = {}
        for data in self._load_json():
            record = ReminderRecord.from_dict(data)
            self._records.pop(record.id, None)
            self._records[record.id] = record

    def _open(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._load_index()
        logger.info(f"Reminder file store opened: {self.path} ({len(self._records)} reminders)")

    def _close(self) -> None:
        self._records = {}
        logger.info(f"Reminder file store closed: {self.path}")

    # =========================================================================
    # Record Operations
    # =========================================================================

    async def list_all(self) -> list[ReminderRecord]:
        """Get every reminder in insertion order."""
        self._ensure_open()
        return [replace(r) for r in self._records.values()]

    async def get_by_id(self, reminder_id: str) -> ReminderRecord | None:
        """Get a reminder by ID."""
        self._ensure_open()
        record = self._records.get(reminder_id)
        return replace(record) if record is not None else None

    async def save(self, record: ReminderRecord) -> None:
        """Save or replace a reminder. A replaced reminder moves to the end."""
        self._ensure_open()
        self._records.pop(record.id, None)
        self._records[record.id] = replace(record)
        self._persist()
        logger.debug("Saved reminder %s", record.id)

    async def delete_by_id(self, reminder_id: str) -> None:
        """Delete a reminder if it exists."""
        self._ensure_open()
        if self._records.pop(reminder_id, None) is None:
            return
        self._persist()
        logger.debug("Deleted reminder %s", reminder_id)

    async def delete_all(self) -> None:
        """Delete every reminder."""
        self._ensure_open()
        self._records.clear()
        self._persist()
        logger.warning(f"All reminders cleared from {self.path}")
