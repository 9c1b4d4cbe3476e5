"""Two-variant outcome type returned by the reminder repository.

Created: 2026-10-19

Callers branch on the variant with structural pattern matching::

    match await repository.get_reminder("1"):
        case Success(data=reminder):
            show(reminder)
        case Error(message=message):
            show_error(message)
        case _ as unreachable:
            assert_never(unreachable)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")

# Message returned when a reminder id has no stored record.
# Other layers match on this exact text.
REMINDER_NOT_FOUND = "Reminder not found!"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation completed; ``data`` holds the payload."""

    data: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Error:
    """Operation failed with a human-readable message."""

    message: str

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_error(self) -> bool:
        return True


Result: TypeAlias = Success[T] | Error
