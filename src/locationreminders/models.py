"""Reminder data model.

Created: 2026-10-19

A ``ReminderRecord`` is the single persisted entity. Every save replaces
the whole record; there are no partial-field updates.

Design notes:
- Plain dataclass, like the rest of the package's models
- ``id`` is chosen by the caller; a UUID4 string is filled in when omitted
- Coordinates are paired by convention only (both set or both ``None``)
"""

import uuid
from dataclasses import asdict, dataclass, field
from typing import Any


def generate_id() -> str:
    """Generate a unique reminder ID."""
    return str(uuid.uuid4())


@dataclass
class ReminderRecord:
    """
    A location reminder as stored on disk.

    Attributes:
        title: Short reminder title
        description: Free-form details
        location: Human-readable label of the selected place
        latitude: Latitude of the selected place
        longitude: Longitude of the selected place
        id: Unique identifier (primary key)
    """

    title: str | None = None
    description: str | None = None
    location: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    id: str = field(default_factory=generate_id)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReminderRecord":
        """Create from dictionary. Unknown keys are ignored."""
        return cls(
            id=data["id"],
            title=data.get("title"),
            description=data.get("description"),
            location=data.get("location"),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
        )
