"""
ParentCare Models - Activity Log
Daily activity records of a toddler (meals, milk, water, diapers, sleep)
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from parentcare.utils.errors import NotFoundError, ValidationError


class ActivityCategory(str, Enum):
    """Kind of activity being logged"""

    FOOD = "FOOD"
    MILK = "MILK"
    WATER = "WATER"
    POOP = "POOP"
    SLEEP = "SLEEP"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        """Chinese display label used by the application shell"""
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS: Dict[ActivityCategory, str] = {
    ActivityCategory.FOOD: "吃饭",
    ActivityCategory.MILK: "喝奶",
    ActivityCategory.WATER: "喝水",
    ActivityCategory.POOP: "便便",
    ActivityCategory.SLEEP: "睡觉",
    ActivityCategory.OTHER: "其他",
}


class ActivityLogEntry(BaseModel):
    """A single immutable activity record"""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "5f1c0f6a9d2b4e0f8a7c3b2d1e0f9a8b",
                "timestamp": "2025-03-02T08:30:00+08:00",
                "category": "MILK",
                "detail": "200ml",
                "note": "喝完后睡着了",
            }
        },
    )

    id: str = Field(..., min_length=1)
    timestamp: datetime
    category: ActivityCategory
    detail: str
    note: Optional[str] = None


class ActivityLog:
    """
    In-memory activity log owned by the application shell.

    Entries are kept newest first, the order the shell displays them in.
    Entries are created and deleted, never updated.
    """

    def __init__(self, entries: Optional[Iterable[ActivityLogEntry]] = None):
        self._entries: List[ActivityLogEntry] = []
        seen = set()
        for entry in entries or []:
            if entry.id in seen:
                raise ValidationError(
                    f"Duplicate activity log id: {entry.id}", details={"id": entry.id}
                )
            seen.add(entry.id)
            self._entries.append(entry)

    def add(
        self,
        category: ActivityCategory,
        detail: str,
        note: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> ActivityLogEntry:
        """Create an entry and put it at the top of the log"""
        if not detail or not detail.strip():
            raise ValidationError("Activity detail must not be blank")

        entry = ActivityLogEntry(
            id=uuid.uuid4().hex,
            timestamp=timestamp or datetime.now().astimezone(),
            category=ActivityCategory(category),
            detail=detail.strip(),
            note=note.strip() if note and note.strip() else None,
        )
        self._entries.insert(0, entry)
        return entry

    def remove(self, entry_id: str) -> bool:
        """Delete an entry by id; returns False when no entry matched"""
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[index]
                return True
        return False

    def find(self, entry_id: str) -> ActivityLogEntry:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        raise NotFoundError(f"Activity log entry not found: {entry_id}")

    @property
    def entries(self) -> List[ActivityLogEntry]:
        """Snapshot of the entries, newest first"""
        return list(self._entries)

    def __iter__(self) -> Iterator[ActivityLogEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
