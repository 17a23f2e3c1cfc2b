"""
ParentCare Repository Pattern
Storage abstraction for the activity log kept by the application shell.

The advisory layer only ever receives an already loaded list of entries;
durable backends live in the shell and implement ActivityLogRepository.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List

from pydantic import TypeAdapter

from parentcare.models.activity import ActivityLogEntry
from parentcare.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LOG_KEY = "toddler_logs"

_ENTRY_LIST = TypeAdapter(List[ActivityLogEntry])


# ============================================================================
# BASE REPOSITORY (Abstract)
# ============================================================================


class ActivityLogRepository(ABC):
    """Keyed read/write of a whole activity log"""

    @abstractmethod
    async def load(self, key: str = DEFAULT_LOG_KEY) -> List[ActivityLogEntry]:
        """Return the stored entries for ``key``, empty when nothing is stored"""

    @abstractmethod
    async def save(
        self, entries: Iterable[ActivityLogEntry], key: str = DEFAULT_LOG_KEY
    ) -> None:
        """Replace the stored entries for ``key``"""


# ============================================================================
# IN-MEMORY REPOSITORY
# ============================================================================


class InMemoryActivityLogRepository(ActivityLogRepository):
    """
    Repository that keeps serialized logs in a dict.

    Logs are stored as JSON, the same representation a durable backend would
    write, so loaded entries never share state with saved ones.
    """

    def __init__(self):
        self._store: Dict[str, bytes] = {}

    async def load(self, key: str = DEFAULT_LOG_KEY) -> List[ActivityLogEntry]:
        payload = self._store.get(key)
        if payload is None:
            return []
        return _ENTRY_LIST.validate_json(payload)

    async def save(
        self, entries: Iterable[ActivityLogEntry], key: str = DEFAULT_LOG_KEY
    ) -> None:
        entries = list(entries)
        self._store[key] = _ENTRY_LIST.dump_json(entries)
        logger.debug(f"Saved {len(entries)} activity log entries under '{key}'")
