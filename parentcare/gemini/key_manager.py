"""
Gemini API Key Manager
Hands out the API key for the next call and parks keys that ran out of quota.

Keys come from ``GEMINI_API_KEYS`` (``key1|name1,key2|name2``) or a single
``GEMINI_API_KEY``. Rotation only happens between calls; a failed call is
reported back here and never replayed.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from parentcare.gemini.exceptions import (
    AllKeysExhaustedError,
    InvalidKeyConfigError,
    NoValidKeysError,
)
from parentcare.utils.logger import get_logger

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class KeyUsage:
    """Call counters for one key"""

    calls: int = 0
    failures: int = 0
    quota_failures: int = 0
    last_call_at: Optional[datetime] = None
    last_error: Optional[str] = None

    @property
    def successes(self) -> int:
        return self.calls - self.failures

    @property
    def error_rate(self) -> float:
        """Failed calls as a percentage"""
        return (self.failures / self.calls) * 100 if self.calls else 0.0


@dataclass
class ApiKey:
    """One configured key; ``value`` never leaves this module's reports"""

    value: str
    name: str
    parked_until: Optional[datetime] = None
    usage: KeyUsage = field(default_factory=KeyUsage)

    def is_parked(self, now: datetime) -> bool:
        return self.parked_until is not None and now < self.parked_until

    def report(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "parked_until": self.parked_until.isoformat() if self.parked_until else None,
            "calls": self.usage.calls,
            "successes": self.usage.successes,
            "failures": self.usage.failures,
            "quota_failures": self.usage.quota_failures,
            "error_rate": round(self.usage.error_rate, 1),
            "last_error": self.usage.last_error,
        }


def parse_api_keys(api_keys: str) -> List[ApiKey]:
    """
    Parse ``key1|name1,key2|name2``; unnamed keys become ``key_<position>``.

    Raises:
        InvalidKeyConfigError: If an entry has a name but no key
    """
    keys: List[ApiKey] = []
    for position, entry in enumerate(api_keys.split(","), start=1):
        entry = entry.strip()
        if not entry:
            continue

        value, _, name = entry.partition("|")
        if not value.strip():
            raise InvalidKeyConfigError(f"empty API key at position {position}")
        keys.append(ApiKey(value=value.strip(), name=name.strip() or f"key_{position}"))
    return keys


class GeminiKeyManager:
    """
    Key pool that sticks to one key and fails over on quota errors.

    A key that hit its quota is parked for ``backoff_seconds``; the next call
    starts from the following key. With rotation disabled the first key is
    always used.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_keys: Optional[str] = None,
        rotation_enabled: bool = True,
        backoff_seconds: int = 60,
    ):
        """
        Args:
            api_key: A single API key
            api_keys: Several named keys; takes precedence over ``api_key``
            rotation_enabled: Move to the next key after a quota failure
            backoff_seconds: How long a quota-exhausted key stays parked
        """
        self.rotation_enabled = rotation_enabled
        self.backoff_seconds = backoff_seconds
        self._lock = asyncio.Lock()
        self._cursor = 0

        if api_keys and api_keys.strip():
            self.keys = parse_api_keys(api_keys)
        elif api_key and api_key.strip():
            self.keys = [ApiKey(value=api_key.strip(), name="primary")]
        else:
            self.keys = []

        if not self.keys:
            raise NoValidKeysError()

        logger.info(
            f"Gemini key pool ready: {len(self.keys)} key(s), "
            f"rotation {'on' if rotation_enabled else 'off'}"
        )

    def _find(self, api_key: str) -> Optional[ApiKey]:
        return next((key for key in self.keys if key.value == api_key), None)

    def key_name(self, api_key: Optional[str]) -> Optional[str]:
        """Configured name of a key value, for logs and errors"""
        key = self._find(api_key) if api_key else None
        return key.name if key else None

    async def get_active_key(self) -> str:
        """
        Return the key for the next call.

        Raises:
            AllKeysExhaustedError: If every key is still parked
        """
        async with self._lock:
            if not self.rotation_enabled or len(self.keys) == 1:
                return self.keys[0].value

            now = _utcnow()
            for offset in range(len(self.keys)):
                index = (self._cursor + offset) % len(self.keys)
                key = self.keys[index]
                if key.is_parked(now):
                    continue
                if key.parked_until is not None:
                    key.parked_until = None
                    logger.info(f"Gemini key '{key.name}' is back in rotation")
                self._cursor = index
                return key.value

            raise AllKeysExhaustedError(total_keys=len(self.keys))

    async def record_success(self, api_key: str) -> None:
        async with self._lock:
            key = self._find(api_key)
            if key is not None:
                key.usage.calls += 1
                key.usage.last_call_at = _utcnow()

    async def record_failure(
        self, api_key: str, error: str, quota_exhausted: bool = False
    ) -> None:
        """Count a failed call; a quota failure also parks the key"""
        async with self._lock:
            key = self._find(api_key)
            if key is None:
                return

            now = _utcnow()
            key.usage.calls += 1
            key.usage.failures += 1
            key.usage.last_call_at = now
            key.usage.last_error = error
            if not quota_exhausted:
                return

            key.usage.quota_failures += 1
            key.parked_until = now + timedelta(seconds=self.backoff_seconds)
            logger.warning(
                f"Gemini key '{key.name}' parked for {self.backoff_seconds}s after quota error"
            )
            if self.rotation_enabled and len(self.keys) > 1:
                self._cursor = (self.keys.index(key) + 1) % len(self.keys)

    def get_metrics(self) -> Dict[str, Any]:
        """Pool snapshot for monitoring; contains key names only"""
        now = _utcnow()
        return {
            "timestamp": now.isoformat(),
            "total_keys": len(self.keys),
            "available_keys": sum(1 for key in self.keys if not key.is_parked(now)),
            "rotation_enabled": self.rotation_enabled,
            "backoff_seconds": self.backoff_seconds,
            "keys": [key.report() for key in self.keys],
        }

    def get_status_summary(self) -> str:
        now = _utcnow()
        lines = [
            f"Gemini key pool: {len(self.keys)} key(s), "
            f"rotation {'on' if self.rotation_enabled else 'off'}"
        ]
        for index, key in enumerate(self.keys):
            state = "PARKED" if key.is_parked(now) else "READY"
            lines.append(
                f"  [{index}] {key.name}: {state} "
                f"(calls={key.usage.calls}, failures={key.usage.failures}, "
                f"error_rate={key.usage.error_rate:.1f}%)"
            )
        return "\n".join(lines)
