"""
Pending-Edit Store - Hold previewed edit batches until approved or expired
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
import uuid
from typing import Callable, Sequence

from models.edit import EditOperation, PendingEdit
from services.errors import UnknownOrExpiredToken

logger = logging.getLogger(__name__)

STATE_TTL_SECONDS = 60.0
SWEEP_INTERVAL_SECONDS = 30.0


class PendingEditStore:
    """Single-use, time-limited tokens mapped to pending edit batches"""

    def __init__(
        self,
        ttl: float = STATE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, PendingEdit] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _is_expired(self, entry: PendingEdit, now: float) -> bool:
        return now - entry.created_at > self.ttl

    def save(self, path: str, batch: Sequence[EditOperation]) -> str:
        """Store a batch and return a fresh token for it"""
        with self._lock:
            now = self._clock()
            self._purge_locked(now)
            token = uuid.uuid4().hex
            while token in self._entries:
                token = uuid.uuid4().hex
            self._entries[token] = PendingEdit(
                token=token,
                path=path,
                batch=tuple(batch),
                created_at=now,
            )
        logger.info("Saved pending edit %s for %s (%d edit(s))", token, path, len(batch))
        return token

    def consume(self, token: str) -> PendingEdit:
        """Remove and return the entry for token. A token works at most once."""
        with self._lock:
            entry = self._entries.pop(token, None)
            if entry is None:
                raise UnknownOrExpiredToken(token)
            if self._is_expired(entry, self._clock()):
                logger.info("Pending edit %s expired before approval", token)
                raise UnknownOrExpiredToken(token)
        logger.info("Consumed pending edit %s for %s", token, entry.path)
        return entry

    def purge_expired(self) -> int:
        """Drop every expired entry, returning how many were removed"""
        with self._lock:
            return self._purge_locked(self._clock())

    def _purge_locked(self, now: float) -> int:
        expired = [token for token, entry in self._entries.items() if self._is_expired(entry, now)]
        for token in expired:
            del self._entries[token]
        if expired:
            logger.debug("Purged %d expired pending edit(s)", len(expired))
        return len(expired)

    async def run_sweeper(self, interval: float = SWEEP_INTERVAL_SECONDS) -> None:
        """Purge periodically until cancelled"""
        while True:
            await asyncio.sleep(interval)
            self.purge_expired()
