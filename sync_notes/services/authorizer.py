"""
Create-note request cache.
Issues single-use tokens that authorize exactly one note creation.
"""

import logging
import threading
import time
import uuid
from typing import Callable, Dict
from uuid import UUID

from sync_notes.models import Token

logger = logging.getLogger(__name__)


class Authorizer:
    """
    Holds outstanding create-note tokens and their issue times.

    Every read and mutation of the table happens under one lock, so a token
    can be consumed at most once even when requests race.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._tokens: Dict[UUID, float] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

    def __contains__(self, token_id: UUID) -> bool:
        with self._lock:
            return token_id in self._tokens

    def issue(self) -> Token:
        """Create and remember a fresh token."""
        token = Token(id=uuid.uuid4(), issued_at=self._clock())
        with self._lock:
            self._tokens[token.id] = token.issued_at
        return token

    def consume(self, token_id: UUID) -> bool:
        """
        Use up a token.

        Returns:
            True if the token was held and still within its TTL; it is
            removed. False otherwise, and the table is left untouched.
        """
        now = self._clock()
        with self._lock:
            issued_at = self._tokens.get(token_id)
            if issued_at is None or now >= issued_at + self.ttl_seconds:
                return False
            del self._tokens[token_id]
        return True

    def expire_older_than(self, now: float, ttl_seconds: float) -> int:
        """Drop tokens issued more than ``ttl_seconds`` before ``now``. Returns count removed."""
        with self._lock:
            expired = [
                (token_id, issued_at) for token_id, issued_at in self._tokens.items()
                if issued_at + ttl_seconds < now
            ]
            for token_id, _ in expired:
                del self._tokens[token_id]
        for token_id, issued_at in expired:
            logger.info("Deleting cached request %s initialised at %s", token_id, issued_at)
        return len(expired)
