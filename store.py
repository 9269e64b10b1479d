from __future__ import annotations

import logging
import random
import threading
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Callable, Dict, Optional

import config
from bank import AgeGroupBank, get_bank
from models import QuizError
from session import Scheduler, SessionController

logger = logging.getLogger("mathquiz.store")


class SessionNotFound(QuizError):
    pass


@dataclass
class _Entry:
    controller: SessionController
    last_seen: datetime


class SessionStore:
    """Live quiz sessions keyed by an opaque id. Nothing outlives the process."""

    def __init__(
        self,
        bank: Optional[AgeGroupBank] = None,
        scheduler: Optional[Scheduler] = None,
        rng_factory: Callable[[], random.Random] = random.Random,
        timeout_minutes: int = config.SESSION_TIMEOUT_MINUTES,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ):
        self.bank = bank or get_bank()
        self._scheduler = scheduler
        self._rng_factory = rng_factory
        self._timeout = timedelta(minutes=timeout_minutes)
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: Dict[str, _Entry] = {}

    def create(self, age_group_id: Optional[str] = None) -> tuple[str, SessionController]:
        age_group = self.bank.get(age_group_id) if age_group_id else self.bank.default
        controller = SessionController(
            age_group, scheduler=self._scheduler, rng=self._rng_factory()
        )
        session_id = uuid.uuid4().hex
        with self._lock:
            self._sessions[session_id] = _Entry(controller, self._clock())
        logger.info("new session %s [age group: %s]", session_id, age_group.id)
        return session_id, controller

    def get(self, session_id: str) -> SessionController:
        now = self._clock()
        with self._lock:
            entry = self._sessions.get(session_id)
            if entry is None:
                raise SessionNotFound(session_id)
            if now - entry.last_seen > self._timeout:
                del self._sessions[session_id]
                entry.controller.close()
                logger.info("session %s expired", session_id)
                raise SessionNotFound(session_id)
            entry.last_seen = now
            return entry.controller

    def delete(self, session_id: str) -> bool:
        with self._lock:
            entry = self._sessions.pop(session_id, None)
        if entry is None:
            return False
        entry.controller.close()
        return True

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [sid for sid, e in self._sessions.items() if now - e.last_seen > self._timeout]
            entries = [self._sessions.pop(sid) for sid in expired]
        for entry in entries:
            entry.controller.close()
        if expired:
            logger.info("purged %d expired sessions", len(expired))
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


_store: SessionStore | None = None


def get_store() -> SessionStore:
    """FastAPI dependency; tests override it with a deterministic store."""
    global _store
    if _store is None:
        _store = SessionStore()
    return _store
