# app/core/session.py
from __future__ import annotations

import logging
import secrets
import threading
import time
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends, Request, Response

from app.core.config import get_settings

if TYPE_CHECKING:
    from app.auth.models import User
    from app.ticket.models import Ticket

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """Everything one browser session owns.

    Hold ``lock`` for the whole of any read-modify-write on this state.
    """

    user: User | None = None
    authenticated: bool = False
    tickets: list[Ticket] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
    last_seen: float = field(default_factory=time.monotonic, compare=False)


class SessionStore:
    """In-process registry of session token -> SessionState."""

    def __init__(self, ttl_seconds: int, max_sessions: int = 10000):
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max_sessions
        self._sessions: dict[str, SessionState] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get_or_create(self, session_id: str | None) -> tuple[str, SessionState]:
        now = time.monotonic()
        with self._lock:
            self._evict_expired(now)
            state = self._sessions.get(session_id) if session_id else None
            if state is None:
                self._evict_least_recent(keep=self.max_sessions - 1)
                session_id = secrets.token_urlsafe(32)
                state = SessionState(last_seen=now)
                self._sessions[session_id] = state
                logger.debug("Created session (%d active)", len(self._sessions))
            state.last_seen = now
        return session_id, state

    def _evict_least_recent(self, keep: int) -> None:
        excess = len(self._sessions) - keep
        if excess <= 0:
            return
        oldest = sorted(self._sessions, key=lambda sid: self._sessions[sid].last_seen)[:excess]
        for sid in oldest:
            del self._sessions[sid]
        logger.debug("Evicted %d least recently used session(s)", len(oldest))

    def _evict_expired(self, now: float) -> None:
        expired = [
            sid for sid, state in self._sessions.items()
            if now - state.last_seen > self.ttl_seconds
        ]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug("Evicted %d idle session(s)", len(expired))


@lru_cache
def get_session_store() -> SessionStore:
    settings = get_settings()
    return SessionStore(
        ttl_seconds=settings.SESSION_TTL_SECONDS,
        max_sessions=settings.SESSION_MAX_COUNT,
    )


# Common session dependency
def get_session(
    request: Request,
    response: Response,
    store: SessionStore = Depends(get_session_store),
) -> SessionState:
    settings = get_settings()
    session_id, state = store.get_or_create(request.cookies.get(settings.SESSION_COOKIE_NAME))
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        session_id,
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return state
