"""
In-memory session store and the per-request session context.

Why: Keep the logged-in identity and role server-side and opaque to the
browser. The cookie carries only a random session id. For multi-process
deployments, replace SessionStore with a shared backend exposing the same
create/get/delete methods.

Security: Never store passwords here. The store holds exactly two user facts
(identity, role) plus bookkeeping.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
import secrets
import time

from .domain import Capabilities


def _now() -> int:
    return int(time.time())


@dataclass
class SessionRecord:
    session_id: str
    identity: Optional[str]
    role: Optional[str]
    expires_at: Optional[int] = None

    @property
    def capabilities(self) -> Capabilities:
        return Capabilities.for_role(self.identity, self.role)


class SessionStore:
    def __init__(self, ttl_seconds: int = 28800):
        self._data: Dict[str, SessionRecord] = {}
        self.ttl_seconds = ttl_seconds

    def create(self, *, identity: str, role: str, ttl_seconds: Optional[int] = None) -> SessionRecord:
        sid = secrets.token_urlsafe(24)
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        rec = SessionRecord(session_id=sid, identity=identity, role=role, expires_at=_now() + ttl)
        self._data[sid] = rec
        return rec

    def get(self, session_id: str) -> Optional[SessionRecord]:
        rec = self._data.get(session_id)
        if not rec:
            return None
        if rec.expires_at and rec.expires_at < _now():
            self._data.pop(session_id, None)
            return None
        return rec

    def delete(self, session_id: str) -> None:
        self._data.pop(session_id, None)


class SessionContext:
    """Single read/write surface over the session of one browser.

    Routes and screens receive this object instead of reaching into a global
    store, so tests can hand in a fresh SessionStore.
    """

    def __init__(self, store: SessionStore, session_id: Optional[str] = None) -> None:
        self._store = store
        self.session_id = session_id

    def get(self) -> Optional[SessionRecord]:
        if not self.session_id:
            return None
        return self._store.get(self.session_id)

    def set(self, *, identity: str, role: str) -> SessionRecord:
        """Replace any existing session with a fresh record (new id)."""
        if self.session_id:
            self._store.delete(self.session_id)
        rec = self._store.create(identity=identity, role=role)
        self.session_id = rec.session_id
        return rec

    def clear(self) -> None:
        """Drop the session. Safe to call when nothing is stored."""
        if self.session_id:
            self._store.delete(self.session_id)
        self.session_id = None
