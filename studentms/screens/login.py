"""
Login screen controller.

Submits credentials to the backend and, on success, writes identity and role
into the session context. The caller decides where to navigate next.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..identity_access.stores import SessionContext, SessionRecord
from ..records.client import RecordsApi
from ..records.errors import ResultKind
from ..records.validation import validate_login
from . import messages

# Non-production convenience: known demo accounts of the reference backend.
DEMO_CREDENTIALS: Dict[str, tuple[str, str]] = {
    "admin": ("admin", "admin123"),
    "user": ("user1", "user123"),
}


class LoginScreen:
    def __init__(self, api: RecordsApi, session: SessionContext) -> None:
        self._api = api
        self._session = session
        self.username = ""
        self.password = ""
        self.error: Optional[str] = None
        self.loading = False

    def prefill_demo(self, kind: str) -> bool:
        """Fill in one of the demo credential pairs; unknown kinds are ignored."""
        creds = DEMO_CREDENTIALS.get(kind)
        if not creds:
            return False
        self.username, self.password = creds
        self.error = None
        return True

    async def submit(self, username: str, password: str) -> Optional[SessionRecord]:
        self.username = username
        self.password = password
        errors = validate_login(username, password)
        if errors:
            self.error = errors["form"]
            return None

        self.loading = True
        self.error = None
        try:
            result = await self._api.login(username=username, password=password)
        finally:
            self.loading = False

        if result.ok:
            return self._session.set(identity=result.data.username, role=result.data.role)
        if result.kind is ResultKind.UNAUTHORIZED:
            self.error = messages.INVALID_CREDENTIALS
        else:
            self.error = messages.CANNOT_CONNECT
        return None
