"""Dashboard controller: student count summary plus role-based quick actions."""

from __future__ import annotations

from typing import Optional

from ..identity_access.domain import Capabilities
from ..records.client import RecordsApi
from . import messages


class DashboardScreen:
    def __init__(self, api: RecordsApi, capabilities: Capabilities) -> None:
        self._api = api
        self.capabilities = capabilities
        self.total_students = 0
        self.loading = True
        self.error: Optional[str] = None

    async def mount(self) -> None:
        self.loading = True
        self.error = None
        result = await self._api.count_students()
        if result.ok:
            self.total_students = result.data
        else:
            self.error = messages.COUNT_FAILED
        self.loading = False
