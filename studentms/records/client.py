"""
HTTP client for the external records backend.

Design:
- One RecordsApi per application, bound to a single base URL, JSON bodies and
  a fixed 10 second timeout. Every backend call in the app funnels through it.
- No retry, no backoff, no request queuing. A timeout is just another
  unreachable outcome.
- Callers receive an ApiResult and decide which message to show; nothing
  raises out of this module for network or status failures.

Security: Never log credentials or request bodies.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from .errors import ApiResult, ResultKind, classify_exception, classify_response
from .models import LoginResult, Student, StudentDraft, UserAccount

logger = logging.getLogger("studentms.records.client")

API_TIMEOUT_SECONDS = 10.0
DEFAULT_BASE_URL = "http://localhost:8080/api"


class RecordsApi:
    """Thin async adapter over the backend contract."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = API_TIMEOUT_SECONDS
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )

    async def _request(self, method: str, path: str, *, json: Any = None, params: Optional[dict] = None) -> ApiResult:
        try:
            async with self._client() as client:
                response = await client.request(method, path, json=json, params=params)
        except httpx.HTTPError as exc:
            logger.warning("Backend call %s %s failed: %s", method, path, exc.__class__.__name__)
            return classify_exception(exc)
        result = classify_response(response)
        if not result.ok:
            logger.warning("Backend call %s %s returned %s (%s)", method, path, response.status_code, result.kind.value)
        return result

    @staticmethod
    def _parse(result: ApiResult, model, *, many: bool = False) -> ApiResult:
        """Validate a success payload into models; malformed bodies count as unreachable."""
        if not result.ok:
            return result
        try:
            if many:
                if not isinstance(result.data, list):
                    raise TypeError("expected_list")
                result.data = [model.model_validate(item) for item in result.data]
            else:
                result.data = model.model_validate(result.data)
        except (ValidationError, TypeError) as exc:
            logger.warning("Backend payload rejected: %s", exc.__class__.__name__)
            return ApiResult(ResultKind.UNREACHABLE, status_code=result.status_code, reason="malformed_payload")
        return result

    # --- Auth -------------------------------------------------------------

    async def login(self, *, username: str, password: str) -> ApiResult:
        result = await self._request("POST", "/auth/login", json={"username": username, "password": password})
        return self._parse(result, LoginResult)

    # --- Students ---------------------------------------------------------

    async def count_students(self) -> ApiResult:
        result = await self._request("GET", "/students/count")
        if not result.ok:
            return result
        total = result.data.get("total") if isinstance(result.data, dict) else None
        if isinstance(total, bool) or not isinstance(total, int):
            return ApiResult(ResultKind.UNREACHABLE, status_code=result.status_code, reason="malformed_payload")
        result.data = total
        return result

    async def list_students(self) -> ApiResult:
        return self._parse(await self._request("GET", "/students"), Student, many=True)

    async def search_students(self, name: str) -> ApiResult:
        result = await self._request("GET", "/students/search", params={"name": name})
        return self._parse(result, Student, many=True)

    async def create_student(self, draft: StudentDraft) -> ApiResult:
        return self._parse(await self._request("POST", "/students", json=draft.payload()), Student)

    async def update_student(self, student_id: int, draft: StudentDraft) -> ApiResult:
        result = await self._request("PUT", f"/students/{int(student_id)}", json=draft.payload())
        return self._parse(result, Student)

    async def delete_student(self, student_id: int) -> ApiResult:
        return await self._request("DELETE", f"/students/{int(student_id)}")

    # --- Users ------------------------------------------------------------

    async def list_users(self) -> ApiResult:
        return self._parse(await self._request("GET", "/users"), UserAccount, many=True)

    async def create_user(self, *, username: str, password: str, role: str) -> ApiResult:
        payload = {"username": username, "password": password, "role": role}
        return self._parse(await self._request("POST", "/users", json=payload), UserAccount)

    async def delete_user(self, user_id: int) -> ApiResult:
        return await self._request("DELETE", f"/users/{int(user_id)}")
