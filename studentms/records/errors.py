"""
Response-to-outcome classifier shared by all screens.

Why:
    Every screen needs the same coarse question answered about a backend
    call: did it work, did the backend reject the input, was the caller not
    allowed, or could the server not be reached at all. Answering it once
    here keeps status-code sniffing out of the screens.

Behavior:
    - 2xx                  -> success
    - 400, 409, 422        -> validation_conflict
    - 401, 403             -> unauthorized
    - anything else, transport errors, timeouts, malformed JSON -> unreachable
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx


class ResultKind(str, Enum):
    SUCCESS = "success"
    VALIDATION_CONFLICT = "validation_conflict"
    UNAUTHORIZED = "unauthorized"
    UNREACHABLE = "unreachable"


_CONFLICT_STATUSES = frozenset({400, 409, 422})
_UNAUTHORIZED_STATUSES = frozenset({401, 403})


@dataclass
class ApiResult:
    kind: ResultKind
    data: Any = None
    status_code: Optional[int] = None
    message: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.SUCCESS


def _extract_message(response: httpx.Response) -> Optional[str]:
    """Return the backend's human-readable `message` (or `detail`/`error`)."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    for key in ("message", "detail", "error"):
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def classify_response(response: httpx.Response) -> ApiResult:
    status = response.status_code
    if 200 <= status < 300:
        if not response.content:
            return ApiResult(ResultKind.SUCCESS, data=None, status_code=status)
        try:
            data = response.json()
        except ValueError:
            return ApiResult(ResultKind.UNREACHABLE, status_code=status, reason="malformed_json")
        return ApiResult(ResultKind.SUCCESS, data=data, status_code=status)
    if status in _CONFLICT_STATUSES:
        return ApiResult(ResultKind.VALIDATION_CONFLICT, status_code=status, message=_extract_message(response))
    if status in _UNAUTHORIZED_STATUSES:
        return ApiResult(ResultKind.UNAUTHORIZED, status_code=status, message=_extract_message(response))
    return ApiResult(ResultKind.UNREACHABLE, status_code=status, message=_extract_message(response))


def classify_exception(exc: Exception) -> ApiResult:
    """Map a transport-level failure (timeout, refused connection) to unreachable."""
    return ApiResult(ResultKind.UNREACHABLE, reason=exc.__class__.__name__)
