"""
Shared web security helpers (FastAPI-agnostic utilities for routes).

Contains the same-origin check for the login form and the per-session CSRF
tokens used by every authenticated form. Keeping a single implementation
avoids security drift between routers.
"""
from __future__ import annotations

import hmac
import os
import secrets
from typing import Optional
from urllib.parse import urlparse

from fastapi import Request


def _parse_origin(url: str) -> tuple[str, str, int]:
    p = urlparse(url)
    if not p.scheme or not p.hostname:
        raise ValueError("invalid_origin")
    scheme = p.scheme.lower()
    host = p.hostname.lower()
    port = p.port if p.port is not None else (443 if scheme == "https" else 80)
    return scheme, host, int(port)


def _parse_server(request: Request) -> tuple[str, str, int]:
    trust_proxy = (os.getenv("STUDENTMS_TRUST_PROXY", "false") or "").lower() == "true"
    if trust_proxy:
        xf_proto = (request.headers.get("x-forwarded-proto") or "").split(",")[0].strip()
        xf_host = (request.headers.get("x-forwarded-host") or "").split(",")[0].strip()
        if xf_host:
            scheme = (xf_proto or request.url.scheme or "http").lower()
            return _parse_origin(f"{scheme}://{xf_host}")

    scheme = (request.url.scheme or "http").lower()
    host = (request.url.hostname or "").lower()
    port = int(request.url.port) if request.url.port else (443 if scheme == "https" else 80)
    return scheme, host, port


def _is_same_origin(request: Request) -> bool:
    """Verify same-origin using Origin or Referer headers.

    Behavior:
    - If Origin is present, require exact scheme/host/port match with server.
    - Else if Referer is present, validate its origin similarly.
    - Else (no headers): allow to not break non-browser clients.
    Proxy awareness: Only trust X-Forwarded-* when STUDENTMS_TRUST_PROXY=true.
    """
    try:
        server = _parse_server(request)
        origin_val = request.headers.get("origin")
        if origin_val:
            return _parse_origin(origin_val) == server
        referer_val = request.headers.get("referer")
        if referer_val:
            return _parse_origin(referer_val) == server
        return True
    except ValueError:
        return False


def _get_or_create_csrf_token(request: Request, session_id: str) -> str:
    tokens: dict[str, str] = request.app.state.csrf_tokens
    token = tokens.get(session_id)
    if not token:
        token = secrets.token_urlsafe(24)
        tokens[session_id] = token
    return token


def _validate_csrf(request: Request, session_id: Optional[str], form_value: Optional[str]) -> bool:
    if not session_id or not form_value:
        return False
    expected = request.app.state.csrf_tokens.get(session_id)
    if not expected:
        return False
    return hmac.compare_digest(expected, str(form_value))


def _drop_csrf_token(request: Request, session_id: Optional[str]) -> None:
    if session_id:
        request.app.state.csrf_tokens.pop(session_id, None)
