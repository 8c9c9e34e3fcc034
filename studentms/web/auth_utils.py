"""
Shared authentication utilities.

Why:
    Cookie policy and session lookup are needed by every router. Keeping them
    in one place keeps the flags consistent between login, logout and the
    guarded screens.

Design:
    `cookie_opts` is pure: it accepts an environment string and returns the
    corresponding cookie flags. The request helpers read the shared stores
    from `request.app.state`, so tests can build an app with their own stores.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Request, Response

from ..identity_access.stores import SessionContext, SessionRecord

SESSION_COOKIE_NAME = "studentms_session"


def cookie_opts(environment: str) -> dict:
    """Return the session cookie flags for an environment.

    Returns a mapping with keys:
      - secure: False only in dev (plain http://localhost), True elsewhere
      - samesite: "lax"  # cookie is sent on top-level navigations only
    """
    env = (environment or "dev").lower()
    return {"secure": env != "dev", "samesite": "lax"}


def set_session_cookie(response: Response, request: Request, value: str) -> None:
    opts = cookie_opts(request.app.state.settings.environment)
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=value,
        httponly=True,
        secure=opts["secure"],
        samesite=opts["samesite"],
        path="/",
        max_age=request.app.state.settings.session_ttl_seconds,
    )


def clear_session_cookie(response: Response, request: Request) -> None:
    opts = cookie_opts(request.app.state.settings.environment)
    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=opts["secure"],
        samesite=opts["samesite"],
    )


def session_context(request: Request) -> SessionContext:
    """SessionContext bound to the cookie of this request (may be empty)."""
    return SessionContext(request.app.state.session_store, request.cookies.get(SESSION_COOKIE_NAME))


def current_session(request: Request) -> Optional[SessionRecord]:
    return session_context(request).get()
