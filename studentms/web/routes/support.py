"""
Helpers shared by the screen routers.

Why:
    Every guarded screen repeats the same three steps: resolve the session,
    enforce the route guard, render the Layout with personalised cache
    headers. Routers call these helpers instead of copying that logic.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Tuple, Union

from fastapi import Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from ...identity_access.guards import LOGIN_PATH, admin_redirect, protected_redirect
from ...identity_access.stores import SessionRecord
from ...records.client import RecordsApi
from ...screens.registry import ScreenRegistry
from ..auth_utils import SESSION_COOKIE_NAME, current_session
from ..components import Layout
from .security import _drop_csrf_token, _validate_csrf

GuardResult = Tuple[Optional[SessionRecord], Optional[Response]]


def _private_no_store() -> dict:
    return {"Cache-Control": "private, no-store"}


def _redirect(request: Request, target: str) -> Response:
    """303 for full-page requests; HTMX gets 401 + HX-Redirect instead."""
    if target == LOGIN_PATH and "HX-Request" in request.headers:
        return Response(
            status_code=401,
            headers={"HX-Redirect": target, "Cache-Control": "private, no-store", "Vary": "HX-Request"},
        )
    return RedirectResponse(url=target, status_code=303)


def _forget_stale_session(request: Request, rec: Optional[SessionRecord]) -> None:
    """Drop screens and CSRF token held for a cookie whose session expired."""
    sid = request.cookies.get(SESSION_COOKIE_NAME)
    if sid and rec is None:
        _registry(request).drop(sid)
        _drop_csrf_token(request, sid)


def _require_session(request: Request) -> GuardResult:
    """Return (session, None) or (None, redirect) for protected screens."""
    rec = current_session(request)
    _forget_stale_session(request, rec)
    target = protected_redirect(rec)
    if target:
        return None, _redirect(request, target)
    return rec, None


def _require_admin(request: Request) -> GuardResult:
    """Unauthenticated -> /login, non-admin -> /dashboard, admin -> (session, None)."""
    rec = current_session(request)
    _forget_stale_session(request, rec)
    target = admin_redirect(rec)
    if target:
        return None, _redirect(request, target)
    return rec, None


async def _read_form(request: Request, rec: SessionRecord) -> Union[dict, Response]:
    """Parse a POSTed form and enforce its CSRF token."""
    form = await request.form()
    if not _validate_csrf(request, rec.session_id, form.get("csrf_token")):
        return HTMLResponse("CSRF Error", status_code=403)
    return {key: str(value) for key, value in form.items() if isinstance(value, str)}


def _api(request: Request) -> RecordsApi:
    return request.app.state.api


def _registry(request: Request) -> ScreenRegistry:
    return request.app.state.screens


def _screen(request: Request, rec: SessionRecord, name: str, factory: Callable[[], Any]) -> Any:
    """Reuse the session's controller for `name`, creating it when missing."""
    registry = _registry(request)
    screen = registry.get(rec.session_id, name)
    if screen is None:
        screen = registry.put(rec.session_id, name, factory())
    return screen


def _layout_response(
    request: Request,
    layout: Layout,
    *,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> HTMLResponse:
    """Render Layout with HTMX-aware semantics and return an HTMLResponse.

    Behavior:
        - Returns only the <main> children when `HX-Request` is present.
        - Otherwise renders the complete document including navigation.
        - Personalised pages default to `Cache-Control: private, no-store`;
          caller-provided headers win.
    Permissions:
        None. Route handlers must enforce the guard before calling this helper.
    """
    if request.headers.get("HX-Request"):
        body = layout.render_fragment()
    else:
        body = layout.render()
    response = HTMLResponse(content=body, status_code=status_code)
    if layout.session is not None and not (headers and "Cache-Control" in headers):
        response.headers.update(_private_no_store())
    if headers:
        for key, value in headers.items():
            response.headers[key] = value
    return response
