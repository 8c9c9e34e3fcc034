"""
Authentication-related FastAPI routes (router-only module).

Why:
    Login and logout are the only routes that create or destroy sessions. They
    live apart from the screen routers so cookie handling stays in one place.

Notes:
    - Credentials go straight to the records backend; this app never stores
      or logs passwords.
    - The login form has no session yet, so it is protected by the
      same-origin check instead of a CSRF token.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from ...identity_access.guards import DASHBOARD_PATH, LOGIN_PATH, is_authenticated
from ...screens.login import LoginScreen
from ..auth_utils import clear_session_cookie, current_session, session_context, set_session_cookie
from ..components import Layout, LoginForm
from .security import _drop_csrf_token, _is_same_origin
from .support import _api, _layout_response, _private_no_store, _registry

auth_router = APIRouter(tags=["Auth"])
logger = logging.getLogger("studentms.web.auth")


def _render_login(request: Request, screen: LoginScreen, *, status_code: int = 200) -> HTMLResponse:
    form_html = LoginForm(
        username=screen.username,
        password=screen.password,
        error=screen.error,
        show_demo=request.app.state.settings.demo_login,
    ).render()
    content = f"""
    <div class="login-container">
        <div class="login-card">
            <div class="login-header">
                <h1>Student Management</h1>
                <p>Sign in to access the system</p>
            </div>
            {form_html}
        </div>
    </div>
    """
    layout = Layout(title="Login", content=content, show_nav=False, current_path=request.url.path)
    return _layout_response(request, layout, status_code=status_code, headers=_private_no_store())


@auth_router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request, demo: Optional[str] = None):
    """Render the login form; an existing session goes straight to the dashboard."""
    if is_authenticated(current_session(request)):
        return RedirectResponse(url=DASHBOARD_PATH, status_code=303)
    screen = LoginScreen(_api(request), session_context(request))
    if demo and request.app.state.settings.demo_login:
        screen.prefill_demo(demo)
    return _render_login(request, screen)


@auth_router.post("/login")
async def login_submit(request: Request):
    if not _is_same_origin(request):
        return Response(status_code=403, headers=_private_no_store())
    form = await request.form()
    username = str(form.get("username") or "")
    password = str(form.get("password") or "")

    ctx = session_context(request)
    previous_sid = ctx.session_id
    screen = LoginScreen(_api(request), ctx)
    rec = await screen.submit(username, password)
    if rec is None:
        # Never echo a typed password back into the page.
        screen.password = ""
        return _render_login(request, screen)

    if previous_sid:
        _registry(request).drop(previous_sid)
        _drop_csrf_token(request, previous_sid)
    logger.info("Login succeeded for %s (%s)", rec.identity, rec.role)
    response = RedirectResponse(url=DASHBOARD_PATH, status_code=303)
    set_session_cookie(response, request, rec.session_id)
    response.headers.update(_private_no_store())
    return response


@auth_router.get("/logout")
async def logout(request: Request):
    """Forget the session locally; the backend keeps no session to end."""
    ctx = session_context(request)
    rec = ctx.get()
    if ctx.session_id:
        _registry(request).drop(ctx.session_id)
        _drop_csrf_token(request, ctx.session_id)
    ctx.clear()
    if rec is not None:
        logger.info("Logout for %s", rec.identity)
    response = RedirectResponse(url=LOGIN_PATH, status_code=303)
    clear_session_cookie(response, request)
    response.headers.update(_private_no_store())
    return response
