"""
User management routes (admins only).

Why:
    Admins create and remove login accounts for the records backend. The
    screen never lets the current session delete its own account; that
    refusal happens in the controller before any prompt or backend call.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from ...identity_access.stores import SessionRecord
from ...screens.user_management import UserManagementScreen
from ..components import Alert, Component, ConfirmPrompt, Layout, ToastBanner, UserCreateForm, UserTable
from .security import _get_or_create_csrf_token
from .support import _api, _layout_response, _read_form, _registry, _require_admin

users_router = APIRouter(tags=["Users"])

SCREEN_NAME = "users"
FORM_FIELDS = ("username", "password", "role")


def _new_screen(request: Request, rec: SessionRecord) -> UserManagementScreen:
    return UserManagementScreen(_api(request), rec.identity, clock=request.app.state.clock)


async def _current_screen(request: Request, rec: SessionRecord) -> UserManagementScreen:
    registry = _registry(request)
    screen: Optional[UserManagementScreen] = registry.get(rec.session_id, SCREEN_NAME)
    if screen is None:
        screen = registry.put(rec.session_id, SCREEN_NAME, _new_screen(request, rec))
        await screen.mount()
    return screen


def _render_users_page(request: Request, rec: SessionRecord, screen: UserManagementScreen) -> HTMLResponse:
    token = _get_or_create_csrf_token(request, rec.session_id)
    toggle_label = "Cancel" if screen.show_form else "+ Add User"
    confirm_html = ""
    if screen.pending_delete is not None:
        confirm_html = ConfirmPrompt(
            f'Delete user "{screen.pending_delete.username}"? This cannot be undone.',
            confirm_action="/users/delete/confirm",
            cancel_action="/users/delete/dismiss",
            csrf_token=token,
        ).render()
    form_html = ""
    if screen.show_form:
        form_html = UserCreateForm(token, values=screen.form, errors=screen.form_errors).render()
    table_html = UserTable(screen.users, csrf_token=token, current_identity=rec.identity).render()
    content = f"""
    <div class="container users-page">
        <div class="page-header">
            <div>
                <h1 class="page-title">User Management</h1>
                <p class="page-subtitle" id="users-count">{len(screen.users)} user(s)</p>
            </div>
            <form method="post" action="/users/form/toggle" class="inline-form">
                {Component.csrf_input(token)}
                <button type="submit" class="btn btn-primary" id="btn-toggle-user-form">{toggle_label}</button>
            </form>
        </div>
        {ToastBanner(screen.toast.message, seconds=screen.toast.duration).render()}
        {Alert(screen.error).render()}
        {confirm_html}
        {form_html}
        {table_html}
    </div>
    """
    layout = Layout(title="Users", content=content, session=rec, current_path=request.url.path)
    return _layout_response(request, layout)


@users_router.get("/users", response_class=HTMLResponse)
async def users_index(request: Request):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    screen = _registry(request).put(rec.session_id, SCREEN_NAME, _new_screen(request, rec))
    await screen.mount()
    return _render_users_page(request, rec, screen)


@users_router.post("/users", response_class=HTMLResponse)
async def users_create(request: Request):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = await _current_screen(request, rec)
    screen.show_form = True
    for field in FORM_FIELDS:
        screen.update_field(field, form.get(field, ""))
    await screen.create_user()
    return _render_users_page(request, rec, screen)


@users_router.post("/users/refresh", response_class=HTMLResponse)
async def users_refresh(request: Request):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = await _current_screen(request, rec)
    await screen.refresh()
    return _render_users_page(request, rec, screen)


@users_router.post("/users/form/toggle", response_class=HTMLResponse)
async def users_toggle_form(request: Request):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = await _current_screen(request, rec)
    screen.toggle_form()
    return _render_users_page(request, rec, screen)


@users_router.post("/users/form/close", response_class=HTMLResponse)
async def users_close_form(request: Request):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = await _current_screen(request, rec)
    screen.close_form()
    return _render_users_page(request, rec, screen)


@users_router.post("/users/{user_id}/delete", response_class=HTMLResponse)
async def users_request_delete(request: Request, user_id: int):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = await _current_screen(request, rec)
    screen.request_delete(user_id)
    return _render_users_page(request, rec, screen)


@users_router.post("/users/delete/confirm", response_class=HTMLResponse)
async def users_confirm_delete(request: Request):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = await _current_screen(request, rec)
    await screen.confirm_delete()
    return _render_users_page(request, rec, screen)


@users_router.post("/users/delete/dismiss", response_class=HTMLResponse)
async def users_dismiss_delete(request: Request):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = await _current_screen(request, rec)
    screen.dismiss_delete()
    return _render_users_page(request, rec, screen)
