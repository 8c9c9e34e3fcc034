"""
Student list routes: listing, search, inline edit and delete.

GET /students remounts the session's StudentListScreen; the action routes
reuse it so the edit draft, pending delete and toast survive between
requests. Mutating actions are refused for non-admins with a redirect back
to the list. That is a UI convenience only: the backend must authorize every
write on its own.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from ...identity_access.stores import SessionRecord
from ...records.models import STUDENT_FIELDS
from ...screens import messages
from ...screens.student_list import StudentListScreen
from ..components import Alert, ConfirmPrompt, Layout, StudentSearchBar, StudentTable, ToastBanner
from .security import _get_or_create_csrf_token
from .support import _api, _layout_response, _read_form, _registry, _require_session

students_router = APIRouter(tags=["Students"])

SCREEN_NAME = "students"
LIST_PATH = "/students"


def _new_screen(request: Request, rec: SessionRecord) -> StudentListScreen:
    return StudentListScreen(_api(request), rec.capabilities, clock=request.app.state.clock)


async def _current_screen(request: Request, rec: SessionRecord) -> StudentListScreen:
    """The session's list controller; mounted on first use."""
    registry = _registry(request)
    screen: Optional[StudentListScreen] = registry.get(rec.session_id, SCREEN_NAME)
    if screen is None:
        screen = registry.put(rec.session_id, SCREEN_NAME, _new_screen(request, rec))
        await screen.mount()
    return screen


def _render_students_page(request: Request, rec: SessionRecord, screen: StudentListScreen) -> HTMLResponse:
    token = _get_or_create_csrf_token(request, rec.session_id)
    can_manage = screen.capabilities.can_manage_students
    count = len(screen.students)
    add_html = (
        '<a href="/add-student" class="btn btn-primary" id="btn-add-student">Add Student</a>'
        if can_manage
        else ""
    )
    confirm_html = ""
    if screen.pending_delete is not None:
        confirm_html = ConfirmPrompt(
            f'Are you sure you want to delete "{screen.pending_delete.name}"?',
            confirm_action="/students/delete/confirm",
            cancel_action="/students/delete/dismiss",
            csrf_token=token,
        ).render()
    table_html = StudentTable(
        screen.students,
        csrf_token=token,
        can_manage=can_manage,
        editing_id=screen.editing_id,
        draft=screen.draft,
    ).render()
    content = f"""
    <div class="container students-page">
        <div class="page-header">
            <div>
                <h1 class="page-title">Student Records</h1>
                <p class="page-subtitle" id="students-count">{count} student(s) found</p>
            </div>
            {add_html}
        </div>
        {ToastBanner(screen.toast.message, seconds=screen.toast.duration).render()}
        {Alert(screen.error).render()}
        {confirm_html}
        {StudentSearchBar(screen.query).render()}
        {table_html}
    </div>
    """
    layout = Layout(title="Students", content=content, session=rec, current_path=request.url.path)
    return _layout_response(request, layout)


def _forbidden_for(rec: SessionRecord) -> Optional[Response]:
    if not rec.capabilities.can_manage_students:
        return RedirectResponse(url=LIST_PATH, status_code=303)
    return None


@students_router.get("/students", response_class=HTMLResponse)
async def students_index(request: Request):
    rec, redirect = _require_session(request)
    if redirect:
        return redirect
    screen = _registry(request).put(rec.session_id, SCREEN_NAME, _new_screen(request, rec))
    await screen.mount()
    return _render_students_page(request, rec, screen)


@students_router.get("/students/search", response_class=HTMLResponse)
async def students_search(request: Request, q: str = ""):
    """Filter by name; a blank query restores the full list."""
    rec, redirect = _require_session(request)
    if redirect:
        return redirect
    screen = _registry(request).get(rec.session_id, SCREEN_NAME)
    if screen is None:
        screen = _registry(request).put(rec.session_id, SCREEN_NAME, _new_screen(request, rec))
    await screen.search(q)
    return _render_students_page(request, rec, screen)


@students_router.post("/students/refresh", response_class=HTMLResponse)
async def students_refresh(request: Request):
    rec, redirect = _require_session(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = await _current_screen(request, rec)
    await screen.refresh()
    return _render_students_page(request, rec, screen)


@students_router.post("/students/{student_id}/edit", response_class=HTMLResponse)
async def students_start_edit(request: Request, student_id: int):
    rec, redirect = _require_session(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    refused = _forbidden_for(rec)
    if refused:
        return refused
    screen = await _current_screen(request, rec)
    screen.start_edit(student_id)
    return _render_students_page(request, rec, screen)


@students_router.post("/students/{student_id}/save", response_class=HTMLResponse)
async def students_save(request: Request, student_id: int):
    rec, redirect = _require_session(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    refused = _forbidden_for(rec)
    if refused:
        return refused
    screen = await _current_screen(request, rec)
    if screen.editing_id != student_id and not screen.start_edit(student_id):
        # Stale form for a row no longer listed: never write into another row.
        screen.error = messages.UPDATE_FAILED
        return _render_students_page(request, rec, screen)
    for field in STUDENT_FIELDS:
        if field in form:
            screen.update_field(field, form[field])
    await screen.save()
    return _render_students_page(request, rec, screen)


@students_router.post("/students/{student_id}/cancel", response_class=HTMLResponse)
async def students_cancel_edit(request: Request, student_id: int):
    rec, redirect = _require_session(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = await _current_screen(request, rec)
    screen.cancel_edit()
    return _render_students_page(request, rec, screen)


@students_router.post("/students/{student_id}/delete", response_class=HTMLResponse)
async def students_request_delete(request: Request, student_id: int):
    rec, redirect = _require_session(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    refused = _forbidden_for(rec)
    if refused:
        return refused
    screen = await _current_screen(request, rec)
    screen.request_delete(student_id)
    return _render_students_page(request, rec, screen)


@students_router.post("/students/delete/confirm", response_class=HTMLResponse)
async def students_confirm_delete(request: Request):
    rec, redirect = _require_session(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    refused = _forbidden_for(rec)
    if refused:
        return refused
    screen = await _current_screen(request, rec)
    await screen.confirm_delete()
    return _render_students_page(request, rec, screen)


@students_router.post("/students/delete/dismiss", response_class=HTMLResponse)
async def students_dismiss_delete(request: Request):
    rec, redirect = _require_session(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = await _current_screen(request, rec)
    screen.dismiss_delete()
    return _render_students_page(request, rec, screen)
