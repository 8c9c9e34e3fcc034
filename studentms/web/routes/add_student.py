"""
Add-student routes (admins only).

The form posts back to itself. Validation errors and backend failures render
the form again with the typed values; success renders the confirmation view
until the admin asks for another blank form.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from ...identity_access.stores import SessionRecord
from ...records.models import STUDENT_FIELDS
from ...screens.add_student import AddStudentScreen
from ..components import Component, Layout, StudentCreateForm
from .security import _get_or_create_csrf_token
from .support import _api, _layout_response, _read_form, _registry, _require_admin, _screen

add_student_router = APIRouter(tags=["Students"])

SCREEN_NAME = "add-student"


def _render_success(screen: AddStudentScreen, csrf_token: str) -> str:
    created = screen.created
    rows = "".join(
        f'<div class="detail-row"><span class="detail-label">{label}</span>'
        f'<span class="detail-value">{Component.escape(value)}</span></div>'
        for label, value in (
            ("Name", created.name),
            ("Email", created.email),
            ("Course", created.course),
            ("Department", created.department),
        )
    )
    return f"""
    <div class="success-card" id="add-student-success">
        <h2>Student Added Successfully!</h2>
        <p class="success-id">Student <strong>#{created.id}</strong> has been registered.</p>
        <div class="success-details">{rows}</div>
        <div class="success-actions">
            <form method="post" action="/add-student/another" class="inline-form">
                {Component.csrf_input(csrf_token)}
                <button type="submit" class="btn btn-primary" id="btn-add-another">Add Another Student</button>
            </form>
            <a href="/students" class="btn btn-secondary" id="btn-view-all">View All Students</a>
        </div>
    </div>
    """


def _render_add_student_page(request: Request, rec: SessionRecord, screen: AddStudentScreen) -> HTMLResponse:
    token = _get_or_create_csrf_token(request, rec.session_id)
    if screen.succeeded:
        body = _render_success(screen, token)
    else:
        body = StudentCreateForm(token, draft=screen.draft, errors=screen.errors, api_error=screen.api_error).render()
    content = f"""
    <div class="container add-student-page">
        <div class="page-header">
            <div>
                <h1 class="page-title">Add New Student</h1>
                <p class="page-subtitle">Fill in the details to register a new student.</p>
            </div>
        </div>
        {body}
    </div>
    """
    layout = Layout(title="Add Student", content=content, session=rec, current_path=request.url.path)
    return _layout_response(request, layout)


@add_student_router.get("/add-student", response_class=HTMLResponse)
async def add_student_page(request: Request):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    screen = _registry(request).put(rec.session_id, SCREEN_NAME, AddStudentScreen(_api(request)))
    return _render_add_student_page(request, rec, screen)


@add_student_router.post("/add-student", response_class=HTMLResponse)
async def add_student_submit(request: Request):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = _screen(request, rec, SCREEN_NAME, lambda: AddStudentScreen(_api(request)))
    for field in STUDENT_FIELDS:
        # Only fields whose value changed drop their stale error.
        value = form.get(field, "")
        if value != getattr(screen.draft, field):
            screen.update_field(field, value)
    await screen.submit()
    return _render_add_student_page(request, rec, screen)


@add_student_router.post("/add-student/another", response_class=HTMLResponse)
async def add_student_another(request: Request):
    rec, redirect = _require_admin(request)
    if redirect:
        return redirect
    form = await _read_form(request, rec)
    if isinstance(form, Response):
        return form
    screen = _screen(request, rec, SCREEN_NAME, lambda: AddStudentScreen(_api(request)))
    screen.add_another()
    return _render_add_student_page(request, rec, screen)
