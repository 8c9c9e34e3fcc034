"""
Dashboard route: student count summary and role-based quick actions.

Every GET remounts the controller, so the count is always fetched fresh.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...identity_access.stores import SessionRecord
from ...screens.dashboard import DashboardScreen
from ..components import Alert, Component, Layout
from .support import _api, _layout_response, _require_session

dashboard_router = APIRouter(tags=["Dashboard"])


def _action_card(href: str, title: str, desc: str, *, card_id: str, special: bool = False) -> str:
    classes = Component.classes("action-card", action_card_special=special)
    return f"""
    <a href="{href}" class="{classes}" id="{card_id}">
        <h3 class="action-title">{Component.escape(title)}</h3>
        <p class="action-desc">{Component.escape(desc)}</p>
    </a>"""


def _render_dashboard(rec: SessionRecord, screen: DashboardScreen) -> str:
    caps = screen.capabilities
    count = '<span class="loading-dots">...</span>' if screen.loading else str(screen.total_students)
    role_label = "Administrator" if caps.can_manage_users else "User"

    actions = [_action_card("/students", "View Students", "Browse and search the student list", card_id="btn-view-students")]
    if caps.can_manage_students:
        actions.append(
            _action_card("/add-student", "Add Student", "Register a new student record",
                         card_id="btn-add-student-dashboard", special=True)
        )
    else:
        actions.append("""
    <div class="action-card action-card-info" id="read-only-notice">
        <h3 class="action-title">Read-Only Access</h3>
        <p class="action-desc">You can view and search students. Contact an Admin to add, edit, or delete.</p>
    </div>""")
    if caps.can_manage_users:
        actions.append(_action_card("/users", "Manage Users", "Create and remove user accounts", card_id="btn-manage-users"))

    return f"""
    <div class="container dashboard">
        <div class="dashboard-header">
            <div>
                <h1 class="welcome-title">Welcome back, <span class="highlight">{Component.escape(rec.identity)}</span>!</h1>
                <p class="welcome-subtitle">Here's what's happening in your system today.</p>
            </div>
            <span class="role-badge role-{Component.escape((rec.role or '').lower())}">{role_label}</span>
        </div>
        {Alert(screen.error).render()}
        <div class="stats-grid">
            <div class="stat-card">
                <span class="stat-label">Total Students</span>
                <span class="stat-value" id="total-students">{count}</span>
            </div>
            <div class="stat-card">
                <span class="stat-label">Your Role</span>
                <span class="stat-value role-value">{Component.escape(rec.role)}</span>
            </div>
        </div>
        <section class="quick-actions-section" aria-labelledby="quick-actions-heading">
            <h2 class="section-title" id="quick-actions-heading">Quick Actions</h2>
            <div class="quick-actions-grid">{''.join(actions)}</div>
        </section>
    </div>
    """


@dashboard_router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(request: Request):
    rec, redirect = _require_session(request)
    if redirect:
        return redirect
    screen = DashboardScreen(_api(request), rec.capabilities)
    await screen.mount()
    layout = Layout(title="Dashboard", content=_render_dashboard(rec, screen), session=rec, current_path=request.url.path)
    return _layout_response(request, layout)
