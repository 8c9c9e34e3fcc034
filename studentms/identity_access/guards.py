"""
Route guards over the session context.

Two predicates decide whether a screen may render; two redirect helpers turn
a failed predicate into the target path. No backend call is made: the guard
trusts the stored flags until the next API call fails.
"""
from __future__ import annotations

from typing import Optional

from .domain import ROLE_ADMIN
from .stores import SessionRecord

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"


def is_authenticated(session: Optional[SessionRecord]) -> bool:
    return bool(session and session.identity)


def is_admin(session: Optional[SessionRecord]) -> bool:
    return is_authenticated(session) and session.role == ROLE_ADMIN  # type: ignore[union-attr]


def protected_redirect(session: Optional[SessionRecord]) -> Optional[str]:
    """Return the redirect target for a protected screen, or None to render."""
    if not is_authenticated(session):
        return LOGIN_PATH
    return None


def admin_redirect(session: Optional[SessionRecord]) -> Optional[str]:
    """Return the redirect target for an admin-only screen, or None to render.

    Unauthenticated visitors go to the login screen, authenticated non-admins
    to the dashboard.
    """
    if not is_authenticated(session):
        return LOGIN_PATH
    if not is_admin(session):
        return DASHBOARD_PATH
    return None
