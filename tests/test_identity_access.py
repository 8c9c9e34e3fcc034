"""
Session store, capabilities and route guard tests.

Why: Every screen decision hangs off two booleans (authenticated, admin).
These tests pin the guard targets and the session lifecycle without HTTP.
"""
from __future__ import annotations

import time

from studentms.identity_access.domain import Capabilities
from studentms.identity_access.guards import (
    admin_redirect,
    is_admin,
    is_authenticated,
    protected_redirect,
)
from studentms.identity_access.stores import SessionContext, SessionRecord, SessionStore


def _rec(identity, role):
    return SessionRecord(session_id="sid", identity=identity, role=role)


def test_capabilities_for_admin_and_user():
    admin = Capabilities.for_role("admin", "ADMIN")
    user = Capabilities.for_role("user1", "USER")
    assert admin == Capabilities(can_view_students=True, can_manage_students=True, can_manage_users=True)
    assert user == Capabilities(can_view_students=True, can_manage_students=False, can_manage_users=False)


def test_capabilities_without_identity_grant_nothing():
    caps = Capabilities.for_role(None, "ADMIN")
    assert not caps.can_view_students
    assert not caps.can_manage_students
    assert not caps.can_manage_users


def test_role_without_identity_is_not_authenticated():
    assert not is_authenticated(None)
    assert not is_authenticated(_rec(None, "ADMIN"))
    assert not is_admin(_rec(None, "ADMIN"))


def test_protected_redirect_targets():
    assert protected_redirect(None) == "/login"
    assert protected_redirect(_rec("user1", "USER")) is None


def test_admin_redirect_targets():
    assert admin_redirect(None) == "/login"
    assert admin_redirect(_rec("user1", "USER")) == "/dashboard"
    assert admin_redirect(_rec("admin", "ADMIN")) is None


def test_unknown_role_is_not_admin():
    assert is_authenticated(_rec("eve", "SUPERUSER"))
    assert not is_admin(_rec("eve", "SUPERUSER"))
    assert admin_redirect(_rec("eve", "admin")) == "/dashboard"


def test_session_context_set_get_clear():
    store = SessionStore()
    ctx = SessionContext(store)
    assert ctx.get() is None

    rec = ctx.set(identity="admin", role="ADMIN")
    assert ctx.get() is rec
    assert store.get(rec.session_id) is rec

    ctx.clear()
    assert ctx.get() is None
    assert store.get(rec.session_id) is None


def test_session_context_clear_twice_is_noop():
    ctx = SessionContext(SessionStore())
    ctx.set(identity="user1", role="USER")
    ctx.clear()
    ctx.clear()
    assert ctx.get() is None


def test_session_context_set_rotates_session_id():
    store = SessionStore()
    ctx = SessionContext(store)
    first = ctx.set(identity="user1", role="USER")
    second = ctx.set(identity="admin", role="ADMIN")
    assert first.session_id != second.session_id
    assert store.get(first.session_id) is None
    assert ctx.get().identity == "admin"


def test_expired_session_is_dropped():
    store = SessionStore()
    rec = store.create(identity="user1", role="USER", ttl_seconds=-1)
    assert rec.expires_at < int(time.time())
    assert store.get(rec.session_id) is None


def test_session_record_capabilities_follow_role():
    store = SessionStore()
    rec = store.create(identity="admin", role="ADMIN")
    assert rec.capabilities.can_manage_users
