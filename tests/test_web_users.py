"""
User management page over HTTP (admins only).

Why: Self-deletion is refused before any prompt or backend call, and a newly
created account is announced with a longer-lived toast.
"""
from __future__ import annotations

import httpx
import pytest

from conftest import client_for, extract_csrf, login_as

pytestmark = pytest.mark.anyio


async def _admin_users_page(client):
    await login_as(client, "admin", "admin123")
    page = await client.get("/users")
    return page, extract_csrf(page.text)


async def test_list_marks_current_account(app):
    async with client_for(app) as client:
        page, _ = await _admin_users_page(client)
    html = page.text
    assert 'id="user-row-1" class="current-user-row"' in html
    assert '<span class="you-badge">You</span>' in html
    assert 'id="btn-delete-user-2"' in html
    assert "2 user(s)" in html
    assert "+ Add User" in html


async def test_load_failure(app, backend):
    backend.fail("GET", "/users", lambda request: httpx.Response(500))
    async with client_for(app) as client:
        await login_as(client, "admin", "admin123")
        resp = await client.get("/users")
    assert "Failed to load users." in resp.text


async def test_self_delete_refused_without_call(app, backend):
    async with client_for(app) as client:
        _, token = await _admin_users_page(client)
        resp = await client.post("/users/1/delete", data={"csrf_token": token})
    assert "You cannot delete your own account." in resp.text
    assert 'id="btn-confirm-delete"' not in resp.text
    assert backend.count("DELETE") == 0


async def test_toggle_form_open_and_closed(app):
    async with client_for(app) as client:
        _, token = await _admin_users_page(client)
        opened = await client.post("/users/form/toggle", data={"csrf_token": token})
        assert 'id="create-user-form"' in opened.text
        assert ">Cancel</button>" in opened.text
        closed = await client.post("/users/form/close", data={"csrf_token": token})
    assert 'id="create-user-form"' not in closed.text
    assert "+ Add User" in closed.text


async def test_create_user_validation(app, backend):
    async with client_for(app) as client:
        _, token = await _admin_users_page(client)
        resp = await client.post(
            "/users", data={"csrf_token": token, "username": "jo", "password": "abc", "role": "USER"}
        )
    assert "Min 3 characters." in resp.text
    assert "Min 4 characters." in resp.text
    assert 'id="create-user-form"' in resp.text
    assert backend.count("POST", "/users") == 0


async def test_create_user_success(app, backend):
    async with client_for(app) as client:
        _, token = await _admin_users_page(client)
        resp = await client.post(
            "/users", data={"csrf_token": token, "username": "john_doe", "password": "secret", "role": "ADMIN"}
        )
    html = resp.text
    assert "User &quot;john_doe&quot; (ADMIN) created successfully!" in html
    assert 'data-dismiss-after="4000"' in html
    assert 'id="create-user-form"' not in html
    assert "john_doe" in html
    assert "secret" not in html
    assert backend.bodies[-2] == {"username": "john_doe", "password": "secret", "role": "ADMIN"}


async def test_create_user_conflict_shows_backend_message(app):
    async with client_for(app) as client:
        _, token = await _admin_users_page(client)
        resp = await client.post(
            "/users", data={"csrf_token": token, "username": "user1", "password": "whatever", "role": "USER"}
        )
    assert "Username &#x27;user1&#x27; is already taken." in resp.text
    assert 'id="create-user-form"' in resp.text


async def test_delete_other_user_after_confirmation(app, backend):
    async with client_for(app) as client:
        _, token = await _admin_users_page(client)
        prompt = await client.post("/users/2/delete", data={"csrf_token": token})
        assert "Delete user &quot;user1&quot;? This cannot be undone." in prompt.text
        assert backend.count("DELETE") == 0
        done = await client.post("/users/delete/confirm", data={"csrf_token": token})
    assert backend.count("DELETE", "/users/2") == 1
    assert "User &quot;user1&quot; deleted." in done.text
    assert 'id="user-row-2"' not in done.text


async def test_dismiss_delete(app, backend):
    async with client_for(app) as client:
        _, token = await _admin_users_page(client)
        await client.post("/users/2/delete", data={"csrf_token": token})
        resp = await client.post("/users/delete/dismiss", data={"csrf_token": token})
    assert 'id="btn-confirm-delete"' not in resp.text
    assert backend.count("DELETE") == 0
