"""
Student list controller tests: fetch, search, inline edit, delete.

Why: This screen carries the only real state machine of the client. The
tests walk its transitions and check which ones must stay off the network.
"""
from __future__ import annotations

import httpx
import pytest

from studentms.identity_access.domain import Capabilities
from studentms.screens import messages
from studentms.screens.student_list import StudentListScreen

pytestmark = pytest.mark.anyio

ADMIN = Capabilities.for_role("admin", "ADMIN")
USER = Capabilities.for_role("user1", "USER")


@pytest.fixture
def seeded(backend):
    backend.add_student("Alice Johnson", "alice@college.edu")
    backend.add_student("Bob Smith", "bob@college.edu", course="MCA", department="Physics")
    return backend


async def _mounted(api, caps, clock=None) -> StudentListScreen:
    screen = StudentListScreen(api, caps, clock=clock)
    await screen.mount()
    return screen


async def test_mount_fetches_full_list(api, seeded):
    screen = await _mounted(api, USER)
    assert [s.name for s in screen.students] == ["Alice Johnson", "Bob Smith"]
    assert screen.loading is False
    assert screen.error is None


async def test_mount_failure_sets_load_error(api, backend):
    backend.fail("GET", "/students", lambda request: httpx.Response(503))
    screen = await _mounted(api, USER)
    assert screen.error == messages.LOAD_STUDENTS_FAILED
    assert screen.students == []


async def test_search_filters_by_name(api, seeded):
    screen = await _mounted(api, USER)
    await screen.search("bob")
    assert [s.name for s in screen.students] == ["Bob Smith"]
    assert screen.error is None


async def test_search_without_match_reports_query(api, backend):
    backend.add_student("Bob Smith", "bob@college.edu")
    screen = await _mounted(api, USER)
    await screen.search("ali")
    assert screen.students == []
    assert screen.error == 'No students found with name containing "ali"'


async def test_search_failure(api, seeded):
    screen = await _mounted(api, USER)
    seeded.fail("GET", "/students/search", httpx.ConnectError("refused"))
    await screen.search("ali")
    assert screen.error == messages.SEARCH_FAILED


async def test_blank_search_behaves_like_clear(api, seeded):
    screen = await _mounted(api, USER)
    await screen.search("ali")
    await screen.search("   ")
    assert screen.query == ""
    assert len(screen.students) == 2
    assert seeded.count("GET", "/students/search") == 1
    assert seeded.count("GET", "/students") == 2


async def test_clear_resets_query_and_error(api, backend):
    backend.add_student("Bob Smith", "bob@college.edu")
    screen = await _mounted(api, USER)
    await screen.search("zzz")
    await screen.clear()
    assert screen.query == ""
    assert screen.error is None
    assert len(screen.students) == 1


async def test_start_edit_seeds_draft_for_admin(api, seeded):
    screen = await _mounted(api, ADMIN)
    assert screen.start_edit(2)
    assert screen.editing_id == 2
    assert screen.draft.name == "Bob Smith"
    assert screen.draft.course == "MCA"


async def test_user_cannot_start_edit(api, seeded):
    screen = await _mounted(api, USER)
    assert not screen.start_edit(1)
    assert screen.editing_id is None


async def test_only_one_row_is_edited_at_a_time(api, seeded):
    screen = await _mounted(api, ADMIN)
    screen.start_edit(1)
    screen.start_edit(2)
    assert screen.editing_id == 2
    assert screen.draft.name == "Bob Smith"


async def test_save_with_empty_field_makes_no_call(api, seeded):
    screen = await _mounted(api, ADMIN)
    screen.start_edit(1)
    screen.update_field("name", "")
    calls_before = len(seeded.calls)
    assert not await screen.save()
    assert screen.error == "All fields are required for update."
    assert screen.editing_id == 1
    assert len(seeded.calls) == calls_before


async def test_save_success_refetches_and_shows_toast(api, seeded, clock):
    screen = await _mounted(api, ADMIN, clock)
    screen.start_edit(1)
    screen.update_field("name", "Alice Cooper")
    assert await screen.save()
    assert screen.editing_id is None
    assert screen.students[0].name == "Alice Cooper"
    assert seeded.calls[-2:] == [("PUT", "/students/1"), ("GET", "/students")]
    assert screen.toast.message == "Student updated successfully!"
    clock.advance(3.0)
    assert screen.toast.message is None


async def test_save_failure_keeps_edit_mode(api, seeded):
    screen = await _mounted(api, ADMIN)
    screen.start_edit(1)
    screen.update_field("email", "alice@uni.edu")
    seeded.fail("PUT", "/students/1", lambda request: httpx.Response(500))
    assert not await screen.save()
    assert screen.error == messages.UPDATE_FAILED
    assert screen.editing_id == 1
    assert screen.draft.email == "alice@uni.edu"


async def test_cancel_edit_is_idempotent_and_offline(api, seeded):
    screen = await _mounted(api, ADMIN)
    screen.start_edit(1)
    screen.update_field("name", "Changed")
    calls_before = len(seeded.calls)
    screen.cancel_edit()
    screen.cancel_edit()
    assert screen.editing_id is None
    assert screen.draft.name == ""
    assert len(seeded.calls) == calls_before
    assert screen.students[0].name == "Alice Johnson"


async def test_delete_requires_confirmation(api, seeded, clock):
    screen = await _mounted(api, ADMIN, clock)
    assert screen.request_delete(1)
    assert screen.pending_delete.name == "Alice Johnson"
    assert seeded.count("DELETE") == 0

    assert await screen.confirm_delete()
    assert screen.pending_delete is None
    assert [s.id for s in screen.students] == [2]
    assert screen.toast.message == 'Student "Alice Johnson" deleted successfully!'


async def test_dismiss_delete_makes_no_call(api, seeded):
    screen = await _mounted(api, ADMIN)
    screen.request_delete(1)
    screen.dismiss_delete()
    assert screen.pending_delete is None
    assert not await screen.confirm_delete()
    assert seeded.count("DELETE") == 0


async def test_delete_failure(api, seeded):
    screen = await _mounted(api, ADMIN)
    screen.request_delete(2)
    seeded.fail("DELETE", "/students/2", httpx.ConnectError("refused"))
    assert not await screen.confirm_delete()
    assert screen.error == messages.DELETE_STUDENT_FAILED
    assert len(screen.students) == 2


async def test_user_cannot_request_delete(api, seeded):
    screen = await _mounted(api, USER)
    assert not screen.request_delete(1)
    assert screen.pending_delete is None


async def test_failed_save_banner_clears_on_next_edit(api, seeded):
    screen = await _mounted(api, ADMIN)
    screen.start_edit(1)
    screen.update_field("name", "")
    await screen.save()
    assert screen.error == "All fields are required for update."
    screen.start_edit(2)
    assert screen.error is None
    screen.update_field("name", "")
    await screen.save()
    screen.cancel_edit()
    assert screen.error is None
