"""
Student list controller: fetch, search and inline edit/delete.

States per row are "viewing" (default) or "editing". Exactly one row can be
edited at a time because the screen tracks a single `editing_id`; starting
an edit on another row simply replaces it.

Transitions:
    mount/refresh        -> fetch full list, viewing
    search(q)            -> filtered list; blank q behaves like clear()
    start_edit(id)       -> editing_id = id, draft seeded from the row
    save()               -> all fields required; on success refetch + toast
    cancel_edit()        -> discard draft, no network call (idempotent)
    request_delete(id)   -> confirmation prompt
    confirm_delete()     -> delete, refetch + toast

Overlapping calls are not sequenced: whichever response is applied last wins.
"""

from __future__ import annotations

from typing import List, Optional

from ..identity_access.domain import Capabilities
from ..records.client import RecordsApi
from ..records.models import STUDENT_FIELDS, Student, StudentDraft
from ..records.validation import validate_student_update
from . import messages
from .toast import Clock, Toast


class StudentListScreen:
    def __init__(self, api: RecordsApi, capabilities: Capabilities, *, clock: Optional[Clock] = None) -> None:
        self._api = api
        self.capabilities = capabilities
        self.students: List[Student] = []
        self.loading = True
        self.error: Optional[str] = None
        self.query = ""
        self.editing_id: Optional[int] = None
        self.draft = StudentDraft()
        self.pending_delete: Optional[Student] = None
        self.toast = Toast(clock)

    # --- Fetching -----------------------------------------------------------

    async def mount(self) -> None:
        await self.refresh()

    async def refresh(self) -> None:
        self.loading = True
        self.error = None
        result = await self._api.list_students()
        if result.ok:
            self.students = result.data
        else:
            self.error = messages.LOAD_STUDENTS_FAILED
        self.loading = False

    async def search(self, query: str) -> None:
        self.query = query or ""
        if not self.query.strip():
            await self.clear()
            return
        self.loading = True
        self.error = None
        result = await self._api.search_students(self.query)
        if result.ok:
            self.students = result.data
            if not self.students:
                self.error = f'No students found with name containing "{self.query}"'
        else:
            self.error = messages.SEARCH_FAILED
        self.loading = False

    async def clear(self) -> None:
        self.query = ""
        await self.refresh()

    def find(self, student_id: int) -> Optional[Student]:
        for student in self.students:
            if student.id == student_id:
                return student
        return None

    # --- Inline edit --------------------------------------------------------

    def start_edit(self, student_id: int) -> bool:
        if not self.capabilities.can_manage_students:
            return False
        student = self.find(student_id)
        if student is None:
            return False
        self.editing_id = student.id
        self.draft = student.to_draft()
        self.error = None
        return True

    def update_field(self, field: str, value: str) -> None:
        if self.editing_id is None or field not in STUDENT_FIELDS:
            return
        setattr(self.draft, field, value)

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.draft = StudentDraft()
        self.error = None

    async def save(self) -> bool:
        if self.editing_id is None or not self.capabilities.can_manage_students:
            return False
        errors = validate_student_update(self.draft)
        if errors:
            self.error = errors["form"]
            return False
        result = await self._api.update_student(self.editing_id, self.draft)
        if not result.ok:
            self.error = messages.UPDATE_FAILED
            return False
        self.cancel_edit()
        await self.refresh()
        self.toast.show("Student updated successfully!")
        return True

    # --- Delete -------------------------------------------------------------

    def request_delete(self, student_id: int) -> bool:
        if not self.capabilities.can_manage_students:
            return False
        student = self.find(student_id)
        if student is None:
            return False
        self.pending_delete = student
        return True

    def dismiss_delete(self) -> None:
        self.pending_delete = None

    async def confirm_delete(self) -> bool:
        target = self.pending_delete
        self.pending_delete = None
        if target is None or not self.capabilities.can_manage_students:
            return False
        result = await self._api.delete_student(target.id)
        if not result.ok:
            self.error = messages.DELETE_STUDENT_FAILED
            return False
        await self.refresh()
        self.toast.show(f'Student "{target.name}" deleted successfully!')
        return True
