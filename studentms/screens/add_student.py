"""
Add-student controller.

Form mode collects a draft and field errors; success mode echoes the created
record (including the backend-assigned id) until the user asks for a fresh
form.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..records.client import RecordsApi
from ..records.errors import ResultKind
from ..records.models import STUDENT_FIELDS, Student, StudentDraft
from ..records.validation import validate_student
from . import messages


class AddStudentScreen:
    def __init__(self, api: RecordsApi) -> None:
        self._api = api
        self.draft = StudentDraft()
        self.errors: Dict[str, str] = {}
        self.api_error: Optional[str] = None
        self.created: Optional[Student] = None
        self.loading = False

    @property
    def succeeded(self) -> bool:
        return self.created is not None

    def update_field(self, field: str, value: str) -> None:
        """Store a typed value and drop that field's stale error."""
        if field not in STUDENT_FIELDS:
            return
        setattr(self.draft, field, value)
        self.errors.pop(field, None)

    async def submit(self) -> bool:
        # A resubmitted form starts over; an earlier success must not linger.
        self.created = None
        errors = validate_student(self.draft)
        if errors:
            self.errors = errors
            return False

        self.loading = True
        self.api_error = None
        try:
            result = await self._api.create_student(self.draft)
        finally:
            self.loading = False

        if result.ok:
            self.created = result.data
            self.draft = StudentDraft()
            return True
        if result.kind is ResultKind.VALIDATION_CONFLICT:
            self.api_error = messages.DUPLICATE_EMAIL
        else:
            self.api_error = messages.CANNOT_CONNECT
        return False

    def add_another(self) -> None:
        self.created = None
        self.draft = StudentDraft()
        self.errors = {}
        self.api_error = None
