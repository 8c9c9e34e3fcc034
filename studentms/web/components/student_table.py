"""
Student table with inline editing.

One row at a time can be in edit mode. The edit row's inputs belong to a form
rendered above the table (HTML `form` attribute), so the table markup stays
valid while Save and Cancel post to different actions.
"""

from typing import List, Optional, Sequence

from ...records.models import COURSES, DEPARTMENTS, Student, StudentDraft
from .base import Component
from .forms.submit import ActionButton

EDIT_FORM_ID = "edit-student-form"


class StudentTable(Component):
    def __init__(
        self,
        students: List[Student],
        *,
        csrf_token: str,
        can_manage: bool = False,
        editing_id: Optional[int] = None,
        draft: Optional[StudentDraft] = None,
    ) -> None:
        self.students = students
        self.csrf_token = csrf_token
        self.can_manage = can_manage
        self.editing_id = editing_id if can_manage else None
        self.draft = draft or StudentDraft()

    def render(self) -> str:
        if not self.students:
            return self._render_empty()

        header = "<th>ID</th><th>Name</th><th>Email</th><th>Course</th><th>Department</th>"
        if self.can_manage:
            header += '<th class="actions-col">Actions</th>'
        rows = "".join(
            self._render_edit_row(s) if s.id == self.editing_id else self._render_row(s)
            for s in self.students
        )
        return f"""
        {self._render_edit_form()}
        <div class="table-wrapper">
            <table class="data-table" id="students-table">
                <thead><tr>{header}</tr></thead>
                <tbody>{rows}</tbody>
            </table>
        </div>
        """

    def _render_empty(self) -> str:
        hint = "Get started by adding a new student." if self.can_manage else "No student records available."
        return f"""
        <div class="empty-state" id="students-empty">
            <h3>No Students Found</h3>
            <p>{hint}</p>
        </div>
        """

    def _render_row(self, student: Student) -> str:
        cells = (
            f'<td class="id-cell">#{student.id}</td>'
            f'<td class="name-cell">{self.escape(student.name)}</td>'
            f"<td>{self.escape(student.email)}</td>"
            f'<td><span class="badge badge-course">{self.escape(student.course)}</span></td>'
            f"<td>{self.escape(student.department)}</td>"
        )
        if self.can_manage:
            edit_html = ActionButton(
                f"/students/{student.id}/edit", "Edit", csrf_token=self.csrf_token, button_id=f"btn-edit-{student.id}"
            ).render()
            delete_html = ActionButton(
                f"/students/{student.id}/delete", "Delete", csrf_token=self.csrf_token,
                variant="danger", button_id=f"btn-delete-{student.id}",
            ).render()
            cells += f'<td class="actions-cell">{edit_html}{delete_html}</td>'
        return f'<tr id="student-row-{student.id}">{cells}</tr>'

    def _render_edit_form(self) -> str:
        if self.editing_id is None:
            return ""
        return (
            f'<form id="{EDIT_FORM_ID}" method="post" action="/students/{self.editing_id}/save">'
            f"{self.csrf_input(self.csrf_token)}</form>"
        )

    def _render_edit_row(self, student: Student) -> str:
        sid = student.id
        name_html = self._text_input("name", self.draft.name, f"Name of student #{sid}")
        email_html = self._text_input("email", self.draft.email, f"Email of student #{sid}", input_type="email")
        course_html = self._select("course", COURSES, self.draft.course, f"Course of student #{sid}")
        department_html = self._select("department", DEPARTMENTS, self.draft.department, f"Department of student #{sid}")
        return f"""
        <tr id="student-row-{sid}" class="editing-row">
            <td class="id-cell">#{sid}</td>
            <td>{name_html}</td>
            <td>{email_html}</td>
            <td>{course_html}</td>
            <td>{department_html}</td>
            <td class="actions-cell">
                <button type="submit" form="{EDIT_FORM_ID}" class="btn btn-success" id="btn-save-{sid}">Save</button>
                <button type="submit" form="{EDIT_FORM_ID}" formaction="/students/{sid}/cancel" class="btn btn-secondary" id="btn-cancel-{sid}">Cancel</button>
            </td>
        </tr>
        """

    def _text_input(self, name: str, value: str, label: str, *, input_type: str = "text") -> str:
        attrs = self.attributes(
            type=input_type, name=name, value=value, form=EDIT_FORM_ID,
            class_="form-input edit-input", aria_label=label,
        )
        return f"<input {attrs}>"

    def _select(self, name: str, options: Sequence[str], value: str, label: str) -> str:
        attrs = self.attributes(name=name, form=EDIT_FORM_ID, class_="form-input edit-input", aria_label=label)
        option_html = "".join(
            f'<option value="{self.escape(o)}"{" selected" if o == value else ""}>{self.escape(o)}</option>'
            for o in options
        )
        return f"<select {attrs}>{option_html}</select>"


class StudentSearchBar(Component):
    """Search by name; Clear restores the full list."""

    def __init__(self, query: str = "") -> None:
        self.query = query

    def render(self) -> str:
        attrs = self.attributes(
            type="search", name="q", id="student-search", value=self.query,
            class_="form-input search-input", placeholder="Search students by name...",
            aria_label="Search students by name",
        )
        clear_html = (
            '<a href="/students" class="btn btn-secondary" id="btn-clear-search">Clear</a>'
            if self.query
            else ""
        )
        return f"""
        <form method="get" action="/students/search" class="search-bar" role="search">
            <input {attrs}>
            <button type="submit" class="btn btn-primary" id="btn-search">Search</button>
            {clear_html}
        </form>
        """
