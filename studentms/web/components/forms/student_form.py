"""
Student Creation Form Component

Name, email, course and department with inline field errors. Course and
department are limited to the fixed enumerations.
"""
from typing import Dict, Optional

from ....records.models import COURSES, DEPARTMENTS, StudentDraft
from ..alerts import Alert
from ..base import Component
from .fields import SelectField, TextInputField
from .submit import SubmitButton


class StudentCreateForm(Component):
    def __init__(
        self,
        csrf_token: str,
        *,
        draft: Optional[StudentDraft] = None,
        errors: Optional[Dict[str, str]] = None,
        api_error: Optional[str] = None,
    ) -> None:
        self.csrf_token = csrf_token
        self.draft = draft or StudentDraft()
        self.errors = errors or {}
        self.api_error = api_error

    def render(self) -> str:
        name_html = TextInputField("name", "Full Name", required=True, error_text=self.errors.get("name")).render(
            value=self.draft.name, placeholder="e.g., Alice Johnson"
        )
        email_html = TextInputField("email", "Email Address", required=True, error_text=self.errors.get("email")).render(
            value=self.draft.email, input_type="email", placeholder="e.g., alice@college.edu"
        )
        course_html = SelectField("course", "Course", required=True, error_text=self.errors.get("course")).render(
            options=COURSES, value=self.draft.course, placeholder="-- Select Course --"
        )
        department_html = SelectField(
            "department", "Department", required=True, error_text=self.errors.get("department")
        ).render(options=DEPARTMENTS, value=self.draft.department, placeholder="-- Select Department --")
        submit_html = SubmitButton("Add Student", loading_label="Adding...", button_id="btn-submit-student").render()

        # novalidate: the server applies the rules and renders field errors
        return f"""
        <div class="form-card">
            {Alert(self.api_error).render()}
            <form method="post" action="/add-student" id="add-student-form" novalidate>
                {self.csrf_input(self.csrf_token)}
                <div class="form-grid">
                    {name_html}
                    {email_html}
                    {course_html}
                    {department_html}
                </div>
                <div class="form-footer">
                    <a href="/students" class="btn btn-secondary">Cancel</a>
                    {submit_html}
                </div>
            </form>
        </div>
        """
