"""
User Creation Form Component

Collapsible sub-form of the user management screen.
"""
from typing import Dict, Optional

from ....identity_access.domain import ROLE_ADMIN, ROLE_USER
from ..base import Component
from .fields import RadioGroupField, TextInputField
from .submit import SubmitButton

ROLE_CHOICES = (
    (ROLE_USER, "User", "Can view & search students"),
    (ROLE_ADMIN, "Admin", "Full access - add, edit, delete"),
)


class UserCreateForm(Component):
    def __init__(self, csrf_token: str, *, values: Optional[Dict[str, str]] = None, errors: Optional[Dict[str, str]] = None) -> None:
        self.csrf_token = csrf_token
        self.values = values or {}
        self.errors = errors or {}

    def render(self) -> str:
        username_html = TextInputField("cu-username", "Username", name="username", required=True, error_text=self.errors.get("username")).render(
            value=self.values.get("username", ""), autocomplete="off", placeholder="e.g., john_doe"
        )
        # Password is write-only: never echo it back into the form.
        password_html = TextInputField("cu-password", "Password", name="password", required=True, error_text=self.errors.get("password")).render(
            input_type="password", autocomplete="new-password", placeholder="Min. 4 characters"
        )
        role_html = RadioGroupField("role", "Role", error_text=self.errors.get("role")).render(
            choices=ROLE_CHOICES, value=self.values.get("role", ROLE_USER)
        )
        submit_html = SubmitButton("Create User", loading_label="Creating...", button_id="btn-submit-user").render()
        return f"""
        <div class="form-card" id="create-user-card">
            <h2 class="section-title">New User Account</h2>
            <form method="post" action="/users" id="create-user-form">
                {self.csrf_input(self.csrf_token)}
                <div class="form-grid">
                    {username_html}
                    {password_html}
                    {role_html}
                </div>
                <div class="form-footer">
                    <button type="submit" class="btn btn-secondary" formaction="/users/form/close" id="btn-cancel-user">Cancel</button>
                    {submit_html}
                </div>
            </form>
        </div>
        """
