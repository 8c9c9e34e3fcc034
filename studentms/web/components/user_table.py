"""User accounts table for the admin screen."""

from typing import List

from ...records.models import UserAccount
from .base import Component
from .forms.submit import ActionButton


class UserTable(Component):
    def __init__(self, users: List[UserAccount], *, csrf_token: str, current_identity: str) -> None:
        self.users = users
        self.csrf_token = csrf_token
        self.current_identity = current_identity

    def render(self) -> str:
        if not self.users:
            return '<div class="empty-state" id="users-empty"><p>No users found.</p></div>'
        rows = "".join(self._render_row(u) for u in self.users)
        return f"""
        <div class="table-wrapper">
            <table class="data-table" id="users-table">
                <thead><tr><th>ID</th><th>Username</th><th>Role</th><th class="actions-col">Actions</th></tr></thead>
                <tbody>{rows}</tbody>
            </table>
        </div>
        """

    def _render_row(self, user: UserAccount) -> str:
        is_self = user.username == self.current_identity
        you_html = ' <span class="you-badge">You</span>' if is_self else ""
        delete_html = ActionButton(
            f"/users/{user.id}/delete", "Delete", csrf_token=self.csrf_token,
            variant="danger", button_id=f"btn-delete-user-{user.id}",
        ).render()
        row_class = ' class="current-user-row"' if is_self else ""
        return (
            f'<tr id="user-row-{user.id}"{row_class}>'
            f'<td class="id-cell">#{user.id}</td>'
            f"<td>{self.escape(user.username)}{you_html}</td>"
            f'<td><span class="role-badge role-{self.escape(user.role.lower())}">{self.escape(user.role)}</span></td>'
            f'<td class="actions-cell">{delete_html}</td>'
            "</tr>"
        )
