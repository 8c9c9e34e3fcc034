"""
User management controller (admins only).

Lists accounts, creates new ones through a collapsible sub-form and deletes
accounts after confirmation. The account of the current session can never be
deleted from here: the attempt is refused before any prompt or network call.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from ..identity_access.domain import ROLE_USER
from ..records.client import RecordsApi
from ..records.models import UserAccount
from ..records.validation import validate_new_user
from . import messages
from .toast import Clock, Toast

CREATE_TOAST_SECONDS = 4.0


class UserManagementScreen:
    def __init__(self, api: RecordsApi, current_identity: str, *, clock: Optional[Clock] = None) -> None:
        self._api = api
        self.current_identity = current_identity
        self.users: List[UserAccount] = []
        self.loading = True
        self.error: Optional[str] = None
        self.toast = Toast(clock)
        self.show_form = False
        self.form: Dict[str, str] = self._blank_form()
        self.form_errors: Dict[str, str] = {}
        self.submitting = False
        self.pending_delete: Optional[UserAccount] = None

    @staticmethod
    def _blank_form() -> Dict[str, str]:
        return {"username": "", "password": "", "role": ROLE_USER}

    async def mount(self) -> None:
        await self.refresh()

    async def refresh(self) -> None:
        self.loading = True
        self.error = None
        result = await self._api.list_users()
        if result.ok:
            self.users = result.data
        else:
            self.error = messages.LOAD_USERS_FAILED
        self.loading = False

    def find(self, user_id: int) -> Optional[UserAccount]:
        for user in self.users:
            if user.id == user_id:
                return user
        return None

    # --- Create -------------------------------------------------------------

    def toggle_form(self) -> None:
        self.show_form = not self.show_form
        self.error = None
        self.form_errors = {}

    def close_form(self) -> None:
        self.show_form = False
        self.error = None
        self.form_errors = {}

    def update_field(self, field: str, value: str) -> None:
        if field not in self.form:
            return
        self.form[field] = value
        self.form_errors.pop(field, None)

    async def create_user(self) -> bool:
        errors = validate_new_user(self.form["username"], self.form["password"], self.form["role"])
        if errors:
            self.form_errors = errors
            return False

        self.submitting = True
        self.error = None
        try:
            result = await self._api.create_user(
                username=self.form["username"],
                password=self.form["password"],
                role=self.form["role"],
            )
        finally:
            self.submitting = False

        if not result.ok:
            self.error = result.message or messages.CREATE_USER_FAILED
            return False

        created: UserAccount = result.data
        self.form = self._blank_form()
        self.show_form = False
        await self.refresh()
        self.toast.show(f'User "{created.username}" ({created.role}) created successfully!', seconds=CREATE_TOAST_SECONDS)
        return True

    # --- Delete -------------------------------------------------------------

    def request_delete(self, user_id: int) -> bool:
        """Open the confirmation prompt, or refuse when targeting oneself."""
        target = self.find(user_id)
        if target is None:
            return False
        if target.username == self.current_identity:
            self.pending_delete = None
            self.error = messages.CANNOT_DELETE_SELF
            return False
        self.pending_delete = target
        return True

    def dismiss_delete(self) -> None:
        self.pending_delete = None

    async def confirm_delete(self) -> bool:
        target = self.pending_delete
        self.pending_delete = None
        if target is None or target.username == self.current_identity:
            return False
        result = await self._api.delete_user(target.id)
        if not result.ok:
            self.error = messages.DELETE_USER_FAILED
            return False
        await self.refresh()
        self.toast.show(f'User "{target.username}" deleted.')
        return True
