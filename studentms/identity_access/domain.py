"""
Identity domain constants and the per-session capability check.

Why:
- Centralize allowed roles to avoid drift between the web layer and screens.
- Compute role-based permissions once per session instead of comparing role
  literals in every screen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ROLE_ADMIN = "ADMIN"
ROLE_USER = "USER"

# Keep roles minimal and explicit. Immutable to prevent accidental mutation.
ALLOWED_ROLES = frozenset({ROLE_ADMIN, ROLE_USER})


@dataclass(frozen=True)
class Capabilities:
    """What the current session may see in the UI.

    Visibility alone never grants a permission: the records backend must
    authorize every mutation independently.
    """

    can_view_students: bool = False
    can_manage_students: bool = False
    can_manage_users: bool = False

    @classmethod
    def for_role(cls, identity: Optional[str], role: Optional[str]) -> "Capabilities":
        if not identity:
            return cls()
        is_admin = role == ROLE_ADMIN
        return cls(
            can_view_students=True,
            can_manage_students=is_admin,
            can_manage_users=is_admin,
        )


__all__ = ["ROLE_ADMIN", "ROLE_USER", "ALLOWED_ROLES", "Capabilities"]
