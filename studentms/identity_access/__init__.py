"""Identity and access: session store, roles, capabilities and route guards."""

from .domain import ALLOWED_ROLES, ROLE_ADMIN, ROLE_USER, Capabilities
from .guards import admin_redirect, is_admin, is_authenticated, protected_redirect
from .stores import SessionContext, SessionRecord, SessionStore

__all__ = [
    "ALLOWED_ROLES",
    "ROLE_ADMIN",
    "ROLE_USER",
    "Capabilities",
    "SessionContext",
    "SessionRecord",
    "SessionStore",
    "admin_redirect",
    "is_admin",
    "is_authenticated",
    "protected_redirect",
]
