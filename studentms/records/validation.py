"""
Client-side validation rules.

All functions are pure and return a mapping of field name to message; an
empty mapping means the input may be sent. Screens run these before any
network call.
"""

from __future__ import annotations

import re
from typing import Dict

from ..identity_access.domain import ALLOWED_ROLES
from .models import COURSES, DEPARTMENTS, STUDENT_FIELDS, StudentDraft

# local-part@domain.tld, no whitespace and no second '@'
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_NAME_LENGTH = 2
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 4


def validate_login(username: str, password: str) -> Dict[str, str]:
    if not (username or "").strip() or not (password or "").strip():
        return {"form": "Please enter both username and password."}
    return {}


def validate_student(draft: StudentDraft) -> Dict[str, str]:
    """Rules for the add-student form."""
    errors: Dict[str, str] = {}
    name = draft.name.strip()
    if not name:
        errors["name"] = "Student name is required."
    elif len(name) < MIN_NAME_LENGTH:
        errors["name"] = "Name must be at least 2 characters."

    # The raw value is what gets sent, so surrounding spaces are rejected.
    if not draft.email.strip():
        errors["email"] = "Email is required."
    elif not EMAIL_PATTERN.match(draft.email):
        errors["email"] = "Please enter a valid email address."

    if draft.course not in COURSES:
        errors["course"] = "Please select a course."
    if draft.department not in DEPARTMENTS:
        errors["department"] = "Please select a department."
    return errors


def validate_student_update(draft: StudentDraft) -> Dict[str, str]:
    """Inline edit only requires the four fields to be non-empty."""
    missing = [field for field in STUDENT_FIELDS if not getattr(draft, field)]
    if missing:
        return {"form": "All fields are required for update."}
    return {}


def validate_new_user(username: str, password: str, role: str) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if not username.strip():
        errors["username"] = "Username is required."
    elif len(username) < MIN_USERNAME_LENGTH:
        errors["username"] = "Min 3 characters."
    if not password.strip():
        errors["password"] = "Password is required."
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = "Min 4 characters."
    if role not in ALLOWED_ROLES:
        errors["role"] = "Role must be ADMIN or USER."
    return errors
