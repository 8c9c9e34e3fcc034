"""Client-side validation rules (pure functions, no network)."""
from __future__ import annotations

import pytest

from studentms.records.models import StudentDraft
from studentms.records.validation import (
    validate_login,
    validate_new_user,
    validate_student,
    validate_student_update,
)


def _draft(**overrides) -> StudentDraft:
    values = {"name": "Alice Johnson", "email": "alice@college.edu", "course": "B.Tech", "department": "Computer Science"}
    values.update(overrides)
    return StudentDraft(**values)


@pytest.mark.parametrize("username,password", [("", "x"), ("x", ""), ("   ", "x"), ("x", "  ")])
def test_login_requires_both_fields(username, password):
    assert validate_login(username, password) == {"form": "Please enter both username and password."}


def test_login_accepts_filled_fields():
    assert validate_login("admin", "admin123") == {}


def test_valid_student_has_no_errors():
    assert validate_student(_draft()) == {}


def test_blank_student_reports_all_four_fields():
    errors = validate_student(StudentDraft())
    assert errors == {
        "name": "Student name is required.",
        "email": "Email is required.",
        "course": "Please select a course.",
        "department": "Please select a department.",
    }


def test_student_name_minimum_length_after_trim():
    assert validate_student(_draft(name=" A "))["name"] == "Name must be at least 2 characters."


@pytest.mark.parametrize("email", ["alice", "alice@", "alice@college", "a b@college.edu", "a@@college.edu", " alice@college.edu", "alice@college.edu "])
def test_student_email_pattern(email):
    assert validate_student(_draft(email=email))["email"] == "Please enter a valid email address."


def test_student_course_and_department_must_be_known_values():
    errors = validate_student(_draft(course="PhD", department="Astrology"))
    assert errors == {"course": "Please select a course.", "department": "Please select a department."}


def test_student_update_requires_all_fields():
    assert validate_student_update(_draft(name="")) == {"form": "All fields are required for update."}
    assert validate_student_update(_draft()) == {}


def test_new_user_rules():
    assert validate_new_user("", "", "USER") == {
        "username": "Username is required.",
        "password": "Password is required.",
    }
    assert validate_new_user("jo", "abc", "USER") == {
        "username": "Min 3 characters.",
        "password": "Min 4 characters.",
    }
    assert validate_new_user("john", "abcd", "ROOT") == {"role": "Role must be ADMIN or USER."}
    assert validate_new_user("john", "abcd", "ADMIN") == {}
