"""
Record models exchanged with the external records backend.

These pydantic models validate what the backend sends back before a screen
renders it. Drafts are what the client sends; they carry no id.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


COURSES = (
    "B.Tech",
    "M.Tech",
    "BCA",
    "B.E",
    "MCA",
    "B.Sc",
    "M.Sc",
    "MBA",
    "B.Com",
    "B.A",
)

DEPARTMENTS = (
    "Computer Science",
    "Information Technology",
    "Mechanical Engineering",
    "Civil Engineering",
    "Electronics",
    "Mathematics",
    "Physics",
    "Chemistry",
    "Business Administration",
)

STUDENT_FIELDS = ("name", "email", "course", "department")


class StudentDraft(BaseModel):
    """Unsaved student values as typed into a form."""

    name: str = ""
    email: str = ""
    course: str = ""
    department: str = ""

    def payload(self) -> dict:
        return self.model_dump()


class Student(BaseModel):
    """Student as returned by the backend (id assigned server-side)."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    email: str
    course: str
    department: str

    def to_draft(self) -> StudentDraft:
        return StudentDraft(name=self.name, email=self.email, course=self.course, department=self.department)


class UserAccount(BaseModel):
    """User account without its password (write-only on creation)."""

    model_config = ConfigDict(extra="ignore")

    id: int
    username: str
    role: str


class LoginResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: str
    role: str
    message: Optional[str] = None
