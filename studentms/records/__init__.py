"""Records context: backend API client, outcome classifier, models and validation."""

from .client import API_TIMEOUT_SECONDS, RecordsApi
from .errors import ApiResult, ResultKind, classify_exception, classify_response
from .models import COURSES, DEPARTMENTS, LoginResult, Student, StudentDraft, UserAccount

__all__ = [
    "API_TIMEOUT_SECONDS",
    "RecordsApi",
    "ApiResult",
    "ResultKind",
    "classify_exception",
    "classify_response",
    "COURSES",
    "DEPARTMENTS",
    "LoginResult",
    "Student",
    "StudentDraft",
    "UserAccount",
]
