"""FastAPI routers, one per screen plus auth and operations."""

from .add_student import add_student_router
from .auth import auth_router
from .dashboard import dashboard_router
from .operations import operations_router
from .students import students_router
from .users import users_router

__all__ = [
    "add_student_router",
    "auth_router",
    "dashboard_router",
    "operations_router",
    "students_router",
    "users_router",
]
