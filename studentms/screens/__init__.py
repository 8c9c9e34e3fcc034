"""
Screen controllers.

Framework-agnostic view-controllers, one per screen. Each owns its local form
or list state and talks to the backend only through RecordsApi. The web
layer renders their state and forwards user actions to them.
"""

from .add_student import AddStudentScreen
from .dashboard import DashboardScreen
from .login import DEMO_CREDENTIALS, LoginScreen
from .registry import ScreenRegistry
from .student_list import StudentListScreen
from .toast import Toast
from .user_management import UserManagementScreen

__all__ = [
    "AddStudentScreen",
    "DashboardScreen",
    "DEMO_CREDENTIALS",
    "LoginScreen",
    "ScreenRegistry",
    "StudentListScreen",
    "Toast",
    "UserManagementScreen",
]
