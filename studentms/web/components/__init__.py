# StudentMS Component System
# Pure Python Components for type-safe HTML generation

from .base import Component
from .layout import Layout
from .navigation import Navigation
from .alerts import Alert, ToastBanner, ConfirmPrompt
from .student_table import StudentTable, StudentSearchBar
from .user_table import UserTable
from .forms import (
    FormField,
    TextInputField,
    SelectField,
    RadioGroupField,
    SubmitButton,
    ActionButton,
    LoginForm,
    StudentCreateForm,
    UserCreateForm,
)

__all__ = [
    "Component",
    "Layout",
    "Navigation",
    "Alert",
    "ToastBanner",
    "ConfirmPrompt",
    "StudentTable",
    "StudentSearchBar",
    "UserTable",
    "FormField",
    "TextInputField",
    "SelectField",
    "RadioGroupField",
    "SubmitButton",
    "ActionButton",
    "LoginForm",
    "StudentCreateForm",
    "UserCreateForm",
]
