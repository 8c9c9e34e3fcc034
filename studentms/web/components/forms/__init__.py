"""
Form components for StudentMS.

Building blocks (fields, buttons) and the three concrete forms: login,
student creation and user creation.
"""

from .fields import FormField, TextInputField, SelectField, RadioGroupField
from .submit import SubmitButton, ActionButton
from .login_form import LoginForm
from .student_form import StudentCreateForm
from .user_create_form import UserCreateForm

__all__ = [
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
