"""
Login Form Component

Username/password form plus the optional demo shortcuts that prefill the two
known accounts of a local backend.
"""
from typing import Optional

from ..alerts import Alert
from ..base import Component
from .fields import TextInputField
from .submit import SubmitButton


class LoginForm(Component):
    def __init__(self, *, username: str = "", password: str = "", error: Optional[str] = None, show_demo: bool = False) -> None:
        self.username = username
        self.password = password
        self.error = error
        self.show_demo = show_demo

    def render(self) -> str:
        username_html = TextInputField("username", "Username").render(
            value=self.username, autocomplete="username", placeholder="Enter your username"
        )
        password_html = TextInputField("password", "Password").render(
            value=self.password, input_type="password", autocomplete="current-password", placeholder="Enter your password"
        )
        submit_html = SubmitButton("Sign In", loading_label="Signing in...", button_id="btn-login").render()
        return f"""
        <form method="post" action="/login" class="login-form">
            {Alert(self.error).render()}
            {username_html}
            {password_html}
            <div class="form-actions">{submit_html}</div>
        </form>
        {self._render_demo()}
        """

    def _render_demo(self) -> str:
        if not self.show_demo:
            return ""
        return """
        <div class="login-hints">
            <p class="hints-title">Quick Login (Demo)</p>
            <div class="hints-buttons">
                <a href="/login?demo=admin" class="hint-btn hint-admin" id="btn-demo-admin">Admin Login</a>
                <a href="/login?demo=user" class="hint-btn hint-user" id="btn-demo-user">User Login</a>
            </div>
            <div class="credentials-info">
                <span>Admin: <code>admin / admin123</code></span>
                <span>User: <code>user1 / user123</code></span>
            </div>
        </div>
        """
