"""
Alert banners and toasts.

Errors stay until the next action replaces them; toasts carry their lifetime
in `data-dismiss-after` so the page script can fade them out, and the server
stops rendering them once expired.
"""

from typing import Optional

from .base import Component


class Alert(Component):
    """Inline banner: variant is 'error', 'success' or 'info'."""

    def __init__(self, message: Optional[str], *, variant: str = "error") -> None:
        self.message = message
        self.variant = variant

    def render(self) -> str:
        if not self.message:
            return ""
        role = "alert" if self.variant == "error" else "status"
        return f'<div class="alert alert-{self.variant}" role="{role}">{self.escape(self.message)}</div>'


class ToastBanner(Component):
    def __init__(self, message: Optional[str], *, seconds: float = 3.0) -> None:
        self.message = message
        self.seconds = seconds

    def render(self) -> str:
        if not self.message:
            return ""
        attrs = self.attributes(
            class_="alert alert-success toast",
            role="status",
            aria_live="polite",
            data_dismiss_after=str(int(self.seconds * 1000)),
        )
        return f"<div {attrs}>{self.escape(self.message)}</div>"


class ConfirmPrompt(Component):
    """Explicit confirmation step before a destructive action."""

    def __init__(self, question: str, *, confirm_action: str, cancel_action: str, csrf_token: str) -> None:
        self.question = question
        self.confirm_action = confirm_action
        self.cancel_action = cancel_action
        self.csrf_token = csrf_token

    def render(self) -> str:
        csrf = self.csrf_input(self.csrf_token)
        return f"""
        <div class="confirm-prompt alert alert-warning" role="alertdialog" aria-labelledby="confirm-question">
            <p id="confirm-question">{self.escape(self.question)}</p>
            <form method="post" action="{self.escape(self.confirm_action)}" class="inline-form">
                {csrf}
                <button type="submit" class="btn btn-danger" id="btn-confirm-delete">Delete</button>
            </form>
            <form method="post" action="{self.escape(self.cancel_action)}" class="inline-form">
                {csrf}
                <button type="submit" class="btn btn-secondary" id="btn-cancel-delete">Cancel</button>
            </form>
        </div>
        """
