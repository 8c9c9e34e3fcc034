"""
Button components.

Keeps loading labels, variants and disabled state consistent.
"""

from typing import Optional

from ..base import Component


class SubmitButton(Component):
    """Form action button (primary by default)."""

    def __init__(
        self,
        label: str,
        *,
        loading_label: str = "Saving...",
        is_loading: bool = False,
        disabled: bool = False,
        variant: str = "primary",
        button_id: Optional[str] = None,
        name: Optional[str] = None,
        value: Optional[str] = None,
    ) -> None:
        self.label = label
        self.loading_label = loading_label
        self.is_loading = is_loading
        self.disabled = disabled
        self.variant = variant
        self.button_id = button_id
        self.name = name
        self.value = value

    def render(self) -> str:
        label = self.loading_label if self.is_loading else self.label
        attrs = self.attributes(
            type="submit",
            id=self.button_id,
            name=self.name,
            value=self.value,
            class_=f"btn btn-{self.variant}",
            disabled=self.disabled or self.is_loading,
            aria_busy="true" if self.is_loading else None,
        )
        return f"<button {attrs}>{self.escape(label)}</button>"


class ActionButton(Component):
    """A one-button POST form, used for row actions like edit and delete."""

    def __init__(self, action: str, label: str, *, csrf_token: str, variant: str = "secondary", button_id: Optional[str] = None) -> None:
        self.action = action
        self.label = label
        self.csrf_token = csrf_token
        self.variant = variant
        self.button_id = button_id

    def render(self) -> str:
        button = SubmitButton(self.label, variant=self.variant, button_id=self.button_id).render()
        return (
            f'<form method="post" action="{self.escape(self.action)}" class="inline-form">'
            f"{self.csrf_input(self.csrf_token)}{button}</form>"
        )
