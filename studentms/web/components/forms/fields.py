"""
Form field components.

Small wrappers that keep label, input, help and error markup identical across
the login, student and user forms.
"""

from typing import Optional, Sequence

from ..base import Component


class FormField(Component):
    """Wrapper that renders label, input slot, help, and error text."""

    def __init__(
        self,
        field_id: str,
        label: str,
        *,
        required: bool = False,
        help_text: Optional[str] = None,
        error_text: Optional[str] = None,
        name: Optional[str] = None,
    ) -> None:
        self.field_id = field_id
        self.name = name or field_id
        self.label = label
        self.required = required
        self.help_text = help_text
        self.error_text = error_text

    def render(self, input_html: str) -> str:
        state_class = " form-field--error" if self.error_text else ""
        required_marker = (
            '<span class="form-required" aria-hidden="true">*</span>'
            if self.required
            else ""
        )
        help_html = (
            f'<p class="form-help" id="{self.field_id}-help">{self.escape(self.help_text)}</p>'
            if self.help_text
            else ""
        )
        error_html = (
            f'<p class="form-error field-error" role="alert" id="{self.field_id}-error">{self.escape(self.error_text)}</p>'
            if self.error_text
            else ""
        )
        label_attrs = self.attributes(for_=self.field_id, class_="form-label")

        return (
            f'<div class="form-field{state_class}">'
            f"<label {label_attrs}>"
            f"{self.escape(self.label)}{required_marker}"
            "</label>"
            f"{input_html}"
            f"{help_html}"
            f"{error_html}"
            "</div>"
        )

    def _describedby(self) -> Optional[str]:
        ids = []
        if self.help_text:
            ids.append(f"{self.field_id}-help")
        if self.error_text:
            ids.append(f"{self.field_id}-error")
        return " ".join(ids) or None


class TextInputField(FormField):
    """Single-line text input ('text', 'email' or 'password')."""

    def render(
        self,
        *,
        value: str = "",
        input_type: str = "text",
        autocomplete: Optional[str] = None,
        placeholder: Optional[str] = None,
        **attrs: str,
    ) -> str:
        input_attrs = self.attributes(
            id=self.field_id,
            name=self.name,
            type=input_type,
            value=value,
            autocomplete=autocomplete,
            placeholder=placeholder,
            class_=self.classes("form-input", input_error=bool(self.error_text)),
            aria_describedby=self._describedby(),
            aria_invalid="true" if self.error_text else "false",
            **attrs,
        )
        return super().render(f"<input {input_attrs}>")


class SelectField(FormField):
    """Drop-down restricted to a fixed list of options."""

    def render(self, *, options: Sequence[str], value: str = "", placeholder: str = "-- Select --") -> str:
        select_attrs = self.attributes(
            id=self.field_id,
            name=self.name,
            class_=self.classes("form-input", "form-select", input_error=bool(self.error_text)),
            aria_describedby=self._describedby(),
            aria_invalid="true" if self.error_text else "false",
        )
        option_html = [f'<option value="">{self.escape(placeholder)}</option>']
        for option in options:
            selected = " selected" if option == value else ""
            option_html.append(f'<option value="{self.escape(option)}"{selected}>{self.escape(option)}</option>')
        return super().render(f"<select {select_attrs}>{''.join(option_html)}</select>")


class RadioGroupField(FormField):
    """Mutually exclusive choices, each with a short description."""

    def render(self, *, choices: Sequence[tuple[str, str, str]], value: str = "") -> str:
        items = []
        for choice_value, choice_label, description in choices:
            input_attrs = self.attributes(
                type="radio",
                name=self.name,
                value=choice_value,
                id=f"{self.field_id}-{choice_value.lower()}",
                checked=choice_value == value,
            )
            items.append(
                f'<label class="role-option">'
                f"<input {input_attrs}> {self.escape(choice_label)}"
                f'<span class="role-option-desc">{self.escape(description)}</span>'
                "</label>"
            )
        return super().render(f'<div class="role-selector" role="radiogroup">{"".join(items)}</div>')
