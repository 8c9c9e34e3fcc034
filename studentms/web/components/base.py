"""
Base Component Class for StudentMS UI components

Every screen is assembled from small Python objects that render HTML strings.
Escaping lives here so no component has to remember it.
"""

from typing import Optional, Any
import html


class Component:
    """Base class for all UI components

    Subclasses implement render(); the static helpers build safe markup.
    """

    def render(self) -> str:
        """Render the component as an HTML string"""
        raise NotImplementedError("Subclasses must implement render()")

    @staticmethod
    def escape(text: Optional[Any]) -> str:
        """Escape HTML entities; None renders as an empty string."""
        return html.escape(str(text)) if text is not None else ""

    @staticmethod
    def classes(*args: str, **conditionals: bool) -> str:
        """Build a CSS class string with conditional classes

        Example:
            >>> Component.classes("btn", "btn-danger", active=True, disabled=False)
            "btn btn-danger active"
        """
        classes = [a for a in args if a]
        classes.extend(key.replace("_", "-") for key, value in conditionals.items() if value)
        return " ".join(classes)

    @staticmethod
    def attributes(**attrs: Any) -> str:
        """Build HTML attributes from keyword arguments

        Example:
            >>> Component.attributes(id="q", data_row="3", disabled=True, class_="x")
            'id="q" data-row="3" disabled class="x"'
        """
        result = []
        for key, value in attrs.items():
            # Trailing underscore for reserved names: class_ -> class, for_ -> for
            if key.endswith("_"):
                key = key[:-1]
            else:
                key = key.replace("_", "-")

            if value is True:
                result.append(key)
            elif value is not False and value is not None:
                result.append(f'{key}="{html.escape(str(value))}"')

        return " ".join(result)

    @staticmethod
    def csrf_input(token: str) -> str:
        """Hidden CSRF field included in every authenticated form."""
        return f'<input type="hidden" name="csrf_token" value="{html.escape(token)}">'
