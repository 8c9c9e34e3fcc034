"""
Layout Component for StudentMS

Main layout wrapper that combines all components into a complete HTML page.
"""

from typing import Optional

from ...identity_access.stores import SessionRecord
from .base import Component
from .navigation import Navigation


class Layout(Component):
    """Main layout component that assembles the complete page"""

    def __init__(
        self,
        title: str,
        content: str,
        session: Optional[SessionRecord] = None,
        show_nav: bool = True,
        current_path: str = "/",
    ):
        """
        Args:
            title: Page title (will be escaped)
            content: Main content HTML (pre-rendered components)
            session: Current session record (optional)
            show_nav: Whether to show the top bar (default: True)
            current_path: Current URL path for active navigation highlighting
        """
        self.title = title
        self.content = content
        self.session = session
        self.show_nav = show_nav
        self.current_path = current_path

    def render(self) -> str:
        nav_html = Navigation(self.session, self.current_path).render() if self.show_nav else ""

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    {self._render_head()}
</head>
<body>
    <a href="#main-content" class="skip-link">Skip to main content</a>

    {nav_html}

    <main id="main-content" class="main-content" role="main">
        {self._render_main_inner()}
    </main>
</body>
</html>"""

    def render_fragment(self) -> str:
        """Return only the children of <main> for HTMX swaps.

        The navigation does not change between screens of one session, so the
        fragment leaves it alone.
        """
        return self._render_main_inner()

    def _render_head(self) -> str:
        return f"""
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="description" content="StudentMS - student records management">

    <title>{self.escape(self.title)} - StudentMS</title>

    <link rel="stylesheet" href="/static/css/studentms.css?v=1">
    <script src="/static/js/studentms.js?v=1" defer></script>
    """

    def _render_main_inner(self) -> str:
        return f"""
        {self.content}

        <footer class="content-footer" role="contentinfo">
            <p class="text-center text-muted">StudentMS</p>
        </footer>
        """
