"""
Navigation Component for StudentMS

Role-based top bar. Users only see the Users link when their session carries
the ADMIN role; visibility alone never grants access, the routes enforce it
again.
"""

from typing import List, Optional, Tuple

from ...identity_access.stores import SessionRecord
from .base import Component

NavItem = Tuple[str, str]


class Navigation(Component):
    """Stateless render of identity, role and the links the role may use."""

    def __init__(self, session: Optional[SessionRecord] = None, current_path: str = "/"):
        """
        Args:
            session: The current session record (None when logged out)
            current_path: The current URL path for active link highlighting
        """
        self.session = session
        self.current_path = current_path

    def render(self) -> str:
        if not self.session:
            return self._render_public_nav()

        self._active_href = self._determine_active_href(self._get_nav_items())
        links = [self._create_nav_link(href, text) for href, text in self._get_nav_items()]
        role = self.session.role
        return f"""
    <header class="navbar" role="banner">
        <nav class="navbar-inner" role="navigation" aria-label="Main navigation">
            <a href="/dashboard" class="navbar-brand">StudentMS</a>
            <div class="navbar-links">
                {''.join(links)}
            </div>
            <div class="navbar-user">
                <span class="user-name">{self.escape(self.session.identity)}</span>
                <span class="role-badge role-{self.escape(role.lower())}">{self.escape(role)}</span>
                {self._render_logout()}
            </div>
        </nav>
    </header>"""

    def _render_public_nav(self) -> str:
        return """
    <header class="navbar" role="banner">
        <nav class="navbar-inner" role="navigation" aria-label="Main navigation">
            <span class="navbar-brand">StudentMS</span>
        </nav>
    </header>"""

    def _get_nav_items(self) -> List[NavItem]:
        items: List[NavItem] = [
            ("/dashboard", "Dashboard"),
            ("/students", "Students"),
        ]
        if self.session and self.session.capabilities.can_manage_users:
            items.append(("/users", "Users"))
        return items

    def _determine_active_href(self, items: List[NavItem]) -> Optional[str]:
        """Best prefix match, so /students/3/edit highlights Students."""
        path = self.current_path or "/"
        best: Optional[str] = None
        for href, _text in items:
            if path == href or path.startswith(href + "/"):
                if best is None or len(href) > len(best):
                    best = href
        return best

    def _create_nav_link(self, href: str, text: str) -> str:
        is_active = getattr(self, "_active_href", None) == href
        active_class = " active" if is_active else ""
        aria_attr = ' aria-current="page"' if is_active else ""
        return f'<a href="{href}" class="navbar-link{active_class}"{aria_attr}>{self.escape(text)}</a>'

    def _render_logout(self) -> str:
        # Full page navigation: logout drops every screen of the session.
        return '<a href="/logout" class="btn btn-secondary btn-logout" id="btn-logout">Logout</a>'
