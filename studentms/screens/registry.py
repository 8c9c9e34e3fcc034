"""
Per-session screen state.

Each browser session owns at most one controller per screen. A GET of the
screen remounts it (fresh controller, fresh fetch); POST actions reuse the
controller so drafts, edit targets and toasts survive between requests.
Logout drops everything held for the session.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple


class ScreenRegistry:
    def __init__(self) -> None:
        self._screens: Dict[Tuple[str, str], Any] = {}

    def get(self, session_id: str, name: str) -> Optional[Any]:
        return self._screens.get((session_id, name))

    def put(self, session_id: str, name: str, screen: Any) -> Any:
        self._screens[(session_id, name)] = screen
        return screen

    def drop(self, session_id: str, name: Optional[str] = None) -> None:
        """Unmount one screen, or every screen of the session when name is None."""
        if name is not None:
            self._screens.pop((session_id, name), None)
            return
        for key in [k for k in self._screens if k[0] == session_id]:
            self._screens.pop(key, None)
