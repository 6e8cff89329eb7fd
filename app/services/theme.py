"""Light/dark theme preference shared by everything rendered for a session.

The preference lives in the browser session (the ``theme`` cookie).  For each
request a :class:`ThemeContext` is built from that cookie; the page tree reads
it, the theme switch endpoint toggles it, and subscribers react to changes
(e.g. to write the new value back to the response cookie).
"""

import logging
from typing import Callable, List, Optional

from app.models.theme import DEFAULT_THEME, THEMES, Theme

logger = logging.getLogger(__name__)

THEME_COOKIE = "theme"
THEME_COOKIE_MAX_AGE = 365 * 24 * 60 * 60  # one year, in seconds

Subscriber = Callable[[Theme], None]


class ThemeContext:
    def __init__(self, theme: Theme = DEFAULT_THEME) -> None:
        self._theme = _validate(theme)
        self._subscribers: List[Subscriber] = []

    @classmethod
    def from_cookie(cls, value: Optional[str]) -> "ThemeContext":
        """Build a context from a raw cookie value, ignoring unknown values."""
        if value in THEMES:
            return cls(value)  # type: ignore[arg-type]
        if value is not None:
            logger.debug("Ignoring unknown theme cookie value %r", value)
        return cls()

    def get(self) -> Theme:
        return self._theme

    def set(self, theme: Theme) -> None:
        """Set the preference and notify subscribers if it changed."""
        theme = _validate(theme)
        if theme == self._theme:
            return
        self._theme = theme
        for callback in list(self._subscribers):
            callback(theme)

    def toggle(self) -> Theme:
        self.set("dark" if self._theme == "light" else "light")
        return self._theme

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback*; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


def _validate(theme: str) -> Theme:
    if theme not in THEMES:
        raise ValueError(f"Unknown theme '{theme}'. Use one of: {', '.join(THEMES)}.")
    return theme  # type: ignore[return-value]
