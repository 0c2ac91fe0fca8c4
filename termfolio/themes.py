"""Cycling through the colour themes of the terminal."""

from __future__ import annotations

from collections.abc import Iterable

THEMES = ("catppuccin", "nord", "default", "tokyonight")


class ThemeCycle:
    """A ring of theme names; the last one is the initial theme."""

    def __init__(self, themes: Iterable[str] = THEMES) -> None:
        self._themes = tuple(themes)
        if not self._themes:
            raise ValueError("at least one theme is required")
        self._index = len(self._themes) - 1

    @property
    def themes(self) -> tuple[str, ...]:
        return self._themes

    def current(self) -> str:
        return self._themes[self._index]

    def next(self) -> str:
        """Move to the following theme and return it."""
        self._index = (self._index + 1) % len(self._themes)
        return self.current()