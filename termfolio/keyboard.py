"""Key handling for the prompt: history navigation and tab completion."""

from __future__ import annotations

from .commands import autocomplete
from .session import Session


class KeyboardHandler:
    """Maps key presses to the new contents of the input line."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.index = 0

    def handle(self, key: str, value: str, ctrl: bool = False) -> str:
        """Return what the input line holds after the key press."""
        history = self.session.history
        if key == "ArrowUp":
            if self.index < len(history):
                value = str(history[self.index].command)
                self.index += 1
        elif key == "ArrowDown":
            if self.index > 1:
                value = str(history[self.index - 2].command)
                self.index -= 1
            elif self.index == 1:
                value = ""
                self.index -= 1
        elif key == "Tab":
            value = autocomplete(value)
        # Ctrl/Cmd+L only suppresses the browser default; the line is kept.
        return value