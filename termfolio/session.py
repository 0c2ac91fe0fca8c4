"""A terminal session: runs commands and keeps the recent history."""

from __future__ import annotations

import itertools
from collections import deque

from .commands import CommandNotFound, HistoryRecord, UserCommand, run_command
from .fetch import Portfolio
from .themes import ThemeCycle

HISTORY_LIMIT = 20


class Session:
    """Runs commands against a portfolio and remembers the last ones."""

    def __init__(self, portfolio: Portfolio, themes: ThemeCycle | None = None) -> None:
        self.portfolio = portfolio
        self.themes = themes if themes is not None else ThemeCycle()
        self.history: deque[HistoryRecord] = deque(maxlen=HISTORY_LIMIT)
        self._ids = itertools.count()

    def prompt(self) -> str:
        return self.portfolio.prompt()

    def run(self, cmd: str, args: list[str]) -> HistoryRecord:
        """Run a command, record it in the history and return the record."""
        args = list(args)
        try:
            text, failed = self.general_command(cmd, args), False
        except CommandNotFound as exc:
            text, failed = str(exc), True
        record = HistoryRecord(UserCommand(next(self._ids), cmd, args), text, failed)
        self.history.append(record)
        return record

    def general_command(self, cmd: str, args: list[str]) -> str:
        """Output of a command; raise CommandNotFound if it is unknown."""
        if cmd == "clear":
            return ""
        if cmd == "history":
            return self.history_lines()
        if cmd in ("theme", "t", "wal"):
            self.themes.next()
            return 'Theme changed to: <b class="grn"></b>'
        return run_command(cmd, args, self.portfolio)

    def history_lines(self) -> str:
        return "\n".join(f"{number} {record.command}" for number, record in enumerate(self.history, 1))