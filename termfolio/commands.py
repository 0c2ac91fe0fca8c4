"""Command dispatch, autocompletion and the records kept in the history."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fetch import Portfolio
from .texts import CREDITS, HELP

_REPLY_GROUPS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("cd",), "Nowhere to go."),
    (("mkdir", "touch"), "Nowhere to create."),
    (("rm", "rmdir"), "Nothing to destroy."),
    (("cp",), "Nothing to duplicate."),
    (("mv",), "Nowhere to move."),
    (("ls", "cat"), "Nothing to see."),
    (("grep", "which", "find"), "Nowhere to search."),
    (("pwd",), "You are here."),
    (("nano", "vi", "vim", "nvim", "hx"), "Great editor."),
    (("emacs",), "Great mail client"),
    (("su", "sudo", "chmod"), "With great power comes great responsibility."),
    (("whoami",), "Despite everything, it's still you."),
    (("exit",), "Hasta la vista."),
    (("",), ""),
)

_FIXED_REPLIES = {
    name: reply for names, reply in _REPLY_GROUPS for name in names
}

_COMPLETIONS = (
    "help",
    "history",
    "about",
    "github",
    "repos",
    "links",
    "theme",
    "wal",
    "credits",
    "onefetch",
    "neofetch",
    "fastfetch",
)


class CommandNotFound(Exception):
    """Raised for a command the terminal does not know."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command}: command not found")
        self.command = command


@dataclass(frozen=True)
class UserCommand:
    """A command line as the user entered it."""

    id: int
    cmd: str
    args: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.args:
            return self.cmd
        return f"{self.cmd} " + ", ".join(self.args)


@dataclass(frozen=True)
class HistoryRecord:
    """A command together with the text it produced."""

    command: UserCommand
    text: str
    failed: bool = False

    def output(self) -> str:
        return self.text


def run_command(command: str, args: list[str], portfolio: Portfolio) -> str:
    """Produce the output of a command; raise CommandNotFound if it is unknown."""
    if command in ("help", "termfolio"):
        return HELP.strip()
    if command == "credits":
        return CREDITS.strip()
    if command == "links":
        return portfolio.contacts().strip()
    reply = _FIXED_REPLIES.get(command)
    if reply is not None:
        return reply
    if command == "about":
        return portfolio.about()
    if command in ("github", "neofetch", "fastfetch"):
        return portfolio.github()
    if command in ("repos", "onefetch"):
        return portfolio.repos()
    if command == "echo":
        return " ".join(args)
    raise CommandNotFound(command)


def autocomplete(inp: str) -> str:
    """Complete the input to the first known command it is a prefix of."""
    inp = inp.strip()
    if inp:
        for candidate in _COMPLETIONS:
            if candidate.startswith(inp):
                return candidate
    return inp


def banner() -> str:
    return HELP