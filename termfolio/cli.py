"""Interactive terminal front end."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import TextIO

from .fetch import Portfolio
from .formats import Artwork
from .session import Session

AUTO_CMDS = "about\nlinks\nhelp\n"
_MAX_INPUT = 38
_CHAR_MAP = str.maketrans({"<": "‹", ">": "›"})
_WHITESPACE = re.compile(r"\s")


def parse_line(line: str) -> tuple[str, list[str]]:
    """Split an input line into the command and a single argument string."""
    parts = _WHITESPACE.split(line, maxsplit=1)
    cmd = parts[0]
    rest = parts[1] if len(parts) > 1 else ""
    return cmd.strip().translate(_CHAR_MAP), [rest.strip().translate(_CHAR_MAP)]


def auto_commands() -> list[str]:
    """Commands run automatically when the terminal starts."""
    return AUTO_CMDS.splitlines()


def _load_portfolio(config_path: Path, art_dir: Path) -> Portfolio:
    try:
        artwork = Artwork.load(art_dir)
    except OSError:
        artwork = Artwork("", "", "", "")
    try:
        return Portfolio.from_file(config_path, artwork)
    except OSError:
        return Portfolio(config=None, artwork=artwork)


def _submit(session: Session, line: str, out: TextIO) -> None:
    cmd, args = parse_line(line[:_MAX_INPUT])
    out.write(session.run(cmd, args).output() + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="termfolio", description="Terminal style portfolio.")
    parser.add_argument("--config", default="configs/config.json", help="portfolio configuration")
    parser.add_argument("--art", default=None, help="artwork directory (default: beside the config)")
    parser.add_argument("--no-auto", action="store_true", help="skip the start-up commands")
    options = parser.parse_args(argv)

    config_path = Path(options.config)
    art_dir = Path(options.art) if options.art else config_path.parent
    session = Session(_load_portfolio(config_path, art_dir))
    out, inp = sys.stdout, sys.stdin

    if not options.no_auto:
        for line in auto_commands():
            out.write(f"{session.prompt()}{line}\n")
            _submit(session, line, out)

    try:
        while True:
            out.write(session.prompt())
            out.flush()
            line = inp.readline()
            if not line:
                out.write("\n")
                break
            _submit(session, line.rstrip("\r\n"), out)
    except KeyboardInterrupt:
        out.write("\n")
    return 0