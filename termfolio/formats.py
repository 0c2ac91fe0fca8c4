"""HTML rendering of the about page, profile, repositories and links."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .models import About, Links, Profile, Repository

_LANG_COLORS = {
    "Rust": "orange",
    "Python": "blue",
    "C": "dblue",
    "C++": "dblue",
    "Java": "red",
    "Haskell": "purple",
    "Zig": "orange",
    "Go": "blue",
    "Dart": "dblue",
    "JavaScript": "yellow",
    "TypeScript": "blue",
    "Bash": "dgreen",
}

_BLOCKS = (
    '<span class="blocks" style="color:var(--black)">█</span>'
    '<span class="rd blocks">█</span>'
    '<span class="grn blocks">█</span>'
    '<span class="ylw blocks">█</span>'
    '<span class="blu blocks">█</span>'
    '<span class="blocks" style="color:var(--orange)">█</span>'
    '<span class="blocks" style="color:var(--purple)">█</span>'
    '<span class="blocks">█</span>'
)


@dataclass(frozen=True)
class Artwork:
    """ASCII art used beside the profile and repository cards."""

    neofetch: str
    rust: str
    python: str
    github: str

    @classmethod
    def load(cls, directory: str | Path) -> Artwork:
        """Read neofetch.txt and lang_icons/{rust,python,github}.txt from a directory."""
        base = Path(directory)
        icons = base / "lang_icons"
        return cls(
            neofetch=(base / "neofetch.txt").read_text(encoding="utf-8"),
            rust=(icons / "rust.txt").read_text(encoding="utf-8"),
            python=(icons / "python.txt").read_text(encoding="utf-8"),
            github=(icons / "github.txt").read_text(encoding="utf-8"),
        )

    def lang_icon(self, lang: str) -> str:
        if lang == "Rust":
            return self.rust
        if lang in ("Python", "Jupyter Notebook"):
            return self.python
        return self.github


def _row(ascii_art: str, text: str) -> str:
    return f'<div class="row">\n<div class="ascii">{ascii_art}</div>\n<div class="text">{text}</div>\n</div>'


def format_langs(langs: Iterable[str]) -> str:
    """Render languages as coloured spans separated by spaces."""
    parts = []
    for lang in langs:
        color = _LANG_COLORS.get(lang)
        if color is None:
            parts.append(f"<span>{lang}</span>")
        else:
            parts.append(f'<span style="color:var(--{color});">{lang}</span>')
    return " ".join(parts)


def format_about(about: About) -> str:
    experience = "\n".join(
        f'<span class="blu semibold">Title:</span> {exp.title}'
        f'<br/><span class="blu semibold">Description:</span> \n'
        + "\n".join(f'<span class="blu semibold">*</span> {line}' for line in exp.description)
        for exp in about.experience
    )
    interests = "\n".join(f'<span class="rd semibold">*</span> {item}' for item in about.interests)
    text = (
        f"{about.intro}\n\n"
        '<h2 class="rd semibold side-borders">Interests</h2>\n\n'
        f"{interests}\n\n"
        '<h2 class="rd semibold side-borders">Languages</h2>\n\n'
        f"{format_langs(about.langs)}\n\n"
        '<h2 class="rd semibold side-borders">Experience</h2>\n\n'
        f"{experience}\n"
    )
    return (
        '<div class="row" style="display: flex; flex-direction: row; '
        'align-items: center; justify-content: left;"> \n'
        f'<div class="about">{text}</div>\n</div>\n'
    )


def format_profile(profile: Profile, artwork: Artwork) -> str:
    info, stats = profile.info, profile.stats
    username = profile.username
    fields = [
        ("Name", info.name if info.name is not None else "-"),
        ("Bio", info.bio if info.bio is not None else "-"),
        ("Repos", info.public_repos),
        ("Langs", format_langs(profile.langs)),
        ("Stars", stats.stars),
        ("Forks", stats.forks),
        ("Company", info.company if info.company is not None else "-"),
        ("Location", info.location if info.location is not None else "-"),
        ("Followers", info.followers),
        ("Following", info.following),
        ("Created on", info.created_at[:10]),
    ]
    lines = [
        f'<a href="https://www.github.com/{username}" style="text-decoration:none" target="_blank">'
        f'<span class="grn semibold">{username}</span>'
        '<span class="grn semibold">@termfolio</span></a>',
        "----------------------",
        *(f'<span class="grn semibold">{label}:</span> {value}' for label, value in fields),
        "",
        _BLOCKS,
    ]
    return _row(artwork.neofetch, "\n".join(lines))


def format_repos(repos: Sequence[Repository], artwork: Artwork) -> str:
    cards = []
    for repo in repos:
        text = (
            f'<a href="https://github.com/{repo.author}/{repo.name}" target="_blank" '
            f'class="blu semibold">{repo.name}</a>\n\n'
            f'<span class="rd semibold">Description:</span> {repo.description}\n'
            f'<span class="rd semibold">Language:</span> <span class="blu">{repo.language}</span>\n'
            f'<span class="rd semibold">Stars:</span> <span class="ylw">{repo.stars}</span>\n'
            f'<span class="rd semibold">Forks:</span> <span class="ylw">{repo.forks}</span>\n'
            "        "
        )
        cards.append(_row(artwork.lang_icon(repo.language), text))
    return "\n".join(cards)


def format_links(links: Links) -> str:
    result = (
        "\n  &nbsp;&nbsp;"
        '<span class="semibold" style="color:var(--purple);">Github</span>: '
        f'<a href="https://github.com/{links.github}" target="_blank"> github.com/{links.github}</a>\n'
    )
    if links.email is not None:
        result += (
            '\n  <span class="semibold" style="color:var(--orange);">Email</span>: '
            f'<a href="mailto:{links.email}" target="_blank">{links.email}</a>\n  '
        )
    if links.linkedin is not None:
        result += (
            f'\n  <a href="https://www.linkedin.com/{links.linkedin}" target="_blank" '
            'class="semibold" style="color:var(--dblue);">LinkedIn</a>: '
            f"linkedin.com/{links.linkedin}\n  "
        )
    if links.twitter is not None:
        result += (
            f'\n  <a href="https://www.twitter.com/{links.twitter}" target="_blank" '
            f'class="blu semibold">Twitter/X</a>: @{links.twitter}\n  '
        )
    return result