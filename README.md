# termfolio

A personal portfolio presented as a small shell. Commands typed at a prompt
such as `example-user@termfolio~$` answer with an "about me" page, contact
links, a neofetch-style GitHub profile card and a list of pinned repositories.
Every answer is an HTML fragment, meant to be placed in a page that styles it
like a terminal.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running

```
termfolio
```

This starts a line-based prompt on standard input and output. It first runs
the start-up commands `about`, `links` and `help`, printing each after the
prompt, and then reads one command per line until end of input or Ctrl+C.
Each line is cut to 38 characters before it is run, and the output is
printed as it is produced, HTML tags included.

Options:

| Option | Meaning |
| --- | --- |
| `--config PATH` | Configuration file (default `configs/config.json`) |
| `--art DIR` | Artwork directory (default: the directory holding the configuration) |
| `--no-auto` | Skip the start-up commands |

## Commands

| Command | What it does |
| --- | --- |
| `help`, `termfolio` | Banner and the list of commands |
| `about` | Introduction, interests, languages and experience |
| `github`, `neofetch`, `fastfetch` | GitHub profile card with repo, star and fork counts |
| `repos`, `onefetch` | Pinned repositories |
| `links` | GitHub, e-mail, LinkedIn and Twitter/X links |
| `theme`, `t`, `wal` | Move to the next colour theme |
| `history` | Numbered list of earlier commands (the last 20 are kept) |
| `credits` | Credits and the APIs used |
| `echo ...` | The rest of the line, back again |
| `clear` | Empty output |

A handful of familiar shell commands (`ls`, `cd`, `rm`, `sudo`, `vim`, ...)
answer with a short joke. Anything else answers `<name>: command not found`.
In what is typed, `<` and `>` become `‹` and `›`.

## The configuration file

```json
{
  "github": "example-user",
  "about": {
    "name": "Example User",
    "intro": "Hello, I write software.",
    "interests": ["Compilers", "Networking"],
    "langs": ["Rust", "Python", "Go"],
    "experience": [
      {"title": "Developer", "description": ["Built things", "Fixed things"]}
    ],
    "education": [
      {"institute": "Example University", "course": "Computer Science", "duration": "2019-2023"}
    ]
  },
  "links": {
    "github": "example-user",
    "email": "someone@example.com",
    "linkedin": "in/example-user",
    "twitter": "example_user"
  }
}
```

`email`, `linkedin` and `twitter` may be left out or `null`. If the file is
missing or does not parse, the prompt falls back to `user@termfolio~$` and
`about`, `links`, `github` and `repos` answer with an error message.

## Artwork

The artwork directory holds `neofetch.txt`, shown beside the GitHub card, and
`lang_icons/rust.txt`, `lang_icons/python.txt` and `lang_icons/github.txt`,
shown beside repositories by language. If any of them cannot be read, the
command-line prompt runs without artwork.

## Network

`github` asks the GitHub users API and a star-counter service; `repos` asks a
pinned-repositories service. The first answer of each is kept and reused for
the rest of the session, including an error answer.

## Using it from Python

```python
from termfolio.formats import Artwork
from termfolio.fetch import Portfolio
from termfolio.themes import ThemeCycle
from termfolio.session import Session
from termfolio.keyboard import KeyboardHandler

artwork = Artwork.load("configs")
portfolio = Portfolio.from_file("configs/config.json", artwork)
session = Session(portfolio, ThemeCycle(["catppuccin", "nord", "default", "tokyonight"]))

record = session.run("about", [])
print(record.output(), record.failed)

keys = KeyboardHandler(session)
line = keys.handle("Tab", "hist")      # "history"
line = keys.handle("ArrowUp", line)    # the most recent... first recorded command
```

- `termfolio.models.parse_config(text)` parses a configuration document and
  raises `ValueError` if it is invalid.
- `termfolio.commands.run_command(command, args, portfolio)` returns a
  command's output and raises `CommandNotFound` for unknown names;
  `Session.run` records that case as a failed `HistoryRecord` instead.
- `termfolio.commands.autocomplete(text)` completes a prefix to the first
  matching command name.
- `ThemeCycle` starts at its last theme; `next()` moves on and returns the
  new one.
- `KeyboardHandler.handle(key, value, ctrl)` returns the new contents of the
  input line for `ArrowUp`, `ArrowDown` and `Tab`; other keys leave it as it
  is. `ArrowUp` walks the history from its oldest kept entry.

## What it does not do

- It serves no web page and ships no styles: the HTML it produces is printed
  or returned, not rendered.
- Themes are only tracked by name; the theme answer does not name the new
  theme and nothing changes colour.
- `clear` prints nothing and does not clear the terminal.
- The command-line prompt reads whole lines; arrow-key history and Tab
  completion are available through `KeyboardHandler`, not at that prompt.