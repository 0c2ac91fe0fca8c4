"""Fixed texts shown by the terminal: help, credits and error messages."""

_LOGO_ROWS = (
    r" _____________  __  ___________  __   ________",
    r"/_  __/ __/ _ \/  |/  / __/ __ \/ /  /  _/ __ \ ".rstrip(),
    r" / / / _// , _/ /|_/ / _// /_/ / /___/ // /_/ /",
    r"/_/ /___/_/|_/_/  /_/_/  \____/____/___/\____/" + " ",
)

LOGO = '<span class="grn">' + "\n".join(_LOGO_ROWS) + "\n</span>"

_HELP_COMMANDS = (
    ("about", "View about me"),
    ("neofetch / fastfetch / github", "View about Github profile "),
    ("onefetch / repos", "View about my pinned repos/projects"),
    ("links", "View contact info and links"),
    ("help", "View this help section"),
    ("theme / wal", "Cycle through themes"),
    ("credits", "View credits and repo"),
    ("history", "View command history"),
    ("clear", "Clear screen"),
)

_CREDITED_APIS = (
    "Github REST API",
    "Pinned repos",
    "Total stars and forks",
)


def _command_line(name: str, description: str) -> str:
    return f'  <span class="rd semibold">{name}</span> - {description}'


def _error(message: str) -> str:
    return f'<span class="rd semibold">{message}</span>'


HELP = (
    LOGO
    + "\nHello, welcome to "
    + '<u class="blu semibold">Termfolio</u> [WIP]. Type one of these commands -\n\n'
    + "\n".join(_command_line(name, text) for name, text in _HELP_COMMANDS)
    + "\n\nYou can use <i>arrow keys</i> to scroll through history,"
    + "\nand also use <i>Ctrl+L</i> to clear the screen"
)

CREDITS = (
    LOGO
    + "\nTerminal style portfolio website. \n \n"
    + '<span class="rd semibold">APIs used -</span>\n\n'
    + "\n\n".join(f'* <span class="blu semibold">{api}</span>' for api in _CREDITED_APIS)
    + "\n\n"
)

READ_JSON_ERROR = _error("Error reading config.json")
FETCH_GITHUB_ERROR = _error("Error fetching data from Github.")