import pytest
import responses

from termfolio.commands import (
    CommandNotFound,
    HistoryRecord,
    UserCommand,
    autocomplete,
    banner,
    run_command,
)
from termfolio.fetch import INFO_URL, REPOS_URL, STATS_URL, Portfolio
from termfolio.formats import Artwork, format_about, format_links, format_repos
from termfolio.models import About, Config, Links, Repository
from termfolio.texts import CREDITS, FETCH_GITHUB_ERROR, HELP


@pytest.fixture
def portfolio():
    config = Config(
        github="jdoe",
        about=About(
            name="J Doe",
            intro="Hi there",
            interests=["systems"],
            langs=["Rust", "Elm"],
            experience=[],
            education=[],
        ),
        links=Links(github="jdoe", email="jdoe@example.com"),
    )
    return Portfolio(config=config, artwork=Artwork("N", "R", "P", "G"))


@pytest.mark.parametrize(
    "command, expected",
    [
        ("cd", "Nowhere to go."),
        ("touch", "Nowhere to create."),
        ("rmdir", "Nothing to destroy."),
        ("cp", "Nothing to duplicate."),
        ("mv", "Nowhere to move."),
        ("cat", "Nothing to see."),
        ("find", "Nowhere to search."),
        ("pwd", "You are here."),
        ("hx", "Great editor."),
        ("emacs", "Great mail client"),
        ("sudo", "With great power comes great responsibility."),
        ("whoami", "Despite everything, it's still you."),
        ("exit", "Hasta la vista."),
        ("", ""),
    ],
)
def test_fixed_replies(portfolio, command, expected):
    assert run_command(command, [], portfolio) == expected


def test_help_and_credits_are_trimmed(portfolio):
    assert run_command("help", [], portfolio) == HELP.strip()
    assert run_command("termfolio", [], portfolio) == HELP.strip()
    assert run_command("credits", [], portfolio) == CREDITS.strip()


def test_links_and_about(portfolio):
    assert run_command("links", [], portfolio) == format_links(portfolio.config.links).strip()
    assert run_command("about", [], portfolio) == format_about(portfolio.config.about)


def test_echo_joins_arguments(portfolio):
    assert run_command("echo", ["a", "b"], portfolio) == "a b"


def test_unknown_command(portfolio):
    with pytest.raises(CommandNotFound) as info:
        run_command("foo", [], portfolio)
    assert str(info.value) == "foo: command not found"
    assert info.value.command == "foo"


def test_github_failure_reports_error(portfolio):
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.GET, INFO_URL.format(user="jdoe"), status=500)
        rsps.add(responses.GET, STATS_URL.format(user="jdoe"), status=500)
        assert run_command("neofetch", [], portfolio) == FETCH_GITHUB_ERROR


def test_repos_rendered(portfolio):
    repo = {
        "author": "jdoe",
        "name": "tool",
        "description": "a tool",
        "stars": 3,
        "forks": 1,
        "language": "Rust",
    }
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, REPOS_URL.format(user="jdoe"), json=[repo])
        expected = format_repos([Repository.from_dict(repo)], portfolio.artwork)
        assert run_command("onefetch", [], portfolio) == expected


@pytest.mark.parametrize(
    "inp, expected",
    [
        ("ne", "neofetch"),
        ("  h ", "help"),
        ("hi", "history"),
        ("fa", "fastfetch"),
        ("xyz", "xyz"),
        ("   ", ""),
    ],
)
def test_autocomplete(inp, expected):
    assert autocomplete(inp) == expected


def test_user_command_display():
    assert str(UserCommand(1, "echo", ["a", "b"])) == "echo a, b"
    assert str(UserCommand(2, "help")) == "help"


def test_history_record_output():
    record = HistoryRecord(UserCommand(0, "foo"), "foo: command not found", failed=True)
    assert record.output() == "foo: command not found"


def test_banner_is_help():
    assert banner() == HELP