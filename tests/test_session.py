import pytest

from termfolio.commands import CommandNotFound
from termfolio.fetch import Portfolio
from termfolio.formats import Artwork
from termfolio.session import HISTORY_LIMIT, Session
from termfolio.texts import HELP
from termfolio.themes import ThemeCycle


@pytest.fixture
def session():
    return Session(Portfolio(config=None, artwork=Artwork("", "", "", "")))


def test_run_records_output(session):
    record = session.run("help", [""])
    assert record.output() == HELP.strip()
    assert not record.failed
    assert list(session.history) == [record]


def test_unknown_command_recorded_as_failure(session):
    record = session.run("foo", [""])
    assert record.failed
    assert record.output() == "foo: command not found"


def test_ids_increase(session):
    ids = [session.run("cd", []).command.id for _ in range(3)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_history_limit(session):
    for _ in range(HISTORY_LIMIT + 5):
        session.run("pwd", [])
    assert len(session.history) == HISTORY_LIMIT


def test_history_command_lists_previous(session):
    session.run("help", [])
    session.run("echo", ["hi"])
    record = session.run("history", [])
    assert record.output() == "1 help\n2 echo hi"


def test_clear_outputs_nothing(session):
    assert session.general_command("clear", []) == ""


def test_theme_advances_cycle():
    themes = ThemeCycle()
    session = Session(Portfolio(config=None, artwork=Artwork("", "", "", "")), themes)
    before = themes.current()
    out = session.general_command("wal", [])
    assert out == 'Theme changed to: <b class="grn"></b>'
    assert themes.current() != before


def test_general_command_raises(session):
    with pytest.raises(CommandNotFound):
        session.general_command("nope", [])


def test_prompt_without_config(session):
    assert session.prompt() == "user@termfolio~$ "