import io
import json

import pytest

from termfolio.cli import auto_commands, main, parse_line
from termfolio.texts import HELP

CONFIG = {
    "github": "jdoe",
    "about": {
        "name": "J Doe",
        "intro": "Hello",
        "interests": ["compilers"],
        "langs": ["Rust"],
        "experience": [],
        "education": [],
    },
    "links": {"github": "jdoe", "email": "jdoe@example.com"},
}


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(CONFIG), encoding="utf-8")
    return path


def test_parse_line_simple():
    assert parse_line("help") == ("help", [""])


def test_parse_line_maps_angle_brackets():
    assert parse_line("echo <b> hi") == ("echo", ["‹b› hi"])


def test_parse_line_leading_space():
    assert parse_line(" help") == ("", ["help"])


def test_auto_commands():
    assert auto_commands() == ["about", "links", "help"]


def test_main_runs_input(config_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("cd\nfoo\n"))
    assert main(["--config", str(config_path), "--no-auto"]) == 0
    out = capsys.readouterr().out
    assert "jdoe@termfolio~$ " in out
    assert "Nowhere to go." in out
    assert "foo: command not found" in out


def test_main_auto_commands(config_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--config", str(config_path)]) == 0
    out = capsys.readouterr().out
    assert HELP.strip() in out
    assert "jdoe@example.com" in out
    assert out.index("Hello") < out.index(HELP.strip())


def test_main_missing_config(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("pwd\n"))
    assert main(["--config", str(tmp_path / "absent.json"), "--no-auto"]) == 0
    out = capsys.readouterr().out
    assert "user@termfolio~$ " in out
    assert "You are here." in out