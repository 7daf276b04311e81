"""Tests for the console entry point in src.main"""
import pytest

from src import main as entry
from src.rps_logic import Move


def feed_input(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture(autouse=True)
def fixed_computer(monkeypatch):
    monkeypatch.setattr(entry, "random_move", lambda: Move.SCISSORS)
    monkeypatch.delenv("RPS_LOG_LEVEL", raising=False)


def test_main_plays_and_summarises(monkeypatch, capsys):
    feed_input(monkeypatch, ["rock", "n"])

    assert entry.main() == 0

    out = capsys.readouterr().out
    assert "Welcome to the Enhanced Rock-Paper-Scissors Game!" in out
    assert "You chose: ROCK" in out
    assert "Computer chose: SCISSORS" in out
    assert "Player Wins: 1" in out


def test_main_treats_eof_as_quit(monkeypatch, capsys):
    feed_input(monkeypatch, ["1", "y"])

    assert entry.main() == 0

    out = capsys.readouterr().out
    assert "Player Wins: 1" in out
    assert "Ties: 0" in out


def test_load_settings_defaults():
    assert entry.load_settings().log_level == "WARNING"


def test_load_settings_reads_env(monkeypatch):
    monkeypatch.setenv("RPS_LOG_LEVEL", "debug")
    assert entry.load_settings().log_level == "DEBUG"


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("RPS_LOG_LEVEL", "chatty")
    settings = entry.load_settings()
    assert settings.log_level == "WARNING"
    assert settings.ignored_log_level == "CHATTY"


def test_main_plays_with_unknown_log_level(monkeypatch, capsys):
    monkeypatch.setenv("RPS_LOG_LEVEL", "verbose")
    feed_input(monkeypatch, ["1", "n"])

    assert entry.main() == 0

    assert "Player Wins: 1" in capsys.readouterr().out


def test_main_treats_ctrl_c_as_quit(monkeypatch, capsys):
    answers = iter(["1", "y"])

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", fake_input)

    assert entry.main() == 0

    out = capsys.readouterr().out
    assert "Player Wins: 1" in out
    assert "Computer Wins: 0" in out
