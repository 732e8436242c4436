import curses
import logging

import pytest

from tuitris import cli
from tuitris.config import GRAVITY_RATE, LOGGER_NAME, SPAWN_POSITION
from tuitris.log import setup_logging
from tuitris.tetromino import Rotation

from tests.fakes import FakeScreen


def test_defaults():
    args = cli.parse_args([])
    assert args.gravity == GRAVITY_RATE
    assert args.seed is None
    assert not args.debug


def test_overrides():
    args = cli.parse_args(["--gravity", "0.5", "--loop-rate", "0.02", "--seed", "3", "--debug"])
    assert args.gravity == 0.5
    assert args.loop_rate == 0.02
    assert args.seed == 3
    assert args.debug


@pytest.mark.parametrize("value", ["0", "-1", "soon"])
def test_rejects_bad_durations(value):
    with pytest.raises(SystemExit):
        cli.parse_args(["--gravity", value])


def test_main_returns_zero_on_quit(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.curses, "wrapper", lambda fn, *args: calls.append(args))
    assert cli.main(["--seed", "1"]) == 0
    assert len(calls) == 1


def test_main_reports_terminal_failure(monkeypatch, capsys):
    def broken(fn, *args):
        raise curses.error("no terminal")

    monkeypatch.setattr(cli.curses, "wrapper", broken)
    assert cli.main([]) == 1
    assert "terminal I/O failed" in capsys.readouterr().err


def test_main_propagates_other_errors(monkeypatch):
    def broken(fn, *args):
        raise IndexError("bad cell")

    monkeypatch.setattr(cli.curses, "wrapper", broken)
    with pytest.raises(IndexError):
        cli.main([])


def test_logging_to_file(tmp_path):
    path = tmp_path / "game.log"
    logger = setup_logging(str(path), debug=True)
    logger.debug("moved left")
    for handler in logger.handlers:
        handler.flush()
    assert "moved left" in path.read_text(encoding="utf-8")
    setup_logging()


def test_logging_without_file_is_silent():
    logger = setup_logging()
    assert logger is logging.getLogger(LOGGER_NAME)
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert logger.level == logging.INFO


def test_run_spawns_before_the_loop(monkeypatch):
    started = []

    def fake_loop(app, screen):
        ap = app.board.active_piece
        started.append((ap.pos, ap.tetromino.rotation, screen))

    fake_screen = FakeScreen()
    monkeypatch.setattr(cli, "CursesScreen", lambda stdscr: fake_screen)
    monkeypatch.setattr(cli.App, "game_loop", fake_loop)
    cli.run(object(), cli.parse_args([]))
    assert started == [(SPAWN_POSITION, Rotation.ZERO, fake_screen)]
