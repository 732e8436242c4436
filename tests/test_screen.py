import curses

import pytest

from tuitris import screen as screen_mod
from tuitris.layout import Rect
from tuitris.render import CellBuffer
from tuitris.screen import COLOR_PAIRS, FALLBACK_COLORS, KEY_RESIZE, CursesScreen
from tuitris.tetromino import Colors


class FakeWindow:
    """Stands in for the curses stdscr window."""

    def __init__(self, rows=24, cols=80, keys=None, bad_cell=None, refresh_error=False):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys or [])
        self.bad_cell = bad_cell
        self.refresh_error = refresh_error
        self.timeouts = []
        self.written = []
        self.erased = 0
        self.refreshed = 0

    def timeout(self, ms):
        self.timeouts.append(ms)

    def getch(self):
        if self.keys:
            return self.keys.pop(0)
        return -1

    def getmaxyx(self):
        return self.rows, self.cols

    def erase(self):
        self.erased += 1
        self.written.clear()

    def addstr(self, y, x, text, attr=0):
        if (x, y) == self.bad_cell:
            raise curses.error("addwstr() returned ERR")
        self.written.append((x, y, text, attr))

    def refresh(self):
        if self.refresh_error:
            raise curses.error("refresh() returned ERR")
        self.refreshed += 1


@pytest.fixture
def no_colors(monkeypatch):
    monkeypatch.setattr(screen_mod.curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(screen_mod.curses, "has_colors", lambda: False)


@pytest.fixture
def basic_colors(monkeypatch):
    pairs = {}
    monkeypatch.setattr(screen_mod.curses, "curs_set", lambda visibility: None)
    monkeypatch.setattr(screen_mod.curses, "has_colors", lambda: True)
    monkeypatch.setattr(screen_mod.curses, "start_color", lambda: None)
    monkeypatch.setattr(screen_mod.curses, "use_default_colors", lambda: None)
    monkeypatch.setattr(screen_mod.curses, "can_change_color", lambda: False)
    monkeypatch.setattr(screen_mod.curses, "COLORS", 8, raising=False)
    monkeypatch.setattr(screen_mod.curses, "init_pair",
                        lambda pair, fg, bg: pairs.__setitem__(pair, (fg, bg)))
    monkeypatch.setattr(screen_mod.curses, "color_pair", lambda pair: pair << 8)
    return pairs


def test_poll_key_translation(no_colors):
    window = FakeWindow(keys=[-1, ord("H"), curses.KEY_RESIZE, curses.KEY_LEFT])
    scr = CursesScreen(window)
    keys = [scr.poll_key(0.1) for _ in range(4)]
    assert keys == [None, "H", KEY_RESIZE, None]
    assert window.timeouts == [100] * 4


def test_poll_key_negative_timeout_is_non_blocking(no_colors):
    window = FakeWindow()
    CursesScreen(window).poll_key(-1)
    assert window.timeouts == [0]


def test_size_and_buffer(no_colors):
    scr = CursesScreen(FakeWindow(rows=30, cols=120))
    assert scr.size() == Rect(0, 0, 120, 30)
    buf = scr.new_buffer()
    assert (buf.width, buf.height) == (120, 30)


def test_draw_without_colors(no_colors):
    window = FakeWindow()
    scr = CursesScreen(window)
    buf = CellBuffer(80, 24)
    buf.put_text(2, 1, "ok")
    buf.set(5, 5, "[", Colors.RED)
    scr.draw(buf)
    assert sorted(window.written) == [(2, 1, "o", 0), (3, 1, "k", 0), (5, 5, "[", 0)]
    assert window.erased == 1
    assert window.refreshed == 1


def test_draw_skips_cells_curses_rejects(no_colors):
    window = FakeWindow(rows=24, cols=80, bad_cell=(79, 23))
    buf = CellBuffer(80, 24)
    buf.set(0, 0, "a")
    buf.set(79, 23, "z")
    buf.set(1, 0, "b")
    CursesScreen(window).draw(buf)
    assert sorted(w[2] for w in window.written) == ["a", "b"]
    assert window.refreshed == 1


def test_refresh_failure_propagates(no_colors):
    window = FakeWindow(refresh_error=True)
    buf = CellBuffer(80, 24)
    buf.set(0, 0, "a")
    with pytest.raises(curses.error):
        CursesScreen(window).draw(buf)


def test_fallback_color_pairs(basic_colors):
    scr = CursesScreen(FakeWindow())
    assert scr.colors_initialized
    assert len(basic_colors) == len(Colors)
    for color, pair in COLOR_PAIRS.items():
        assert basic_colors[pair] == (FALLBACK_COLORS[color.fallback], -1)


def test_color_attr(basic_colors):
    scr = CursesScreen(FakeWindow())
    assert scr.color_attr(None) == 0
    assert scr.color_attr(Colors.PURPLE) == COLOR_PAIRS[Colors.PURPLE] << 8


def test_draw_with_colors(basic_colors):
    window = FakeWindow()
    buf = CellBuffer(80, 24)
    buf.set(4, 2, "]", Colors.GREEN)
    CursesScreen(window).draw(buf)
    assert window.written == [(4, 2, "]", COLOR_PAIRS[Colors.GREEN] << 8)]


def test_color_attr_without_colors(no_colors):
    assert CursesScreen(FakeWindow()).color_attr(Colors.BLUE) == 0
