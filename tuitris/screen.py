import curses
import logging

from tuitris.config import LOGGER_NAME
from tuitris.layout import Rect
from tuitris.render import CellBuffer
from tuitris.tetromino import Colors

logger = logging.getLogger(LOGGER_NAME)

KEY_RESIZE = "<resize>"

USE_COLORS = True
# First colour number used for redefined RGB colours.
CUSTOM_COLOR_BASE = 16

FALLBACK_COLORS = {
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
}

COLOR_PAIRS = {color: n for n, color in enumerate(Colors, start=1)}


def _rgb_to_curses(component):
    return component * 1000 // 255


class CursesScreen:
    """Draws CellBuffers to a curses window and polls it for keys."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.colors_initialized = False
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self._init_colors()

    def _init_colors(self):
        if not USE_COLORS or not curses.has_colors():
            return
        curses.start_color()
        curses.use_default_colors()
        custom = curses.can_change_color() and curses.COLORS > CUSTOM_COLOR_BASE + len(Colors)
        for color, pair in COLOR_PAIRS.items():
            fg = FALLBACK_COLORS[color.fallback]
            if custom:
                fg = CUSTOM_COLOR_BASE + pair
                r, g, b = (_rgb_to_curses(c) for c in color.rgb)
                try:
                    curses.init_color(fg, r, g, b)
                except curses.error:
                    fg = FALLBACK_COLORS[color.fallback]
            try:
                curses.init_pair(pair, fg, -1)
            except curses.error:
                pass
        self.colors_initialized = True
        logger.debug("color pairs initialised (custom rgb: %s)", custom)

    def color_attr(self, color):
        if color is None or not self.colors_initialized:
            return 0
        return curses.color_pair(COLOR_PAIRS[color])

    def size(self):
        max_y, max_x = self.stdscr.getmaxyx()
        return Rect(0, 0, max_x, max_y)

    def new_buffer(self):
        area = self.size()
        return CellBuffer(area.width, area.height)

    def poll_key(self, timeout):
        """Wait at most `timeout` seconds for one key press."""
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        key = self.stdscr.getch()
        if key == -1:
            return None
        if key == curses.KEY_RESIZE:
            return KEY_RESIZE
        if 0 <= key < 256:
            return chr(key)
        return None

    def draw(self, buf):
        self.stdscr.erase()
        for (x, y), (symbol, color) in buf.cells.items():
            try:
                self.stdscr.addstr(y, x, symbol, self.color_attr(color))
            except curses.error:
                # writing the bottom-right cell moves the cursor off screen
                pass
        self.stdscr.refresh()
