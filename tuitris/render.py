"""Mapping game state onto a grid of character cells.

Nothing in here touches the terminal. Every function writes into a
CellBuffer which the screen backend flushes in one go, so frames can be
inspected in tests exactly as they would appear.
"""
import textwrap

from tuitris.config import (
    DEBUG_GREETING, LEFT_PANEL_TEXT, MIN_SIZE, RIGHT_PANEL_TEXT, TILE_CHARS, TILE_SIZE,
)
from tuitris.layout import Rect, frame_layout

BORDER_H_CHAR = "─"
BORDER_V_CHAR = "│"
CORNER_CHARS = ("┌", "┐", "└", "┘")


class CellBuffer:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.cells = {}

    @property
    def area(self):
        return Rect(0, 0, self.width, self.height)

    def set(self, x, y, symbol, color=None):
        # clipped, like writing past the edge of the screen
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[(x, y)] = (symbol, color)

    def put_text(self, x, y, text, color=None, max_width=None):
        if max_width is not None:
            text = text[:max(0, max_width)]
        for i, ch in enumerate(text):
            self.set(x + i, y, ch, color)

    def get(self, x, y):
        return self.cells.get((x, y))

    def symbol(self, x, y):
        cell = self.cells.get((x, y))
        return cell[0] if cell else " "

    def row_text(self, y):
        return "".join(self.symbol(x, y) for x in range(self.width))

    def clear(self):
        self.cells.clear()


# ============= BOARD =============

def tile_positions(board, area):
    """Yield (grid cell, char cell, tile sub-cell, buffer cell) for every
    character of the board region, row by row."""
    for char_y in range(board.grid_dims_chars.y):
        for char_x in range(board.grid_dims_chars.x):
            yield (
                (char_y // TILE_SIZE.y, char_x // TILE_SIZE.x),
                (char_y, char_x),
                (char_y % TILE_SIZE.y, char_x % TILE_SIZE.x),
                (area.top + char_y, area.left + char_x),
            )


def draw_tile(buf, area, row, col, color):
    for tile_y in range(TILE_SIZE.y):
        for tile_x in range(TILE_SIZE.x):
            buf.set(area.left + col * TILE_SIZE.x + tile_x,
                    area.top + row * TILE_SIZE.y + tile_y,
                    TILE_CHARS[tile_y][tile_x], color)


def render_board(board, buf, area):
    for (grid_y, grid_x), _, (tile_y, tile_x), (buf_y, buf_x) in tile_positions(board, area):
        color = board.grid[grid_y][grid_x]
        if color is not None:
            buf.set(buf_x, buf_y, TILE_CHARS[tile_y][tile_x], color)

    ap = board.active_piece
    if ap is None:
        return
    for row, col in ap.cells():
        # a piece that has left the grid is simply not shown
        if board.in_bounds(row, col):
            draw_tile(buf, area, row, col, ap.tetromino.color)


# ============= PANELS =============

def render_panel(buf, area, title, text):
    """Bordered box with the title in the top edge and text inside."""
    if area.width < 2 or area.height < 2:
        return
    left, top = area.left, area.top
    right, bottom = area.right - 1, area.bottom - 1
    buf.set(left, top, CORNER_CHARS[0])
    buf.set(right, top, CORNER_CHARS[1])
    buf.set(left, bottom, CORNER_CHARS[2])
    buf.set(right, bottom, CORNER_CHARS[3])
    for x in range(left + 1, right):
        buf.set(x, top, BORDER_H_CHAR)
        buf.set(x, bottom, BORDER_H_CHAR)
    for y in range(top + 1, bottom):
        buf.set(left, y, BORDER_V_CHAR)
        buf.set(right, y, BORDER_V_CHAR)
    if title:
        buf.put_text(left + 1, top, title, max_width=area.width - 2)

    inner = area.inner()
    if inner.width <= 0:
        return
    lines = []
    for paragraph in text.split("\n"):
        lines.extend(textwrap.wrap(paragraph, inner.width) or [""])
    for i, line in enumerate(lines[:inner.height]):
        buf.put_text(inner.left, inner.top + i, line, max_width=inner.width)


def too_small_message(area):
    return (f"Required Terminal Size is {MIN_SIZE.x}x{MIN_SIZE.y}\n"
            f"Your Terminal Size is {area.width}x{area.height}")


def is_too_small(area):
    return area.height < MIN_SIZE.y or area.width < MIN_SIZE.x


def render_too_small(buf, area):
    render_panel(buf, area, "Error", too_small_message(area))


# ============= FRAME =============

def debug_text(app):
    lines = [DEBUG_GREETING]
    ap = app.board.active_piece
    if ap is not None:
        t = ap.tetromino
        lines.append(f"piece: {t.shape.value} rot={t.rotation.name} pos=({ap.pos.x}, {ap.pos.y})")
    else:
        lines.append("piece: none")
    settled = sum(1 for _ in app.board.occupied_cells())
    lines.append(f"settled cells: {settled}  frames: {app.frames}")
    return "\n".join(lines)


def make_frame(app, buf):
    """Compose one full frame. Returns the layout used, or None when the
    terminal is too small to show the game."""
    buf.clear()
    frame = buf.area
    if is_too_small(frame):
        render_too_small(buf, frame)
        return None

    layout = frame_layout(frame, app.board.grid_dims_chars)
    render_panel(buf, layout["debug"], "debug", debug_text(app))
    render_panel(buf, layout["left"], "left", LEFT_PANEL_TEXT)
    render_panel(buf, layout["right"], "right", RIGHT_PANEL_TEXT)
    render_board(app.board, buf, layout["board"])
    return layout
