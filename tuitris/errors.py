class TetrisError(Exception):
    pass


class GridBoundsError(TetrisError, IndexError):
    """A grid cell or piece position outside the playfield coordinate space."""

    def __init__(self, row, col, size):
        self.row = row
        self.col = col
        self.size = size
        super().__init__(f"cell (row={row}, col={col}) is outside the {size.x}x{size.y} grid")
