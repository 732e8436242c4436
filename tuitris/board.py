from dataclasses import dataclass

from tuitris.config import GAME_SIZE, SPAWN_POSITION, TILE_SIZE
from tuitris.errors import GridBoundsError
from tuitris.tetromino import MoveDirection, Rotation, Tetromino, pick_random_shape
from tuitris.vec2 import Vec2

_STEPS = {
    MoveDirection.LEFT: Vec2(-1, 0),
    MoveDirection.RIGHT: Vec2(1, 0),
    MoveDirection.DOWN: Vec2(0, 1),
}


@dataclass(frozen=True)
class ActivePiece:
    pos: Vec2
    tetromino: Tetromino

    def moved(self, direction, size=GAME_SIZE):
        """One cell left/right/down. No wall or stack check, but the
        position may never go negative."""
        if direction == MoveDirection.FIRM_DROP:
            raise NotImplementedError("firm drop")
        pos = self.pos + _STEPS[direction]
        if pos.x < 0 or pos.y < 0:
            raise GridBoundsError(pos.y, pos.x, size)
        return ActivePiece(pos, self.tetromino)

    def rotated(self, direction):
        return ActivePiece(self.pos, self.tetromino.rotate(direction))

    def cells(self):
        for row, col in self.tetromino.blocks:
            yield row + self.pos.y, col + self.pos.x


class GameBoard:
    def __init__(self, size=GAME_SIZE):
        self.size = size
        self.grid = [[None] * size.x for _ in range(size.y)]
        self.grid_dims_chars = Vec2(TILE_SIZE.x * size.x, TILE_SIZE.y * size.y)
        self.active_piece = None

    def in_bounds(self, row, col):
        return 0 <= row < self.size.y and 0 <= col < self.size.x

    def cell(self, row, col):
        if not self.in_bounds(row, col):
            raise GridBoundsError(row, col, self.size)
        return self.grid[row][col]

    def occupied_cells(self):
        for row, cells in enumerate(self.grid):
            for col, color in enumerate(cells):
                if color is not None:
                    yield (row, col), color

    def commit(self, pos, tetromino):
        """Write the piece into the grid. Later writes win on overlap."""
        targets = [(row + pos.y, col + pos.x) for row, col in tetromino.blocks]
        for row, col in targets:
            if not self.in_bounds(row, col):
                raise GridBoundsError(row, col, self.size)
        for row, col in targets:
            self.grid[row][col] = tetromino.color

    def spawn(self, shape=None, rng=None):
        if shape is None:
            shape = pick_random_shape() if rng is None else pick_random_shape(rng)
        self.active_piece = ActivePiece(SPAWN_POSITION, Tetromino.new(shape, Rotation.ZERO))
        return self.active_piece

    def lock_and_spawn(self, rng=None):
        ap = self.active_piece
        if ap is None:
            return None
        self.commit(ap.pos, ap.tetromino)
        return self.spawn(rng=rng)
