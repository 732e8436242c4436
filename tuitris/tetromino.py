import enum
import random
from dataclasses import dataclass


class Colors(enum.Enum):
    # (rgb, basic terminal fallback)
    PURPLE = ((155, 89, 182), "magenta")
    ORANGE = ((242, 140, 40), "yellow")
    PINK = ((241, 148, 138), "red")
    RED = ((255, 0, 0), "red")
    GREEN = ((0, 255, 0), "green")
    BLUE = ((0, 255, 255), "cyan")
    YELLOW = ((255, 255, 0), "yellow")

    @property
    def rgb(self):
        return self.value[0]

    @property
    def fallback(self):
        return self.value[1]


class Shape(enum.Enum):
    T = "T"
    L = "L"
    J = "J"
    S = "S"
    Z = "Z"
    I = "I"  # noqa: E741
    O = "O"  # noqa: E741


class Rotation(enum.IntEnum):
    ZERO = 0
    NINETY = 1
    ONE_EIGHTY = 2
    TWO_SEVENTY = 3

    def step(self, clockwise):
        return Rotation((self + (1 if clockwise else 3)) % 4)


class MoveDirection(enum.Enum):
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CCW = "ccw"
    CW = "cw"
    FIRM_DROP = "firm_drop"


SHAPE_COLORS = {
    Shape.T: Colors.PURPLE,
    Shape.L: Colors.ORANGE,
    Shape.J: Colors.PINK,
    Shape.S: Colors.GREEN,
    Shape.Z: Colors.RED,
    Shape.I: Colors.BLUE,
    Shape.O: Colors.YELLOW,
}

# Order the random picker draws from.
RANDOM_SHAPES = [Shape.O, Shape.I, Shape.T, Shape.S, Shape.Z, Shape.J, Shape.L]

# ============= OFFSET TABLES =============
# (row, col) offsets from the piece anchor, one literal entry per
# (shape, rotation). S and Z are kept exactly as shipped: their turns do
# not follow standard geometry and Z at 180 repeats (1, 1).

_R = Rotation

BLOCKS = {
    (Shape.T, _R.ZERO): ((1, 0), (1, 1), (1, 2), (0, 1)),
    (Shape.T, _R.NINETY): ((0, 1), (1, 1), (2, 1), (1, 2)),
    (Shape.T, _R.ONE_EIGHTY): ((1, 0), (1, 1), (1, 2), (2, 1)),
    (Shape.T, _R.TWO_SEVENTY): ((0, 1), (1, 1), (2, 1), (1, 0)),

    (Shape.L, _R.ZERO): ((1, 0), (1, 1), (1, 2), (0, 2)),
    (Shape.L, _R.NINETY): ((0, 1), (1, 1), (2, 1), (2, 0)),
    (Shape.L, _R.ONE_EIGHTY): ((1, 0), (1, 1), (1, 2), (2, 0)),
    (Shape.L, _R.TWO_SEVENTY): ((0, 0), (1, 0), (2, 0), (0, 1)),

    (Shape.J, _R.ZERO): ((1, 0), (1, 1), (1, 2), (0, 0)),
    (Shape.J, _R.NINETY): ((0, 1), (1, 1), (2, 1), (2, 2)),
    (Shape.J, _R.ONE_EIGHTY): ((1, 0), (1, 1), (1, 2), (2, 2)),
    (Shape.J, _R.TWO_SEVENTY): ((0, 2), (0, 1), (1, 1), (2, 1)),

    (Shape.S, _R.ZERO): ((1, 0), (1, 1), (0, 1), (0, 2)),
    (Shape.S, _R.NINETY): ((0, 1), (1, 1), (1, 2), (2, 2)),
    (Shape.S, _R.ONE_EIGHTY): ((2, 0), (2, 1), (1, 1), (1, 2)),
    (Shape.S, _R.TWO_SEVENTY): ((0, 0), (1, 0), (1, 1), (2, 1)),

    (Shape.Z, _R.ZERO): ((0, 0), (0, 1), (1, 1), (1, 2)),
    (Shape.Z, _R.NINETY): ((0, 1), (1, 1), (1, 2), (2, 1)),
    (Shape.Z, _R.ONE_EIGHTY): ((1, 0), (1, 1), (1, 1), (1, 2)),
    (Shape.Z, _R.TWO_SEVENTY): ((0, 0), (1, 0), (1, 1), (2, 1)),

    (Shape.I, _R.ZERO): ((1, 0), (1, 1), (1, 2), (1, 3)),
    (Shape.I, _R.NINETY): ((0, 2), (1, 2), (2, 2), (3, 2)),
    (Shape.I, _R.ONE_EIGHTY): ((2, 0), (2, 1), (2, 2), (2, 3)),
    (Shape.I, _R.TWO_SEVENTY): ((0, 1), (1, 1), (2, 1), (3, 1)),

    (Shape.O, _R.ZERO): ((0, 0), (0, 1), (1, 0), (1, 1)),
    (Shape.O, _R.NINETY): ((0, 0), (0, 1), (1, 0), (1, 1)),
    (Shape.O, _R.ONE_EIGHTY): ((0, 0), (0, 1), (1, 0), (1, 1)),
    (Shape.O, _R.TWO_SEVENTY): ((0, 0), (0, 1), (1, 0), (1, 1)),
}

del _R


def pick_random_shape(rng=random):
    return rng.choice(RANDOM_SHAPES)


@dataclass(frozen=True)
class Tetromino:
    blocks: tuple
    color: Colors
    shape: Shape
    rotation: Rotation

    @classmethod
    def new(cls, shape, rotation=Rotation.ZERO):
        return cls(BLOCKS[(shape, rotation)], SHAPE_COLORS[shape], shape, rotation)

    def rotate(self, direction):
        """Step one quarter turn; any non-rotation direction returns self."""
        if direction == MoveDirection.CW:
            return Tetromino.new(self.shape, self.rotation.step(True))
        if direction == MoveDirection.CCW:
            return Tetromino.new(self.shape, self.rotation.step(False))
        return self

    def distinct_cells(self):
        return set(self.blocks)
