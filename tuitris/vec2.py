from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Vec2(Generic[T]):
    """Ordered (x, y) pair used for grid positions and sizes."""
    x: T
    y: T

    def __add__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar):
        if isinstance(scalar, Vec2):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __iter__(self):
        yield self.x
        yield self.y
