"""Splitting the terminal into named rectangular regions."""
import enum
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def left(self):
        return self.x

    @property
    def top(self):
        return self.y

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def inner(self, margin=1):
        return Rect(self.x + margin, self.y + margin,
                    max(0, self.width - 2 * margin), max(0, self.height - 2 * margin))


class Partition(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class SizeConstraint:
    fixed: Optional[int] = None

    @property
    def is_rest(self):
        return self.fixed is None


SizeConstraint.REST = SizeConstraint()


@dataclass
class Area:
    name: str
    partition: Optional[Partition] = None
    size: Optional[SizeConstraint] = None
    areas: list = field(default_factory=list)

    def with_partition(self, partition):
        self.partition = partition
        return self

    def with_size_constraint(self, size):
        self.size = size
        return self

    def add_sub_area(self, area):
        self.areas.append(area)
        return self


def calculate_layout(area, available):
    """Map every named sub-area of `area` to its Rect inside `available`.

    Fixed children take their size first, REST children share what is left
    (integer division). Leaf areas (no partition) split nothing."""
    layout = {}
    if area.partition == Partition.HORIZONTAL:
        offset, total = available.x, available.width
    elif area.partition == Partition.VERTICAL:
        offset, total = available.y, available.height
    else:
        offset, total = 0, 0

    remaining = total
    rest_count = 0
    for sub in area.areas:
        if sub.size is None:
            continue
        if sub.size.is_rest:
            rest_count += 1
        else:
            remaining -= sub.size.fixed
    remaining = max(0, remaining)
    rest_size = remaining // rest_count if rest_count else 0

    for sub in area.areas:
        if sub.size is None:
            size = total
        elif sub.size.is_rest:
            size = rest_size
        else:
            size = sub.size.fixed

        if area.partition == Partition.HORIZONTAL:
            rect = Rect(offset, available.y, size, available.height)
            offset += size
        elif area.partition == Partition.VERTICAL:
            rect = Rect(available.x, offset, available.width, size)
            offset += size
        else:
            rect = Rect(available.x, available.y, available.width, available.height)
        layout[sub.name] = rect

        if sub.areas:
            layout.update(calculate_layout(sub, rect))
    return layout


def frame_layout(frame, board_chars):
    """game (board rows) over debug, game split into left / board / right."""
    game = (
        Area("game")
        .with_size_constraint(SizeConstraint(board_chars.y))
        .with_partition(Partition.HORIZONTAL)
        .add_sub_area(Area("left").with_size_constraint(SizeConstraint.REST))
        .add_sub_area(Area("board").with_size_constraint(SizeConstraint(board_chars.x)))
        .add_sub_area(Area("right").with_size_constraint(SizeConstraint.REST))
    )
    root = (
        Area("root")
        .with_partition(Partition.VERTICAL)
        .add_sub_area(game)
        .add_sub_area(Area("debug").with_size_constraint(SizeConstraint.REST))
    )
    return calculate_layout(root, frame)
