"""Square coordinates and move-shape classification.

Every question about "what shape of move is this" is answered here. The
rest of the engine only compares the values produced by ``classify``.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

BOARD_SIZE = 8


@dataclass(frozen=True)
class Square:
    """A board coordinate.

    Attributes:
        row: Row index, 0 (first side's back rank) to 7
        col: Column index, 0 to 7
    """

    row: int
    col: int

    def __post_init__(self) -> None:
        if not (0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE):
            raise ValueError(f"Square ({self.row}, {self.col}) is off the board")

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


class Direction(Enum):
    """The eight rays a sliding or stepping piece can travel along."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UP_LEFT = "up_left"
    UP_RIGHT = "up_right"
    DOWN_LEFT = "down_left"
    DOWN_RIGHT = "down_right"

    @property
    def is_straight(self) -> bool:
        return self in _STRAIGHT

    @property
    def is_diagonal(self) -> bool:
        return not self.is_straight


_STRAIGHT = frozenset({Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT})


class KnightDirection(Enum):
    """L-shape variants, named dominant axis first.

    UP_*/DOWN_* cover two rows and one column, LEFT_*/RIGHT_* two columns
    and one row.
    """

    UP_LEFT = "up_left"
    UP_RIGHT = "up_right"
    DOWN_LEFT = "down_left"
    DOWN_RIGHT = "down_right"
    LEFT_UP = "left_up"
    LEFT_DOWN = "left_down"
    RIGHT_UP = "right_up"
    RIGHT_DOWN = "right_down"


@dataclass(frozen=True)
class Ray:
    """A straight or diagonal move of ``distance`` squares."""

    direction: Direction
    distance: int


@dataclass(frozen=True)
class KnightJump:
    """An L-shaped jump. Carries no distance and has no intermediate squares."""

    variant: KnightDirection


Movement = Ray | KnightJump


class SquareOrder(Enum):
    """Traversal order used when enumerating the board."""

    COLUMN_MAJOR = "column_major"
    ROW_MAJOR = "row_major"


def classify(start: Square, end: Square) -> Movement | None:
    """Classify the move from ``start`` to ``end``.

    Returns a Ray for rank, file and 45 degree moves, a KnightJump for the
    (2, 1) / (1, 2) offsets, and None when the squares coincide or are
    related in any other way.
    """
    row_delta = max(start.row, end.row) - min(start.row, end.row)
    col_delta = max(start.col, end.col) - min(start.col, end.col)
    going_down = start.row > end.row
    going_left = start.col > end.col

    if row_delta == 0 and col_delta == 0:
        return None

    if row_delta == 0:
        return Ray(Direction.LEFT if going_left else Direction.RIGHT, col_delta)

    if col_delta == 0:
        return Ray(Direction.DOWN if going_down else Direction.UP, row_delta)

    if row_delta == col_delta:
        match (going_down, going_left):
            case (True, True):
                direction = Direction.DOWN_LEFT
            case (True, False):
                direction = Direction.DOWN_RIGHT
            case (False, True):
                direction = Direction.UP_LEFT
            case _:
                direction = Direction.UP_RIGHT
        return Ray(direction, row_delta)

    if row_delta == 2 and col_delta == 1:
        match (going_down, going_left):
            case (True, True):
                variant = KnightDirection.DOWN_LEFT
            case (True, False):
                variant = KnightDirection.DOWN_RIGHT
            case (False, True):
                variant = KnightDirection.UP_LEFT
            case _:
                variant = KnightDirection.UP_RIGHT
        return KnightJump(variant)

    if row_delta == 1 and col_delta == 2:
        match (going_left, going_down):
            case (True, True):
                variant = KnightDirection.LEFT_DOWN
            case (True, False):
                variant = KnightDirection.LEFT_UP
            case (False, True):
                variant = KnightDirection.RIGHT_DOWN
            case _:
                variant = KnightDirection.RIGHT_UP
        return KnightJump(variant)

    return None


def iter_squares(order: SquareOrder = SquareOrder.COLUMN_MAJOR) -> Iterator[Square]:
    """Yield all 64 squares in a deterministic order."""
    for outer in range(BOARD_SIZE):
        for inner in range(BOARD_SIZE):
            if order == SquareOrder.COLUMN_MAJOR:
                yield Square(inner, outer)
            else:
                yield Square(outer, inner)
