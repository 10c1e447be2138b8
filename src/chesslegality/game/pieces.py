"""Piece and side definitions."""

from dataclasses import dataclass
from enum import Enum

from chesslegality.game.geometry import Direction, Square


class PieceType(Enum):
    """Chess piece types."""

    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value


class Side(Enum):
    """The two sides. FIRST moves first and starts on rows 0-1."""

    FIRST = "first"
    SECOND = "second"

    @property
    def opponent(self) -> "Side":
        return Side.SECOND if self == Side.FIRST else Side.FIRST

    @property
    def forward(self) -> Direction:
        """Direction this side's pawns advance in."""
        return Direction.UP if self == Side.FIRST else Direction.DOWN

    @property
    def forward_diagonals(self) -> tuple[Direction, Direction]:
        """Directions this side's pawns capture in."""
        if self == Side.FIRST:
            return (Direction.UP_LEFT, Direction.UP_RIGHT)
        return (Direction.DOWN_LEFT, Direction.DOWN_RIGHT)

    @property
    def pawn_start_row(self) -> int:
        return 1 if self == Side.FIRST else 6

    @property
    def back_row(self) -> int:
        return 0 if self == Side.FIRST else 7


@dataclass
class Piece:
    """A piece on the board.

    The side a piece belongs to is the Board collection that holds it, not
    a field of the piece.

    Attributes:
        type: Type of piece (pawn, knight, etc.)
        row: Current row
        col: Current column
    """

    type: PieceType
    row: int
    col: int

    @classmethod
    def create(cls, piece_type: PieceType, row: int, col: int) -> "Piece":
        """Create a piece, rejecting off-board coordinates."""
        square = Square(row, col)
        return cls(type=piece_type, row=square.row, col=square.col)

    @property
    def square(self) -> Square:
        return Square(self.row, self.col)

    def relocate(self, square: Square) -> None:
        """Move the piece to ``square`` in place."""
        self.row = square.row
        self.col = square.col

    def copy(self) -> "Piece":
        """Create a copy of this piece."""
        return Piece(type=self.type, row=self.row, col=self.col)
