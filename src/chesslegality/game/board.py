"""Board state: the pieces of each side and the side to move."""

import logging
from dataclasses import dataclass, field

from chesslegality.game.geometry import Square
from chesslegality.game.pieces import Piece, PieceType, Side

logger = logging.getLogger(__name__)


# Standard initial board setup
# Row 0: First side back row
# Row 1: First side pawns
# Row 6: Second side pawns
# Row 7: Second side back row
STANDARD_BACK_ROW = [
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
]


@dataclass
class Board:
    """Chess board with pieces.

    A square is assumed to hold at most one piece across both collections;
    the board does not enforce it.

    Attributes:
        first: Pieces of the side that moves first
        second: Pieces of the other side
        to_move: Side whose turn it is
    """

    first: list[Piece] = field(default_factory=list)
    second: list[Piece] = field(default_factory=list)
    to_move: Side = Side.FIRST

    @classmethod
    def create_standard(cls) -> "Board":
        """Create a standard 8x8 chess board with initial piece positions."""
        first: list[Piece] = []
        for col, piece_type in enumerate(STANDARD_BACK_ROW):
            first.append(Piece.create(piece_type, row=Side.FIRST.back_row, col=col))
        for col in range(8):
            first.append(Piece.create(PieceType.PAWN, row=Side.FIRST.pawn_start_row, col=col))

        # Second side mirrors the first across the middle of the board
        second = [Piece.create(p.type, row=7 - p.row, col=p.col) for p in first]

        return cls(first=first, second=second, to_move=Side.FIRST)

    @classmethod
    def create_empty(cls, to_move: Side = Side.FIRST) -> "Board":
        """Create an empty board (useful for tests and custom positions)."""
        return cls(first=[], second=[], to_move=to_move)

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(
            first=[p.copy() for p in self.first],
            second=[p.copy() for p in self.second],
            to_move=self.to_move,
        )

    def pieces_for(self, side: Side) -> list[Piece]:
        """Get the collection holding ``side``'s pieces."""
        return self.first if side == Side.FIRST else self.second

    def all_pieces(self) -> list[Piece]:
        """Get every piece on the board, first side's pieces first."""
        return [*self.first, *self.second]

    def get_piece_at(self, square: Square) -> Piece | None:
        """Get the piece standing on ``square``."""
        for piece in self.all_pieces():
            if piece.row == square.row and piece.col == square.col:
                return piece
        return None

    def get_side_at(self, square: Square) -> Side | None:
        """Get the side whose piece stands on ``square``."""
        for side in Side:
            for piece in self.pieces_for(side):
                if piece.row == square.row and piece.col == square.col:
                    return side
        return None

    def owner_of(self, piece: Piece) -> Side | None:
        """Get the side whose collection holds this exact piece object."""
        for side in Side:
            if any(p is piece for p in self.pieces_for(side)):
                return side
        return None

    def add_piece(self, piece: Piece, side: Side) -> None:
        """Add a piece to a side's collection."""
        self.pieces_for(side).append(piece)

    def remove_piece(self, piece: Piece) -> bool:
        """Remove a piece from the board. Returns True if found and removed."""
        for side in Side:
            pieces = self.pieces_for(side)
            for i, p in enumerate(pieces):
                if p is piece:
                    del pieces[i]
                    return True
        return False

    def swap_turn(self) -> Side:
        """Hand the move to the other side and return the new side to move."""
        self.to_move = self.to_move.opponent
        logger.debug(f"Turn passed to {self.to_move.value}")
        return self.to_move
