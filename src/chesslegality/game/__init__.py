"""Move legality engine."""

from chesslegality.game.geometry import (
    Direction,
    KnightDirection,
    KnightJump,
    Movement,
    Ray,
    Square,
    SquareOrder,
    classify,
    iter_squares,
)
from chesslegality.game.pieces import Piece, PieceType, Side
from chesslegality.game.board import Board
from chesslegality.game.rules import is_pawn_in_start_position, is_shape_legal
from chesslegality.game.moves import (
    MoveOutcome,
    is_path_blocked,
    suggest_moves,
    validate_move,
)
from chesslegality.game.engine import GameEngine, MoveResult

__all__ = [
    # Geometry
    "Direction",
    "KnightDirection",
    "KnightJump",
    "Movement",
    "Ray",
    "Square",
    "SquareOrder",
    "classify",
    "iter_squares",
    # Pieces
    "Piece",
    "PieceType",
    "Side",
    # Board
    "Board",
    # Rules
    "is_pawn_in_start_position",
    "is_shape_legal",
    # Moves
    "MoveOutcome",
    "is_path_blocked",
    "suggest_moves",
    "validate_move",
    # Engine
    "GameEngine",
    "MoveResult",
]
