"""Move validation, path obstruction and move suggestion."""

import logging
from enum import Enum

from chesslegality.game.board import Board
from chesslegality.game.geometry import Ray, Square, SquareOrder, classify, iter_squares
from chesslegality.game.pieces import Piece, PieceType
from chesslegality.game.rules import is_shape_legal

logger = logging.getLogger(__name__)


class MoveOutcome(Enum):
    """Result of validating a move. Checked in declaration order."""

    LEGAL = "legal"
    SAME_SQUARE = "same_square"
    FRIENDLY_FIRE = "friendly_fire"
    SHAPE_ILLEGAL = "shape_illegal"
    BLOCKED = "blocked"


def validate_move(board: Board, piece: Piece, end: Square) -> MoveOutcome:
    """Validate moving ``piece`` to ``end`` for the side to move.

    Checks run in a fixed order so that e.g. a move onto the piece's own
    square is always reported as SAME_SQUARE, never as BLOCKED.

    Args:
        board: Current board state
        piece: The piece to move
        end: Destination square

    Returns:
        MoveOutcome.LEGAL, or the first failed check
    """
    if piece.row == end.row and piece.col == end.col:
        return MoveOutcome.SAME_SQUARE

    if is_friendly_fire(board, end):
        return MoveOutcome.FRIENDLY_FIRE

    if not is_shape_legal(piece, end, board.to_move):
        return MoveOutcome.SHAPE_ILLEGAL

    if is_path_blocked(board, piece, end):
        return MoveOutcome.BLOCKED

    return MoveOutcome.LEGAL


def is_friendly_fire(board: Board, end: Square) -> bool:
    """Check if ``end`` holds a piece of the side to move."""
    return any(
        p.row == end.row and p.col == end.col for p in board.pieces_for(board.to_move)
    )


def is_path_blocked(board: Board, piece: Piece, end: Square) -> bool:
    """Check if another piece stands strictly between the piece and ``end``.

    Rather than walking the squares of the path, every other piece is
    classified from the origin. A piece blocks when it lies on the same ray
    as the move, strictly nearer than ``end``, and on a square the moving
    piece could itself reach by shape. Knight jumps are never blocked.
    """
    start = piece.square
    movement = classify(start, end)
    if not isinstance(movement, Ray):
        return False

    for other in board.all_pieces():
        if other.row == start.row and other.col == start.col:
            continue

        other_square = other.square
        if not is_shape_legal(piece, other_square, board.to_move):
            continue

        candidate = classify(start, other_square)
        if (
            isinstance(candidate, Ray)
            and candidate.direction == movement.direction
            and candidate.distance < movement.distance
        ):
            logger.debug(
                f"{piece.type} {start.as_tuple()} -> {end.as_tuple()} "
                f"blocked by {other.type} at {other_square.as_tuple()}"
            )
            return True

    return False


def _is_pawn_capture(piece: Piece, end: Square) -> bool:
    return piece.type == PieceType.PAWN and end.col != piece.col


def suggest_moves(
    board: Board,
    piece: Piece,
    *,
    order: SquareOrder = SquareOrder.COLUMN_MAJOR,
    require_pawn_capture: bool = True,
) -> list[Square]:
    """List every square ``piece`` can legally move to.

    Args:
        board: Current board state
        piece: The piece to move
        order: Order in which squares are visited (and returned)
        require_pawn_capture: Only keep diagonal pawn moves that land on an
            opposing piece

    Returns:
        Destination squares for which validate_move returns LEGAL
    """
    opponents = board.pieces_for(board.to_move.opponent)
    suggestions: list[Square] = []

    for square in iter_squares(order):
        if validate_move(board, piece, square) != MoveOutcome.LEGAL:
            continue

        if require_pawn_capture and _is_pawn_capture(piece, square):
            if not any(p.row == square.row and p.col == square.col for p in opponents):
                continue

        suggestions.append(square)

    return suggestions
