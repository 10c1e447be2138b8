"""Per-piece move shape rules.

These predicates only look at geometry. Occupancy, friendly fire and
obstruction are checked by the query engine in ``moves``.
"""

from collections.abc import Callable

from chesslegality.game.geometry import KnightJump, Ray, Square, classify
from chesslegality.game.pieces import Piece, PieceType, Side

ShapeRule = Callable[[Piece, Square, Side], bool]


def is_pawn_in_start_position(piece: Piece, side: Side) -> bool:
    """Check if a pawn sits on ``side``'s initial pawn rank."""
    return piece.row == side.pawn_start_row


def _is_valid_king_move(piece: Piece, end: Square, side: Side) -> bool:
    match classify(piece.square, end):
        case Ray(distance=1):
            return True
        case _:
            return False


def _is_valid_queen_move(piece: Piece, end: Square, side: Side) -> bool:
    return isinstance(classify(piece.square, end), Ray)


def _is_valid_rook_move(piece: Piece, end: Square, side: Side) -> bool:
    movement = classify(piece.square, end)
    return isinstance(movement, Ray) and movement.direction.is_straight


def _is_valid_bishop_move(piece: Piece, end: Square, side: Side) -> bool:
    movement = classify(piece.square, end)
    return isinstance(movement, Ray) and movement.direction.is_diagonal


def _is_valid_knight_move(piece: Piece, end: Square, side: Side) -> bool:
    return isinstance(classify(piece.square, end), KnightJump)


def _is_valid_pawn_move(piece: Piece, end: Square, side: Side) -> bool:
    """Check pawn shape for ``side``.

    Pawns may:
    - Advance 1 square, or 2 from the starting rank
    - Step 1 square diagonally forward (whether a capture target is present
      is decided by the caller)
    """
    movement = classify(piece.square, end)
    if not isinstance(movement, Ray):
        return False

    if movement.direction == side.forward:
        if movement.distance == 1:
            return True
        return movement.distance == 2 and is_pawn_in_start_position(piece, side)

    if movement.direction in side.forward_diagonals:
        return movement.distance == 1

    return False


SHAPE_RULES: dict[PieceType, ShapeRule] = {
    PieceType.KING: _is_valid_king_move,
    PieceType.QUEEN: _is_valid_queen_move,
    PieceType.ROOK: _is_valid_rook_move,
    PieceType.BISHOP: _is_valid_bishop_move,
    PieceType.KNIGHT: _is_valid_knight_move,
    PieceType.PAWN: _is_valid_pawn_move,
}


def is_shape_legal(piece: Piece, end: Square, side: Side) -> bool:
    """Check whether moving ``piece`` to ``end`` has a shape its type allows.

    Args:
        piece: The piece to move
        end: Destination square
        side: Side making the move (decides pawn direction and start rank)

    Returns:
        True if the geometry is permitted for the piece type
    """
    return SHAPE_RULES[piece.type](piece, end, side)
