"""Core game engine.

State is mutated in place. Use Board.copy() if you need to preserve a
position (e.g., to try a move without committing to it).
"""

import logging
from dataclasses import dataclass

from chesslegality.game.board import Board
from chesslegality.game.geometry import Square, SquareOrder
from chesslegality.game.moves import MoveOutcome, suggest_moves, validate_move
from chesslegality.game.pieces import Piece, Side
from chesslegality.settings import get_settings

logger = logging.getLogger(__name__)

PIECE_NOT_FOUND = "piece_not_found"

_OUTCOME_MESSAGES = {
    MoveOutcome.SAME_SQUARE: "Piece is already on that square",
    MoveOutcome.FRIENDLY_FIRE: "Destination is occupied by your own piece",
    MoveOutcome.SHAPE_ILLEGAL: "This piece cannot move that way",
    MoveOutcome.BLOCKED: "Another piece is in the way",
}


@dataclass
class MoveResult:
    """Result of attempting to make a move."""

    success: bool
    outcome: MoveOutcome | None = None
    error: str | None = None
    message: str | None = None
    move_data: dict | None = None


class GameEngine:
    """Entry points for playing moves on a Board.

    All methods are static and mutate the board in place. The turn is never
    advanced implicitly; call swap_turn() once a move has been accepted.
    """

    @staticmethod
    def create_game() -> Board:
        """Create a board in the standard starting position, first side to move."""
        return Board.create_standard()

    @staticmethod
    def validate_move(board: Board, piece: Piece, end: Square) -> MoveOutcome:
        """Validate a move without applying it."""
        outcome = validate_move(board, piece, end)
        if outcome != MoveOutcome.LEGAL:
            logger.debug(
                f"Move {piece.type} {piece.square.as_tuple()} -> {end.as_tuple()} "
                f"rejected: {outcome.value}"
            )
        return outcome

    @staticmethod
    def apply_move(board: Board, piece: Piece, end: Square) -> MoveResult:
        """Attempt to move ``piece`` to ``end``.

        The piece must belong to the side to move. On success it is relocated
        in place; on failure nothing on the board changes.

        Args:
            board: Current board state
            piece: The piece to move (an object held by the board)
            end: Destination square

        Returns:
            MoveResult indicating success or failure
        """
        if board.owner_of(piece) != board.to_move:
            logger.debug(
                f"Piece {piece.type} at {piece.square.as_tuple()} "
                f"not found for {board.to_move.value}"
            )
            return MoveResult(
                success=False,
                error=PIECE_NOT_FOUND,
                message="Piece not found among the pieces of the side to move",
            )

        outcome = GameEngine.validate_move(board, piece, end)
        if outcome != MoveOutcome.LEGAL:
            return MoveResult(
                success=False,
                outcome=outcome,
                error=outcome.value,
                message=_OUTCOME_MESSAGES[outcome],
            )

        start = piece.square
        piece.relocate(end)
        logger.info(
            f"{board.to_move.value} moved {piece.type} {start.as_tuple()} -> {end.as_tuple()}"
        )

        return MoveResult(
            success=True,
            outcome=outcome,
            move_data={
                "piece": str(piece.type),
                "from": start.as_tuple(),
                "to": end.as_tuple(),
            },
        )

    @staticmethod
    def suggest_moves(board: Board, piece: Piece) -> list[Square]:
        """List legal destinations for ``piece`` using the configured options."""
        settings = get_settings()
        return suggest_moves(
            board,
            piece,
            order=SquareOrder(settings.suggestion_order),
            require_pawn_capture=settings.require_pawn_capture,
        )

    @staticmethod
    def swap_turn(board: Board) -> Side:
        """Hand the move to the other side."""
        return board.swap_turn()
