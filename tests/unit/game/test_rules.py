"""Tests for per-piece move shape rules."""

import pytest

from chesslegality.game.geometry import Square, iter_squares
from chesslegality.game.pieces import Piece, PieceType, Side
from chesslegality.game.rules import SHAPE_RULES, is_pawn_in_start_position, is_shape_legal


def _legal_targets(piece: Piece, side: Side = Side.FIRST) -> set[tuple[int, int]]:
    return {
        square.as_tuple()
        for square in iter_squares()
        if square != piece.square and is_shape_legal(piece, square, side)
    }


class TestShapeRuleTable:
    def test_every_piece_type_has_a_rule(self):
        assert set(SHAPE_RULES) == set(PieceType)


class TestPawnShape:
    """Tests for pawn movement shape."""

    def test_first_side_steps(self):
        """Test forward and forward-diagonal single steps for the first side."""
        for row in range(1, 7):
            for col in range(1, 7):
                pawn = Piece.create(PieceType.PAWN, row=row, col=col)
                for end in [
                    Square(row + 1, col),
                    Square(row + 1, col - 1),
                    Square(row + 1, col + 1),
                ]:
                    assert is_shape_legal(pawn, end, Side.FIRST), (pawn, end)

    def test_second_side_steps(self):
        """Test forward and forward-diagonal single steps for the second side."""
        for row in range(1, 7):
            for col in range(1, 7):
                pawn = Piece.create(PieceType.PAWN, row=row, col=col)
                for end in [
                    Square(row - 1, col),
                    Square(row - 1, col - 1),
                    Square(row - 1, col + 1),
                ]:
                    assert is_shape_legal(pawn, end, Side.SECOND), (pawn, end)

    def test_double_step_from_start(self):
        """Test pawns may advance two squares from their starting rank only."""
        first = Piece.create(PieceType.PAWN, row=1, col=0)
        second = Piece.create(PieceType.PAWN, row=6, col=0)

        assert is_shape_legal(first, Square(3, 0), Side.FIRST)
        assert is_shape_legal(second, Square(4, 0), Side.SECOND)

        moved = Piece.create(PieceType.PAWN, row=2, col=0)
        assert not is_shape_legal(moved, Square(4, 0), Side.FIRST)

    def test_never_three_squares(self):
        pawn = Piece.create(PieceType.PAWN, row=1, col=4)
        assert not is_shape_legal(pawn, Square(4, 4), Side.FIRST)

    def test_backward_and_sideways_invalid(self):
        """Test pawns cannot move backward, sideways or backward-diagonally."""
        pawn = Piece.create(PieceType.PAWN, row=4, col=4)

        assert not is_shape_legal(pawn, Square(3, 4), Side.FIRST)
        assert not is_shape_legal(pawn, Square(4, 5), Side.FIRST)
        assert not is_shape_legal(pawn, Square(3, 3), Side.FIRST)
        assert not is_shape_legal(pawn, Square(5, 4), Side.SECOND)

    def test_long_diagonal_invalid(self):
        pawn = Piece.create(PieceType.PAWN, row=1, col=2)
        assert not is_shape_legal(pawn, Square(3, 4), Side.FIRST)

    def test_direction_follows_moving_side(self):
        """Test the side passed in, not the square, decides pawn direction."""
        pawn = Piece.create(PieceType.PAWN, row=6, col=3)

        assert _legal_targets(pawn, Side.SECOND) == {(5, 3), (4, 3), (5, 2), (5, 4)}
        assert _legal_targets(pawn, Side.FIRST) == {(7, 3), (7, 2), (7, 4)}

    def test_is_pawn_in_start_position(self):
        """Test start rank detection for both sides."""
        for row in range(8):
            for col in range(8):
                pawn = Piece.create(PieceType.PAWN, row=row, col=col)
                assert is_pawn_in_start_position(pawn, Side.FIRST) == (row == 1)
                assert is_pawn_in_start_position(pawn, Side.SECOND) == (row == 6)


class TestSlidingShapes:
    """Tests for bishop, rook and queen shapes."""

    def test_bishop_move(self):
        for row in range(1, 7):
            for col in range(1, 7):
                bishop = Piece.create(PieceType.BISHOP, row=row, col=col)
                for end in [
                    Square(row + 1, col - 1),
                    Square(row + 1, col + 1),
                    Square(row - 1, col - 1),
                    Square(row - 1, col + 1),
                ]:
                    assert is_shape_legal(bishop, end, Side.FIRST), (bishop, end)

    def test_bishop_not_straight(self):
        bishop = Piece.create(PieceType.BISHOP, row=4, col=4)
        assert not is_shape_legal(bishop, Square(4, 7), Side.FIRST)
        assert not is_shape_legal(bishop, Square(0, 4), Side.FIRST)

    def test_rook_move(self):
        for row in range(1, 7):
            for col in range(1, 7):
                rook = Piece.create(PieceType.ROOK, row=row, col=col)
                for end in [
                    Square(row + 1, col),
                    Square(row - 1, col),
                    Square(row, col - 1),
                    Square(row, col + 1),
                ]:
                    assert is_shape_legal(rook, end, Side.FIRST), (rook, end)

    def test_rook_not_diagonal(self):
        rook = Piece.create(PieceType.ROOK, row=4, col=4)
        assert not is_shape_legal(rook, Square(5, 5), Side.FIRST)

    def test_queen_reach(self):
        """Test a cornered queen reaches its rank, file and diagonal."""
        queen = Piece.create(PieceType.QUEEN, row=0, col=0)

        targets = _legal_targets(queen)

        assert len(targets) == 21
        assert (7, 7) in targets
        assert (2, 1) not in targets

    def test_shapes_independent_of_side(self):
        rook = Piece.create(PieceType.ROOK, row=3, col=3)
        assert _legal_targets(rook, Side.FIRST) == _legal_targets(rook, Side.SECOND)


class TestKnightShape:
    def test_knight_move(self):
        for row in range(2, 6):
            for col in range(2, 6):
                knight = Piece.create(PieceType.KNIGHT, row=row, col=col)
                for row_offset, col_offset in [
                    (2, -1), (2, 1), (-2, -1), (-2, 1),
                    (-1, -2), (-1, 2), (1, -2), (1, 2),
                ]:
                    end = Square(row + row_offset, col + col_offset)
                    assert is_shape_legal(knight, end, Side.FIRST), (knight, end)

    def test_knight_rejects_rays(self):
        knight = Piece.create(PieceType.KNIGHT, row=4, col=4)
        assert _legal_targets(knight) == {
            (6, 5), (6, 3), (2, 5), (2, 3), (5, 6), (3, 6), (5, 2), (3, 2),
        }


class TestKingShape:
    def test_king_move(self):
        for row in range(1, 7):
            for col in range(1, 7):
                king = Piece.create(PieceType.KING, row=row, col=col)
                targets = _legal_targets(king)
                assert len(targets) == 8
                assert all(
                    max(abs(r - row), abs(c - col)) == 1 for r, c in targets
                )

    @pytest.mark.parametrize("end", [Square(6, 5), Square(4, 6), Square(6, 6)])
    def test_king_rejects_longer_moves(self, end):
        """Test knight jumps and two-square rays are not king moves."""
        king = Piece.create(PieceType.KING, row=4, col=4)
        assert not is_shape_legal(king, end, Side.FIRST)
