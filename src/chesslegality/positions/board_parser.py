"""Board string parser for custom positions."""

from chesslegality.game.board import Board
from chesslegality.game.geometry import BOARD_SIZE
from chesslegality.game.pieces import Piece, PieceType, Side

PIECE_TYPE_MAP = {
    "P": PieceType.PAWN,
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}

SIDE_MAP = {
    "1": Side.FIRST,
    "2": Side.SECOND,
}

EMPTY_CELL = "00"


def parse_board_string(board_str: str, to_move: Side = Side.FIRST) -> Board:
    """Parse a board string into a Board object.

    Board string format:
        - 8 rows, the first line is row 7 and the last line row 0
        - Each square = 2 characters: piece type + side number
        - "00" = empty square
        - Piece types: P (pawn), N (knight), B (bishop), R (rook), Q (queen), K (king)
        - Sides: 1 (first to move), 2 (second)

    Args:
        board_str: Multi-line string with 2 chars per square
        to_move: Side to move in the resulting position

    Returns:
        Board object with pieces placed

    Raises:
        ValueError: If the board string format is invalid
    """
    lines = [line.strip() for line in board_str.strip().splitlines() if line.strip()]

    if len(lines) != BOARD_SIZE:
        raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(lines)}")

    board = Board.create_empty(to_move)

    for index, line in enumerate(lines):
        row = BOARD_SIZE - 1 - index
        if len(line) != BOARD_SIZE * 2:
            raise ValueError(
                f"Row {row} has wrong length: {len(line)}, expected {BOARD_SIZE * 2}"
            )

        for col in range(BOARD_SIZE):
            cell = line[col * 2 : col * 2 + 2]
            if cell == EMPTY_CELL:
                continue

            piece_type_char = cell[0]
            side_char = cell[1]

            if piece_type_char not in PIECE_TYPE_MAP:
                raise ValueError(f"Unknown piece type: {piece_type_char}")
            if side_char not in SIDE_MAP:
                raise ValueError(f"Invalid side number: {side_char}")

            board.add_piece(
                Piece.create(PIECE_TYPE_MAP[piece_type_char], row=row, col=col),
                SIDE_MAP[side_char],
            )

    return board


def board_to_string(board: Board) -> str:
    """Render a board in the format read by parse_board_string."""
    cells = [[EMPTY_CELL] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for side_char, side in SIDE_MAP.items():
        for piece in board.pieces_for(side):
            cells[piece.row][piece.col] = f"{piece.type.value}{side_char}"

    return "\n".join("".join(cells[row]) for row in reversed(range(BOARD_SIZE)))
