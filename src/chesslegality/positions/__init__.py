"""Custom positions in text form."""

from chesslegality.positions.board_parser import (
    PIECE_TYPE_MAP,
    board_to_string,
    parse_board_string,
)

__all__ = [
    "PIECE_TYPE_MAP",
    "board_to_string",
    "parse_board_string",
]
