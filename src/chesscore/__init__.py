"""Bitboard chess core: attack tables, magic lookups, board state and move generation."""

from .board import Board, Undo
from .errors import (
    ChessCoreError,
    EmptyBitboardError,
    IllegalMoveError,
    InvalidPositionError,
    InvalidSquareError,
    MagicSearchError,
    MalformedMoveError,
)
from .game import Game
from .move import Move, UciMove, parse_uci
from .movegen import (
    is_checkmate,
    is_in_check,
    is_stalemate,
    legal_captures,
    legal_moves,
    legal_moves_matching,
    move_from_uci,
)
from .perft import divide, perft
from .pieces import BLACK, WHITE
from .sliding import SlidingAttackTables, default_tables
from .squares import square_to_str, str_to_square

__version__ = "0.1.0"

__all__ = [
    "BLACK",
    "Board",
    "ChessCoreError",
    "EmptyBitboardError",
    "Game",
    "IllegalMoveError",
    "InvalidPositionError",
    "InvalidSquareError",
    "MagicSearchError",
    "MalformedMoveError",
    "Move",
    "SlidingAttackTables",
    "UciMove",
    "Undo",
    "WHITE",
    "default_tables",
    "divide",
    "is_checkmate",
    "is_in_check",
    "is_stalemate",
    "legal_captures",
    "legal_moves",
    "legal_moves_matching",
    "move_from_uci",
    "parse_uci",
    "perft",
    "square_to_str",
    "str_to_square",
]
