from __future__ import annotations

from typing import Dict

from .board import Board
from .movegen import legal_moves


def perft(board: Board, depth: int) -> int:
    """Compute the perft node count for ``board`` at ``depth``.

    Definition:
    - depth == 0 returns 1 (the current node).
    - depth > 0 returns the sum over all legal child positions' perft(depth-1).

    Moves are made and unmade in place; ``board`` is restored on return.
    Leaf counts at depth 1 use the legal move list length directly.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return 1
    moves = legal_moves(board)
    if depth == 1:
        return len(moves)
    nodes = 0
    for m in moves:
        undo = board.make_move_unchecked(m)
        nodes += perft(board, depth - 1)
        board.unmake_move(m, undo)
    return nodes


def divide(board: Board, depth: int) -> Dict[str, int]:
    """Return perft(depth - 1) below each legal root move, keyed by UCI text."""
    if depth < 1:
        raise ValueError("depth must be >= 1")
    out: Dict[str, int] = {}
    for m in legal_moves(board):
        undo = board.make_move_unchecked(m)
        out[m.to_uci()] = perft(board, depth - 1)
        board.unmake_move(m, undo)
    return out
