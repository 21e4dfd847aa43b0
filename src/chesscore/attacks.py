"""Precomputed, occupancy-independent attack tables.

Tables are built once at import and stored as tuples:

- ``KNIGHT_ATTACKS[sq]`` and ``KING_ATTACKS[sq]``
- ``PAWN_ATTACKS[side][sq]``: diagonal capture squares only
- ``PAWN_PUSHES[side][sq]``: the single-step push square (empty on the last rank)
- ``BETWEEN[a][b]``: squares strictly between two aligned squares
- ``LINE[a][b]``: the whole rank, file or diagonal through two aligned squares

Sliding attacks that depend on occupancy live in :mod:`chesscore.sliding`.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .pieces import BLACK, WHITE


KNIGHT_DELTAS = ((-1, 2), (1, 2), (-2, 1), (2, 1), (-2, -1), (2, -1), (-1, -2), (1, -2))
KING_DELTAS = ((-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), (-1, 1), (0, 1), (1, 1))
ROOK_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP_DIRECTIONS = ((1, 1), (-1, 1), (1, -1), (-1, -1))
QUEEN_DIRECTIONS = ROOK_DIRECTIONS + BISHOP_DIRECTIONS


def _on_board(file_idx: int, rank_idx: int) -> bool:
    return 0 <= file_idx < 8 and 0 <= rank_idx < 8


def _step_table(deltas: Sequence[Tuple[int, int]]) -> Tuple[int, ...]:
    table: List[int] = []
    for sq in range(64):
        f, r = sq % 8, sq // 8
        mask = 0
        for df, dr in deltas:
            tf, tr = f + df, r + dr
            if _on_board(tf, tr):
                mask |= 1 << (tr * 8 + tf)
        table.append(mask)
    return tuple(table)


def _ray_tables() -> Tuple[Tuple[Tuple[int, ...], ...], Tuple[Tuple[int, ...], ...]]:
    between = [[0] * 64 for _ in range(64)]
    line = [[0] * 64 for _ in range(64)]
    for sq in range(64):
        f, r = sq % 8, sq // 8
        for df, dr in QUEEN_DIRECTIONS:
            # Full line: both half-rays plus the origin
            full = 1 << sq
            for sign in (1, -1):
                tf, tr = f + sign * df, r + sign * dr
                while _on_board(tf, tr):
                    full |= 1 << (tr * 8 + tf)
                    tf += sign * df
                    tr += sign * dr
            path = 0
            tf, tr = f + df, r + dr
            while _on_board(tf, tr):
                to = tr * 8 + tf
                between[sq][to] = path
                line[sq][to] = full
                path |= 1 << to
                tf += df
                tr += dr
    return tuple(tuple(row) for row in between), tuple(tuple(row) for row in line)


KNIGHT_ATTACKS = _step_table(KNIGHT_DELTAS)
KING_ATTACKS = _step_table(KING_DELTAS)
PAWN_ATTACKS = (
    _step_table(((-1, 1), (1, 1))),  # WHITE
    _step_table(((-1, -1), (1, -1))),  # BLACK
)
PAWN_PUSHES = (
    _step_table(((0, 1),)),
    _step_table(((0, -1),)),
)
BETWEEN, LINE = _ray_tables()


def knight_attacks(sq: int) -> int:
    return KNIGHT_ATTACKS[sq]


def king_attacks(sq: int) -> int:
    return KING_ATTACKS[sq]


def pawn_attacks(side: int, sq: int) -> int:
    """Return the squares a pawn of ``side`` on ``sq`` captures on."""
    if side not in (WHITE, BLACK):
        raise ValueError(f"invalid side: {side!r}")
    return PAWN_ATTACKS[side][sq]


def between(a: int, b: int) -> int:
    return BETWEEN[a][b]


def line(a: int, b: int) -> int:
    return LINE[a][b]
