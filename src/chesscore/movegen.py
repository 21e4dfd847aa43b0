"""Pseudo-legal and legal move generation.

Generation produces every move consistent with piece movement for the side
to move; legality filtering then drops the moves that leave the mover's king
attacked:

- king moves: the destination must be safe with the king lifted off the
  board, so it cannot hide behind itself on a slider's line;
- en passant, and any move while in check: verified by make/unmake;
- pinned pieces: only along the line through king and pinner;
- everything else is legal as generated.

No move order is guaranteed.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from .attacks import BETWEEN, KING_ATTACKS, KNIGHT_ATTACKS, LINE, PAWN_ATTACKS, PAWN_PUSHES
from .bitboard import FULL, MASK64, RANK_1, RANK_2, RANK_7, RANK_8
from .board import (
    BLACK_KINGSIDE,
    BLACK_QUEENSIDE,
    WHITE_KINGSIDE,
    WHITE_QUEENSIDE,
    Board,
)
from .errors import IllegalMoveError
from .move import (
    CAPTURE,
    CASTLE,
    CASTLE_KINGSIDE,
    CASTLE_QUEENSIDE,
    DOUBLE_PUSH,
    EN_PASSANT,
    PROMOTION,
    QUIET,
    Move,
    parse_uci,
)
from .pieces import BISHOP, KING, KNIGHT, PAWN, PROMOTION_KINDS, QUEEN, ROOK, WHITE
from .sliding import default_tables
from .squares import B1, B8, C1, C8, D1, D8, E1, E8, F1, F8, G1, G8


# (right, king from, king to, squares that must be empty, squares that must be safe, flag)
CASTLING_PATHS = (
    (
        (WHITE_KINGSIDE, E1, G1, (1 << F1) | (1 << G1), (E1, F1, G1), CASTLE_KINGSIDE),
        (
            WHITE_QUEENSIDE,
            E1,
            C1,
            (1 << B1) | (1 << C1) | (1 << D1),
            (E1, D1, C1),
            CASTLE_QUEENSIDE,
        ),
    ),
    (
        (BLACK_KINGSIDE, E8, G8, (1 << F8) | (1 << G8), (E8, F8, G8), CASTLE_KINGSIDE),
        (
            BLACK_QUEENSIDE,
            E8,
            C8,
            (1 << B8) | (1 << C8) | (1 << D8),
            (E8, D8, C8),
            CASTLE_QUEENSIDE,
        ),
    ),
)


def _add_promotions(append: Callable[[Move], None], fr: int, to: int, flags: int) -> None:
    for kind in PROMOTION_KINDS:
        append(Move(fr, to, flags, kind))


def _add_targets(append: Callable[[Move], None], fr: int, dests: int, opp: int) -> None:
    while dests:
        low = dests & -dests
        append(Move(fr, low.bit_length() - 1, CAPTURE if low & opp else QUIET))
        dests ^= low


def generate_pseudo_legal(board: Board, targets: int = FULL, origins: int = FULL) -> List[Move]:
    """Return pseudo-legal moves for the side to move.

    Args:
        board (Board): Position to generate from.
        targets (int): Only moves whose destination is in this set.
        origins (int): Only moves whose origin is in this set.

    Returns:
        List[Move]: Moves consistent with piece movement. Castling is only
            offered when the right is held, the path is empty and the king's
            square, transit and landing squares are not attacked; other moves
            may still leave the king in check.
    """
    moves: List[Move] = []
    append = moves.append
    us = board.side_to_move
    them = us ^ 1
    bb = board.bb
    own = board.occ[us]
    opp = board.occ[them]
    occ_all = own | opp
    empty = ~occ_all & MASK64
    base = us * 6
    tables = default_tables()
    not_own_targets = targets & ~own & MASK64

    # Pawns
    pawns = bb[base + PAWN] & origins
    if pawns:
        pushes = PAWN_PUSHES[us]
        caps = PAWN_ATTACKS[us]
        if us == WHITE:
            forward, start_rank, last_rank = 8, RANK_2, RANK_8
        else:
            forward, start_rank, last_rank = -8, RANK_7, RANK_1
        capture_targets = targets & opp
        ep = board.ep_square
        ep_bit = (1 << ep) & targets if ep is not None else 0
        while pawns:
            low = pawns & -pawns
            fr = low.bit_length() - 1
            pawns ^= low
            one = pushes[fr] & empty
            if one:
                to = fr + forward
                if one & targets:
                    if one & last_rank:
                        _add_promotions(append, fr, to, PROMOTION)
                    else:
                        append(Move(fr, to))
                if low & start_rank and pushes[to] & empty & targets:
                    append(Move(fr, to + forward, DOUBLE_PUSH))
            hits = caps[fr] & capture_targets
            while hits:
                hit = hits & -hits
                to = hit.bit_length() - 1
                if hit & last_rank:
                    _add_promotions(append, fr, to, CAPTURE | PROMOTION)
                else:
                    append(Move(fr, to, CAPTURE))
                hits ^= hit
            if caps[fr] & ep_bit:
                append(Move(fr, ep, CAPTURE | EN_PASSANT))

    # Knights
    knights = bb[base + KNIGHT] & origins
    while knights:
        low = knights & -knights
        fr = low.bit_length() - 1
        _add_targets(append, fr, KNIGHT_ATTACKS[fr] & not_own_targets, opp)
        knights ^= low

    # Bishops, rooks, queens
    for kind, lookup in (
        (BISHOP, tables.bishop_attacks),
        (ROOK, tables.rook_attacks),
        (QUEEN, tables.queen_attacks),
    ):
        sliders = bb[base + kind] & origins
        while sliders:
            low = sliders & -sliders
            fr = low.bit_length() - 1
            _add_targets(append, fr, lookup(fr, occ_all) & not_own_targets, opp)
            sliders ^= low

    # King, including castling
    king = bb[base + KING] & origins
    if king:
        fr = king.bit_length() - 1
        _add_targets(append, fr, KING_ATTACKS[fr] & not_own_targets, opp)
        if board.castling:
            for right, king_from, king_to, must_be_empty, must_be_safe, flag in CASTLING_PATHS[us]:
                if (
                    board.castling & right
                    and (targets >> king_to) & 1
                    and not occ_all & must_be_empty
                    and not any(board.is_square_attacked(sq, them) for sq in must_be_safe)
                ):
                    append(Move(king_from, king_to, flag))

    return moves


def pinned_pieces(board: Board, side: int) -> int:
    """Return the pieces of ``side`` pinned to their own king."""
    ksq = board.king_square(side)
    if ksq is None:
        return 0
    tables = default_tables()
    bb = board.bb
    base = (side ^ 1) * 6
    occ_all = board.occ[0] | board.occ[1]
    own = board.occ[side]
    queens = bb[base + QUEEN]
    snipers = tables.rook_attacks(ksq, 0) & (bb[base + ROOK] | queens)
    snipers |= tables.bishop_attacks(ksq, 0) & (bb[base + BISHOP] | queens)
    pinned = 0
    between_row = BETWEEN[ksq]
    while snipers:
        low = snipers & -snipers
        blockers = between_row[low.bit_length() - 1] & occ_all
        if blockers and not blockers & (blockers - 1):
            pinned |= blockers & own
        snipers ^= low
    return pinned


def _king_safe_after(board: Board, move: Move, ksq: int, them: int) -> bool:
    undo = board.make_move_unchecked(move)
    try:
        return not board.is_square_attacked(ksq, them)
    finally:
        board.unmake_move(move, undo)


def filter_legal(board: Board, moves: List[Move]) -> List[Move]:
    """Keep the moves of ``moves`` that do not leave the mover's king attacked.

    ``moves`` must be pseudo-legal for ``board``.
    """
    us = board.side_to_move
    them = us ^ 1
    ksq = board.king_square(us)
    if ksq is None:
        return list(moves)
    occ_without_king = (board.occ[0] | board.occ[1]) ^ (1 << ksq)
    in_check = board.is_square_attacked(ksq, them)
    pinned = pinned_pieces(board, us)
    line_row = LINE[ksq]
    legal: List[Move] = []
    append = legal.append
    for m in moves:
        fr = m.from_sq
        if fr == ksq:
            if m.flags & CASTLE or not board.is_square_attacked(m.to_sq, them, occ_without_king):
                append(m)
        elif in_check or m.flags & EN_PASSANT:
            if _king_safe_after(board, m, ksq, them):
                append(m)
        elif (pinned >> fr) & 1:
            if (line_row[fr] >> m.to_sq) & 1:
                append(m)
        else:
            append(m)
    return legal


def legal_moves(board: Board) -> List[Move]:
    """Return all legal moves for the side to move."""
    return filter_legal(board, generate_pseudo_legal(board))


def legal_moves_matching(board: Board, targets: int) -> List[Move]:
    """Return the legal moves whose destination lies in ``targets``.

    ``legal_moves_matching(board, board.occupancy(them))`` gives the ordinary
    captures; see :func:`legal_captures` to include en passant.
    """
    return filter_legal(board, generate_pseudo_legal(board, targets=targets & MASK64))


def legal_captures(board: Board) -> List[Move]:
    """Return legal captures, en passant included."""
    targets = board.occ[board.side_to_move ^ 1]
    if board.ep_square is not None:
        targets |= 1 << board.ep_square
    return [m for m in legal_moves_matching(board, targets) if m.flags & CAPTURE]


def has_legal_moves(board: Board) -> bool:
    return bool(legal_moves(board))


def is_pseudo_legal(board: Board, move: Move) -> bool:
    return move in generate_pseudo_legal(board, targets=1 << move.to_sq, origins=1 << move.from_sq)


def is_legal(board: Board, move: Move) -> bool:
    return is_pseudo_legal(board, move) and bool(filter_legal(board, [move]))


def is_in_check(board: Board, side: Optional[int] = None) -> bool:
    """Return True if ``side`` (default: side to move) is in check."""
    return board.in_check(side)


def is_checkmate(board: Board) -> bool:
    return board.in_check() and not has_legal_moves(board)


def is_stalemate(board: Board) -> bool:
    return not board.in_check() and not has_legal_moves(board)


def move_from_uci(board: Board, uci: str) -> Move:
    """Resolve UCI text such as ``"e1g1"`` to the matching legal move.

    Raises:
        MalformedMoveError: If ``uci`` cannot be parsed.
        IllegalMoveError: If no legal move matches.
    """
    parsed = parse_uci(uci)
    for m in legal_moves_matching(board, 1 << parsed.to_sq):
        if m.from_sq == parsed.from_sq and m.promotion == parsed.promotion:
            return m
    raise IllegalMoveError(f"illegal move: {uci}")
