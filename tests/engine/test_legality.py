from __future__ import annotations

import pytest

from chesscore.bitboard import from_squares
from chesscore.board import Board
from chesscore.errors import IllegalMoveError, MalformedMoveError
from chesscore.move import CAPTURE, DOUBLE_PUSH
from chesscore.movegen import (
    generate_pseudo_legal,
    has_legal_moves,
    is_checkmate,
    is_in_check,
    is_legal,
    is_pseudo_legal,
    is_stalemate,
    legal_captures,
    legal_moves,
    legal_moves_matching,
    move_from_uci,
    pinned_pieces,
)
from chesscore.pieces import BLACK, WHITE
from chesscore.squares import str_to_square


def sq(name: str) -> int:
    return str_to_square(name)


def from_sq(b: Board, origin: str) -> set[str]:
    return {m.to_uci() for m in legal_moves(b) if m.from_sq == sq(origin)}


@pytest.mark.parametrize("name", ["kiwipete", "position3", "position4", "position5"])
def test_legal_moves_never_leave_own_king_attacked(request, name: str) -> None:
    b: Board = request.getfixturevalue(name)
    us = b.side_to_move
    legal = legal_moves(b)
    for mv in generate_pseudo_legal(b):
        undo = b.make_move_unchecked(mv)
        exposed = b.in_check(us)
        b.unmake_move(mv, undo)
        # Legal exactly when the king is safe afterwards
        assert (mv in legal) == (not exposed), mv.to_uci()


def test_pinned_pieces(place) -> None:
    b = place("Ke1 Re2 Bd2 Nf2 ke8 re7 bb4 qh4")
    assert pinned_pieces(b, WHITE) == from_squares([sq("e2"), sq("d2"), sq("f2")])
    # The e7 rook shields its own king from the e2 rook
    assert pinned_pieces(b, BLACK) == 1 << sq("e7")


def test_two_blockers_means_no_pin(place) -> None:
    b = place("Ke1 Re2 Re3 ke8 re7")
    assert pinned_pieces(b, WHITE) == 0


def test_diagonal_pin_allows_moves_along_the_pin_only(place) -> None:
    b = place("Ke1 Bd2 ke8 bb4")
    assert from_sq(b, "d2") == {"d2c3", "d2b4"}


def test_pinned_knight_cannot_move(place) -> None:
    assert from_sq(place("Ke1 Ne2 re8 ka8"), "e2") == set()


def test_check_evasion_by_block_only(place) -> None:
    b = place("Ke1 Rd3 ke8 re5")
    assert is_in_check(b)
    assert from_sq(b, "d3") == {"d3e3"}
    assert from_sq(b, "e1") == {"e1d1", "e1d2", "e1f1", "e1f2"}


def test_check_evasion_by_capture(place) -> None:
    b = place("Ke1 Nc6 ke8 qe5")
    assert from_sq(b, "c6") == {"c6e5"}


def test_king_cannot_capture_protected_piece(place) -> None:
    b = place("Ke1 ke8 qe2 rh2")
    assert is_in_check(b)
    assert "e1e2" not in from_sq(b, "e1")


def test_legal_moves_matching_filters_destinations() -> None:
    b = Board.startpos()
    moves = legal_moves_matching(b, 1 << sq("e4"))
    assert [m.to_uci() for m in moves] == ["e2e4"]
    assert moves[0].flags == DOUBLE_PUSH
    assert legal_moves_matching(b, 0) == []


def test_legal_captures_includes_en_passant(kiwipete: Board, place) -> None:
    caps = legal_captures(kiwipete)
    assert len(caps) == 8
    assert all(m.flags & CAPTURE for m in caps)
    ep = place("Ke1 Pe5 ke8 pd5", ep_square="d6")
    assert {m.to_uci() for m in legal_captures(ep)} == {"e5d6"}


def test_is_legal_and_is_pseudo_legal(place) -> None:
    b = place("Ke1 Re2 ke8 re7")
    pinned = next(m for m in generate_pseudo_legal(b) if m.to_uci() == "e2d2")
    assert is_pseudo_legal(b, pinned)
    assert not is_legal(b, pinned)
    assert is_legal(b, move_from_uci(b, "e2e7"))


def test_checkmate_and_stalemate(place) -> None:
    mate = place("ka8 Qb7 Kc6", side_to_move="b")
    assert is_checkmate(mate)
    assert not is_stalemate(mate)
    assert not has_legal_moves(mate)

    stale = place("ka8 Qb6 Kh1", side_to_move="b")
    assert is_stalemate(stale)
    assert not is_checkmate(stale)
    assert not is_in_check(stale)

    start = Board.startpos()
    assert not is_checkmate(start) and not is_stalemate(start)


def test_move_from_uci() -> None:
    b = Board.startpos()
    assert move_from_uci(b, "e2e4").flags == DOUBLE_PUSH
    assert move_from_uci(b, "g1f3").to_uci() == "g1f3"
    with pytest.raises(IllegalMoveError):
        move_from_uci(b, "e1g1")
    with pytest.raises(IllegalMoveError):
        move_from_uci(b, "e2e4q")
    with pytest.raises(MalformedMoveError):
        move_from_uci(b, "e2")
