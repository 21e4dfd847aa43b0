from __future__ import annotations

from chesscore.board import Board
from chesscore.movegen import legal_moves


def moves_set(b: Board) -> set[str]:
    return {m.to_uci() for m in legal_moves(b)}


def test_rook_basic_moves(place) -> None:
    # Rook a1 with open a-file and rank 1 up to the king
    ms = moves_set(place("Ra1 Ke1 ke8"))
    assert {"a1a2", "a1b1", "a1a8", "a1d1"}.issubset(ms)
    assert "a1e1" not in ms


def test_bishop_basic_moves(place) -> None:
    ms = moves_set(place("Bc1 Ke1 ke8"))
    assert {"c1b2", "c1d2", "c1a3", "c1h6"}.issubset(ms)


def test_queen_basic_moves(place) -> None:
    ms = moves_set(place("Qd1 Ke1 ke8"))
    assert {"d1d2", "d1c1", "d1c2", "d1d8", "d1a4", "d1h5"}.issubset(ms)


def test_sliders_stop_at_blockers_and_capture(place) -> None:
    ms = moves_set(place("Rd1 Ke1 ke8 Pd3"))
    # Own pawn on d3 blocks the file
    assert "d1d2" in ms
    assert "d1d3" not in ms and "d1d4" not in ms
    ms = moves_set(place("Rd4 Ke1 ke8 nd6 Pb4"))
    assert "d4d6" in ms and "d4d7" not in ms
    assert "d4c4" in ms and "d4b4" not in ms


def test_pinned_rook_move_filtered(place) -> None:
    # Black rook e8 pins the e2 rook to the white king
    ms = moves_set(place("Ke1 Re2 re8 ka8"))
    assert "e2d2" not in ms and "e2f2" not in ms
    # Moving along the e-file (including capturing the pinner) is allowed
    assert {"e2e3", "e2e7", "e2e8"}.issubset(ms)
