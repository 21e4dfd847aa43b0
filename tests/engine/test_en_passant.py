from __future__ import annotations

from chesscore.board import Board
from chesscore.game import Game
from chesscore.move import CAPTURE, DOUBLE_PUSH, EN_PASSANT
from chesscore.movegen import generate_pseudo_legal, legal_moves, move_from_uci
from chesscore.pieces import BP, WP
from chesscore.squares import str_to_square


def sq(name: str) -> int:
    return str_to_square(name)


def ep_moves(b: Board) -> list:
    return [m for m in legal_moves(b) if m.is_en_passant]


def test_no_en_passant_without_adjacent_pawn() -> None:
    game = Game.new()
    for uci in ("e2e4", "e7e5", "g1f3", "d7d5"):
        game.apply_move(uci)
    assert game.board.ep_square == sq("d6")
    assert ep_moves(game.board) == []
    # e4xd5 is an ordinary capture
    assert move_from_uci(game.board, "e4d5").flags == CAPTURE


def test_genuine_double_push_offers_exactly_one_en_passant(place) -> None:
    b = place("Ke1 Pe5 ke8 pd7", side_to_move="b")
    push = move_from_uci(b, "d7d5")
    assert push.flags == DOUBLE_PUSH
    b.make_move(push)
    assert b.ep_square == sq("d6")

    moves = ep_moves(b)
    assert [m.to_uci() for m in moves] == ["e5d6"]
    assert moves[0].flags == CAPTURE | EN_PASSANT

    b.make_move(moves[0])
    assert (b.bb[WP] >> sq("d6")) & 1
    assert ((b.bb[WP] >> sq("e5")) & 1) == 0
    assert ((b.bb[BP] >> sq("d5")) & 1) == 0
    assert b.ep_square is None
    assert b.halfmove_clock == 0


def test_en_passant_expires_after_one_move(place) -> None:
    b = place("Ke1 Pe5 ke8 pd7", side_to_move="b")
    b.make_move(move_from_uci(b, "d7d5"))
    b.make_move(move_from_uci(b, "e1e2"))
    b.make_move(move_from_uci(b, "e8e7"))
    assert b.ep_square is None
    assert ep_moves(b) == []


def test_black_en_passant_generation_and_apply(place) -> None:
    # White just played e2e4 -> ep target e3; black pawn on d4 can capture
    b = place("ke8 pd4 Pe4 Ke1", side_to_move="b", ep_square="e3")
    mv = move_from_uci(b, "d4e3")
    assert mv.is_en_passant
    child = b.apply(mv)
    assert (child.bb[BP] >> sq("e3")) & 1
    assert ((child.bb[BP] >> sq("d4")) & 1) == 0
    assert ((child.bb[WP] >> sq("e4")) & 1) == 0


def test_en_passant_both_neighbours(place) -> None:
    b = place("Ke1 Pc5 Pe5 ke8 pd5", ep_square="d6")
    assert sorted(m.to_uci() for m in ep_moves(b)) == ["c5d6", "e5d6"]


def test_en_passant_exposing_king_on_rank_is_illegal(place) -> None:
    # Capturing removes both pawns from the fifth rank
    b = place("Ka5 Pb5 pc5 rh5 ke8", ep_square="c6")
    assert any(m.is_en_passant for m in generate_pseudo_legal(b))
    assert ep_moves(b) == []


def test_en_passant_can_capture_the_checking_pawn(place) -> None:
    b = place("Kf4 Pd5 ke8 pe5", ep_square="e6")
    assert b.in_check()
    assert [m.to_uci() for m in ep_moves(b)] == ["d5e6"]
