from __future__ import annotations

import pytest

from chesscore.errors import InvalidSquareError, MalformedMoveError
from chesscore.move import (
    CAPTURE,
    CASTLE_KINGSIDE,
    DOUBLE_PUSH,
    EN_PASSANT,
    PROMOTION,
    QUIET,
    Move,
    UciMove,
    parse_uci,
)
from chesscore.pieces import KING, KNIGHT, PAWN, QUEEN
from chesscore.squares import str_to_square


def sq(name: str) -> int:
    return str_to_square(name)


def test_to_uci() -> None:
    assert Move(sq("e2"), sq("e4"), DOUBLE_PUSH).to_uci() == "e2e4"
    assert Move(sq("e7"), sq("e8"), PROMOTION, QUEEN).to_uci() == "e7e8q"
    assert str(Move(sq("b7"), sq("a8"), CAPTURE | PROMOTION, KNIGHT)) == "b7a8n"


def test_repr_names_flags() -> None:
    assert repr(Move(sq("g1"), sq("f3"))) == "Move(g1f3, quiet)"
    assert repr(Move(sq("e5"), sq("d6"), CAPTURE | EN_PASSANT)) == "Move(e5d6, capture|en_passant)"
    assert repr(Move(sq("b7"), sq("a8"), CAPTURE | PROMOTION, KNIGHT)) == (
        "Move(b7a8n, capture|promotion)"
    )


def test_flag_properties() -> None:
    ep = Move(sq("e5"), sq("d6"), CAPTURE | EN_PASSANT)
    assert ep.is_capture and ep.is_en_passant
    assert not ep.is_castle and not ep.is_promotion
    castle = Move(sq("e1"), sq("g1"), CASTLE_KINGSIDE)
    assert castle.is_castle and not castle.is_capture
    assert Move(sq("a2"), sq("a4"), DOUBLE_PUSH).is_double_push


def test_equality_covers_every_field() -> None:
    assert Move(12, 28, DOUBLE_PUSH) == Move(12, 28, DOUBLE_PUSH)
    assert Move(12, 28) != Move(12, 28, DOUBLE_PUSH)
    assert Move(52, 60, PROMOTION, QUEEN) != Move(52, 60, PROMOTION, KNIGHT)
    assert len({Move(12, 28, DOUBLE_PUSH), Move(12, 28, DOUBLE_PUSH)}) == 1


@pytest.mark.parametrize(
    ("args", "reason"),
    [
        ((12, 12), "same square"),
        ((64, 1), "origin off board"),
        ((0, -1), "destination off board"),
        ((0, 1, PROMOTION), "promotion flag without piece"),
        ((0, 1, QUIET, QUEEN), "piece without promotion flag"),
        ((0, 1, PROMOTION, KING), "king is not promotable"),
        ((0, 1, PROMOTION, PAWN), "pawn is not promotable"),
        ((0, 1, EN_PASSANT), "en passant without capture"),
        ((0, 1, DOUBLE_PUSH | CAPTURE), "double push capture"),
        ((0, 1, CASTLE_KINGSIDE | CAPTURE), "castle capture"),
        ((0, 1, 64), "unknown flag"),
    ],
)
def test_inconsistent_moves_are_rejected(args, reason: str) -> None:
    with pytest.raises(MalformedMoveError):
        Move(*args)


@pytest.mark.parametrize(
    "move",
    [
        Move(0, 63),
        Move(12, 28, DOUBLE_PUSH),
        Move(36, 43, CAPTURE | EN_PASSANT),
        Move(49, 56, CAPTURE | PROMOTION, KNIGHT),
    ],
)
def test_encode_decode(move: Move) -> None:
    packed = move.encode()
    assert 0 <= packed < 1 << 21
    assert Move.decode(packed) == move


@pytest.mark.parametrize("value", [-1, 1 << 21, 0])
def test_decode_rejects_invalid_values(value: int) -> None:
    # 0 decodes to a1a1, which is not a move
    with pytest.raises(MalformedMoveError):
        Move.decode(value)


def test_parse_uci() -> None:
    assert parse_uci("e2e4") == UciMove(sq("e2"), sq("e4"), None)
    assert parse_uci("e7e8q") == UciMove(sq("e7"), sq("e8"), QUEEN)
    assert parse_uci("a2a1n").promotion == KNIGHT


@pytest.mark.parametrize("text", ["", "e2", "e2e4qq", "e2e2", "e7e8k", "e7e8x", "e2e9"])
def test_parse_uci_rejects_malformed_text(text: str) -> None:
    with pytest.raises(MalformedMoveError):
        parse_uci(text)


def test_parse_uci_chains_square_errors() -> None:
    with pytest.raises(MalformedMoveError) as excinfo:
        parse_uci("z2e4")
    assert isinstance(excinfo.value.__cause__, InvalidSquareError)
