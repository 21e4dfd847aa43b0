from __future__ import annotations

import pytest

from chesscore.bitboard import (
    EDGES,
    FILE_A,
    FULL,
    RANK_1,
    clear_bit,
    complement,
    count_ones,
    difference,
    from_squares,
    intersection,
    is_set,
    iter_squares,
    lsb,
    names,
    pop_lsb,
    render,
    set_bit,
    single_square,
    squares_of,
    union,
)
from chesscore.errors import ChessCoreError, EmptyBitboardError, InvalidSquareError
from chesscore.squares import A1, E1, H8, square_at, square_to_str, str_to_square


def test_square_names_round_trip_corners() -> None:
    assert str_to_square("a1") == A1 == 0
    assert str_to_square("h8") == H8 == 63
    assert str_to_square("e4") == 28
    assert square_to_str(28) == "e4"
    assert square_at(4, 0) == E1


@pytest.mark.parametrize("text", ["", "e", "i1", "a9", "a0", "E4", "e44", "4e"])
def test_str_to_square_rejects_bad_names(text: str) -> None:
    with pytest.raises(InvalidSquareError):
        str_to_square(text)


@pytest.mark.parametrize("idx", [-1, 64, 100])
def test_square_to_str_rejects_out_of_range(idx: int) -> None:
    with pytest.raises(InvalidSquareError):
        square_to_str(idx)


def test_square_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        square_at(8, 0)
    assert issubclass(InvalidSquareError, ChessCoreError)


def test_set_algebra_stays_within_64_bits() -> None:
    assert count_ones(FILE_A) == 8
    assert count_ones(EDGES) == 28
    assert complement(0) == FULL
    assert complement(FULL) == 0
    assert count_ones(difference(FULL, FILE_A)) == 56
    assert union(FILE_A, RANK_1) == FILE_A | RANK_1
    assert count_ones(union(FILE_A, RANK_1)) == 15
    assert intersection(FILE_A, RANK_1) == 1


def test_bit_toggling() -> None:
    bb = set_bit(0, 63)
    assert is_set(bb, 63)
    assert not is_set(bb, 0)
    assert clear_bit(bb, 63) == 0
    # Clearing an unset square is a no-op
    assert clear_bit(bb, 5) == bb


def test_lsb_and_pop_lsb() -> None:
    bb = from_squares([3, 17, 40])
    assert lsb(bb) == 3
    sq, rest = pop_lsb(bb)
    assert sq == 3
    assert rest == from_squares([17, 40])


@pytest.mark.parametrize("fn", [lsb, pop_lsb])
def test_lsb_of_empty_raises(fn) -> None:
    with pytest.raises(EmptyBitboardError):
        fn(0)


def test_iteration_is_ascending() -> None:
    bb = from_squares([63, 0, 27, 9])
    assert list(iter_squares(bb)) == [0, 9, 27, 63]
    assert squares_of(0) == []
    assert names(from_squares([0, 63])) == ["a1", "h8"]


def test_single_square() -> None:
    assert single_square(1 << 5) == 5
    assert single_square(0b11) is None
    assert single_square(0) is None


def test_render_marks_set_squares() -> None:
    lines = render(from_squares([A1, H8])).splitlines()
    assert lines[0] == "8 . . . . . . . x"
    assert lines[7] == "1 x . . . . . . ."
    assert lines[8] == "  a b c d e f g h"
