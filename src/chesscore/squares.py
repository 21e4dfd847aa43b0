from __future__ import annotations

from .errors import InvalidSquareError


NUM_SQUARES = 64
FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)

SQUARE_NAMES = tuple(f + r for r in RANK_NAMES for f in FILE_NAMES)


def file_of(sq: int) -> int:
    return sq % 8


def rank_of(sq: int) -> int:
    return sq // 8


def square_at(file_idx: int, rank_idx: int) -> int:
    """Return the square index for zero-based ``file_idx`` and ``rank_idx``.

    Raises:
        InvalidSquareError: If either coordinate is outside 0..7.
    """
    if not (0 <= file_idx < 8 and 0 <= rank_idx < 8):
        raise InvalidSquareError(f"invalid square coordinates: file={file_idx} rank={rank_idx}")
    return rank_idx * 8 + file_idx


def check_square(sq: int) -> int:
    """Return ``sq`` unchanged if it is a valid square index.

    Raises:
        InvalidSquareError: If ``sq`` is not an int in 0..63.
    """
    if not isinstance(sq, int) or isinstance(sq, bool) or sq < 0 or sq > 63:
        raise InvalidSquareError(f"invalid square index: {sq!r}")
    return sq


def str_to_square(s: str) -> int:
    """Convert algebraic notation into a 0-based square index.

    Args:
        s (str): Square name such as ``"e4"``.

    Returns:
        int: Zero-based square index (a1=0, h8=63).

    Raises:
        InvalidSquareError: If ``s`` is not a valid square.
    """
    if (
        not isinstance(s, str)
        or len(s) != 2
        or s[0] < "a"
        or s[0] > "h"
        or s[1] < "1"
        or s[1] > "8"
    ):
        raise InvalidSquareError(f"invalid square: {s!r}")
    file = ord(s[0]) - ord("a")
    rank = int(s[1]) - 1
    return rank * 8 + file


def square_to_str(idx: int) -> str:
    """Convert a 0-based square index into algebraic notation.

    Raises:
        InvalidSquareError: If ``idx`` is outside the valid square range.
    """
    return SQUARE_NAMES[check_square(idx)]
