"""Bitboard primitives.

A bitboard is a plain ``int`` holding a set of squares: bit ``i`` is set when
square ``i`` (a1=0 .. h8=63) is in the set. All helpers are pure and return
new values; results are always masked back to 64 bits.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .errors import EmptyBitboardError
from .squares import SQUARE_NAMES


MASK64 = 0xFFFFFFFFFFFFFFFF
EMPTY = 0
FULL = MASK64

FILE_A = 0x0101010101010101
FILE_H = FILE_A << 7
FILES = tuple(FILE_A << f for f in range(8))

RANK_1 = 0xFF
RANKS = tuple(RANK_1 << (8 * r) for r in range(8))
RANK_2, RANK_3, RANK_4, RANK_5, RANK_6, RANK_7, RANK_8 = RANKS[1:]

EDGES = FILE_A | FILE_H | RANK_1 | RANK_8


def bit(sq: int) -> int:
    return 1 << sq


def from_squares(squares: Iterable[int]) -> int:
    bb = 0
    for sq in squares:
        bb |= 1 << sq
    return bb


def union(*bbs: int) -> int:
    out = 0
    for bb in bbs:
        out |= bb
    return out & MASK64


def intersection(a: int, b: int) -> int:
    return a & b


def difference(a: int, b: int) -> int:
    return a & ~b & MASK64


def complement(bb: int) -> int:
    return ~bb & MASK64


def is_set(bb: int, sq: int) -> bool:
    return (bb >> sq) & 1 == 1


def set_bit(bb: int, sq: int) -> int:
    return bb | (1 << sq)


def clear_bit(bb: int, sq: int) -> int:
    return bb & ~(1 << sq) & MASK64


def count_ones(bb: int) -> int:
    return bin(bb).count("1")


def lsb(bb: int) -> int:
    """Return the index of the lowest set square.

    Raises:
        EmptyBitboardError: If ``bb`` is empty.
    """
    if not bb:
        raise EmptyBitboardError("lsb of empty bitboard")
    return (bb & -bb).bit_length() - 1


def pop_lsb(bb: int) -> tuple[int, int]:
    """Split ``bb`` into its lowest set square and the remaining set.

    Returns:
        tuple[int, int]: ``(square, remainder)``.

    Raises:
        EmptyBitboardError: If ``bb`` is empty.
    """
    if not bb:
        raise EmptyBitboardError("pop_lsb of empty bitboard")
    low = bb & -bb
    return low.bit_length() - 1, bb ^ low


def iter_squares(bb: int) -> Iterator[int]:
    """Yield set squares in ascending order."""
    while bb:
        low = bb & -bb
        yield low.bit_length() - 1
        bb ^= low


def squares_of(bb: int) -> List[int]:
    return list(iter_squares(bb))


def single_square(bb: int) -> Optional[int]:
    """Return the only square of a one-element set, else ``None``."""
    if bb and not (bb & (bb - 1)):
        return bb.bit_length() - 1
    return None


def render(bb: int) -> str:
    """Return an 8x8 diagram of ``bb`` with rank 8 on top.

    Handy in assertion messages: ``x`` marks set squares, ``.`` empty ones.
    """
    rows = []
    for rank_idx in range(7, -1, -1):
        cells = ["x" if (bb >> (rank_idx * 8 + f)) & 1 else "." for f in range(8)]
        rows.append(f"{rank_idx + 1} " + " ".join(cells))
    rows.append("  a b c d e f g h")
    return "\n".join(rows)


def names(bb: int) -> List[str]:
    """Return the algebraic names of the set squares, ascending."""
    return [SQUARE_NAMES[sq] for sq in iter_squares(bb)]
