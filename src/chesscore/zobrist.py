from __future__ import annotations

from typing import List, Tuple, TYPE_CHECKING

from .pieces import BLACK
from .rng import MASK64, SplitMix64

if TYPE_CHECKING:  # pragma: no cover
    from .board import Board


class Zobrist:
    """Zobrist hashing keys.

    Table layout:
    - piece_square[12][64]: indices follow the piece order (WP..BK)
    - side_to_move: toggled when black is to move
    - castling[16]: one key per castling-rights mask (xor of the K, Q, k, q keys)
    - ep_file[8]: files a..h
    """

    piece_square: List[List[int]]
    side_to_move: int
    castling: Tuple[int, ...]
    ep_file: List[int]

    def __init__(self, seed: int = 0xC0FFEE_F00D_DEAD) -> None:
        prng = SplitMix64(seed)
        self.piece_square = [[prng.next() for _ in range(64)] for _ in range(12)]
        self.side_to_move = prng.next()
        rights = [prng.next() for _ in range(4)]  # K, Q, k, q
        combos = []
        for mask in range(16):
            key = 0
            for i in range(4):
                if mask & (1 << i):
                    key ^= rights[i]
            combos.append(key)
        self.castling = tuple(combos)
        self.ep_file = [prng.next() for _ in range(8)]


# Global deterministic table
ZOBRIST = Zobrist()


def compute_hash_from_scratch(board: "Board") -> int:
    """Compute the 64-bit Zobrist hash of ``board`` from its fields.

    Make/unmake keep ``Board.zobrist_hash`` equal to this value incrementally.
    """
    h = 0
    for p in range(12):
        bb = board.bb[p]
        keys = ZOBRIST.piece_square[p]
        while bb:
            lsb = bb & -bb
            h ^= keys[lsb.bit_length() - 1]
            bb ^= lsb
    if board.side_to_move == BLACK:
        h ^= ZOBRIST.side_to_move
    h ^= ZOBRIST.castling[board.castling]
    if board.ep_square is not None:
        h ^= ZOBRIST.ep_file[board.ep_square % 8]
    return h & MASK64
