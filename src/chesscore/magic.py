"""Magic-number search for sliding-piece attack tables.

For each square and slider kind (bishop, rook) the search finds a 64-bit
constant that maps every subset of the blocker mask to a slot of a dense
table:

    index = ((occupancy & mask) * magic mod 2**64) >> shift

A candidate is accepted only if no two subsets with different attack sets
share a slot. Subsets with identical attack sets may collide.

The search is a pure function of its inputs: give it the same generator
state and bound and it returns the same entry.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterator, List, Optional, Protocol, Tuple

from .attacks import BISHOP_DIRECTIONS, ROOK_DIRECTIONS
from .bitboard import MASK64, count_ones
from .config import DEFAULT_MAX_ATTEMPTS, MagicSearchSettings
from .errors import MagicSearchError
from .pieces import BISHOP, KIND_NAMES, ROOK
from .rng import SplitMix64
from .squares import SQUARE_NAMES


logger = logging.getLogger(__name__)

SLIDER_KINDS = (BISHOP, ROOK)
# Candidates whose product with the mask leaves fewer high bits are rarely usable
MIN_HIGH_BITS = 6
HIGH_BYTE = 0xFF00000000000000


class RandomSource(Protocol):
    def next(self) -> int: ...


@dataclass(frozen=True)
class MagicEntry:
    """One verified magic lookup for a (square, slider kind) pair.

    Attributes:
        square (int): Square the slider stands on.
        kind (int): ``BISHOP`` or ``ROOK``.
        mask (int): Relevant blocker squares (board edges excluded).
        magic (int): Multiplier.
        shift (int): ``64 - popcount(mask)``.
        table (Tuple[int, ...]): Attack sets indexed by the magic index.
    """

    square: int
    kind: int
    mask: int
    magic: int
    shift: int
    table: Tuple[int, ...]

    def index(self, occupancy: int) -> int:
        return (((occupancy & self.mask) * self.magic) & MASK64) >> self.shift

    def attacks(self, occupancy: int) -> int:
        return self.table[(((occupancy & self.mask) * self.magic) & MASK64) >> self.shift]


def _directions(kind: int) -> Tuple[Tuple[int, int], ...]:
    if kind == BISHOP:
        return BISHOP_DIRECTIONS
    if kind == ROOK:
        return ROOK_DIRECTIONS
    raise ValueError(f"not a slider kind: {kind!r}")


def ray_attacks(square: int, occupancy: int, kind: int) -> int:
    """Ray-cast attacks of a slider on ``square``.

    Each ray includes the first occupied square it meets and stops there.
    This is the ground truth the magic tables are checked against.
    """
    attacks = 0
    f, r = square % 8, square // 8
    for df, dr in _directions(kind):
        tf, tr = f + df, r + dr
        while 0 <= tf < 8 and 0 <= tr < 8:
            to = tr * 8 + tf
            attacks |= 1 << to
            if (occupancy >> to) & 1:
                break
            tf += df
            tr += dr
    return attacks


def blocker_mask(square: int, kind: int) -> int:
    """Return the squares whose occupancy can change the slider's attacks.

    The last square of every ray is left out: a piece there blocks nothing
    further.
    """
    mask = 0
    f, r = square % 8, square // 8
    for df, dr in _directions(kind):
        tf, tr = f + df, r + dr
        while 0 <= tf + df < 8 and 0 <= tr + dr < 8:
            mask |= 1 << (tr * 8 + tf)
            tf += df
            tr += dr
    return mask


def subsets(mask: int) -> Iterator[int]:
    """Yield every subset of ``mask``, starting with the empty set."""
    sub = 0
    while True:
        yield sub
        sub = (sub - mask) & mask
        if sub == 0:
            return


def magic_candidate(rng: RandomSource) -> int:
    return rng.next() & rng.next() & rng.next()


def try_build_table(
    magic: int, shift: int, occupancies: List[int], attack_sets: List[int]
) -> Optional[List[int]]:
    """Fill a table for ``magic``; return ``None`` on a destructive collision."""
    table: List[Optional[int]] = [None] * (1 << (64 - shift))
    for occ, att in zip(occupancies, attack_sets):
        idx = ((occ * magic) & MASK64) >> shift
        slot = table[idx]
        if slot is None:
            table[idx] = att
        elif slot != att:
            return None
    return [0 if slot is None else slot for slot in table]


def find_magic(
    square: int,
    kind: int,
    rng: RandomSource,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    deadline: Optional[float] = None,
) -> MagicEntry:
    """Search for a collision-free magic for ``square`` and ``kind``.

    Args:
        square (int): Square index 0..63.
        kind (int): ``BISHOP`` or ``ROOK``.
        rng (RandomSource): Source of 64-bit draws; consumed in order.
        max_attempts (int): Number of candidates to draw before giving up.
        deadline (Optional[float]): ``time.monotonic()`` value after which the
            search gives up.

    Returns:
        MagicEntry: The accepted magic together with its filled table.

    Raises:
        MagicSearchError: If the attempt bound or deadline is exhausted.
    """
    mask = blocker_mask(square, kind)
    bits = count_ones(mask)
    shift = 64 - bits
    occupancies = list(subsets(mask))
    attack_sets = [ray_attacks(square, occ, kind) for occ in occupancies]

    for attempt in range(1, max_attempts + 1):
        if deadline is not None and time.monotonic() > deadline:
            logger.error(
                "magic search timed out",
                extra={"square": SQUARE_NAMES[square], "piece": KIND_NAMES[kind], "attempts": attempt - 1},
            )
            raise MagicSearchError(
                f"magic search for {KIND_NAMES[kind]} on {SQUARE_NAMES[square]} "
                f"hit its deadline after {attempt - 1} attempts"
            )
        magic = magic_candidate(rng)
        if count_ones((mask * magic) & HIGH_BYTE) < MIN_HIGH_BITS:
            continue
        table = try_build_table(magic, shift, occupancies, attack_sets)
        if table is not None:
            logger.debug(
                "magic found",
                extra={
                    "square": SQUARE_NAMES[square],
                    "piece": KIND_NAMES[kind],
                    "attempts": attempt,
                    "bits": bits,
                },
            )
            return MagicEntry(square, kind, mask, magic, shift, tuple(table))

    logger.error(
        "magic search exhausted",
        extra={"square": SQUARE_NAMES[square], "piece": KIND_NAMES[kind], "attempts": max_attempts},
    )
    raise MagicSearchError(
        f"no magic for {KIND_NAMES[kind]} on {SQUARE_NAMES[square]} "
        f"within {max_attempts} attempts"
    )


def verify_entry(entry: MagicEntry) -> None:
    """Check ``entry`` against ray-casting for every blocker subset.

    Raises:
        MagicSearchError: On the first subset whose lookup differs.
    """
    if entry.mask != blocker_mask(entry.square, entry.kind):
        raise MagicSearchError(
            f"{KIND_NAMES[entry.kind]} entry on {SQUARE_NAMES[entry.square]} has a wrong mask"
        )
    if entry.shift != 64 - count_ones(entry.mask) or len(entry.table) != 1 << (64 - entry.shift):
        raise MagicSearchError(
            f"{KIND_NAMES[entry.kind]} entry on {SQUARE_NAMES[entry.square]} has a wrong size"
        )
    for occ in subsets(entry.mask):
        if entry.attacks(occ) != ray_attacks(entry.square, occ, entry.kind):
            raise MagicSearchError(
                f"{KIND_NAMES[entry.kind]} entry on {SQUARE_NAMES[entry.square]} "
                f"mismatches ray attacks for blockers {occ:#018x}"
            )


def entry_from_magic(square: int, kind: int, mask: int, magic: int, shift: int) -> MagicEntry:
    """Rebuild the table for a known ``(mask, magic, shift)`` triple.

    Raises:
        MagicSearchError: If the mask or shift does not belong to the square,
            or the magic collides destructively.
    """
    if mask != blocker_mask(square, kind) or shift != 64 - count_ones(mask):
        raise MagicSearchError(
            f"stored {KIND_NAMES[kind]} magic for {SQUARE_NAMES[square]} has a wrong mask or shift"
        )
    occupancies = list(subsets(mask))
    attack_sets = [ray_attacks(square, occ, kind) for occ in occupancies]
    table = try_build_table(magic, shift, occupancies, attack_sets)
    if table is None:
        raise MagicSearchError(
            f"stored {KIND_NAMES[kind]} magic for {SQUARE_NAMES[square]} collides"
        )
    return MagicEntry(square, kind, mask, magic, shift, tuple(table))


def square_seed(seed: int, square: int, kind: int) -> int:
    """Derive the generator seed for one (square, kind) search."""
    return (seed ^ (((kind << 6) | square) * 0x9E3779B97F4A7C15)) & MASK64


def search_magics(
    kind: int, settings: MagicSearchSettings, deadline: Optional[float] = None
) -> Tuple[MagicEntry, ...]:
    """Find (and optionally verify) one entry per square for ``kind``.

    ``deadline`` defaults to ``settings.max_seconds`` from now.

    Raises:
        MagicSearchError: If any square fails to converge or verify. No
            partial result is returned.
    """
    if kind not in SLIDER_KINDS:
        raise ValueError(f"not a slider kind: {kind!r}")
    if deadline is None and settings.max_seconds is not None:
        deadline = time.monotonic() + settings.max_seconds
    entries = []
    for square in range(64):
        rng = SplitMix64(square_seed(settings.seed, square, kind))
        entry = find_magic(square, kind, rng, settings.max_attempts, deadline)
        if settings.verify:
            verify_entry(entry)
        entries.append(entry)
    return tuple(entries)
