from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Sequence, Tuple

from .bitboard import MASK64
from .config import MagicSearchSettings, get_settings
from . import magic_constants
from .errors import MagicSearchError
from .magic import (
    MagicEntry,
    entry_from_magic,
    find_magic,
    search_magics,
    square_seed,
    verify_entry,
)
from .pieces import BISHOP, KIND_NAMES, QUEEN, ROOK
from .rng import SplitMix64
from .squares import SQUARE_NAMES


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlidingAttackTables:
    """Magic lookups for bishops and rooks on all 64 squares.

    Instances come from :meth:`build` or :meth:`load`, which check every
    entry before returning, so lookups never fail at runtime.
    """

    bishop: Tuple[MagicEntry, ...]
    rook: Tuple[MagicEntry, ...]

    @classmethod
    def build(cls, settings: Optional[MagicSearchSettings] = None) -> "SlidingAttackTables":
        """Run the magic search for both slider kinds.

        Raises:
            MagicSearchError: If either search fails; nothing is returned.
        """
        settings = settings or get_settings()
        start = time.perf_counter()
        deadline = None
        if settings.max_seconds is not None:
            deadline = time.monotonic() + settings.max_seconds
        bishop = search_magics(BISHOP, settings, deadline)
        rook = search_magics(ROOK, settings, deadline)
        tables = cls(bishop=bishop, rook=rook)
        logger.info(
            "sliding attack tables built",
            extra={
                "seed": settings.seed,
                "verified": settings.verify,
                "entries": sum(len(e.table) for e in bishop + rook),
                "elapsed_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return tables

    @classmethod
    def load(cls, settings: Optional[MagicSearchSettings] = None) -> "SlidingAttackTables":
        """Rebuild the tables from the constants in :mod:`chesscore.magic_constants`.

        When ``settings.seed`` differs from the seed the constants were
        generated with, this is the same as :meth:`build`. A stored triple
        that is missing or fails to rebuild is logged and searched again for
        that square only.

        Raises:
            MagicSearchError: If a fallback search or verification fails.
        """
        settings = settings or get_settings()
        if settings.seed != magic_constants.SEED:
            return cls.build(settings)
        start = time.perf_counter()
        bishop = _load_kind(BISHOP, magic_constants.BISHOP_MAGICS, settings)
        rook = _load_kind(ROOK, magic_constants.ROOK_MAGICS, settings)
        tables = cls(bishop=bishop, rook=rook)
        logger.info(
            "sliding attack tables loaded",
            extra={
                "seed": settings.seed,
                "verified": settings.verify,
                "entries": sum(len(e.table) for e in bishop + rook),
                "elapsed_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return tables

    def verify(self) -> None:
        """Exhaustively re-check every entry against ray-casting."""
        for kind, entries in ((BISHOP, self.bishop), (ROOK, self.rook)):
            if len(entries) != 64:
                raise MagicSearchError(f"expected 64 entries, got {len(entries)}")
            for sq, entry in enumerate(entries):
                if entry.square != sq or entry.kind != kind:
                    raise MagicSearchError(f"entry {sq} is out of place")
                verify_entry(entry)

    def bishop_attacks(self, sq: int, occupancy: int) -> int:
        e = self.bishop[sq]
        return e.table[(((occupancy & e.mask) * e.magic) & MASK64) >> e.shift]

    def rook_attacks(self, sq: int, occupancy: int) -> int:
        e = self.rook[sq]
        return e.table[(((occupancy & e.mask) * e.magic) & MASK64) >> e.shift]

    def queen_attacks(self, sq: int, occupancy: int) -> int:
        return self.bishop_attacks(sq, occupancy) | self.rook_attacks(sq, occupancy)

    def attacks(self, kind: int, sq: int, occupancy: int) -> int:
        if kind == BISHOP:
            return self.bishop_attacks(sq, occupancy)
        if kind == ROOK:
            return self.rook_attacks(sq, occupancy)
        if kind == QUEEN:
            return self.queen_attacks(sq, occupancy)
        raise ValueError(f"not a slider kind: {kind!r}")


def _load_kind(
    kind: int, stored: Sequence[Tuple[int, int, int]], settings: MagicSearchSettings
) -> Tuple[MagicEntry, ...]:
    entries = []
    for sq in range(64):
        entry: Optional[MagicEntry] = None
        reason = "missing"
        if sq < len(stored):
            try:
                entry = entry_from_magic(sq, kind, *stored[sq])
            except MagicSearchError as exc:
                reason = str(exc)
        if entry is None:
            logger.warning(
                "stored magic rejected, searching",
                extra={"square": SQUARE_NAMES[sq], "piece": KIND_NAMES[kind], "reason": reason},
            )
            rng = SplitMix64(square_seed(settings.seed, sq, kind))
            entry = find_magic(sq, kind, rng, settings.max_attempts)
        if settings.verify:
            verify_entry(entry)
        entries.append(entry)
    return tuple(entries)


@lru_cache(maxsize=1)
def default_tables() -> SlidingAttackTables:
    """Return the process-wide tables, loading them on first use.

    Call once during startup before sharing boards across threads.
    """
    return SlidingAttackTables.load(get_settings())
