from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from .errors import InvalidSquareError, MalformedMoveError
from .pieces import BISHOP, CHAR_TO_KIND, KIND_TO_CHAR, KNIGHT, QUEEN, ROOK
from .squares import SQUARE_NAMES, str_to_square


# Move flags; combined with bitwise or
QUIET = 0
CAPTURE = 1
DOUBLE_PUSH = 2
EN_PASSANT = 4
CASTLE_KINGSIDE = 8
CASTLE_QUEENSIDE = 16
PROMOTION = 32
CASTLE = CASTLE_KINGSIDE | CASTLE_QUEENSIDE
ALL_FLAGS = CAPTURE | DOUBLE_PUSH | EN_PASSANT | CASTLE | PROMOTION

FLAG_NAMES = {
    CAPTURE: "capture",
    DOUBLE_PUSH: "double_push",
    EN_PASSANT: "en_passant",
    CASTLE_KINGSIDE: "castle_kingside",
    CASTLE_QUEENSIDE: "castle_queenside",
    PROMOTION: "promotion",
}

PROMOTABLE = frozenset((KNIGHT, BISHOP, ROOK, QUEEN))


def _flags_error(flags: int) -> Optional[str]:
    if flags & ~ALL_FLAGS:
        return f"unknown flag bits {flags:#x}"
    if flags & EN_PASSANT and flags != (EN_PASSANT | CAPTURE):
        return "en passant must be a plain capture"
    if flags & DOUBLE_PUSH and flags != DOUBLE_PUSH:
        return "double push cannot carry other flags"
    if flags & CASTLE and flags not in (CASTLE_KINGSIDE, CASTLE_QUEENSIDE):
        return "castling cannot carry other flags"
    return None


@dataclass(frozen=True)
class Move:
    """Engine-internal move representation.

    Attributes:
        from_sq (int): Origin square index (0-based, a1=0).
        to_sq (int): Destination square index.
        flags (int): Bitwise or of the move-class flags above; ``QUIET`` is 0.
        promotion (Optional[int]): Promoted piece kind, set iff ``PROMOTION``
            is in ``flags``.

    Two moves are equal only when every field matches.
    """

    from_sq: int
    to_sq: int
    flags: int = QUIET
    promotion: Optional[int] = None

    def __post_init__(self) -> None:
        for sq in (self.from_sq, self.to_sq):
            if not isinstance(sq, int) or sq < 0 or sq > 63:
                raise MalformedMoveError(f"invalid square index in move: {sq!r}")
        if self.from_sq == self.to_sq:
            raise MalformedMoveError("move origin and destination are the same square")
        problem = _flags_error(self.flags)
        if problem:
            raise MalformedMoveError(problem)
        if self.flags & PROMOTION:
            if self.promotion not in PROMOTABLE:
                raise MalformedMoveError(f"invalid promotion piece: {self.promotion!r}")
        elif self.promotion is not None:
            raise MalformedMoveError("promotion piece given without the promotion flag")

    @property
    def is_capture(self) -> bool:
        return bool(self.flags & CAPTURE)

    @property
    def is_en_passant(self) -> bool:
        return bool(self.flags & EN_PASSANT)

    @property
    def is_castle(self) -> bool:
        return bool(self.flags & CASTLE)

    @property
    def is_double_push(self) -> bool:
        return bool(self.flags & DOUBLE_PUSH)

    @property
    def is_promotion(self) -> bool:
        return bool(self.flags & PROMOTION)

    def to_uci(self) -> str:
        """Serialize the move into long algebraic UCI form.

        Returns:
            str: Move encoded like ``"e2e4"`` or ``"e7e8q"``.
        """
        promo = KIND_TO_CHAR[self.promotion] if self.promotion is not None else ""
        return SQUARE_NAMES[self.from_sq] + SQUARE_NAMES[self.to_sq] + promo

    def encode(self) -> int:
        """Pack the move into 21 bits: from(6) | to(6) | promotion(3) | flags(6)."""
        promo = self.promotion if self.promotion is not None else 0
        return self.from_sq | (self.to_sq << 6) | (promo << 12) | (self.flags << 15)

    @classmethod
    def decode(cls, value: int) -> "Move":
        """Rebuild a move from :meth:`encode` output.

        Raises:
            MalformedMoveError: If the packed fields do not form a valid move.
        """
        if not isinstance(value, int) or value < 0 or value >> 21:
            raise MalformedMoveError(f"invalid encoded move: {value!r}")
        flags = value >> 15
        promotion: Optional[int] = (value >> 12) & 0x7
        if not flags & PROMOTION:
            promotion = None
        return cls(value & 0x3F, (value >> 6) & 0x3F, flags, promotion)

    def __str__(self) -> str:
        return self.to_uci()

    def __repr__(self) -> str:
        names = "|".join(name for bit, name in FLAG_NAMES.items() if self.flags & bit)
        return f"Move({self.to_uci()}, {names or 'quiet'})"


class UciMove(NamedTuple):
    """Squares and promotion parsed from UCI text, before matching a board."""

    from_sq: int
    to_sq: int
    promotion: Optional[int] = None


def parse_uci(uci: str) -> UciMove:
    """Parse a UCI move string.

    Args:
        uci (str): Move encoded in long algebraic notation (e.g. ``"e2e4"``).

    Returns:
        UciMove: Origin, destination and optional promotion kind. Move flags
            depend on the position; use :func:`chesscore.movegen.move_from_uci`
            to obtain a full :class:`Move`.

    Raises:
        MalformedMoveError: If the string has an invalid length, squares, or
            promotion piece.
    """
    if not isinstance(uci, str) or len(uci) not in (4, 5):
        raise MalformedMoveError(f"invalid UCI move length: {uci!r}")
    try:
        from_sq = str_to_square(uci[0:2])
        to_sq = str_to_square(uci[2:4])
    except InvalidSquareError as e:
        raise MalformedMoveError(f"invalid UCI move: {uci!r}") from e
    if from_sq == to_sq:
        raise MalformedMoveError(f"invalid UCI move: {uci!r}")
    promo: Optional[int] = None
    if len(uci) == 5:
        promo = CHAR_TO_KIND.get(uci[4].lower())
        if promo not in PROMOTABLE:
            raise MalformedMoveError(f"invalid promotion piece: {uci[4]!r}")
    return UciMove(from_sq, to_sq, promo)
