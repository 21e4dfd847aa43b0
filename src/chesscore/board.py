from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, NamedTuple, Optional, Union

from .attacks import KING_ATTACKS, KNIGHT_ATTACKS, PAWN_ATTACKS
from .bitboard import MASK64, RANK_1, RANK_8
from .errors import IllegalMoveError, InvalidPositionError
from .move import CASTLE, DOUBLE_PUSH, EN_PASSANT, PROMOTION, Move
from .pieces import (
    BISHOP,
    BLACK,
    CHAR_TO_PIECE,
    CHAR_TO_SIDE,
    KING,
    KNIGHT,
    PAWN,
    PIECE_ORDER,
    PIECE_TO_CHAR,
    QUEEN,
    ROOK,
    SIDE_TO_CHAR,
    WHITE,
)
from .sliding import default_tables
from .squares import (
    A1,
    A8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    SQUARE_NAMES,
    check_square,
    str_to_square,
)
from .zobrist import ZOBRIST, compute_hash_from_scratch


# Castling-rights bits
WHITE_KINGSIDE, WHITE_QUEENSIDE, BLACK_KINGSIDE, BLACK_QUEENSIDE = 1, 2, 4, 8
NO_CASTLING = 0
ALL_CASTLING = 15
CASTLING_CHARS = "KQkq"

# right -> (side, king home, rook home)
CASTLING_HOMES = {
    WHITE_KINGSIDE: (WHITE, E1, H1),
    WHITE_QUEENSIDE: (WHITE, E1, A1),
    BLACK_KINGSIDE: (BLACK, E8, H8),
    BLACK_QUEENSIDE: (BLACK, E8, A8),
}

# king destination -> (rook origin, rook destination)
CASTLE_ROOK_SQUARES = {
    G1: (H1, F1),
    C1: (A1, D1),
    G8: (H8, F8),
    C8: (A8, D8),
}


def _check_side(side: int) -> int:
    if side not in (WHITE, BLACK):
        raise ValueError(f"invalid side: {side!r}")
    return side


def _rights_mask_table() -> tuple:
    table = [ALL_CASTLING] * 64
    table[E1] &= ~(WHITE_KINGSIDE | WHITE_QUEENSIDE)
    table[H1] &= ~WHITE_KINGSIDE
    table[A1] &= ~WHITE_QUEENSIDE
    table[E8] &= ~(BLACK_KINGSIDE | BLACK_QUEENSIDE)
    table[H8] &= ~BLACK_KINGSIDE
    table[A8] &= ~BLACK_QUEENSIDE
    return tuple(table)


# Rights that survive a move touching a square, as origin or destination.
# Covers king moves, rook moves and rooks captured on their home square.
CASTLING_RIGHTS_MASK = _rights_mask_table()

_BACK_RANK = "RNBQKBNR"
STARTPOS_PIECES: Dict[str, str] = {}
for _f, _ch in enumerate(_BACK_RANK):
    _file = "abcdefgh"[_f]
    STARTPOS_PIECES[_file + "1"] = _ch
    STARTPOS_PIECES[_file + "2"] = "P"
    STARTPOS_PIECES[_file + "7"] = "p"
    STARTPOS_PIECES[_file + "8"] = _ch.lower()


class Undo(NamedTuple):
    """State needed to reverse one move; returned by the make methods."""

    moved_piece: int
    captured_piece: Optional[int]
    captured_sq: Optional[int]
    castling: int
    ep_square: Optional[int]
    halfmove_clock: int
    fullmove_number: int
    zobrist_hash: int


def parse_castling(text: str) -> int:
    """Convert ``"KQkq"``-style text (or ``"-"``) into a rights mask."""
    if text in ("", "-"):
        return NO_CASTLING
    rights = NO_CASTLING
    for ch in text:
        idx = CASTLING_CHARS.find(ch)
        if idx < 0:
            raise InvalidPositionError(f"invalid castling rights: {text!r}")
        rights |= 1 << idx
    return rights


def castling_to_str(rights: int) -> str:
    text = "".join(ch for i, ch in enumerate(CASTLING_CHARS) if rights & (1 << i))
    return text or "-"


@dataclass
class Board:
    """Board state with bitboards.

    Notes:
    - Squares are 0..63 (a1=0 .. h8=63), rank-major from white's perspective.
    - ``bb`` holds the 12 piece bitboards indexed WP..BK.
    - ``occ`` (per-side occupancy) and ``zobrist_hash`` are derived and kept
      in sync by make/unmake; they are not compared by ``==``.
    - Construction validates every position invariant.
    """

    bb: List[int]
    side_to_move: int = WHITE
    castling: int = NO_CASTLING
    ep_square: Optional[int] = None
    halfmove_clock: int = 0
    fullmove_number: int = 1
    occ: List[int] = field(init=False, repr=False, compare=False)
    zobrist_hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.bb = list(self.bb)
        self.validate()
        bb = self.bb
        self.occ = [
            bb[0] | bb[1] | bb[2] | bb[3] | bb[4] | bb[5],
            bb[6] | bb[7] | bb[8] | bb[9] | bb[10] | bb[11],
        ]
        self.zobrist_hash = compute_hash_from_scratch(self)

    # --- Construction ---
    @classmethod
    def startpos(cls) -> "Board":
        """Create a board initialized to the standard chess starting position."""
        return cls.from_pieces(STARTPOS_PIECES, side_to_move="w", castling="KQkq")

    @classmethod
    def from_pieces(
        cls,
        pieces: Mapping[Union[str, int], str],
        side_to_move: Union[str, int] = "w",
        castling: Union[str, int] = "-",
        ep_square: Union[str, int, None] = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> "Board":
        """Create a board from an explicit piece placement.

        Args:
            pieces: Maps squares (``"e1"`` or an index) to piece symbols
                (``"KQRBNP"`` for white, ``"kqrbnp"`` for black).
            side_to_move: ``"w"``/``"b"`` or ``WHITE``/``BLACK``.
            castling: Rights as ``"KQkq"``-style text, ``"-"``, or a mask.
            ep_square: En-passant target as a name or index, if any.
            halfmove_clock: Plies since the last capture or pawn move.
            fullmove_number: Starts at 1, incremented after black moves.

        Returns:
            Board: Validated board.

        Raises:
            InvalidSquareError: If a square is malformed.
            InvalidPositionError: If a symbol is unknown, a square is given
                twice, or the resulting position breaks an invariant.
        """
        bb = [0] * 12
        placed = 0
        for key, symbol in pieces.items():
            sq = str_to_square(key) if isinstance(key, str) else check_square(key)
            if symbol not in CHAR_TO_PIECE:
                raise InvalidPositionError(f"invalid piece symbol: {symbol!r}")
            if (placed >> sq) & 1:
                raise InvalidPositionError(f"square {SQUARE_NAMES[sq]} given twice")
            placed |= 1 << sq
            bb[CHAR_TO_PIECE[symbol]] |= 1 << sq

        if isinstance(side_to_move, str):
            if side_to_move not in CHAR_TO_SIDE:
                raise InvalidPositionError("side to move must be 'w' or 'b'")
            side = CHAR_TO_SIDE[side_to_move]
        else:
            side = side_to_move
        rights = parse_castling(castling) if isinstance(castling, str) else castling
        ep = str_to_square(ep_square) if isinstance(ep_square, str) else ep_square
        return cls(
            bb=bb,
            side_to_move=side,
            castling=rights,
            ep_square=ep,
            halfmove_clock=halfmove_clock,
            fullmove_number=fullmove_number,
        )

    def validate(self) -> None:
        """Check every position invariant.

        Raises:
            InvalidPositionError: On the first violated invariant.
        """
        bb = self.bb
        if len(bb) != 12:
            raise InvalidPositionError("expected 12 piece bitboards")
        seen = 0
        for p, b in enumerate(bb):
            if not isinstance(b, int) or b < 0 or b > MASK64:
                raise InvalidPositionError(f"bitboard {PIECE_TO_CHAR[p]} is not a 64-bit set")
            if seen & b:
                raise InvalidPositionError("piece bitboards overlap")
            seen |= b
        if getattr(self, "occ", None) is not None:
            if self.occ[WHITE] != (bb[0] | bb[1] | bb[2] | bb[3] | bb[4] | bb[5]) or self.occ[
                BLACK
            ] != (bb[6] | bb[7] | bb[8] | bb[9] | bb[10] | bb[11]):
                raise InvalidPositionError("occupancy out of sync with piece bitboards")
        if self.side_to_move not in (WHITE, BLACK):
            raise InvalidPositionError(f"invalid side to move: {self.side_to_move!r}")
        for side in (WHITE, BLACK):
            kings = bb[side * 6 + KING]
            if kings & (kings - 1):
                raise InvalidPositionError(f"more than one {SIDE_TO_CHAR[side]} king")
        if (bb[PAWN] | bb[6 + PAWN]) & (RANK_1 | RANK_8):
            raise InvalidPositionError("pawn on the first or last rank")

        if not isinstance(self.castling, int) or not 0 <= self.castling <= ALL_CASTLING:
            raise InvalidPositionError(f"invalid castling rights: {self.castling!r}")
        for right, (side, king_sq, rook_sq) in CASTLING_HOMES.items():
            if self.castling & right:
                if not (bb[side * 6 + KING] >> king_sq) & 1 or not (bb[side * 6 + ROOK] >> rook_sq) & 1:
                    raise InvalidPositionError(
                        f"castling right {castling_to_str(right)} without king and rook at home"
                    )

        if self.ep_square is not None:
            ep = check_square(self.ep_square)
            occupied = seen
            if self.side_to_move == WHITE:
                # Black just pushed from rank 7 to rank 5
                ok = ep // 8 == 5 and (bb[6 + PAWN] >> (ep - 8)) & 1 and not (occupied >> ep) & 1
                ok = ok and not (occupied >> (ep + 8)) & 1
            else:
                ok = ep // 8 == 2 and (bb[PAWN] >> (ep + 8)) & 1 and not (occupied >> ep) & 1
                ok = ok and not (occupied >> (ep - 8)) & 1
            if not ok:
                raise InvalidPositionError(
                    f"en passant square {SQUARE_NAMES[ep]} does not follow a double pawn push"
                )

        if not isinstance(self.halfmove_clock, int) or self.halfmove_clock < 0:
            raise InvalidPositionError("invalid halfmove clock")
        if not isinstance(self.fullmove_number, int) or self.fullmove_number < 1:
            raise InvalidPositionError("invalid fullmove number")

    def copy(self) -> "Board":
        clone = copy.copy(self)
        clone.bb = list(self.bb)
        clone.occ = list(self.occ)
        return clone

    # --- Queries ---
    @property
    def castling_str(self) -> str:
        return castling_to_str(self.castling)

    def occupancy(self, side: Optional[int] = None) -> int:
        if side is None:
            return self.occ[WHITE] | self.occ[BLACK]
        return self.occ[side]

    def pieces(self, side: int, kind: int) -> int:
        return self.bb[side * 6 + kind]

    def piece_at(self, sq: int) -> Optional[int]:
        """Return the piece index (``WP``..``BK``) on ``sq``, or ``None``."""
        mask = 1 << check_square(sq)
        if not (self.occ[WHITE] | self.occ[BLACK]) & mask:
            return None
        for p in PIECE_ORDER:
            if self.bb[p] & mask:
                return p
        return None

    def king_square(self, side: int) -> Optional[int]:
        kings = self.bb[_check_side(side) * 6 + KING]
        if not kings:
            return None
        return (kings & -kings).bit_length() - 1

    def attackers_to(self, sq: int, by_side: int, occupancy: Optional[int] = None) -> int:
        """Return the pieces of ``by_side`` attacking ``sq``.

        Sliders are blocked by ``occupancy`` (the full board by default);
        pieces missing from ``occupancy`` are not counted as attackers.
        """
        check_square(sq)
        _check_side(by_side)
        occ = self.occ[WHITE] | self.occ[BLACK] if occupancy is None else occupancy
        bb = self.bb
        base = by_side * 6
        tables = default_tables()
        queens = bb[base + QUEEN]
        attackers = PAWN_ATTACKS[by_side ^ 1][sq] & bb[base + PAWN]
        attackers |= KNIGHT_ATTACKS[sq] & bb[base + KNIGHT]
        attackers |= KING_ATTACKS[sq] & bb[base + KING]
        attackers |= tables.bishop_attacks(sq, occ) & (bb[base + BISHOP] | queens)
        attackers |= tables.rook_attacks(sq, occ) & (bb[base + ROOK] | queens)
        return attackers & occ

    def is_square_attacked(self, sq: int, by_side: int, occupancy: Optional[int] = None) -> bool:
        """Return True if any piece of ``by_side`` attacks ``sq``.

        Pass an ``occupancy`` without the defending king to test the squares
        a king would move to: it cannot shelter behind itself.
        """
        check_square(sq)
        _check_side(by_side)
        occ = self.occ[WHITE] | self.occ[BLACK] if occupancy is None else occupancy
        bb = self.bb
        base = by_side * 6
        if PAWN_ATTACKS[by_side ^ 1][sq] & bb[base + PAWN] & occ:
            return True
        if KNIGHT_ATTACKS[sq] & bb[base + KNIGHT] & occ:
            return True
        if KING_ATTACKS[sq] & bb[base + KING] & occ:
            return True
        tables = default_tables()
        queens = bb[base + QUEEN]
        if tables.bishop_attacks(sq, occ) & (bb[base + BISHOP] | queens) & occ:
            return True
        return bool(tables.rook_attacks(sq, occ) & (bb[base + ROOK] | queens) & occ)

    def in_check(self, side: Optional[int] = None) -> bool:
        """Return True if ``side`` (default: side to move) is in check."""
        s = self.side_to_move if side is None else _check_side(side)
        ksq = self.king_square(s)
        if ksq is None:
            return False
        return self.is_square_attacked(ksq, s ^ 1)

    def checkers(self) -> int:
        """Return the pieces giving check to the side to move."""
        ksq = self.king_square(self.side_to_move)
        if ksq is None:
            return 0
        return self.attackers_to(ksq, self.side_to_move ^ 1)

    # --- State transitions ---
    def make_move(self, move: Move) -> Undo:
        """Apply a pseudo-legal ``move`` in place.

        Returns:
            Undo: Data for :meth:`unmake_move`.

        Raises:
            IllegalMoveError: If ``move`` is not pseudo-legal here; the board
                is left untouched.
        """
        from .movegen import is_pseudo_legal

        if not is_pseudo_legal(self, move):
            raise IllegalMoveError(f"move {move.to_uci()} is not pseudo-legal in this position")
        return self.make_move_unchecked(move)

    def make_move_unchecked(self, move: Move) -> Undo:
        """Apply ``move`` in place without checking it against the position.

        The caller guarantees the move came from this position's move
        generator. Updates pieces, castling rights, en passant target, clocks,
        side to move and the Zobrist hash.
        """
        us = self.side_to_move
        them = us ^ 1
        fr, to, flags = move.from_sq, move.to_sq, move.flags
        bb = self.bb
        occ = self.occ
        from_bit = 1 << fr
        to_bit = 1 << to
        base = us * 6

        moved = None
        for p in range(base, base + 6):
            if bb[p] & from_bit:
                moved = p
                break
        if moved is None:
            raise IllegalMoveError(
                f"no {SIDE_TO_CHAR[us]} piece on {SQUARE_NAMES[fr]} for move {move.to_uci()}"
            )

        captured = None
        cap_sq = None
        if flags & EN_PASSANT:
            cap_sq = to - 8 if us == WHITE else to + 8
            captured = them * 6 + PAWN
        elif occ[them] & to_bit:
            cap_sq = to
            for p in range(them * 6, them * 6 + 6):
                if bb[p] & to_bit:
                    captured = p
                    break

        undo = Undo(
            moved,
            captured,
            cap_sq,
            self.castling,
            self.ep_square,
            self.halfmove_clock,
            self.fullmove_number,
            self.zobrist_hash,
        )

        keys = ZOBRIST.piece_square
        h = self.zobrist_hash

        if captured is not None:
            cap_bit = 1 << cap_sq
            bb[captured] ^= cap_bit
            occ[them] ^= cap_bit
            h ^= keys[captured][cap_sq]

        move_bits = from_bit | to_bit
        if flags & PROMOTION:
            placed = base + move.promotion
            bb[moved] ^= from_bit
            bb[placed] |= to_bit
            h ^= keys[moved][fr] ^ keys[placed][to]
        else:
            bb[moved] ^= move_bits
            h ^= keys[moved][fr] ^ keys[moved][to]
        occ[us] ^= move_bits

        if flags & CASTLE:
            rook_from, rook_to = CASTLE_ROOK_SQUARES[to]
            rook = base + ROOK
            rook_bits = (1 << rook_from) | (1 << rook_to)
            bb[rook] ^= rook_bits
            occ[us] ^= rook_bits
            h ^= keys[rook][rook_from] ^ keys[rook][rook_to]

        if self.ep_square is not None:
            h ^= ZOBRIST.ep_file[self.ep_square & 7]
        if flags & DOUBLE_PUSH:
            self.ep_square = (fr + to) >> 1
            h ^= ZOBRIST.ep_file[self.ep_square & 7]
        else:
            self.ep_square = None

        rights = self.castling & CASTLING_RIGHTS_MASK[fr] & CASTLING_RIGHTS_MASK[to]
        if rights != self.castling:
            h ^= ZOBRIST.castling[self.castling] ^ ZOBRIST.castling[rights]
            self.castling = rights

        if moved == base + PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1
        if us == BLACK:
            self.fullmove_number += 1

        self.side_to_move = them
        self.zobrist_hash = h ^ ZOBRIST.side_to_move
        return undo

    def unmake_move(self, move: Move, undo: Undo) -> None:
        """Reverse ``move`` using the ``undo`` returned when it was made.

        Must be called in strict LIFO order with the matching make call.
        """
        them = self.side_to_move
        us = them ^ 1
        fr, to, flags = move.from_sq, move.to_sq, move.flags
        bb = self.bb
        occ = self.occ
        from_bit = 1 << fr
        to_bit = 1 << to
        move_bits = from_bit | to_bit
        moved = undo.moved_piece

        if flags & PROMOTION:
            bb[us * 6 + move.promotion] ^= to_bit
            bb[moved] |= from_bit
        else:
            bb[moved] ^= move_bits
        occ[us] ^= move_bits

        if flags & CASTLE:
            rook_from, rook_to = CASTLE_ROOK_SQUARES[to]
            rook_bits = (1 << rook_from) | (1 << rook_to)
            bb[us * 6 + ROOK] ^= rook_bits
            occ[us] ^= rook_bits

        if undo.captured_piece is not None:
            cap_bit = 1 << undo.captured_sq
            bb[undo.captured_piece] |= cap_bit
            occ[them] |= cap_bit

        self.side_to_move = us
        self.castling = undo.castling
        self.ep_square = undo.ep_square
        self.halfmove_clock = undo.halfmove_clock
        self.fullmove_number = undo.fullmove_number
        self.zobrist_hash = undo.zobrist_hash

    def apply(self, move: Move) -> "Board":
        """Return a new Board with ``move`` applied if legal.

        - Validates the move against the legal moves of this position.
        - Applies the move on a copy; ``self`` is never modified.

        Raises:
            IllegalMoveError: If ``move`` is not legal here.
        """
        from .movegen import is_legal

        if not is_legal(self, move):
            raise IllegalMoveError(f"illegal move: {move.to_uci()}")
        child = self.copy()
        child.make_move_unchecked(move)
        return child

    # --- Display ---
    def _piece_char_at(self, sq: int) -> Optional[str]:
        p = self.piece_at(sq)
        return None if p is None else PIECE_TO_CHAR[p]

    def __str__(self) -> str:
        rows = []
        for rank_idx in range(7, -1, -1):
            cells = [self._piece_char_at(rank_idx * 8 + f) or "." for f in range(8)]
            rows.append(f"{rank_idx + 1} " + " ".join(cells))
        rows.append("  a b c d e f g h")
        ep = SQUARE_NAMES[self.ep_square] if self.ep_square is not None else "-"
        rows.append(
            f"{SIDE_TO_CHAR[self.side_to_move]} {self.castling_str} {ep} "
            f"{self.halfmove_clock} {self.fullmove_number}"
        )
        return "\n".join(rows)
