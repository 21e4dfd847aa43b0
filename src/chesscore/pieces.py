from __future__ import annotations

from typing import Dict


WHITE, BLACK = 0, 1
SIDES = (WHITE, BLACK)
SIDE_TO_CHAR = {WHITE: "w", BLACK: "b"}
CHAR_TO_SIDE = {v: k for k, v in SIDE_TO_CHAR.items()}

PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING = range(6)
PIECE_KINDS = (PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING)
KIND_NAMES = ("pawn", "knight", "bishop", "rook", "queen", "king")
# Emission order for promotions: queen first
PROMOTION_KINDS = (QUEEN, ROOK, BISHOP, KNIGHT)
KIND_TO_CHAR = {PAWN: "p", KNIGHT: "n", BISHOP: "b", ROOK: "r", QUEEN: "q", KING: "k"}
CHAR_TO_KIND = {v: k for k, v in KIND_TO_CHAR.items()}

# Piece indices for the 12 bitboards: side * 6 + kind
WP, WN, WB, WR, WQ, WK, BP, BN, BB, BR, BQ, BK = range(12)
PIECE_ORDER = [WP, WN, WB, WR, WQ, WK, BP, BN, BB, BR, BQ, BK]
PIECE_TO_CHAR: Dict[int, str] = {
    WP: "P",
    WN: "N",
    WB: "B",
    WR: "R",
    WQ: "Q",
    WK: "K",
    BP: "p",
    BN: "n",
    BB: "b",
    BR: "r",
    BQ: "q",
    BK: "k",
}
CHAR_TO_PIECE = {v: k for k, v in PIECE_TO_CHAR.items()}


def piece_index(side: int, kind: int) -> int:
    return side * 6 + kind


def side_of(piece: int) -> int:
    return piece // 6


def kind_of(piece: int) -> int:
    return piece % 6


def opponent(side: int) -> int:
    return side ^ 1
