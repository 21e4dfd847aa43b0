from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union

from .board import Board, Undo
from .errors import IllegalMoveError
from .move import Move
from .movegen import has_legal_moves, is_legal, legal_moves, move_from_uci


logger = logging.getLogger(__name__)


@dataclass
class Game:
    """Game wrapper around a board with helper operations.

    Responsibility: track board state and move history, expose legal moves,
    apply and undo moves, answer terminal-state questions.
    """

    board: Board
    move_stack: List[Tuple[Move, Undo]] = field(default_factory=list)
    repetition: Dict[int, int] = field(default_factory=dict)

    @classmethod
    def new(cls) -> "Game":
        return cls(board=Board.startpos())

    def __post_init__(self) -> None:
        # Seed repetition with current position
        h = self.board.zobrist_hash
        self.repetition[h] = self.repetition.get(h, 0) + 1

    @property
    def ply(self) -> int:
        return len(self.move_stack)

    def legal_moves(self) -> List[Move]:
        return legal_moves(self.board)

    def apply_move(self, move: Union[Move, str]) -> Move:
        """Play ``move`` (a :class:`Move` or UCI text) and record it.

        Raises:
            IllegalMoveError: If the move is not legal; the game is unchanged.
            MalformedMoveError: If UCI text cannot be parsed.
        """
        if isinstance(move, str):
            try:
                move = move_from_uci(self.board, move)
            except IllegalMoveError:
                logger.debug("rejected move", extra={"move": move, "ply": self.ply})
                raise
        elif not is_legal(self.board, move):
            logger.debug("rejected move", extra={"move": move.to_uci(), "ply": self.ply})
            raise IllegalMoveError(f"illegal move: {move.to_uci()}")
        undo = self.board.make_move_unchecked(move)
        self.move_stack.append((move, undo))
        h = self.board.zobrist_hash
        self.repetition[h] = self.repetition.get(h, 0) + 1
        return move

    def undo_move(self) -> Move:
        if not self.move_stack:
            raise ValueError("no moves to undo")
        # Decrement count for current position
        curr = self.board.zobrist_hash
        if curr in self.repetition:
            self.repetition[curr] -= 1
            if self.repetition[curr] <= 0:
                del self.repetition[curr]
        last, undo = self.move_stack.pop()
        self.board.unmake_move(last, undo)
        return last

    # --- State flags ---
    def in_check(self) -> bool:
        return self.board.in_check()

    def checkmate(self) -> bool:
        return self.board.in_check() and not has_legal_moves(self.board)

    def stalemate(self) -> bool:
        return (not self.board.in_check()) and not has_legal_moves(self.board)

    def is_draw(self) -> bool:
        # Draw by 50-move rule, stalemate, or threefold repetition
        if self.board.halfmove_clock >= 100:
            return True
        if self.stalemate():
            return True
        return self.repetition.get(self.board.zobrist_hash, 0) >= 3

    def move_history_uci(self) -> List[str]:
        return [m.to_uci() for m, _ in self.move_stack]
