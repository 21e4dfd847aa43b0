from __future__ import annotations


class ChessCoreError(Exception):
    """Base class for every error raised by chesscore."""


class InvalidSquareError(ChessCoreError, ValueError):
    """A square index or square name is outside the board."""


class MalformedMoveError(ChessCoreError, ValueError):
    """Move fields are inconsistent, or UCI move text cannot be parsed."""


class InvalidPositionError(ChessCoreError, ValueError):
    """Board fields violate a position invariant."""


class EmptyBitboardError(ChessCoreError, ValueError):
    """A square was requested from an empty bitboard."""


class IllegalMoveError(ChessCoreError, ValueError):
    """A move is not valid for the board it was applied to.

    Raised before any state is touched, so the board stays as it was.
    """


class MagicSearchError(ChessCoreError, RuntimeError):
    """Magic-number search did not converge, or an entry failed verification."""
