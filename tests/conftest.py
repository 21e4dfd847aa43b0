import os
import sys
from typing import Any, Callable

import pytest


# Ensure the repository's src/ is on sys.path for `import chesscore` without installing
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_PATH = os.path.join(REPO_ROOT, "src")
SRC_PATH = os.path.abspath(SRC_PATH)
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from chesscore.board import Board  # noqa: E402
# Reference positions written as "<symbol><square>" tokens
KIWIPETE = (
    "ra8 ke8 rh8 pa7 pc7 pd7 qe7 pf7 bg7 ba6 nb6 pe6 nf6 pg6 Pd5 Ne5 pb4 Pe4 "
    "Nc3 Qf3 ph3 Pa2 Pb2 Pc2 Bd2 Be2 Pf2 Pg2 Ph2 Ra1 Ke1 Rh1"
)
POSITION_3 = "pc7 pd6 Ka5 Pb5 rh5 Rb4 pf4 kh4 Pe2 Pg2"
POSITION_4 = (
    "ra8 ke8 rh8 Pa7 pb7 pc7 pd7 pf7 pg7 ph7 bb6 nf6 bg6 Nh6 na5 Pb5 Ba4 Bb4 "
    "Pc4 Pe4 qa3 Nf3 Pa2 pb2 Pd2 Pg2 Ph2 Ra1 Qd1 Rf1 Kg1"
)
POSITION_5 = (
    "ra8 nb8 bc8 qd8 kf8 rh8 pa7 pb7 Pd7 be7 pf7 pg7 ph7 pc6 Bc4 Pa2 Pb2 Pc2 "
    "Ne2 nf2 Pg2 Ph2 Ra1 Nb1 Bc1 Qd1 Ke1 Rh1"
)


def build(layout: str, **fields: Any) -> Board:
    pieces = {token[1:]: token[0] for token in layout.split()}
    return Board.from_pieces(pieces, **fields)


@pytest.fixture
def place() -> Callable[..., Board]:
    """Builder for boards from tokens like ``"Ke1 ke8 Ra1"``.

    Keyword arguments are passed to ``Board.from_pieces``.
    """
    return build


@pytest.fixture
def kiwipete() -> Board:
    return build(KIWIPETE, castling="KQkq")


@pytest.fixture
def position3() -> Board:
    return build(POSITION_3)


@pytest.fixture
def position4() -> Board:
    return build(POSITION_4, castling="kq")


@pytest.fixture
def position5() -> Board:
    return build(POSITION_5, castling="KQ", halfmove_clock=1, fullmove_number=8)
