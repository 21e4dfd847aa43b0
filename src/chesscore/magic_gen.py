"""Regenerate :mod:`chesscore.magic_constants`.

Run ``python -m chesscore.magic_gen --output src/chesscore/magic_constants.py``
after changing the search. The module it writes holds one
``(mask, magic, shift)`` triple per square and slider kind; tables are
rebuilt from those triples at startup instead of searched.
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from .config import DEFAULT_MAGIC_SEED, DEFAULT_MAX_ATTEMPTS, MagicSearchSettings
from .sliding import SlidingAttackTables
from .squares import SQUARE_NAMES


logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = os.path.join(os.path.dirname(__file__), "magic_constants.py")


def render_module(tables: SlidingAttackTables, seed: int) -> str:
    """Return the source of a constants module for ``tables``."""
    lines = [
        "# Generated by `python -m chesscore.magic_gen`. Do not edit.",
        '"""Precomputed magic constants: one ``(mask, magic, shift)`` triple per square."""',
        "",
        f"SEED = {seed:#018x}",
        "",
    ]
    for name, entries in (("BISHOP_MAGICS", tables.bishop), ("ROOK_MAGICS", tables.rook)):
        lines.append(f"{name} = (")
        for e in entries:
            lines.append(
                f"    ({e.mask:#018x}, {e.magic:#018x}, {e.shift}),  # {SQUARE_NAMES[e.square]}"
            )
        lines.append(")")
        lines.append("")
    return "\n".join(lines[:-1]) + "\n"


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Search magic numbers and write them as a module")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="Module path to write")
    parser.add_argument(
        "--seed", type=lambda s: int(s, 0), default=DEFAULT_MAGIC_SEED, help="Base search seed"
    )
    parser.add_argument(
        "--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS, help="Draws allowed per square"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    settings = MagicSearchSettings(seed=args.seed, max_attempts=args.max_attempts)
    tables = SlidingAttackTables.build(settings)
    with open(args.output, "w", encoding="utf-8") as f:
        f.write(render_module(tables, args.seed))
    logger.info("magic constants written", extra={"path": args.output, "seed": args.seed})
    print(args.output)


if __name__ == "__main__":
    main()
