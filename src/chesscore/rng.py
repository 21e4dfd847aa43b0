from __future__ import annotations


MASK64 = 0xFFFFFFFFFFFFFFFF


class SplitMix64:
    """Deterministic 64-bit SplitMix64 generator.

    Used wherever a reproducible stream is needed (Zobrist keys, magic
    candidates). Nearby seeds still produce unrelated streams.
    """

    def __init__(self, seed: int) -> None:
        self.state = seed & MASK64

    def next(self) -> int:
        self.state = (self.state + 0x9E3779B97F4A7C15) & MASK64
        z = self.state
        z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & MASK64
        z = (z ^ (z >> 27)) * 0x94D049BB133111EB & MASK64
        z = z ^ (z >> 31)
        return z & MASK64
