"""
Deterministic pseudo-random values derived from strings.

The same seed always produces the same stream on every platform, so the
values drawn here (atom jitter, safety percentages) stay stable across
reruns of the app. Nothing here is cryptographic or statistically
meaningful.
"""

import struct

MASK_32 = 0xFFFFFFFF
FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 16777619

SCORE_MIN = 5
SCORE_SPAN = 91  # SCORE_MIN + 0..90 -> 5..95


def utf16_code_units(text: str):
    data = text.encode("utf-16-le", "surrogatepass")
    return struct.unpack(f"<{len(data) // 2}H", data)


def fnv1a_32(text: str) -> int:
    """FNV-1a fold over the UTF-16 code units of ``text`` (32-bit)."""
    h = FNV_OFFSET_BASIS
    for unit in utf16_code_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & MASK_32
    return h


class SeededRandom:
    """xorshift32 generator seeded from a string.

    Draws are in [0, 1) with a resolution of 1e-6:

        rng = SeededRandom("CCO")
        rng.next()
    """

    def __init__(self, seed: str):
        self.seed = seed
        self.state = fnv1a_32(seed)

    def next(self) -> float:
        s = self.state
        s ^= (s << 13) & MASK_32
        s ^= s >> 17
        s ^= (s << 5) & MASK_32
        self.state = s
        return (s % 1_000_000) / 1_000_000

    def __repr__(self):
        return f"SeededRandom(seed={self.seed!r}, state={self.state:#010x})"

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.next()

    def __iter__(self):
        return self

    def __next__(self) -> float:
        return self.next()


def score_from_seed(seed: str, salt: str) -> int:
    # map to 5..95 for nicer percentages
    h = fnv1a_32(f"{seed}|{salt}")
    return SCORE_MIN + h % SCORE_SPAN
