"""
Python implementation of the Alea PRNG.

Based on Johannes Baagøe's Alea algorithm; a direct port of the JavaScript
version, so a given seed yields the same sequence in either language.
"""

_TWO_POW_32 = 0x100000000
_TWO_POW_NEG_32 = 2.3283064365386963e-10


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class _Mash:
    """Alea's string hashing step, stateful across calls."""

    def __init__(self):
        self.n = 0xEFC8249D

    def __call__(self, data) -> float:
        for char in str(data):
            self.n = self.n + ord(char)
            h = 0.02519603282416938 * self.n
            self.n = _uint32(h)
            h -= self.n
            h *= self.n
            self.n = _uint32(h)
            h -= self.n
            self.n += h * _TWO_POW_32
        return _uint32(self.n) * _TWO_POW_NEG_32


class AleaPRNG:
    """
    Alea PRNG seeded from an int, a string, or a sequence of them.

    Each seed part is hashed in turn, so ``AleaPRNG((7, 1, 2))`` and
    ``AleaPRNG((7, 2, 1))`` give unrelated streams.

    Attributes:
        seed: The seed the generator was built from.
        call_count (int): Number of values drawn so far.
    """

    def __init__(self, seed):
        """Initialize with seed string, number, or a sequence of those."""
        self.seed = seed
        self.call_count = 0

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            parts = list(seed)
        else:
            parts = [seed]

        mash = _Mash()
        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for part in parts:
            self.s0 -= mash(part)
            if self.s0 < 0:
                self.s0 += 1
            self.s1 -= mash(part)
            if self.s1 < 0:
                self.s1 += 1
            self.s2 -= mash(part)
            if self.s2 < 0:
                self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * _TWO_POW_NEG_32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def uniform(self, low: float, high: float) -> float:
        """Draw a float between low and high without forming high - low."""
        r = self.random()
        return low * (1.0 - r) + high * r
