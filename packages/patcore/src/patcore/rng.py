from __future__ import annotations
import secrets
from typing import Iterator, Protocol

_MASK32 = 0xFFFFFFFF
_TWO32 = 4294967296.0
_GOLDEN32 = 0x6D2B79F5

_B36 = "0123456789abcdefghijklmnopqrstuvwxyz"
SEED_LEN = 8


def fold_seed32(seed: str) -> int:
    """Fold a seed string into an unsigned 32-bit state (h = 31*h + c, wrapping).

    Iterates UTF-16 code units so astral characters count as two units.
    """
    h = 0
    data = seed.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        c = data[i] | (data[i + 1] << 8)
        h = (31 * h + c) & _MASK32
    return h


class SeededRandom:
    """mulberry32 stream seeded from a string. One instance per generation call."""

    __slots__ = ("_state",)

    def __init__(self, seed: str):
        self._state = fold_seed32(seed)

    def next(self) -> float:
        self._state = (self._state + _GOLDEN32) & _MASK32
        h = self._state
        t = ((h ^ (h >> 15)) * (h | 1)) & _MASK32
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32) ^ t
        return ((t ^ (t >> 14)) & _MASK32) / _TWO32

    def uniform(self, lo: float, hi: float) -> float:
        return lo + self.next() * (hi - lo)

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.next()


class EntropySource(Protocol):
    def randbelow(self, n: int) -> int: ...


class SystemEntropy:
    """Default entropy: OS CSPRNG through `secrets`."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


def _to_base36(n: int, width: int) -> str:
    out = []
    for _ in range(width):
        n, r = divmod(n, 36)
        out.append(_B36[r])
    return "".join(reversed(out))


def mint_seed(entropy: EntropySource | None = None) -> str:
    """Mint a fresh 8-char base-36 seed from `entropy` (system CSPRNG by default)."""
    src = entropy if entropy is not None else SystemEntropy()
    return _to_base36(src.randbelow(36 ** SEED_LEN), SEED_LEN)


def resolve_seed(seed: str | None, entropy: EntropySource | None = None) -> str:
    """Return `seed` when given (non-empty), otherwise a freshly minted one."""
    if seed:
        return str(seed)
    return mint_seed(entropy)


def rng_for(seed: str | None, entropy: EntropySource | None = None) -> tuple[str, SeededRandom]:
    s = resolve_seed(seed, entropy)
    return s, SeededRandom(s)
