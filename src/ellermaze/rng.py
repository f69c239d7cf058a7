# src/ellermaze/rng.py
# Park–Miller minimal standard stream. Every maze owns one instance; nothing
# in the pipeline touches module-level random state.

import hashlib
import logging
import secrets
from dataclasses import dataclass
from typing import List, Optional, Sequence, TypeVar, Union

A = 16807
M = 0x7FFFFFFF  # 2^31-1

T = TypeVar("T")
SeedValue = Union[str, int]

log = logging.getLogger(__name__)


def pm_next(state: int) -> int:
    return (state * A) % M


@dataclass
class PMRandom:
    state: int

    def __post_init__(self) -> None:
        if not 0 < self.state < M:
            raise ValueError(f"PMRandom state must be in 1..{M - 1}, got {self.state}")

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        # Open interval (0, 1): the stream never yields 0 or M.
        return self.next32() / M

    def bounded(self, n: int) -> int:
        """
        Return an int in 1..n inclusive, uniformly.
        States above the largest multiple of n in 1..M-1 are redrawn so every
        residue is equally likely; for small n this almost never costs a draw.
        """
        if n <= 0:
            raise ValueError(f"bounded() needs n > 0, got {n}")
        limit = (M - 1) - (M - 1) % n
        w = self.next32()
        while w > limit:
            w = self.next32()
        return (w % n) + 1

    def shuffle(self, items: List[T]) -> None:
        """In-place Fisher–Yates, walking from the back."""
        for i in range(len(items) - 1, 0, -1):
            j = self.bounded(i + 1) - 1
            items[i], items[j] = items[j], items[i]

    def sample(self, items: Sequence[T], k: int) -> List[T]:
        """
        k distinct picks without replacement (partial Fisher–Yates over a copy).
        One bounded() call per pick, including the last forced one.
        """
        pool = list(items)
        if not 0 <= k <= len(pool):
            raise ValueError(f"sample size {k} out of range for {len(pool)} items")
        for i in range(k):
            j = i + self.bounded(len(pool) - i) - 1
            pool[i], pool[j] = pool[j], pool[i]
        return pool[:k]


def seed_from_value(value: SeedValue) -> int:
    """
    Map any caller seed onto a valid stream state:
    first 4 bytes (big-endian) of sha256(str(value)), folded into 1..M-1.
    """
    digest = hashlib.sha256(str(value).encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big") % (M - 1) + 1


def fresh_seed() -> int:
    return secrets.randbelow(M - 1) + 1


def make_rng(seed: Optional[SeedValue] = None) -> PMRandom:
    if seed is None:
        state = fresh_seed()
        log.debug("no seed given, drew state=%d", state)
    else:
        state = seed_from_value(seed)
        log.debug("seed %r -> state=%d", seed, state)
    return PMRandom(state)
