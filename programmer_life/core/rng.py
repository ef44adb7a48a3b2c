from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Generic, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def next_int(self, min_inclusive: int, max_exclusive: int) -> int: ...

    def next_float(self) -> float: ...


def seed_to_uint32(seed: int | str) -> int:
    text = str(seed).encode("utf-8")
    digest = hashlib.sha256(text).hexdigest()
    value = int(digest[:8], 16)
    return value if value != 0 else 0x9E3779B9


@dataclass(slots=True)
class WeightedEntry(Generic[T]):
    value: T
    weight: int


@dataclass(slots=True)
class DeterministicRNG:
    seed: int | str
    state: int
    calls: int = 0

    @classmethod
    def from_seed(cls, seed: int | str) -> "DeterministicRNG":
        return cls(seed=seed, state=seed_to_uint32(seed), calls=0)

    def _next_uint32(self) -> int:
        value = self.state & 0xFFFFFFFF
        value ^= (value << 13) & 0xFFFFFFFF
        value ^= (value >> 17) & 0xFFFFFFFF
        value ^= (value << 5) & 0xFFFFFFFF
        value &= 0xFFFFFFFF
        self.state = value if value != 0 else 0x6D2B79F5
        self.calls += 1
        return self.state

    def next_float(self) -> float:
        return self._next_uint32() / 2**32

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        if max_exclusive <= min_inclusive:
            raise ValueError(
                f"next_int requires max_exclusive ({max_exclusive}) > min_inclusive ({min_inclusive})."
            )
        span = max_exclusive - min_inclusive
        return min_inclusive + int(self.next_float() * span)


def pick_weighted(rng: RandomSource, entries: Sequence[WeightedEntry[T]]) -> T:
    """Pick one entry by cumulative integer weight.

    The draw is a uniform integer in ``[0, total)`` where ``total`` is the
    weight sum floored at 1, so an all-zero pool still yields its last entry.
    """
    if not entries:
        raise ValueError("pick_weighted requires at least one entry.")

    total_weight = max(sum(max(0, entry.weight) for entry in entries), 1)
    roll = rng.next_int(0, total_weight)
    cumulative = 0
    for entry in entries:
        cumulative += max(0, entry.weight)
        if roll < cumulative:
            return entry.value
    return entries[-1].value
