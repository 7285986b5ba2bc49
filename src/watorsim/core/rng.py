"""
Random sources for neighbor selection and initial placement.

The update rules never touch a global generator. They receive a
RandomSource, which comes in three shapes:
- NumpyRandomSource: a numpy Generator; spawn() gives each worker its own
  independent stream, so workers never share generator state
- LockedRandomSource: one source shared by all workers behind a lock
- SequenceRandomSource: replays fixed integers, for deterministic tests

With independent worker streams the trajectory depends on how rows are
partitioned; sequential and parallel runs are not bit-identical.
"""

from __future__ import annotations
import threading
from typing import Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for uniform integer generators used by the engine."""

    def randrange(self, n: int) -> int:
        """Uniform integer in [0, n). n must be positive."""
        ...

    def permutation(self, n: int) -> list[int]:
        """A permutation of range(n)."""
        ...

    def spawn(self, k: int) -> list["RandomSource"]:
        """k sources that are safe to use from k concurrent workers."""
        ...


class NumpyRandomSource:
    """RandomSource backed by numpy.random.Generator."""

    def __init__(self, generator: np.random.Generator | None = None, seed: int | None = None):
        if generator is None:
            generator = np.random.default_rng(seed)
        self.generator = generator

    def randrange(self, n: int) -> int:
        return int(self.generator.integers(n))

    def permutation(self, n: int) -> list[int]:
        return self.generator.permutation(n).tolist()

    def spawn(self, k: int) -> list[RandomSource]:
        # Each call yields fresh children, so successive steps differ
        return [NumpyRandomSource(child) for child in self.generator.spawn(k)]


class LockedRandomSource:
    """
    One source shared across workers, serialized by a lock.

    Neighbor draws are short, so workers never wait long on the lock.
    """

    def __init__(self, inner: RandomSource):
        self.inner = inner
        self._lock = threading.Lock()

    def randrange(self, n: int) -> int:
        with self._lock:
            return self.inner.randrange(n)

    def permutation(self, n: int) -> list[int]:
        with self._lock:
            return self.inner.permutation(n)

    def spawn(self, k: int) -> list[RandomSource]:
        return [self] * k


class SequenceRandomSource:
    """
    Deterministic source that replays a fixed list of integers.

    Each draw takes the next value modulo n, cycling through the list.
    permutation() is the identity. spawn() hands every worker its own
    replay from the start of the list.
    """

    def __init__(self, values: Sequence[int] = (0,)):
        if len(values) == 0:
            raise ValueError("SequenceRandomSource needs at least one value")
        self.values = list(values)
        self._index = 0

    def randrange(self, n: int) -> int:
        value = self.values[self._index % len(self.values)]
        self._index += 1
        return value % n

    def permutation(self, n: int) -> list[int]:
        return list(range(n))

    def spawn(self, k: int) -> list[RandomSource]:
        return [SequenceRandomSource(self.values) for _ in range(k)]

    @property
    def draws(self) -> int:
        """Number of values consumed so far."""
        return self._index


def create_random_source(seed: int | None = None) -> NumpyRandomSource:
    """Factory for the default random source."""
    return NumpyRandomSource(seed=seed)
