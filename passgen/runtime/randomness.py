# passgen/runtime/randomness.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import random
from typing import Any, List, Optional, Sequence

from passgen.runtime.concurrency import get_lock, with_lock


def default_random() -> random.SystemRandom:
    """
    Return the random source used when the caller supplies none. SystemRandom
    draws from ``os.urandom`` and keeps no shared state, so it is safe to use
    from several threads at once.
    """
    return random.SystemRandom()


class SerializedRandom:
    """
    Wraps a random source that is not safe for concurrent use, such as a
    seeded ``random.Random`` shared between threads, so every draw happens
    under one lock. The generator never wraps sources on its own.
    """

    def __init__(self, source: random.Random) -> None:
        """
        :param source: The random source whose draws should be serialized.
        """
        self._source = source
        self._lock = get_lock()

    def randrange(self, start: int, stop: Optional[int] = None, step: int = 1) -> int:
        with with_lock(self._lock):
            if stop is None:
                return self._source.randrange(start)
            return self._source.randrange(start, stop, step)

    def choice(self, seq: Sequence[Any]) -> Any:
        with with_lock(self._lock):
            return self._source.choice(seq)

    def choices(
        self,
        population: Sequence[Any],
        weights: Optional[Sequence[float]] = None,
        *,
        cum_weights: Optional[Sequence[float]] = None,
        k: int = 1,
    ) -> List[Any]:
        with with_lock(self._lock):
            return self._source.choices(population, weights, cum_weights=cum_weights, k=k)
