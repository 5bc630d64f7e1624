"""Pseudo-random sources consumed by the point generators."""
import time
from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    """Anything exposing uniform floats in [0, 1) and integers in [0, max]."""

    def random_float(self) -> float:
        ...

    def random_int(self, max_value: int) -> int:
        ...


class DefaultPRNG:
    """Mersenne Twister backed random source.

    Without a seed the generator mixes operating-system entropy with the
    wall-clock time, so two process runs never share a sequence. An explicit
    ``seed`` makes every draw reproducible.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            entropy = [np.random.SeedSequence().entropy, time.time_ns()]
            seed_seq = np.random.SeedSequence(entropy)
        else:
            if seed < 0:
                raise ValueError(f"seed must be non-negative, got {seed}")
            seed_seq = np.random.SeedSequence(seed)
        self.seed = seed
        self._gen = np.random.Generator(np.random.MT19937(seed_seq))

    def random_float(self) -> float:
        return float(self._gen.random())

    def random_int(self, max_value: int) -> int:
        if max_value < 0:
            raise ValueError(f"random_int requires max_value >= 0, got {max_value}")
        return int(self._gen.integers(0, max_value, endpoint=True))
