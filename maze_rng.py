from __future__ import annotations

"""Seeded random stream for maze generation.

A single :class:`MazeRNG` is created per generation run and handed from stage
to stage.  The order of draws is part of the reproducibility contract: the
edge shuffle consumes the stream first, the start-vertex pick second.
"""

from typing import Any, MutableSequence

import numpy as np

SEED_LIMIT = 2**64


class MazeRNG:
    def __init__(self, seed: int) -> None:
        if not 0 <= seed < SEED_LIMIT:
            raise ValueError(f"seed must be in [0, 2**64), got {seed}")
        self.initial_seed = seed
        self.rng = np.random.default_rng(self.initial_seed)

    def get_int(self, a: int, b: int) -> int:
        """Uniform integer in ``[a, b]`` (both ends inclusive)."""
        if a > b:
            raise ValueError("a <= b")
        return int(self.rng.integers(a, b + 1))

    def shuffle(self, seq: MutableSequence[Any] | np.ndarray) -> None:
        """Shuffle *seq* in place with a uniform Fisher-Yates permutation."""
        self.rng.shuffle(seq)


__all__ = ["MazeRNG", "SEED_LIMIT"]
