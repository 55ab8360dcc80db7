# maze/disjoint_set.py
"""Union-find over flat vertex ids, with numba-compiled find/join kernels."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numba import njit


@njit(cache=True, nogil=True)
def _find(parent: np.ndarray, index: int) -> int:
    root = index
    while parent[root] != root:
        root = parent[root]
    # Path compression
    while parent[index] != root:
        nxt = parent[index]
        parent[index] = root
        index = nxt
    return root


@njit(cache=True, nogil=True)
def _join(parent: np.ndarray, rank: np.ndarray, left: int, right: int) -> bool:
    root_left = _find(parent, left)
    root_right = _find(parent, right)
    if root_left == root_right:
        return False
    if rank[root_left] < rank[root_right]:
        root_left, root_right = root_right, root_left
    parent[root_right] = root_left
    if rank[root_left] == rank[root_right]:
        rank[root_left] += 1
    return True


@dataclass
class DisjointSet:
    """Union-find structure with one entry per lattice vertex."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = np.arange(self.size, dtype=np.int64)
        self.rank = np.zeros(self.size, dtype=np.int32)

    def _check(self, index: int) -> int:
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} out of range for {self.size} entries")
        return int(index)

    def find(self, index: int) -> int:
        return int(_find(self.parent, self._check(index)))

    def join(self, left: int, right: int) -> bool:
        """Union the sets of *left* and *right*.

        Returns True when they were previously distinct, i.e. when an edge
        between them does not close a cycle.
        """
        return bool(_join(self.parent, self.rank, self._check(left), self._check(right)))

    def same_set(self, left: int, right: int) -> bool:
        return self.find(left) == self.find(right)

    @property
    def component_count(self) -> int:
        return int(np.count_nonzero(self.parent == np.arange(self.size)))
