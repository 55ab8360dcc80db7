# maze/spanning_tree.py
"""Random spanning tree of the toroidal lattice (randomized Kruskal).

Edges carry no weights: a uniformly shuffled edge order stands in for random
weights, and each edge is kept when it joins two different components.
"""
from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np
import structlog
from numba import njit

from maze.disjoint_set import DisjointSet, _join
from maze.errors import ConfigurationError
from maze.lattice import Edge, Orientation, edge_count
from maze_rng import MazeRNG

log = structlog.get_logger(__name__)


@dataclass
class SpanningTree:
    """Membership set of tree edges keyed by ``(row, col, orientation)``."""

    size: int
    mask: np.ndarray  # bool[size, size, 2]

    def __contains__(self, edge: object) -> bool:
        row, col, orientation = edge  # type: ignore[misc]
        return bool(self.mask[row, col, int(orientation)])

    def __len__(self) -> int:
        return int(np.count_nonzero(self.mask))

    def __iter__(self) -> Iterator[Edge]:
        for row, col, orientation in np.argwhere(self.mask):
            yield Edge(int(row), int(col), Orientation(int(orientation)))

    @property
    def vertex_count(self) -> int:
        return self.size * self.size


@njit(cache=True, nogil=True)
def _kruskal(
    order: np.ndarray,
    size: int,
    parent: np.ndarray,
    rank: np.ndarray,
    mask: np.ndarray,
) -> int:
    """Joins endpoints in *order*, flagging edges that merged two components."""
    added = 0
    for k in range(order.shape[0]):
        eid = order[k]
        cell = eid // 2
        row = cell // size
        col = cell % size
        # Same wraparound as lattice.neighbors_of
        if eid % 2 == 0:
            other = row * size + (col + 1) % size
        else:
            other = ((row + 1) % size) * size + col
        if _join(parent, rank, cell, other):
            mask[eid] = True
            added += 1
    return added


def build_spanning_tree_with_sets(
    size: int, rng: MazeRNG
) -> Tuple[SpanningTree, DisjointSet]:
    """Builds the tree and also returns the disjoint set it was built with."""
    if size < 1:
        raise ConfigurationError(f"lattice size must be at least 1, got {size}")

    order = np.arange(edge_count(size), dtype=np.int64)
    rng.shuffle(order)

    vertices = DisjointSet(size * size)
    flat_mask = np.zeros(order.shape[0], dtype=np.bool_)
    added = _kruskal(order, size, vertices.parent, vertices.rank, flat_mask)

    tree = SpanningTree(size=size, mask=flat_mask.reshape(size, size, 2))
    log.debug(
        "Spanning tree built",
        size=size,
        candidate_edges=int(order.shape[0]),
        tree_edges=int(added),
    )
    return tree, vertices


def build_spanning_tree(size: int, rng: MazeRNG) -> SpanningTree:
    """Random spanning tree over the ``size x size`` torus.

    Consumes exactly one shuffle from *rng*.  The result has ``size**2 - 1``
    edges for every ``size >= 1``.
    """
    tree, _ = build_spanning_tree_with_sets(size, rng)
    return tree
