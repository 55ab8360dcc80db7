# maze/walker.py
"""Iterative depth-first walk of a spanning tree.

The walk keeps an explicit stack of ``(vertex, arrival_direction)`` pairs.
Because the tree has no cycles, refusing to step back across the edge just
arrived by is enough to reach every vertex exactly once; no visited set is
kept.  Neighbours are pushed in the order right, down, left, up, so the last
one pushed is explored first.  That order fixes which vertex receives which
index and must not change.
"""
from typing import Final, Iterator, List, NamedTuple, Optional, Tuple

import structlog

from maze.lattice import Direction, Vertex, edge_towards, opposite, step
from maze.spanning_tree import SpanningTree
from maze_rng import MazeRNG

log = structlog.get_logger(__name__)

PUSH_ORDER: Final[Tuple[Direction, ...]] = (
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
    Direction.UP,
)


class Visit(NamedTuple):
    row: int
    col: int
    index: int  # arbitrary precision


def pick_start(size: int, rng: MazeRNG) -> Vertex:
    """Random start vertex; draws the row first, then the column."""
    row = rng.get_int(0, size - 1)
    col = rng.get_int(0, size - 1)
    return row, col


def walk_tree(tree: SpanningTree, start: Vertex) -> Iterator[Visit]:
    """Yields every vertex of *tree* once, in pre-order, with its index."""
    size = tree.size
    if not (0 <= start[0] < size and 0 <= start[1] < size):
        raise ValueError(f"start vertex {start} outside a {size}x{size} lattice")

    stack: List[Tuple[Vertex, Optional[Direction]]] = [(start, None)]
    index = 0
    while stack:
        vertex, arrived = stack.pop()
        yield Visit(vertex[0], vertex[1], index)
        index += 1

        came_from = opposite(arrived) if arrived is not None else None
        for direction in PUSH_ORDER:
            if direction is came_from:
                continue
            if edge_towards(vertex, direction, size) in tree:
                stack.append((step(vertex, direction, size), direction))


def visitation_order(tree: SpanningTree, start: Vertex) -> List[Visit]:
    visits = list(walk_tree(tree, start))
    log.debug("Tree walk finished", start=start, visited=len(visits))
    return visits
