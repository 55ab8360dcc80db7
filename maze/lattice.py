# maze/lattice.py
"""Toroidal lattice: vertices, candidate edges and wraparound arithmetic.

Every vertex ``(row, col)`` owns exactly two candidate edges, a rightward one
and a downward one, so a lattice of side ``size`` has ``2 * size**2`` edges.
Edges are enumerated row-major with the rightward edge first, which is also
the order of their flat ids.
"""
from enum import Enum, IntEnum
from typing import Final, Iterator, NamedTuple, Tuple

Vertex = Tuple[int, int]  # (row, col)


class Orientation(IntEnum):
    RIGHT = 0
    DOWN = 1


class Direction(Enum):
    """Direction of a step between neighbouring vertices."""

    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    UP = "up"


class Edge(NamedTuple):
    """A candidate edge leaving ``(row, col)`` in ``orientation``."""

    row: int
    col: int
    orientation: Orientation


_OPPOSITES: Final[dict[Direction, Direction]] = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.DOWN: Direction.UP,
    Direction.UP: Direction.DOWN,
}


def edge_count(size: int) -> int:
    return 2 * size * size


def vertex_id(vertex: Vertex, size: int) -> int:
    row, col = vertex
    return row * size + col


def edge_id(edge: Edge, size: int) -> int:
    return (edge.row * size + edge.col) * 2 + int(edge.orientation)


def edge_from_id(eid: int, size: int) -> Edge:
    cell, orientation = divmod(eid, 2)
    row, col = divmod(cell, size)
    return Edge(row, col, Orientation(orientation))


def iter_edges(size: int) -> Iterator[Edge]:
    """Yields every candidate edge in flat-id order."""
    for row in range(size):
        for col in range(size):
            yield Edge(row, col, Orientation.RIGHT)
            yield Edge(row, col, Orientation.DOWN)


def neighbors_of(
    vertex: Vertex, orientation: Orientation, size: int
) -> Tuple[Vertex, Vertex]:
    """Both endpoints of the edge leaving *vertex* in *orientation*."""
    row, col = vertex
    if orientation == Orientation.RIGHT:
        return (row, col), (row, (col + 1) % size)
    return (row, col), ((row + 1) % size, col)


def step(vertex: Vertex, direction: Direction, size: int) -> Vertex:
    row, col = vertex
    if direction is Direction.RIGHT:
        return row, (col + 1) % size
    if direction is Direction.DOWN:
        return (row + 1) % size, col
    if direction is Direction.LEFT:
        return row, (col + size - 1) % size
    return (row + size - 1) % size, col


def edge_towards(vertex: Vertex, direction: Direction, size: int) -> Edge:
    """The candidate edge joining *vertex* to its neighbour in *direction*.

    Leftward and upward steps use the neighbour's own rightward/downward edge.
    """
    if direction is Direction.RIGHT:
        return Edge(vertex[0], vertex[1], Orientation.RIGHT)
    if direction is Direction.DOWN:
        return Edge(vertex[0], vertex[1], Orientation.DOWN)
    row, col = step(vertex, direction, size)
    if direction is Direction.LEFT:
        return Edge(row, col, Orientation.RIGHT)
    return Edge(row, col, Orientation.DOWN)


def opposite(direction: Direction) -> Direction:
    return _OPPOSITES[direction]


def opposite_edge(vertex: Vertex, orientation: Orientation, size: int) -> Edge:
    """The edge entering *vertex* from the side opposite to *orientation*.

    For a rightward orientation this is the rightward edge of the left
    neighbour; for a downward one, the downward edge of the upper neighbour.
    """
    if orientation == Orientation.RIGHT:
        return edge_towards(vertex, Direction.LEFT, size)
    return edge_towards(vertex, Direction.UP, size)
