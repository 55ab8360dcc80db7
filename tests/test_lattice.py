from maze.lattice import (
    Direction,
    Edge,
    Orientation,
    edge_count,
    edge_from_id,
    edge_id,
    edge_towards,
    iter_edges,
    neighbors_of,
    opposite,
    opposite_edge,
    step,
)


def test_edge_enumeration_matches_flat_ids():
    size = 3
    edges = list(iter_edges(size))
    assert len(edges) == edge_count(size) == 18
    assert edges[0] == Edge(0, 0, Orientation.RIGHT)
    assert edges[1] == Edge(0, 0, Orientation.DOWN)
    for eid, edge in enumerate(edges):
        assert edge_id(edge, size) == eid
        assert edge_from_id(eid, size) == edge


def test_neighbors_wrap_around():
    assert neighbors_of((1, 3), Orientation.RIGHT, 4) == ((1, 3), (1, 0))
    assert neighbors_of((3, 2), Orientation.DOWN, 4) == ((3, 2), (0, 2))
    # A 1x1 torus only has self-loops
    assert neighbors_of((0, 0), Orientation.RIGHT, 1) == ((0, 0), (0, 0))
    assert neighbors_of((0, 0), Orientation.DOWN, 1) == ((0, 0), (0, 0))


def test_step_and_opposite():
    size = 5
    for direction in Direction:
        back = step(step((0, 0), direction, size), opposite(direction), size)
        assert back == (0, 0)
    assert step((0, 0), Direction.LEFT, size) == (0, 4)
    assert step((0, 0), Direction.UP, size) == (4, 0)


def test_edge_towards_uses_neighbour_edge_for_left_and_up():
    size = 4
    assert edge_towards((2, 0), Direction.RIGHT, size) == Edge(2, 0, Orientation.RIGHT)
    assert edge_towards((2, 0), Direction.DOWN, size) == Edge(2, 0, Orientation.DOWN)
    assert edge_towards((2, 0), Direction.LEFT, size) == Edge(2, 3, Orientation.RIGHT)
    assert edge_towards((0, 1), Direction.UP, size) == Edge(3, 1, Orientation.DOWN)


def test_opposite_edge():
    size = 4
    assert opposite_edge((1, 0), Orientation.RIGHT, size) == Edge(1, 3, Orientation.RIGHT)
    assert opposite_edge((0, 2), Orientation.DOWN, size) == Edge(3, 2, Orientation.DOWN)
