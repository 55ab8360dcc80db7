import itertools

import pytest

from maze.hilbert import hilbert_index, hilbert_point


def test_first_cube_is_gray_code_order():
    points = [hilbert_point(i, 1, 3) for i in range(8)]
    assert points[:4] == [(0, 0, 0), (0, 0, 1), (0, 1, 1), (0, 1, 0)]
    assert len(set(points)) == 8


@pytest.mark.parametrize("bits,dimensions", [(1, 2), (2, 2), (3, 2), (2, 3), (3, 3)])
def test_curve_is_bijective_and_continuous(bits, dimensions):
    total = 1 << (bits * dimensions)
    points = [hilbert_point(i, bits, dimensions) for i in range(total)]
    assert set(points) == set(itertools.product(range(1 << bits), repeat=dimensions))
    for a, b in zip(points, points[1:]):
        assert sum(abs(x - y) for x, y in zip(a, b)) == 1
    assert points[0] == (0,) * dimensions


@pytest.mark.parametrize("bits", [1, 2, 4])
def test_index_inverts_point(bits):
    for i in range(1 << (3 * bits)):
        assert hilbert_index(hilbert_point(i, bits, 3), bits) == i


def test_zero_order_curve_is_single_point():
    assert hilbert_point(0, 0, 3) == (0, 0, 0)
    assert hilbert_index((0, 0, 0), 0) == 0


def test_accepts_indices_beyond_64_bits():
    bits = 30
    index = (1 << 89) + 12345
    point = hilbert_point(index, bits, 3)
    assert all(0 <= c < 1 << bits for c in point)
    assert hilbert_index(point, bits) == index


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        hilbert_point(8, 1, 3)
    with pytest.raises(ValueError):
        hilbert_point(-1, 2, 3)
    with pytest.raises(ValueError):
        hilbert_index((2, 0, 0), 1)


def test_order_two_bit_layout():
    points = [hilbert_point(i, 2, 3) for i in range(9)]
    assert points == [
        (0, 0, 0),
        (0, 1, 0),
        (1, 1, 0),
        (1, 0, 0),
        (1, 0, 1),
        (1, 1, 1),
        (0, 1, 1),
        (0, 0, 1),
        (0, 0, 2),
    ]
