import numpy as np

from maze.colorizer import Colorizer, color_base, color_base_to_color, curve_bits
from maze.walker import Visit


def test_curve_bits():
    assert curve_bits(1) == 0
    assert curve_bits(4) == 2
    assert curve_bits(9) == 4
    assert curve_bits(16) == 4
    assert curve_bits(256) == 8
    assert curve_bits(0) == 8


def test_channel_scaling_uses_integer_division():
    assert color_base_to_color((0, 1, 3), 4) == (0, 85, 255)
    assert color_base_to_color((1, 4, 8), 9) == (31, 127, 255)


def test_single_level_saturates_to_zero():
    assert color_base_to_color((0, 0, 0), 1) == (0, 0, 0)


def test_color_base_casts_to_eight_bits():
    assert color_base((1, 255, 256)) == (1, 255, 0)


def test_colors_stay_in_channel_range():
    for scale in (2, 3, 4):
        colorizer = Colorizer(scale)
        for index in range(scale**6):
            assert all(0 <= c <= 255 for c in colorizer.color_for(index))


def test_colorize_writes_row_col():
    colorizer = Colorizer(2)
    buffer = np.zeros((8, 8, 3), dtype=np.uint8)
    visits = [Visit(0, 0, 0), Visit(3, 5, 1), Visit(7, 2, 63)]
    assert colorizer.colorize(visits, buffer) == 3
    assert tuple(buffer[0, 0]) == (0, 0, 0)
    assert tuple(buffer[3, 5]) == colorizer.color_for(1)
    assert sorted(buffer[3, 5].tolist()) == [0, 0, 85]
    assert tuple(buffer[7, 2]) == colorizer.color_for(63)
    assert buffer.sum() > 0


def test_adjacent_indices_give_close_colors():
    colorizer = Colorizer(2)
    for index in range(63):
        a = colorizer.color_for(index)
        b = colorizer.color_for(index + 1)
        assert sum(abs(x - y) for x, y in zip(a, b)) == 85
