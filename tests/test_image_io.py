import numpy as np
import pytest
from PIL import Image

from maze.image_io import default_filename, save_image, to_image


def test_default_filename():
    assert default_filename(3, 42) == "img-3-42.png"
    assert default_filename(2, 7, "out/{seed}_{scale}.png") == "out/7_2.png"


def test_rows_map_to_x_axis(tmp_path):
    pixels = np.zeros((2, 2, 3), dtype=np.uint8)
    pixels[1, 0] = (255, 0, 0)  # row 1, col 0
    path = save_image(pixels, tmp_path / "nested" / "img.png")
    with Image.open(path) as img:
        assert img.size == (2, 2)
        assert img.mode == "RGB"
        assert img.getpixel((1, 0)) == (255, 0, 0)
        assert img.getpixel((0, 1)) == (0, 0, 0)


def test_to_image_rejects_non_rgb_buffer():
    with pytest.raises(ValueError):
        to_image(np.zeros((2, 2), dtype=np.uint8))
