# maze/image_io.py
"""Writes pixel buffers to image files with Pillow."""
from pathlib import Path
from typing import Union

import numpy as np
import structlog
from PIL import Image

from common.constants import DEFAULT_FILENAME_TEMPLATE

log = structlog.get_logger(__name__)


def default_filename(
    scale: int, seed: int, template: str = DEFAULT_FILENAME_TEMPLATE
) -> str:
    return template.format(scale=scale, seed=seed)


def to_image(pixels: np.ndarray) -> Image.Image:
    """RGB image with lattice rows along the x axis and columns along y."""
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"expected an (N, N, 3) buffer, got shape {pixels.shape}")
    # Image arrays are indexed [y, x]; rows map to x.
    return Image.fromarray(
        np.ascontiguousarray(pixels.transpose(1, 0, 2), dtype=np.uint8), "RGB"
    )


def save_image(pixels: np.ndarray, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    to_image(pixels).save(path)
    log.info("Image saved", path=str(path), width=pixels.shape[0], height=pixels.shape[1])
    return path
