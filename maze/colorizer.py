# maze/colorizer.py
"""Colours walk positions by following a 3D Hilbert curve through RGB space.

Visit ``k`` is painted with the ``k``-th point of the curve, so vertices that
the walk reaches close together get similar colours and tree branches show up
as smooth gradients.
"""
from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np
import structlog

from common.constants import (
    CHANNEL_MASK,
    CHANNEL_MAX,
    CURVE_DIMENSIONS,
    DEFAULT_CURVE_BITS,
)
from maze.hilbert import hilbert_point
from maze.walker import Visit

log = structlog.get_logger(__name__)

Color = Tuple[int, int, int]
ColorBase = Tuple[int, int, int]


def curve_bits(color_size: int) -> int:
    """``ceil(log2(next_power_of_two(color_size)))``, or 8 when undefined."""
    if color_size < 1:
        return DEFAULT_CURVE_BITS
    return (color_size - 1).bit_length()


def color_base(point: Tuple[int, ...]) -> ColorBase:
    """Casts curve coordinates to 8-bit values."""
    return (
        point[0] & CHANNEL_MASK,
        point[1] & CHANNEL_MASK,
        point[2] & CHANNEL_MASK,
    )


def color_base_to_color(cb: ColorBase, color_size: int) -> Color:
    """Stretches ``[0, color_size - 1]`` onto ``[0, 255]``.

    With a single coordinate value there is nothing to stretch and every
    channel is 0.
    """
    denominator = color_size - 1
    if denominator <= 0:
        return (0, 0, 0)
    r, g, b = ((c * CHANNEL_MAX // denominator) & CHANNEL_MASK for c in cb)
    return r, g, b


class Colorizer:
    """Maps visitation indices of a ``scale`` run to display colours."""

    def __init__(self, scale: int) -> None:
        self.scale = scale
        self.color_size = scale * scale
        self.bits = curve_bits(self.color_size)

    def color_for(self, index: int) -> Color:
        point = hilbert_point(index, self.bits, CURVE_DIMENSIONS)
        return color_base_to_color(color_base(point), self.color_size)

    def colorize(self, visits: Iterable[Visit], buffer: np.ndarray) -> int:
        """Paints each visit into ``buffer[row, col]``; returns the count."""
        painted = 0
        for visit in visits:
            buffer[visit.row, visit.col] = self.color_for(visit.index)
            painted += 1
        log.debug(
            "Buffer colourised",
            painted=painted,
            color_size=self.color_size,
            curve_bits=self.bits,
        )
        return painted
