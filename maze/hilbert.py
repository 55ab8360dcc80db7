# maze/hilbert.py
"""Discrete N-dimensional Hilbert curve (Skilling's transpose algorithm).

J. Skilling, "Programming the Hilbert curve", AIP Conf. Proc. 707 (2004).

A curve of order ``bits`` in ``dimensions`` axes visits every point of the
cube ``[0, 2**bits)**dimensions`` once.  The index is an ordinary Python
``int`` so it may exceed 64 bits.  Its bits are dealt most-significant first,
round-robin over the axes, into the "transposed" form that the algorithm
works on.
"""
from typing import List, Sequence, Tuple


def _check(bits: int, dimensions: int) -> None:
    if bits < 0:
        raise ValueError(f"bits must be non-negative, got {bits}")
    if dimensions < 1:
        raise ValueError(f"dimensions must be positive, got {dimensions}")


def _untranspose(index: int, bits: int, dimensions: int) -> List[int]:
    axes = [0] * dimensions
    for level in range(bits):
        for axis in range(dimensions):
            if (index >> (level * dimensions + dimensions - 1 - axis)) & 1:
                axes[axis] |= 1 << level
    return axes


def _transpose(axes: Sequence[int], bits: int) -> int:
    dimensions = len(axes)
    index = 0
    for level in range(bits):
        for axis in range(dimensions):
            if (axes[axis] >> level) & 1:
                index |= 1 << (level * dimensions + dimensions - 1 - axis)
    return index


def hilbert_point(index: int, bits: int, dimensions: int = 3) -> Tuple[int, ...]:
    """Coordinates of the point at position *index* along the curve."""
    _check(bits, dimensions)
    if not 0 <= index < 1 << (bits * dimensions):
        raise ValueError(
            f"index {index} outside a {dimensions}-d curve of order {bits}"
        )
    if bits == 0:
        return (0,) * dimensions

    x = _untranspose(index, bits, dimensions)
    n = dimensions
    top = 2 << (bits - 1)

    # Gray decode
    t = x[n - 1] >> 1
    for i in range(n - 1, 0, -1):
        x[i] ^= x[i - 1]
    x[0] ^= t

    # Undo excess work
    q = 2
    while q != top:
        p = q - 1
        for i in range(n - 1, -1, -1):
            if x[i] & q:
                x[0] ^= p
            else:
                t = (x[0] ^ x[i]) & p
                x[0] ^= t
                x[i] ^= t
        q <<= 1
    return tuple(x)


def hilbert_index(point: Sequence[int], bits: int) -> int:
    """Position along the curve of *point*; inverse of :func:`hilbert_point`."""
    n = len(point)
    _check(bits, n)
    if any(not 0 <= c < 1 << bits for c in point):
        raise ValueError(f"point {tuple(point)} outside a curve of order {bits}")
    if bits == 0:
        return 0

    x = list(point)
    m = 1 << (bits - 1)

    # Inverse undo
    q = m
    while q > 1:
        p = q - 1
        for i in range(n):
            if x[i] & q:
                x[0] ^= p
            else:
                t = (x[0] ^ x[i]) & p
                x[0] ^= t
                x[i] ^= t
        q >>= 1

    # Gray encode
    for i in range(1, n):
        x[i] ^= x[i - 1]
    t = 0
    q = m
    while q > 1:
        if x[n - 1] & q:
            t ^= q - 1
        q >>= 1
    for i in range(n):
        x[i] ^= t

    return _transpose(x, bits)
