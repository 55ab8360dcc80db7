# maze/procgen.py
"""End-to-end generation: lattice -> spanning tree -> walk -> colours."""
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import structlog

from common.constants import MAX_COLOR_SIZE
from maze.colorizer import Colorizer
from maze.errors import ConfigurationError
from maze.lattice import Vertex
from maze.spanning_tree import SpanningTree, build_spanning_tree
from maze.walker import Visit, pick_start, visitation_order, walk_tree
from maze_rng import SEED_LIMIT, MazeRNG

log = structlog.get_logger(__name__)


@dataclass
class GenerationResult:
    scale: int
    seed: int
    tree: SpanningTree
    start: Vertex
    visits: List[Visit]
    pixels: np.ndarray  # uint8[size, size, 3], indexed [row, col]

    @property
    def size(self) -> int:
        return self.tree.size


def validate_parameters(scale: int, seed: int) -> None:
    """Rejects parameters the pipeline cannot honour, before any work starts."""
    if isinstance(scale, bool) or not isinstance(scale, (int, np.integer)):
        raise ConfigurationError(f"scale must be an integer, got {scale!r}")
    if scale < 1:
        raise ConfigurationError(f"scale must be at least 1, got {scale}")
    if scale * scale > MAX_COLOR_SIZE:
        raise ConfigurationError(
            f"scale {scale} needs {scale * scale} colour levels per channel;"
            f" at most {MAX_COLOR_SIZE} fit in 8 bits"
        )
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise ConfigurationError(f"seed must be an integer, got {seed!r}")
    if not 0 <= seed < SEED_LIMIT:
        raise ConfigurationError(f"seed must be in [0, 2**64), got {seed}")


def _plant(
    scale: int, seed: int, rng: Optional[MazeRNG]
) -> Tuple[SpanningTree, Vertex]:
    """Builds the tree and picks the start vertex from one random stream."""
    validate_parameters(scale, seed)
    size = int(scale) ** 3
    log.info("Generating image", scale=int(scale), seed=int(seed), size=size)
    if rng is None:
        rng = MazeRNG(int(seed))
    tree = build_spanning_tree(size, rng)
    start = pick_start(size, rng)
    return tree, start


def generate(scale: int, seed: int, rng: Optional[MazeRNG] = None) -> GenerationResult:
    """Like :func:`make_image`, also keeping the tree and the full walk."""
    tree, start = _plant(scale, seed, rng)
    visits = visitation_order(tree, start)

    pixels = np.zeros((tree.size, tree.size, 3), dtype=np.uint8)
    Colorizer(int(scale)).colorize(visits, pixels)
    log.info("Image generated", tree_edges=len(tree), visited=len(visits), start=start)
    return GenerationResult(
        scale=int(scale),
        seed=int(seed),
        tree=tree,
        start=start,
        visits=visits,
        pixels=pixels,
    )


def make_image(scale: int, seed: int, rng: Optional[MazeRNG] = None) -> np.ndarray:
    """Pixel buffer of shape ``(scale**3, scale**3, 3)`` for ``(scale, seed)``.

    The walk is colourised as it is produced; visits are never collected.
    *rng* defaults to ``MazeRNG(seed)``.
    """
    tree, start = _plant(scale, seed, rng)
    pixels = np.zeros((tree.size, tree.size, 3), dtype=np.uint8)
    painted = Colorizer(int(scale)).colorize(walk_tree(tree, start), pixels)
    log.info("Image generated", tree_edges=len(tree), visited=painted, start=start)
    return pixels
