"""Hilbert-coloured random spanning tree images."""

from .errors import ConfigurationError
from .procgen import GenerationResult, generate, make_image, validate_parameters
from .spanning_tree import SpanningTree, build_spanning_tree
from .walker import Visit, pick_start, walk_tree
from .colorizer import Colorizer
from .image_io import default_filename, save_image

__all__ = [
    "ConfigurationError",
    "GenerationResult",
    "generate",
    "make_image",
    "validate_parameters",
    "SpanningTree",
    "build_spanning_tree",
    "Visit",
    "pick_start",
    "walk_tree",
    "Colorizer",
    "default_filename",
    "save_image",
]
